import io

import pandas as pd
import pytest

from payroll_reports.data_loader import (
    load_salary_records,
    open_salary_view,
    read_uploaded_records,
    resolve_data_path,
)
from payroll_reports.errors import PayrollReportError


@pytest.fixture
def records_csv(tmp_path):
    path = tmp_path / "salary_records.csv"
    pd.DataFrame(
        [
            {"month": "January", "year": 2024, "designation": "Nurse", "netPayableSalary": 60000},
            {"month": "January", "year": 2024, "designation": "Doctor", "netPayableSalary": 250000},
            {"month": "February", "year": 2024, "designation": "Nurse", "netPayableSalary": 61000},
            {"month": "January", "year": 2023, "designation": "Nurse", "netPayableSalary": 58000},
        ]
    ).to_csv(path, index=False)
    return path


def test_resolve_data_path_prefers_env(monkeypatch, tmp_path):
    monkeypatch.setenv("DATA_PATH", str(tmp_path / "bundle.parquet"))
    assert resolve_data_path() == str(tmp_path / "bundle.parquet")


def test_resolve_data_path_empty_when_nothing_found(monkeypatch):
    monkeypatch.delenv("DATA_PATH", raising=False)
    assert resolve_data_path("no-such-bundle-anywhere.parquet") == ""


def test_open_salary_view_requires_path():
    with pytest.raises(FileNotFoundError):
        open_salary_view("")


def test_open_salary_view_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_salary_view(str(tmp_path / "absent.csv"))


def test_load_salary_records_filters_period(records_csv):
    conn = open_salary_view(str(records_csv))
    df = load_salary_records(conn, "January", 2024)
    assert len(df) == 2
    assert set(df["designation"]) == {"Nurse", "Doctor"}

    assert load_salary_records(conn, "March", "2024").empty


def test_read_uploaded_records_keeps_requested_period(records_csv):
    with open(records_csv, "rb") as fh:
        df = read_uploaded_records(fh, "January", 2024)
    assert sorted(df["designation"]) == ["Doctor", "Nurse"]


def test_read_uploaded_records_unreadable_file_raises_payroll_error(caplog):
    with pytest.raises(PayrollReportError) as excinfo:
        read_uploaded_records(io.BytesIO(b""), "January", 2024)
    assert excinfo.value.message.startswith("Could not read the uploaded CSV")
    assert "Failed to read uploaded salary records" in caplog.text

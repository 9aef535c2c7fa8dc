import logging
import os
from pathlib import Path
from typing import Any, Union

import duckdb
import pandas as pd
import streamlit as st

from .config import DEFAULT_DATA_FILENAME, ENV_DATA_PATH
from .errors import PayrollReportError

logger = logging.getLogger(__name__)


def _default_candidates(default_filename: str) -> list[Path]:
    here = Path(__file__).resolve().parent
    return [
        here / default_filename,
        here / "data" / default_filename,
        here.parent / "data" / default_filename,
        here.parent / default_filename,
    ]


def resolve_data_path(default_filename: str = DEFAULT_DATA_FILENAME) -> str:
    """
    Resolve the salary-record bundle from env or common locations.
    Returns an empty string if nothing is found so callers can handle gracefully.
    """
    env_path = os.getenv(ENV_DATA_PATH, "").strip()
    if env_path:
        return env_path

    for candidate in _default_candidates(default_filename):
        if candidate.exists():
            return str(candidate)
    return ""


def open_salary_view(data_path: str) -> duckdb.DuckDBPyConnection:
    """
    In-memory DuckDB connection with the bundle mounted as ``salary_raw``.
    Parquet and CSV files are both accepted.
    """
    if not data_path:
        raise FileNotFoundError(
            "Data path is empty. Set DATA_PATH or place salary_records.parquet in ./data."
        )
    if not Path(data_path).exists():
        raise FileNotFoundError(f"Salary records not found: {data_path}")
    reader = "read_csv_auto" if data_path.lower().endswith(".csv") else "read_parquet"
    conn = duckdb.connect(database=":memory:")
    # DuckDB does not accept prepared parameters in view definitions.
    quoted = data_path.replace("'", "''")
    conn.execute(f"CREATE OR REPLACE VIEW salary_raw AS SELECT * FROM {reader}('{quoted}');")
    return conn


@st.cache_resource(show_spinner=False)
def connect_duckdb(data_path: str) -> duckdb.DuckDBPyConnection:
    return open_salary_view(data_path)


def load_salary_records(
    conn: duckdb.DuckDBPyConnection, month: str, year: Union[str, int]
) -> pd.DataFrame:
    """Salary rows for one period; ``month`` is the full month name."""
    return conn.execute(
        "SELECT * FROM salary_raw WHERE month = ? AND CAST(year AS VARCHAR) = ?;",
        [str(month), str(year)],
    ).df()


def read_uploaded_records(upload: Any, month: str, year: Union[str, int]) -> pd.DataFrame:
    """
    Salary rows from an uploaded CSV. When the file carries ``month``/``year``
    columns only the requested period is kept.
    """
    try:
        df = pd.read_csv(upload)
    except Exception as exc:
        logger.exception("Failed to read uploaded salary records %s", getattr(upload, "name", "<upload>"))
        raise PayrollReportError(f"Could not read the uploaded CSV: {exc}") from exc
    if {"month", "year"}.issubset(df.columns):
        df = df[(df["month"] == month) & (df["year"].astype(str) == str(year))]
    return df

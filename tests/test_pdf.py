import logging

import pytest
from PIL import Image

from payroll_reports import sections
from payroll_reports.context import RenderResult
from payroll_reports.errors import GENERATION_FAILED_MESSAGE, ReportGenerationError
from payroll_reports.pdf import (
    build_report_pdf,
    generate_payroll_distribution_pdf,
    report_file_name,
    save_report,
)
from payroll_reports.sections import ReportJob, SectionSpec


@pytest.fixture
def no_logo(tmp_path):
    return tmp_path / "missing-logo.png"


def test_scenario_produces_named_pdf(scenario_payload, no_logo, generated_at):
    result = generate_payroll_distribution_pdf(
        scenario_payload, {"month": "January", "year": 2024}, logo_source=no_logo, generated_at=generated_at
    )
    assert result.success is True
    assert result.file_name == "Payroll_Distribution_Report_January_2024.pdf"
    assert result.content.startswith(b"%PDF")


def test_accepts_dataclass_inputs(scenario_data, filters, no_logo):
    result = generate_payroll_distribution_pdf(scenario_data, filters, logo_source=no_logo)
    assert isinstance(result, RenderResult)
    assert result.file_name == report_file_name(filters)


def test_empty_payload_renders(filters, no_logo):
    result = generate_payroll_distribution_pdf(
        {"departmentBreakdown": [], "salaryDistribution": []}, filters, logo_source=no_logo
    )
    assert result.success
    assert result.content.startswith(b"%PDF")


def test_missing_report_data_renders(filters, no_logo):
    assert generate_payroll_distribution_pdf(None, filters, logo_source=no_logo).success


def test_renders_with_logo(scenario_data, filters, tmp_path):
    logo_path = tmp_path / "Logo.png"
    Image.new("RGB", (260, 110), (59, 130, 246)).save(logo_path)
    with_logo = generate_payroll_distribution_pdf(scenario_data, filters, logo_source=logo_path)
    without_logo = generate_payroll_distribution_pdf(scenario_data, filters, logo_source=tmp_path / "nope.png")
    assert with_logo.success and without_logo.success
    assert len(with_logo.content) > len(without_logo.content)


def test_file_name_depends_only_on_filters(scenario_data, filters, no_logo):
    first = generate_payroll_distribution_pdf(scenario_data, filters, logo_source=no_logo)
    second = generate_payroll_distribution_pdf({}, filters, logo_source=no_logo)
    assert first.file_name == second.file_name


def test_table_failure_becomes_generic_error(scenario_data, filters, no_logo, monkeypatch, caplog):
    def broken_table(*args, **kwargs):
        raise RuntimeError("table plugin exploded")

    monkeypatch.setattr(sections, "render_table", broken_table)
    with caplog.at_level(logging.ERROR, logger="payroll_reports.pdf"):
        with pytest.raises(ReportGenerationError) as excinfo:
            generate_payroll_distribution_pdf(scenario_data, filters, logo_source=no_logo)

    err = excinfo.value
    assert err.message == GENERATION_FAILED_MESSAGE == "Failed to generate payroll distribution report PDF"
    assert str(err) == GENERATION_FAILED_MESSAGE
    assert err.__cause__ is None
    assert err.__suppress_context__ is True
    assert "table plugin exploded" not in str(err)

    record = next(r for r in caplog.records if r.name == "payroll_reports.pdf")
    assert record.exc_info is not None
    assert "table plugin exploded" in caplog.text


def test_drawing_failure_becomes_generic_error(scenario_data, filters, no_logo, monkeypatch):
    def broken_text(self, *args, **kwargs):
        raise ValueError("bad glyph")

    monkeypatch.setattr("payroll_reports.drawing.Canvas.text", broken_text)
    with pytest.raises(ReportGenerationError) as excinfo:
        generate_payroll_distribution_pdf(scenario_data, filters, logo_source=no_logo)
    assert excinfo.value.message == GENERATION_FAILED_MESSAGE


def test_backwards_cursor_is_rejected(scenario_data, filters, generated_at):
    job = ReportJob(data=scenario_data, filters=filters, generated_at=generated_at)
    rewinding = [
        SectionSpec("down", "Down", lambda canvas, y, job: y + 100),
        SectionSpec("up", "Up", lambda canvas, y, job: y - 50),
    ]
    with pytest.raises(RuntimeError, match="backwards"):
        build_report_pdf(job, sections=rewinding)


def test_save_report_writes_bytes(scenario_data, filters, no_logo, tmp_path):
    result = generate_payroll_distribution_pdf(scenario_data, filters, logo_source=no_logo)
    path = save_report(result, tmp_path / "out")
    assert path.name == "Payroll_Distribution_Report_January_2024.pdf"
    assert path.read_bytes() == result.content

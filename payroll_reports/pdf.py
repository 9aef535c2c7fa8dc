import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from fpdf import FPDF

from .config import DEFAULT_REPORT_DIR, ORGANIZATION_NAME, REPORT_TITLE
from .context import RenderResult, ReportData, ReportFilters
from .drawing import FOOTER_ZONE, Canvas
from .errors import ReportGenerationError
from .logo import LogoSource, load_logo
from .sections import SECTION_REGISTRY, ReportJob, SectionSpec, render_footer

logger = logging.getLogger(__name__)

TOP_MARGIN = 40


class ReportPDF(FPDF):
    """A4 portrait in points; the footer hook repeats the attribution on every page."""

    def __init__(self):
        super().__init__(orientation="P", unit="pt", format="A4")
        self.set_margins(40, TOP_MARGIN, 40)
        self.set_auto_page_break(auto=True, margin=FOOTER_ZONE)

    def footer(self):
        render_footer(Canvas(self))


def _coerce_pdf_bytes(data) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("latin-1", errors="replace")
    return bytes(data)


def report_file_name(filters: Union[ReportFilters, Mapping[str, Any]]) -> str:
    if not isinstance(filters, ReportFilters):
        filters = ReportFilters.from_dict(filters)
    return filters.file_name()


def build_report_pdf(job: ReportJob, sections: Optional[Sequence[SectionSpec]] = None) -> bytes:
    """
    Run each section renderer in order, handing the cursor returned by one
    to the next. Any exception propagates to the caller untouched.
    """
    pdf = ReportPDF()
    pdf.set_title(REPORT_TITLE)
    pdf.set_author(ORGANIZATION_NAME)
    pdf.add_page()
    canvas = Canvas(pdf)

    cursor = float(TOP_MARGIN)
    for spec in sections or SECTION_REGISTRY:
        page_before = pdf.page_no()
        next_cursor = spec.renderer(canvas, cursor, job)
        if pdf.page_no() == page_before and next_cursor < cursor:
            raise RuntimeError(f"Section {spec.id!r} moved the cursor backwards")
        cursor = next_cursor
    return _coerce_pdf_bytes(pdf.output())


def generate_payroll_distribution_pdf(
    report_data: Union[ReportData, Mapping[str, Any], None],
    filters: Union[ReportFilters, Mapping[str, Any]],
    logo_source: LogoSource = None,
    generated_at: Optional[datetime] = None,
) -> RenderResult:
    """
    Render the payroll distribution report for one period.

    Returns a RenderResult holding the file name and the PDF bytes. Any
    failure while drawing is logged with its traceback and surfaced as a
    single ReportGenerationError; no bytes are returned in that case.
    """
    try:
        if not isinstance(report_data, ReportData):
            report_data = ReportData.from_dict(report_data)
        if not isinstance(filters, ReportFilters):
            filters = ReportFilters.from_dict(filters)

        job = ReportJob(
            data=report_data,
            filters=filters,
            generated_at=generated_at or datetime.now(),
            logo=load_logo(logo_source),
        )
        content = build_report_pdf(job)
        file_name = filters.file_name()
    except Exception:
        logger.exception("PDF generation error")
        raise ReportGenerationError() from None

    logger.info("Generated payroll distribution report", extra={"file_name": file_name})
    return RenderResult(success=True, file_name=file_name, content=content)


def save_pdf(pdf_bytes: bytes, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(pdf_bytes)
    return path


def save_report(result: RenderResult, output_dir: Path = DEFAULT_REPORT_DIR) -> Path:
    return save_pdf(result.content, output_dir / result.file_name)

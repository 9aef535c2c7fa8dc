"""
Payroll distribution reporting for the WorkPulse hospital management system.

Salary records are aggregated into ReportData, laid out section by section
onto an A4 page with FPDF, and handed back as PDF bytes for download.
"""

from .config import (
    DEFAULT_DATA_FILENAME,
    DEFAULT_REPORT_DIR,
    ENV_DATA_PATH,
)
from .context import RenderResult, ReportData, ReportFilters
from .errors import ReportGenerationError
from .formatting import format_currency, format_percentage
from .pdf import generate_payroll_distribution_pdf, report_file_name

__all__ = [
    "DEFAULT_DATA_FILENAME",
    "DEFAULT_REPORT_DIR",
    "ENV_DATA_PATH",
    "RenderResult",
    "ReportData",
    "ReportFilters",
    "ReportGenerationError",
    "format_currency",
    "format_percentage",
    "generate_payroll_distribution_pdf",
    "report_file_name",
]

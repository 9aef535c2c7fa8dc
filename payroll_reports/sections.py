from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from PIL import Image

from .config import (
    FOOTER_TEXT,
    ORGANIZATION_ADDRESS,
    ORGANIZATION_CONTACT,
    ORGANIZATION_NAME,
    REPORT_TITLE,
)
from .context import ReportData, ReportFilters
from .drawing import PALETTE, Canvas, TextStyle
from .formatting import format_currency, format_percentage, format_timestamp
from .tables import TableStyle, render_table

PAGE_INSET = 30
SUMMARY_BOX_HEIGHT = 120

DEPARTMENT_COLUMNS = ("Department", "Employee Count", "Total Salary", "Average Salary")
SALARY_RANGE_COLUMNS = ("Salary Range", "Employee Count", "Percentage")

DEPARTMENT_TABLE = TableStyle(header_fill=PALETTE["department"])
SALARY_RANGE_TABLE = TableStyle(header_fill=PALETTE["salary_range"])

SECTION_HEADING = TextStyle(size=13, bold=True, color=PALETTE["heading"])
BODY = TextStyle(size=10, color=PALETTE["body"])


@dataclass(frozen=True)
class ReportJob:
    """Everything one rendering pass needs; built once per call and discarded."""

    data: ReportData
    filters: ReportFilters
    generated_at: datetime
    logo: Optional[Image.Image] = None


Renderer = Callable[[Canvas, float, ReportJob], float]


@dataclass
class SectionSpec:
    id: str
    title: str
    renderer: Renderer


# ---- Row shaping


def department_rows(data: ReportData) -> List[list]:
    return [
        [
            dept.department,
            dept.employee_count,
            format_currency(dept.total_salary),
            format_currency(dept.average_salary),
        ]
        for dept in data.department_breakdown
    ]


def salary_range_rows(data: ReportData) -> List[list]:
    return [
        [band.range, band.count, format_percentage(band.count, data.total_employees)]
        for band in data.salary_distribution
    ]


def summary_lines(data: ReportData, filters: ReportFilters) -> List[str]:
    """Left column first, then right column."""
    return [
        f"Total payroll for {filters.label}: {format_currency(data.total_payroll)}",
        f"Average salary per employee: {format_currency(data.average_salary)}",
        f"Total deductions: {format_currency(data.total_deductions)}",
        f"Department with highest payroll: {data.top_department}",
    ]


# ---- Renderers


def _render_header(canvas: Canvas, y: float, job: ReportJob) -> float:
    right = canvas.width - PAGE_INSET
    if job.logo is not None:
        canvas.image(job.logo, PAGE_INSET, y - 10, 130, 55)

    canvas.text(right, y + 10, ORGANIZATION_NAME, TextStyle(size=18, bold=True), align="right")
    canvas.text(right, y + 28, ORGANIZATION_ADDRESS, TextStyle(size=10), align="right")
    canvas.text(right, y + 44, ORGANIZATION_CONTACT, TextStyle(size=10), align="right")
    y += 75

    canvas.fill_rect(PAGE_INSET, y, canvas.width - 2 * PAGE_INSET, 3, PALETTE["accent"])
    return y + 25


def _render_title(canvas: Canvas, y: float, job: ReportJob) -> float:
    canvas.text(PAGE_INSET, y, REPORT_TITLE, TextStyle(size=16, bold=True))

    badge_text = job.filters.label
    badge_style = TextStyle(size=10, color=PALETTE["body"])
    badge_w = canvas.text_width(badge_text, badge_style) + 20
    badge_x = canvas.width - PAGE_INSET - badge_w
    badge_y = y - 14
    canvas.fill_rect(badge_x, badge_y, badge_w, 24, PALETTE["badge"], radius=6)
    canvas.text(badge_x + badge_w / 2, badge_y + 16, badge_text, badge_style, align="center")
    return y + 40


def _render_table_section(
    canvas: Canvas,
    y: float,
    heading: str,
    underline_half: float,
    columns: Sequence[str],
    rows: Sequence[Sequence],
    style: TableStyle,
) -> float:
    # Keep the heading on the same page as at least the table's heading band.
    y = canvas.ensure_space(y, 80)
    center = canvas.width / 2
    canvas.text(center, y, heading, SECTION_HEADING, align="center")
    canvas.line(center - underline_half, y + 5, center + underline_half, y + 5, style.header_fill)
    return render_table(canvas, columns, rows, style, y + 20)


def _render_departments(canvas: Canvas, y: float, job: ReportJob) -> float:
    final_y = _render_table_section(
        canvas,
        y,
        "Department Breakdown",
        60,
        DEPARTMENT_COLUMNS,
        department_rows(job.data),
        DEPARTMENT_TABLE,
    )
    return final_y + 40


def _render_salary_ranges(canvas: Canvas, y: float, job: ReportJob) -> float:
    final_y = _render_table_section(
        canvas,
        y,
        "Salary Range Distribution",
        70,
        SALARY_RANGE_COLUMNS,
        salary_range_rows(job.data),
        SALARY_RANGE_TABLE,
    )
    return final_y + 50


def _render_summary(canvas: Canvas, y: float, job: ReportJob) -> float:
    # Fixed-height panel: the four lines and timestamp must fit in it.
    box_y = canvas.ensure_space(y - 10, SUMMARY_BOX_HEIGHT)
    y = box_y + 10
    width = canvas.width

    canvas.fill_rect(42, box_y + 2, width - 84, SUMMARY_BOX_HEIGHT, PALETTE["panel"], radius=10)
    canvas.stroke_rect(40, box_y, width - 80, SUMMARY_BOX_HEIGHT, PALETTE["border"], radius=10)
    canvas.text(
        width / 2, y + 12, "Report Summary", TextStyle(size=13, bold=True, color=PALETTE["ink"]), align="center"
    )
    y += 25

    lines = summary_lines(job.data, job.filters)
    columns = ((70, lines[:2]), (width / 2 + 30, lines[2:]))
    for x, column in columns:
        line_y = y + 5
        for line in column:
            canvas.dot(x - 5, line_y - 2.5, 1.3, PALETTE["body"])
            canvas.text(x, line_y, line, BODY)
            line_y += 16

    canvas.text(
        width / 2,
        box_y + SUMMARY_BOX_HEIGHT - 10,
        f"Report generated on: {format_timestamp(job.generated_at)}",
        TextStyle(size=9, color=PALETTE["muted"]),
        align="center",
    )
    return box_y + SUMMARY_BOX_HEIGHT


def render_footer(canvas: Canvas) -> None:
    """Divider and attribution pinned to the bottom of the current page."""
    height = canvas.height
    canvas.line(40, height - 50, canvas.width - 40, height - 50, PALETTE["rule"])
    canvas.text(
        canvas.width / 2,
        height - 30,
        FOOTER_TEXT,
        TextStyle(size=8, color=PALETTE["muted"]),
        align="center",
    )


SECTION_REGISTRY: List[SectionSpec] = [
    SectionSpec("header", "Header", _render_header),
    SectionSpec("title", "Title", _render_title),
    SectionSpec("departments", "Department Breakdown", _render_departments),
    SectionSpec("salary_ranges", "Salary Range Distribution", _render_salary_ranges),
    SectionSpec("summary", "Report Summary", _render_summary),
]

import pytest

from payroll_reports.drawing import PALETTE, Canvas
from payroll_reports.pdf import TOP_MARGIN, ReportPDF
from payroll_reports.tables import TableStyle, render_table

COLUMNS = ("Department", "Employee Count", "Total Salary", "Average Salary")
ROWS = [["ICU", 10, "LKR 500,000", "LKR 50,000"]]


class RecordingCanvas(Canvas):
    def __init__(self, pdf):
        super().__init__(pdf)
        self.frames = []

    def stroke_rect(self, x, y, w, h, color, radius=0, line_width=1):
        self.frames.append((self.pdf.page, y, h, color, line_width))
        super().stroke_rect(x, y, w, h, color, radius=radius, line_width=line_width)


def _canvas(cls=Canvas):
    pdf = ReportPDF()
    pdf.add_page()
    return cls(pdf)


def test_heading_padding_is_wider_than_body_padding():
    style = TableStyle(header_fill=PALETTE["department"])
    tight = TableStyle(header_fill=PALETTE["department"], header_padding=style.padding)
    padded_y = render_table(_canvas(), COLUMNS, ROWS, style, 200.0)
    tight_y = render_table(_canvas(), COLUMNS, ROWS, tight, 200.0)
    assert style.header_padding == 10
    assert padded_y - tight_y == pytest.approx(2 * (style.header_padding - style.padding))


def test_heading_band_outlined_in_heading_color():
    canvas = _canvas(RecordingCanvas)
    style = TableStyle(header_fill=PALETTE["salary_range"])
    render_table(canvas, COLUMNS[:3], [["0-50k", 4, "40.0%"]], style, 200.0)

    assert len(canvas.frames) == 1
    page, y, height, color, width = canvas.frames[0]
    assert (page, y, color, width) == (1, 200.0, PALETTE["salary_range"], 0.8)
    assert height > 2 * style.header_padding
    # Body grid keeps its own stroke width.
    assert canvas.pdf.line_width == pytest.approx(style.border_width)


def test_repeated_headings_are_outlined_on_each_page():
    canvas = _canvas(RecordingCanvas)
    rows = [[f"Ward {i}", 3, "LKR 150,000", "LKR 50,000"] for i in range(60)]
    render_table(canvas, COLUMNS, rows, TableStyle(header_fill=PALETTE["department"]), 200.0)

    assert canvas.pdf.page > 1
    assert [frame[0] for frame in canvas.frames] == list(range(1, canvas.pdf.page + 1))
    assert all(frame[1] == TOP_MARGIN for frame in canvas.frames[1:])

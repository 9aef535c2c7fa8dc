from dataclasses import dataclass
from typing import Any, Sequence

from fpdf.fonts import FontFace
from fpdf.table import Table

from .drawing import FONT_FAMILY, PALETTE, RGB, Canvas
from .formatting import pdf_safe_text


@dataclass(frozen=True)
class TableStyle:
    header_fill: RGB
    header_text: RGB = PALETTE["heading"]
    body_text: RGB = PALETTE["body"]
    stripe_fill: RGB = PALETTE["stripe"]
    border: RGB = PALETTE["border"]
    border_width: float = 0.5
    header_size: float = 10
    header_padding: float = 10
    # Heading band outline, stroked in header_fill.
    header_border_width: float = 0.8
    body_size: float = 9
    padding: float = 8
    width: float = 500


class HeadingFramedTable(Table):
    """
    FPDF table whose heading rows get an outline in the heading color,
    drawn right after each heading row, repeated ones included.
    """

    def __init__(self, canvas: Canvas, style: TableStyle, **kwargs):
        super().__init__(canvas.pdf, **kwargs)
        self.canvas = canvas
        self.style = style

    def _render_table_row(self, i, *args, **kwargs):
        pdf = self.canvas.pdf
        top = pdf.get_y()
        super()._render_table_row(i, *args, **kwargs)
        if i < self._num_heading_rows:
            with pdf.local_context():
                self._frame(pdf.l_margin, top, pdf.get_y() - top, len(self.rows[i].cells))

    def _frame(self, x: float, y: float, height: float, count: int) -> None:
        style = self.style
        col_width = style.width / count
        self.canvas.stroke_rect(x, y, style.width, height, style.header_fill, line_width=style.header_border_width)
        for j in range(1, count):
            divider = x + j * col_width
            self.canvas.line(divider, y, divider, y + height, style.header_fill, style.header_border_width)


def render_table(
    canvas: Canvas,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    style: TableStyle,
    start_y: float,
) -> float:
    """
    Draw a centered grid table with a colored heading band and striped body
    rows starting at ``start_y``. Returns the y just below the last row.
    Long tables continue on a new page with the heading repeated.
    """
    pdf = canvas.pdf
    pdf.set_font(FONT_FAMILY, "", style.body_size)
    pdf.set_text_color(*style.body_text)
    pdf.set_draw_color(*style.border)
    pdf.set_line_width(style.border_width)
    canvas.move_to(start_y)

    headings = FontFace(
        emphasis="BOLD",
        color=style.header_text,
        fill_color=style.header_fill,
        size_pt=style.header_size,
    )
    table = HeadingFramedTable(
        canvas,
        style,
        width=style.width,
        align="CENTER",
        text_align="CENTER",
        v_align="MIDDLE",
        padding=style.padding,
        line_height=style.body_size * 1.2,
        headings_style=headings,
        cell_fill_color=style.stripe_fill,
        cell_fill_mode="ROWS",
        borders_layout="ALL",
    )
    heading = table.row()
    for column in columns:
        heading.cell(pdf_safe_text(column), padding=style.header_padding)
    for values in rows:
        row = table.row()
        for value in values:
            row.cell(pdf_safe_text(value))
    table.render()
    return pdf.get_y()

"""
Thin drawing layer over FPDF.

FPDF keeps font, fill, draw and text colors as document state that leaks
from one call into the next. Canvas methods take every style value they
need as an argument and set it before drawing, so a section renderer never
depends on what the previous one left behind.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from fpdf import FPDF

from .formatting import pdf_safe_text

RGB = Tuple[int, int, int]

FONT_FAMILY = "Helvetica"

PALETTE = {
    "accent": (59, 130, 246),
    "ink": (17, 24, 39),
    "heading": (30, 41, 59),
    "body": (55, 65, 81),
    "muted": (107, 114, 128),
    "badge": (243, 244, 246),
    "panel": (247, 249, 252),
    "border": (209, 213, 219),
    "rule": (229, 231, 235),
    "stripe": (250, 250, 250),
    "department": (147, 197, 253),
    "salary_range": (134, 239, 172),
    "black": (0, 0, 0),
    "white": (255, 255, 255),
}

# Bottom band reserved for the page footer; content never flows into it.
FOOTER_ZONE = 60


@dataclass(frozen=True)
class TextStyle:
    size: float = 10
    bold: bool = False
    color: RGB = PALETTE["black"]

    @property
    def emphasis(self) -> str:
        return "B" if self.bold else ""


class Canvas:
    def __init__(self, pdf: FPDF):
        self.pdf = pdf

    @property
    def width(self) -> float:
        return self.pdf.w

    @property
    def height(self) -> float:
        return self.pdf.h

    @property
    def top(self) -> float:
        return self.pdf.t_margin

    @property
    def content_bottom(self) -> float:
        return self.pdf.h - FOOTER_ZONE

    def _use_text_style(self, style: TextStyle) -> None:
        self.pdf.set_font(FONT_FAMILY, style.emphasis, style.size)
        self.pdf.set_text_color(*style.color)

    def text_width(self, value: str, style: TextStyle) -> float:
        self._use_text_style(style)
        return self.pdf.get_string_width(pdf_safe_text(value))

    def text(self, x: float, y: float, value: str, style: TextStyle, align: str = "left") -> None:
        """Draw a single line with its baseline at ``y``; ``x`` is the left, center or right anchor."""
        safe = pdf_safe_text(value)
        self._use_text_style(style)
        w = self.pdf.get_string_width(safe)
        if align == "right":
            x -= w
        elif align == "center":
            x -= w / 2
        self.pdf.text(x, y, safe)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: RGB, radius: float = 0) -> None:
        self.pdf.set_fill_color(*color)
        if radius:
            self.pdf.rect(x, y, w, h, style="F", round_corners=True, corner_radius=radius)
        else:
            self.pdf.rect(x, y, w, h, style="F")

    def stroke_rect(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        color: RGB,
        radius: float = 0,
        line_width: float = 1,
    ) -> None:
        self.pdf.set_draw_color(*color)
        self.pdf.set_line_width(line_width)
        if radius:
            self.pdf.rect(x, y, w, h, style="D", round_corners=True, corner_radius=radius)
        else:
            self.pdf.rect(x, y, w, h, style="D")

    def line(self, x1: float, y1: float, x2: float, y2: float, color: RGB, line_width: float = 1) -> None:
        self.pdf.set_draw_color(*color)
        self.pdf.set_line_width(line_width)
        self.pdf.line(x1, y1, x2, y2)

    def dot(self, cx: float, cy: float, r: float, color: RGB) -> None:
        self.pdf.set_fill_color(*color)
        self.pdf.ellipse(cx - r, cy - r, 2 * r, 2 * r, style="F")

    def image(self, img, x: float, y: float, w: float, h: float) -> None:
        self.pdf.image(img, x=x, y=y, w=w, h=h)

    def ensure_space(self, y: float, needed: float) -> float:
        """Return ``y`` if ``needed`` points fit above the footer zone, else the top of a new page."""
        if y + needed <= self.content_bottom:
            return y
        self.pdf.add_page()
        return self.top

    def move_to(self, y: float, x: Optional[float] = None) -> None:
        self.pdf.set_xy(self.pdf.l_margin if x is None else x, y)

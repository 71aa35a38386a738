"""Cursor-based page writer on top of a reportlab canvas.

Positions are kept in millimetres measured from the top of the page, the
way the documents are laid out; conversion to PDF points (origin at the
bottom-left corner) happens only when drawing.
"""

import io
import logging

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from contract_gen.config import LayoutConfig

logger = logging.getLogger(__name__)

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

# Distance of the footer baseline from the bottom edge, in mm.
FOOTER_OFFSET = 10.0


def wrap_text(text: str, max_width: float, font: str = FONT, size: float = 10) -> list[str]:
    """Split text into lines no wider than ``max_width`` points.

    Explicit newlines are kept as paragraph breaks. A single word wider
    than the line is left on its own line rather than broken.
    """
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if pdfmetrics.stringWidth(candidate, font, size) <= max_width:
                current = candidate
            else:
                if current:
                    lines.append(current)
                current = word
        lines.append(current)
    return lines


class PageWriter:
    """Draw flowing text onto A4 pages, tracking a vertical cursor.

    Parameters
    ----------
    layout : LayoutConfig
        Page geometry and break thresholds.
    title : str
        PDF document title metadata.
    author : str
        PDF author metadata.
    """

    def __init__(self, layout: LayoutConfig, title: str = "", author: str = "") -> None:
        self.layout = layout
        self._buffer = io.BytesIO()
        self.c = canvas.Canvas(
            self._buffer, pagesize=(layout.page_width * mm, layout.page_height * mm)
        )
        if title:
            self.c.setTitle(title)
        if author:
            self.c.setAuthor(author)
        self.page_num = 1
        self.y = layout.margin_top

    @property
    def bottom_limit(self) -> float:
        """Lowest baseline body text may use before spilling to a new page."""
        return self.layout.page_height - self.layout.margin_top

    def line_height(self, size: float) -> float:
        return size * self.layout.line_height_factor

    def _pdf_y(self, y: float) -> float:
        return (self.layout.page_height - y) * mm

    def text(
        self,
        text: str,
        x: float,
        y: float | None = None,
        font: str = FONT,
        size: float | None = None,
        align: str = "left",
    ) -> None:
        """Draw one line of text at ``x`` (mm) on the cursor or an explicit ``y``."""
        size = size or self.layout.font_size
        self.c.setFont(font, size)
        pdf_y = self._pdf_y(self.y if y is None else y)
        if align == "center":
            self.c.drawCentredString(x * mm, pdf_y, text)
        elif align == "right":
            self.c.drawRightString(x * mm, pdf_y, text)
        else:
            self.c.drawString(x * mm, pdf_y, text)

    def paragraph(
        self,
        text: str,
        font: str = FONT,
        size: float | None = None,
        x: float | None = None,
        width: float | None = None,
    ) -> None:
        """Draw wrapped text at the cursor and advance past it."""
        size = size or self.layout.font_size
        x = self.layout.margin_left if x is None else x
        width = self.layout.content_width if width is None else width
        step = self.line_height(size)
        for line in wrap_text(text, width * mm, font, size):
            if self.y + step > self.bottom_limit:
                self.new_page()
            self.text(line, x, font=font, size=size)
            self.y += step

    def section(self, title: str, body: str) -> None:
        """Bold title followed by its body, starting a new page past the threshold."""
        if self.y > self.layout.section_break_at:
            self.new_page()
        self.paragraph(title, font=FONT_BOLD, size=self.layout.font_size + 2)
        self.y += 3
        self.paragraph(body)
        self.y += 5

    def hline(self, x1: float, x2: float, y: float | None = None) -> None:
        pdf_y = self._pdf_y(self.y if y is None else y)
        self.c.setLineWidth(0.3)
        self.c.line(x1 * mm, pdf_y, x2 * mm, pdf_y)

    def skip(self, amount: float) -> None:
        self.y += amount

    def new_page(self) -> None:
        self._draw_footer()
        self.c.showPage()
        self.page_num += 1
        self.y = self.layout.margin_top

    def _draw_footer(self) -> None:
        if not self.layout.footer:
            return
        self.text(
            f"Página {self.page_num}",
            self.layout.page_width / 2,
            y=self.layout.page_height - FOOTER_OFFSET,
            size=8,
            align="center",
        )

    def finish(self) -> bytes:
        """Close the last page and return the PDF bytes."""
        self._draw_footer()
        self.c.save()
        logger.debug("Rendered %d page(s)", self.page_num, extra={"pages": self.page_num})
        return self._buffer.getvalue()

# =============================================================================
# lib/pdf_renderer.py - Call Sheet Rasterizer and PDF Paginator
# =============================================================================
# Turns an assembled CallSheet into a PDF in two steps:
#
# 1. Rasterize: lay the sheet out on a white Pillow image at a fixed
#    upscale factor (default 2x) so text stays sharp when printed.
# 2. Paginate: scale the image to the A4 width (210mm) and slice it into
#    295mm bands, one reportlab page per band, until the whole image
#    height has been placed.
#
# Usage:
#   from lib.pdf_renderer import render_call_sheet_pdf
#   pdf_bytes = render_call_sheet_pdf(call_sheet, scale=2)
# =============================================================================

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Any

from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from core.models.call_sheet import CREW_COLUMNS, CallSheet, LabeledValue
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

# Page geometry (millimetres)
PAGE_WIDTH_MM = 210
PAGE_BAND_MM = 295

# Layout constants at 1x; multiplied by the scale factor
PADDING = 24
LINE_GAP = 6
SECTION_GAP = 24
CELL_PADDING = 8

BLACK = (0, 0, 0)
GRAY_TEXT = (75, 85, 99)
RULE_GRAY = (209, 213, 219)
HEADER_FILL = (243, 244, 246)
WHITE = (255, 255, 255)

_FONT_FILES = {
    False: "DejaVuSans.ttf",
    True: "DejaVuSans-Bold.ttf",
}


class CallSheetRenderError(ApplicationError):
    """Raised when the call sheet can't be rasterized or paginated."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="CALL_SHEET_RENDER_FAILED", **kwargs)


def _font(size: int, bold: bool = False) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """DejaVu when the system has it, otherwise Pillow's bundled font."""
    try:
        return ImageFont.truetype(_FONT_FILES[bold], size)
    except OSError:
        return ImageFont.load_default(size=size)


# =============================================================================
# Layout
# =============================================================================

@dataclass
class _Layout:
    """
    Collects drawing operations top to bottom.

    Measuring uses a scratch ImageDraw, so the final image can be created
    at exactly the height the content needs.
    """
    width: int
    scale: int
    y: int = 0
    ops: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))
        self.pad = PADDING * self.scale
        self.y = self.pad
        self.fonts = {
            "title": _font(24 * self.scale, bold=True),
            "name": _font(20 * self.scale, bold=True),
            "client": _font(18 * self.scale),
            "heading": _font(18 * self.scale, bold=True),
            "label": _font(14 * self.scale, bold=True),
            "body": _font(14 * self.scale),
            "cell": _font(12 * self.scale),
            "cell_bold": _font(12 * self.scale, bold=True),
        }

    # -- measuring ------------------------------------------------------------

    def text_width(self, text: str, font: Any) -> int:
        left, _, right, _ = self._measure.textbbox((0, 0), text, font=font)
        return right - left

    def line_height(self, font: Any) -> int:
        _, top, _, bottom = self._measure.textbbox((0, 0), "Ag", font=font)
        return bottom - top + LINE_GAP * self.scale

    def wrap(self, text: str, font: Any, max_width: int) -> list[str]:
        """Greedy word wrap; a single overlong word gets its own line."""
        lines: list[str] = []
        for paragraph in text.splitlines() or [""]:
            current = ""
            for word in paragraph.split():
                candidate = f"{current} {word}".strip()
                if current and self.text_width(candidate, font) > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def truncate(self, text: str, font: Any, max_width: int) -> str:
        if self.text_width(text, font) <= max_width:
            return text
        while text and self.text_width(text + "…", font) > max_width:
            text = text[:-1]
        return text + "…"

    # -- emitting -------------------------------------------------------------

    @property
    def content_width(self) -> int:
        return self.width - 2 * self.pad

    def centered(self, text: str, font_key: str, fill=BLACK) -> None:
        font = self.fonts[font_key]
        x = (self.width - self.text_width(text, font)) // 2
        self.ops.append(("text", ((x, self.y), text, font, fill)))
        self.y += self.line_height(font)

    def rule(self, thickness: int) -> None:
        t = thickness * self.scale
        color = BLACK if thickness > 1 else RULE_GRAY
        self.ops.append(("rect", ((self.pad, self.y, self.width - self.pad, self.y + t - 1), color, None)))
        self.y += t

    def gap(self, amount: int = SECTION_GAP) -> None:
        self.y += amount * self.scale

    def heading(self, text: str) -> None:
        self.paragraph(text, "heading")
        self.rule(1)
        self.gap(8)

    def paragraph(self, text: str, font_key: str = "body") -> None:
        font = self.fonts[font_key]
        for line in self.wrap(text, font, self.content_width):
            self.ops.append(("text", ((self.pad, self.y), line, font, BLACK)))
            self.y += self.line_height(font)

    def labeled(self, item: LabeledValue, x: int | None = None, max_width: int | None = None) -> int:
        """'Label: value' with a bold label. Returns the height used."""
        x = self.pad if x is None else x
        max_width = max_width or self.content_width
        label_font, body_font = self.fonts["label"], self.fonts["body"]

        label = f"{item.label}: "
        label_width = self.text_width(label, label_font)
        self.ops.append(("text", ((x, self.y), label, label_font, BLACK)))

        lines = self.wrap(item.value, body_font, max(max_width - label_width, 1))
        height = 0
        for i, line in enumerate(lines):
            line_x = x + label_width if i == 0 else x
            self.ops.append(("text", ((line_x, self.y + height), line, body_font, BLACK)))
            height += self.line_height(body_font)
        return height

    def labeled_lines(self, items: list[LabeledValue]) -> None:
        for item in items:
            self.y += self.labeled(item)

    def two_column(self, items: list[LabeledValue]) -> None:
        column_width = self.content_width // 2
        for start in range(0, len(items), 2):
            row_height = 0
            for offset, item in enumerate(items[start:start + 2]):
                x = self.pad + offset * column_width
                row_height = max(row_height, self.labeled(item, x=x, max_width=column_width - self.pad // 2))
            self.y += row_height + LINE_GAP * self.scale

    def table(self, header: tuple[str, ...], rows: list[tuple[str, ...]]) -> None:
        column_width = self.content_width // len(header)
        cell_pad = CELL_PADDING * self.scale
        row_height = self.line_height(self.fonts["cell"]) + cell_pad

        for row_index, cells in enumerate([header, *rows]):
            is_header = row_index == 0
            font = self.fonts["cell_bold"] if is_header else self.fonts["cell"]
            for col, text in enumerate(cells):
                x0 = self.pad + col * column_width
                box = (x0, self.y, x0 + column_width, self.y + row_height)
                fill = HEADER_FILL if is_header else WHITE
                self.ops.append(("rect", (box, fill, RULE_GRAY)))
                text = self.truncate(text, font, column_width - 2 * cell_pad)
                self.ops.append(("text", ((x0 + cell_pad, self.y + cell_pad // 2), text, font, BLACK)))
            self.y += row_height


# Sections below the header, keyed by CallSheet.section_titles()

def _location_section(layout: _Layout, call_sheet: CallSheet) -> None:
    layout.heading("LOCATION")
    layout.labeled_lines(call_sheet.location)
    layout.gap()


def _crew_section(layout: _Layout, call_sheet: CallSheet) -> None:
    layout.heading("CREW")
    layout.table(CREW_COLUMNS, [row.cells() for row in call_sheet.crew])
    layout.gap()


def _looks_section(layout: _Layout, call_sheet: CallSheet) -> None:
    layout.heading("LOOKS")
    for number, look in enumerate(call_sheet.looks, start=1):
        layout.paragraph(f"{number}. {look}")
    layout.gap()


def _emergency_section(layout: _Layout, call_sheet: CallSheet) -> None:
    layout.rule(2)
    layout.gap(16)
    layout.paragraph("EMERGENCY CONTACTS", "heading")
    layout.labeled_lines(call_sheet.emergency_contacts)


def _notes_section(layout: _Layout, call_sheet: CallSheet) -> None:
    layout.gap(16)
    layout.paragraph("SPECIAL NOTES", "heading")
    layout.paragraph(call_sheet.special_notes)


_SECTIONS = {
    "LOCATION": _location_section,
    "CREW": _crew_section,
    "LOOKS": _looks_section,
    "EMERGENCY CONTACTS": _emergency_section,
    "SPECIAL NOTES": _notes_section,
}


def _layout_call_sheet(call_sheet: CallSheet, width: int, scale: int) -> _Layout:
    layout = _Layout(width=width, scale=scale)

    # Header
    layout.centered(call_sheet.title, "title")
    layout.centered(call_sheet.production_name, "name")
    if call_sheet.client_line:
        layout.centered(call_sheet.client_line, "client")
    layout.gap(8)
    layout.rule(2)
    layout.gap()

    # Production info
    layout.two_column(call_sheet.info)
    layout.gap()

    for title in call_sheet.section_titles():
        _SECTIONS[title](layout, call_sheet)

    layout.y += layout.pad
    return layout


# =============================================================================
# Public API
# =============================================================================

def render_call_sheet_image(
    call_sheet: CallSheet,
    scale: int = 2,
    base_width: int = 800,
) -> Image.Image:
    """
    Rasterize a call sheet.

    Args:
        call_sheet: The assembled sheet
        scale: Upscale factor applied to every size in the layout
        base_width: Layout width in pixels before scaling

    Returns:
        RGB image, base_width * scale pixels wide, as tall as the content

    Raises:
        CallSheetRenderError: If scale or width are not positive
    """
    if scale < 1 or base_width < 1:
        raise CallSheetRenderError(
            f"Invalid raster size: scale={scale}, base_width={base_width}",
            suggestion="Set PDF_SCALE >= 1 and PDF_BASE_WIDTH_PX >= 1",
        )

    width = base_width * scale
    layout = _layout_call_sheet(call_sheet, width, scale)

    image = Image.new("RGB", (width, layout.y), WHITE)
    draw = ImageDraw.Draw(image)
    for kind, args in layout.ops:
        if kind == "text":
            xy, text, font, fill = args
            draw.text(xy, text, font=font, fill=fill)
        elif kind == "rect":
            box, fill, outline = args
            draw.rectangle(box, fill=fill, outline=outline)

    logger.debug(f"Rasterized call sheet {call_sheet.production_id}: {image.width}x{image.height}px")
    return image


def page_offsets(image_height_mm: float, page_height_mm: float = PAGE_BAND_MM) -> list[float]:
    """
    Vertical image offsets (mm, relative to the page top) for each page.

    The first page shows the image from its top edge; every further page
    shifts it up by one band until no image height remains.

    Example:
        page_offsets(600)  # [0.0, -295.0, -590.0]
    """
    offsets = [0.0]
    remaining = image_height_mm - page_height_mm
    while remaining > 0:
        offsets.append(remaining - image_height_mm)
        remaining -= page_height_mm
    return offsets


def paginate_image(image: Image.Image, title: str | None = None) -> bytes:
    """
    Lay an image across as many A4 pages as its height needs.

    Returns:
        PDF document bytes
    """
    image_height_mm = image.height * PAGE_WIDTH_MM / image.width
    offsets = page_offsets(image_height_mm)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    if title:
        pdf.setTitle(title)

    _, page_height = A4
    reader = ImageReader(image)
    for offset in offsets:
        # reportlab's origin is bottom-left; offset is measured from the top
        y = page_height - (offset + image_height_mm) * mm
        pdf.drawImage(reader, 0, y, width=PAGE_WIDTH_MM * mm, height=image_height_mm * mm)
        pdf.showPage()
    pdf.save()

    logger.debug(f"Paginated {image_height_mm:.1f}mm image onto {len(offsets)} pages")
    return buffer.getvalue()


def render_call_sheet_pdf(
    call_sheet: CallSheet,
    scale: int = 2,
    base_width: int = 800,
) -> bytes:
    """Rasterize and paginate a call sheet in one step."""
    image = render_call_sheet_image(call_sheet, scale=scale, base_width=base_width)
    return paginate_image(image, title=call_sheet.file_name.removesuffix(".pdf"))

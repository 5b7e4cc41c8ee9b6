"""PDF renderer: one page per sheet, drawn with ReportLab."""

from __future__ import annotations

from io import BytesIO

from reportlab.lib.colors import Color, black
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from label_types import LabelLayout, SheetConfig, SheetLayout
from .base import LabelRenderer

FONT_NAME = "Helvetica"
LABEL_OUTLINE_WIDTH = 0.5
SHEET_OUTLINE_WIDTH = 1.0
SIZE_CAPTION_HEIGHT = 1.5 * mm
SIZE_CAPTION_OFFSET = 1.0 * mm

PALETTE: dict[str, tuple[float, float, float]] = {
    "white": (1, 1, 1),
    "black": (0, 0, 0),
    "red": (1, 0, 0),
    "green": (0, 0.5, 0),
    "blue": (0, 0, 1),
    "yellow": (1, 1, 0),
    "orange": (1, 0.65, 0),
    "purple": (0.5, 0, 0.5),
    "pink": (1, 0.75, 0.8),
    "brown": (0.6, 0.3, 0),
    "gray": (0.5, 0.5, 0.5),
    "grey": (0.5, 0.5, 0.5),
    "cyan": (0, 1, 1),
    "magenta": (1, 0, 1),
    "silver": (0.75, 0.75, 0.75),
    "gold": (1, 0.84, 0),
    "navy": (0, 0, 0.5),
    "maroon": (0.5, 0, 0),
    "olive": (0.5, 0.5, 0),
    "teal": (0, 0.5, 0.5),
    "lime": (0, 1, 0),
    "aqua": (0, 1, 1),
    "fuchsia": (1, 0, 1),
}


def colour_for(name: str) -> Color:
    """Map a palette colour name to a ReportLab colour, defaulting to black."""

    rgb = PALETTE.get(name.strip().lower())
    if rgb is None:
        return black
    return Color(*rgb)


def size_caption(layout: LabelLayout) -> str:
    spec = layout.placed.spec
    return f"{spec.width:g}x{spec.height:g}mm"


class Renderer(LabelRenderer):
    """Thin translator from sheet geometry to a single PDF page."""

    def __init__(self, draw_outline: bool = True) -> None:
        self._draw_outline = draw_outline

    @property
    def extension(self) -> str:  # type: ignore[override]
        return "pdf"

    def render_sheet(
        self,
        sheet: SheetLayout,
        config: SheetConfig,
    ) -> bytes:  # type: ignore[override]
        buffer = BytesIO()
        canvas_obj = canvas.Canvas(
            buffer,
            pagesize=(config.width * mm, config.height * mm),
        )

        if self._draw_outline:
            canvas_obj.saveState()
            canvas_obj.setStrokeColor(black)
            canvas_obj.setLineWidth(SHEET_OUTLINE_WIDTH)
            canvas_obj.rect(0, 0, config.width * mm, config.height * mm)
            canvas_obj.restoreState()

        for label in sheet.labels:
            self._draw_label(canvas_obj, label)

        canvas_obj.showPage()
        canvas_obj.save()
        return buffer.getvalue()

    def _draw_label(self, canvas_obj: canvas.Canvas, layout: LabelLayout) -> None:
        placed = layout.placed
        spec = placed.spec
        left = placed.x * mm
        bottom = placed.y * mm
        text_colour = colour_for(spec.text_colour)

        canvas_obj.saveState()
        canvas_obj.setLineWidth(LABEL_OUTLINE_WIDTH)
        canvas_obj.setStrokeColor(black)
        canvas_obj.setFillColor(colour_for(spec.background_colour))
        canvas_obj.rect(left, bottom, spec.width * mm, spec.height * mm, stroke=1, fill=1)

        for hole in layout.holes:
            canvas_obj.circle(
                left + hole.x * mm,
                bottom + hole.y * mm,
                hole.diameter / 2.0 * mm,
                stroke=1,
                fill=0,
            )

        canvas_obj.setFillColor(text_colour)
        for line in layout.lines:
            canvas_obj.setFont(FONT_NAME, line.height * mm)
            canvas_obj.drawCentredString(
                left + line.center_x * mm,
                bottom + line.baseline * mm,
                line.text,
            )

        canvas_obj.setFont(FONT_NAME, SIZE_CAPTION_HEIGHT)
        canvas_obj.drawCentredString(
            left + spec.width * mm / 2.0,
            bottom + SIZE_CAPTION_OFFSET,
            size_caption(layout),
        )
        canvas_obj.restoreState()

"""Sheet layout engine for manufactured labels."""

from .arrange import arrange_sheets, expand_units, is_oversized
from .engine import fit_text_lines, hole_centres, layout, layout_label, sheet_summary
from .grouping import group_key, partition_by_group
from .text_fit import (
    GLYPH_ASPECT_RATIO,
    LINE_SPACING,
    MIN_TEXT_HEIGHT,
    TEXT_PADDING,
    estimate_text_width,
    fit_text_height,
    stacked_baselines,
)

__all__ = [
    "arrange_sheets",
    "expand_units",
    "is_oversized",
    "fit_text_lines",
    "hole_centres",
    "layout",
    "layout_label",
    "sheet_summary",
    "group_key",
    "partition_by_group",
    "GLYPH_ASPECT_RATIO",
    "LINE_SPACING",
    "MIN_TEXT_HEIGHT",
    "TEXT_PADDING",
    "estimate_text_width",
    "fit_text_height",
    "stacked_baselines",
]

"""Approximate text metrics used to auto-fit label text."""

from __future__ import annotations

# Average glyph width relative to glyph height for the engraving font.
GLYPH_ASPECT_RATIO = 0.55
MIN_TEXT_HEIGHT = 0.5
TEXT_PADDING = 2.0
LINE_SPACING = 1.0


def estimate_text_width(text: str, height: float) -> float:
    """Return the estimated rendered width of ``text`` at glyph ``height``."""

    return len(text) * height * GLYPH_ASPECT_RATIO


def fit_text_height(
    text: str,
    available_width: float,
    desired_height: float,
    padding: float = TEXT_PADDING,
) -> float:
    """Return the glyph height to use so ``text`` fits ``available_width``.

    Text that already fits keeps ``desired_height``. Wider text is scaled down
    proportionally and never drops below ``MIN_TEXT_HEIGHT``.
    """

    if desired_height <= MIN_TEXT_HEIGHT:
        return MIN_TEXT_HEIGHT
    if not text.strip():
        return desired_height

    interior = available_width - 2 * padding
    estimated = estimate_text_width(text, desired_height)
    if estimated <= interior:
        return desired_height

    # interior may be zero or negative for very narrow labels
    scaled = desired_height * interior / estimated
    return max(MIN_TEXT_HEIGHT, scaled)


def stacked_baselines(
    heights: list[float],
    area_height: float,
    spacing: float = LINE_SPACING,
) -> list[float]:
    """Return baselines for lines stacked downward from a centred block.

    ``heights`` are the fitted line heights in drawing order; the block is
    centred vertically in ``area_height`` and each baseline is measured from
    the bottom of that area.
    """

    if not heights:
        return []

    block_height = sum(heights) + (len(heights) - 1) * spacing
    cursor = (area_height + block_height) / 2.0
    baselines: list[float] = []
    for height in heights:
        cursor -= height
        baselines.append(cursor)
        cursor -= spacing
    return baselines

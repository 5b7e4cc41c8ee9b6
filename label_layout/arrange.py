"""Row-based shelf packing of label copies onto print sheets."""

from __future__ import annotations

import logging
from typing import Iterable

from label_types import LabelSpec, PlacedLabel, PlacementUnit, Sheet, SheetConfig

logger = logging.getLogger(__name__)

# Tolerance for comparisons against sheet edges, in millimetres.
EPSILON = 1e-9


def expand_units(specs: Iterable[LabelSpec]) -> list[PlacementUnit]:
    """Return one placement unit per physical copy, in input order."""

    return [
        PlacementUnit(spec=spec, index=index)
        for spec in specs
        for index in range(spec.copies)
    ]


def is_oversized(spec: LabelSpec, config: SheetConfig) -> bool:
    """Return True if ``spec`` cannot fit inside the usable sheet area."""

    return (
        spec.width > config.usable_width + EPSILON
        or spec.height > config.usable_height + EPSILON
    )


def oversize_message(spec: LabelSpec, config: SheetConfig) -> str:
    return (
        f"Label {spec.display_name} ({spec.width:g}x{spec.height:g}mm) is too "
        f"large for sheet ({config.usable_width:g}x{config.usable_height:g}mm)"
    )


def arrange_sheets(
    specs: Iterable[LabelSpec],
    config: SheetConfig,
) -> list[Sheet]:
    """Pack every copy of ``specs`` onto sheets, left-to-right, top-to-bottom.

    ``specs`` must belong to a single manufacturing group. Labels are never
    reordered or rotated; a row or sheet that cannot take the next label is
    closed and the label starts a new one. Labels larger than the usable area
    are placed anyway and overflow the sheet.
    """

    units = expand_units(specs)
    sheets: list[Sheet] = []
    if not units:
        return sheets

    left = config.margin
    top = config.height - config.margin
    right_limit = config.width - config.margin

    current: list[PlacedLabel] = []
    x = left
    y = top
    row_height = units[0].spec.height
    warned: set[int] = set()

    for unit in units:
        width = unit.spec.width
        height = unit.spec.height

        if is_oversized(unit.spec, config) and id(unit.spec) not in warned:
            warned.add(id(unit.spec))
            logger.warning("%s; placing it anyway", oversize_message(unit.spec, config))

        if x + width > right_limit + EPSILON:
            x = left
            y -= row_height + config.gap
            row_height = height

        if y - height < config.margin - EPSILON:
            if current:
                sheets.append(Sheet(page_number=len(sheets) + 1, labels=tuple(current)))
            current = []
            x = left
            y = top
            row_height = height

        current.append(PlacedLabel(unit=unit, x=x, y=y - height))
        row_height = max(row_height, height)
        x += width + config.gap

    if current:
        sheets.append(Sheet(page_number=len(sheets) + 1, labels=tuple(current)))

    logger.debug("Arranged %d label(s) onto %d sheet(s)", len(units), len(sheets))
    return sheets

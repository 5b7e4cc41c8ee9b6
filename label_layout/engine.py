"""Layout orchestration: grouping, packing, text fitting and hole placement."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from label_types import (
    GroupKey,
    HoleCentre,
    LabelLayout,
    LabelSpec,
    LayoutResult,
    PlacedLabel,
    SheetConfig,
    SheetLayout,
    TextLineFit,
)

from .arrange import arrange_sheets, is_oversized, oversize_message
from .grouping import partition_by_group
from .text_fit import LINE_SPACING, TEXT_PADDING, fit_text_height, stacked_baselines

logger = logging.getLogger(__name__)

DEFAULT_HOLE_EDGE_DISTANCE = 5.0


def fit_text_lines(spec: LabelSpec) -> tuple[TextLineFit, ...]:
    """Fit every non-blank line of ``spec`` and centre the block vertically."""

    lines = [line for line in spec.lines if not line.is_blank]
    heights = [
        fit_text_height(line.text, spec.width, line.height, TEXT_PADDING)
        for line in lines
    ]
    baselines = stacked_baselines(heights, spec.height, LINE_SPACING)

    return tuple(
        TextLineFit(
            text=line.text,
            desired_height=line.height,
            height=height,
            baseline=baseline,
            center_x=spec.width / 2.0,
            spacing_top=line.spacing_top,
            spacing_left=line.spacing_left,
        )
        for line, height, baseline in zip(lines, heights, baselines)
    )


def hole_centres(spec: LabelSpec) -> tuple[HoleCentre, ...]:
    """Return hole centres relative to the label's bottom-left corner."""

    count = spec.hole_count
    diameter = spec.hole_diameter
    if count <= 0 or diameter <= 0:
        return ()

    inset = spec.hole_edge_distance or DEFAULT_HOLE_EDGE_DISTANCE
    width = spec.width
    height = spec.height
    middle = height / 2.0

    if count == 1:
        points = [(inset, middle)]
    elif count == 2:
        points = [(inset, middle), (width - inset, middle)]
    elif count == 4:
        points = [
            (inset, inset),
            (width - inset, inset),
            (inset, height - inset),
            (width - inset, height - inset),
        ]
    else:
        step = (width - 2 * inset) / (count - 1)
        points = [(inset + i * step, middle) for i in range(count)]

    return tuple(HoleCentre(x=x, y=y, diameter=diameter) for x, y in points)


def layout_label(placed: PlacedLabel, config: SheetConfig) -> LabelLayout:
    spec = placed.spec
    return LabelLayout(
        placed=placed,
        lines=fit_text_lines(spec),
        holes=hole_centres(spec),
        oversized=is_oversized(spec, config),
    )


def layout(
    specs: Iterable[LabelSpec],
    config: Optional[SheetConfig] = None,
) -> LayoutResult:
    """Lay out ``specs`` onto sheets, one run of sheets per manufacturing group."""

    config = config or SheetConfig()
    groups: dict[GroupKey, tuple[SheetLayout, ...]] = {}
    warnings: list[str] = []

    for key, group_specs in partition_by_group(specs).items():
        for spec in group_specs:
            if is_oversized(spec, config):
                warnings.append(oversize_message(spec, config))

        sheets = arrange_sheets(group_specs, config)
        groups[key] = tuple(
            SheetLayout(
                key=key,
                sheet=sheet,
                labels=tuple(layout_label(placed, config) for placed in sheet.labels),
            )
            for sheet in sheets
        )
        logger.debug(
            "Group %s on %s %gmm (%s): %d sheet(s)",
            key.text_colour,
            key.background_colour,
            key.thickness,
            key.style.value,
            len(sheets),
        )

    return LayoutResult(config=config, groups=groups, warnings=tuple(warnings))


def sheet_summary(
    specs: Sequence[LabelSpec],
    config: Optional[SheetConfig] = None,
) -> tuple[int, list[int], int]:
    """Return ``(total_sheets, labels_per_sheet, total_labels)`` for ``specs``."""

    result = layout(specs, config)
    per_sheet = [len(sheet.labels) for sheet in result.sheets]
    return len(per_sheet), per_sheet, sum(per_sheet)

"""Partition label specs by the substrate/ink combination they are cut from."""

from __future__ import annotations

import logging
from typing import Iterable

from label_types import GroupKey, LabelSpec

logger = logging.getLogger(__name__)


def group_key(spec: LabelSpec) -> GroupKey:
    """Return the manufacturing group of ``spec``."""

    return GroupKey(
        text_colour=spec.text_colour,
        background_colour=spec.background_colour,
        thickness=spec.thickness,
        style=spec.style,
    )


def partition_by_group(
    specs: Iterable[LabelSpec],
) -> dict[GroupKey, list[LabelSpec]]:
    """Split ``specs`` into groups, keeping input order inside each group.

    Groups are returned in the order their first spec appears.
    """

    groups: dict[GroupKey, list[LabelSpec]] = {}
    for spec in specs:
        groups.setdefault(group_key(spec), []).append(spec)

    logger.debug("Partitioned label specs into %d group(s)", len(groups))
    return groups

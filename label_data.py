"""Helpers for building resolved `LabelSpec` collections from label records."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence

from label_layout.text_fit import MIN_TEXT_HEIGHT
from label_types import AUTO, AdhesiveStyle, LabelSpec, Spacing, TextLine

__all__ = [
    "LabelDataError",
    "DEFAULT_TEXT_COLOUR",
    "DEFAULT_BACKGROUND_COLOUR",
    "DEFAULT_THICKNESS",
    "DEFAULT_TEXT_HEIGHT",
    "resolve_label_spec",
    "resolve_text_line",
    "label_specs_from_records",
    "load_label_specs",
]

DEFAULT_TEXT_COLOUR = "Black"
DEFAULT_BACKGROUND_COLOUR = "White"
DEFAULT_THICKNESS = 0.8
DEFAULT_TEXT_HEIGHT = 2.0


class LabelDataError(ValueError):
    """Raised when a label record cannot be turned into a `LabelSpec`."""


def _as_float(value: Any, field_name: str, default: float | None = None) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise LabelDataError(f"Missing required field '{field_name}'")
        return default
    if isinstance(value, bool):
        raise LabelDataError(f"Field '{field_name}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise LabelDataError(
            f"Field '{field_name}' must be a number, got {value!r}"
        ) from exc
    if not math.isfinite(number):
        raise LabelDataError(
            f"Field '{field_name}' must be a finite number, got {value!r}"
        )
    return number


def _as_int(value: Any, field_name: str, default: int) -> int:
    return int(_as_float(value, field_name, float(default)))


def _as_text(value: Any, default: str) -> str:
    text = str(value).strip() if value is not None else ""
    return text or default


def _as_spacing(value: Any) -> Spacing:
    """Pass spacing hints through; anything non-numeric is ``AUTO``."""

    if value is None or isinstance(value, bool):
        return AUTO
    try:
        number = float(value)
    except (TypeError, ValueError):
        return AUTO
    return number if math.isfinite(number) else AUTO


def resolve_text_line(record: Mapping[str, Any]) -> TextLine:
    """Convert a single line record into a `TextLine`."""

    text = record.get("text")
    height = _as_float(record.get("textSizeMm"), "textSizeMm", DEFAULT_TEXT_HEIGHT)
    if height <= 0:
        height = DEFAULT_TEXT_HEIGHT

    return TextLine(
        text=text if isinstance(text, str) else "",
        height=max(height, MIN_TEXT_HEIGHT),
        spacing_top=_as_spacing(record.get("spacingTopMm")),
        spacing_left=_as_spacing(record.get("spacingLeftMm")),
    )


def resolve_label_spec(record: Mapping[str, Any]) -> LabelSpec:
    """Convert a label record into a `LabelSpec` with every default filled in."""

    width = _as_float(record.get("labelLengthMm"), "labelLengthMm")
    height = _as_float(record.get("labelHeightMm"), "labelHeightMm")
    if width <= 0 or height <= 0:
        raise LabelDataError(
            f"Label dimensions must be positive, got {width:g}x{height:g}mm"
        )

    thickness = _as_float(
        record.get("labelThicknessMm"), "labelThicknessMm", DEFAULT_THICKNESS
    )
    if thickness <= 0:
        thickness = DEFAULT_THICKNESS

    hole_count = max(_as_int(record.get("noOfHoles"), "noOfHoles", 0), 0)
    hole_diameter = max(_as_float(record.get("holeSizeMm"), "holeSizeMm", 0.0), 0.0)
    hole_edge_distance = max(
        _as_float(record.get("holeDistanceMm"), "holeDistanceMm", 0.0), 0.0
    )

    lines = record.get("lines") or []
    if not isinstance(lines, (list, tuple)):
        raise LabelDataError("Field 'lines' must be a list of line records")

    return LabelSpec(
        name=_as_text(record.get("name"), ""),
        width=width,
        height=height,
        thickness=thickness,
        background_colour=_as_text(
            record.get("labelColourBackground"), DEFAULT_BACKGROUND_COLOUR
        ),
        text_colour=_as_text(record.get("textColour"), DEFAULT_TEXT_COLOUR),
        quantity=_as_int(record.get("labelQuantity"), "labelQuantity", 1),
        style=AdhesiveStyle.parse(record.get("style")),
        hole_count=hole_count,
        hole_diameter=hole_diameter,
        hole_edge_distance=hole_edge_distance,
        lines=tuple(
            resolve_text_line(line) for line in lines if isinstance(line, Mapping)
        ),
    )


def label_specs_from_records(
    records: Iterable[Mapping[str, Any]],
) -> List[LabelSpec]:
    """Resolve every record, reporting the position of the first bad one."""

    specs: List[LabelSpec] = []
    for position, record in enumerate(records, start=1):
        if not isinstance(record, Mapping):
            raise LabelDataError(f"Label record {position} is not an object")
        try:
            specs.append(resolve_label_spec(record))
        except LabelDataError as exc:
            raise LabelDataError(f"Label record {position}: {exc}") from exc
    return specs


def _extract_records(payload: Any) -> Sequence[Mapping[str, Any]]:
    if isinstance(payload, Mapping):
        payload = payload.get("labelSetups")
    if not isinstance(payload, list):
        raise LabelDataError(
            "Expected a list of label records or an object with 'labelSetups'"
        )
    return payload


def load_label_specs(path: str | Path) -> List[LabelSpec]:
    """Read label records from a JSON file."""

    try:
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise LabelDataError(f"Invalid JSON in '{path}': {exc}") from exc

    return label_specs_from_records(_extract_records(payload))

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Union

AUTO = "AUTO"

Spacing = Union[float, str]


class AdhesiveStyle(str, Enum):
    """Backing style of the label material."""

    ADHESIVE = "Adhesive"
    NON_ADHESIVE = "Non Adhesive"

    @classmethod
    def parse(cls, value: object) -> "AdhesiveStyle":
        """Return the style for ``value``; unknown or blank values are adhesive."""

        if isinstance(value, AdhesiveStyle):
            return value
        text = "".join(ch for ch in str(value or "").lower() if ch.isalpha())
        if text in {"nonadhesive", "nonad"}:
            return cls.NON_ADHESIVE
        return cls.ADHESIVE


@dataclass(frozen=True)
class TextLine:
    """One line of text as designed, before auto-fit."""

    text: str
    height: float
    spacing_top: Spacing = AUTO
    spacing_left: Spacing = AUTO

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class LabelSpec:
    """Resolved description of one label design."""

    width: float
    height: float
    thickness: float
    background_colour: str
    text_colour: str
    quantity: int
    style: AdhesiveStyle
    hole_count: int = 0
    hole_diameter: float = 0.0
    hole_edge_distance: float = 0.0
    lines: tuple[TextLine, ...] = ()
    name: str = ""

    @property
    def copies(self) -> int:
        """Number of physical copies; a non-positive quantity still prints once."""

        return max(self.quantity, 1)

    @property
    def display_name(self) -> str:
        return self.name.strip() or "unnamed"


@dataclass(frozen=True)
class PlacementUnit:
    spec: LabelSpec
    index: int


@dataclass(frozen=True)
class SheetConfig:
    """Print sheet geometry in millimetres."""

    width: float = 600.0
    height: float = 300.0
    margin: float = 0.0
    gap: float = 0.0

    def __post_init__(self) -> None:
        for name in ("width", "height", "margin", "gap"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"Sheet {name} must be a finite number, got {value}")
        if self.width <= 0:
            raise ValueError(f"Sheet width must be positive, got {self.width}")
        if self.height <= 0:
            raise ValueError(f"Sheet height must be positive, got {self.height}")
        if self.margin < 0:
            raise ValueError(f"Sheet margin must be non-negative, got {self.margin}")
        if self.gap < 0:
            raise ValueError(f"Label gap must be non-negative, got {self.gap}")
        if self.usable_width <= 0 or self.usable_height <= 0:
            raise ValueError(
                f"Margin {self.margin} leaves no usable area on a "
                f"{self.width}x{self.height} sheet"
            )

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def usable_height(self) -> float:
        return self.height - 2 * self.margin


@dataclass(frozen=True)
class PlacedLabel:
    """A placement unit with its bottom-left corner on the sheet."""

    unit: PlacementUnit
    x: float
    y: float

    @property
    def spec(self) -> LabelSpec:
        return self.unit.spec

    @property
    def width(self) -> float:
        return self.unit.spec.width

    @property
    def height(self) -> float:
        return self.unit.spec.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    def overlaps(self, other: "PlacedLabel", tolerance: float = 1e-9) -> bool:
        """Return True when the interiors of both bounding boxes intersect."""

        return (
            self.x < other.right - tolerance
            and other.x < self.right - tolerance
            and self.y < other.top - tolerance
            and other.y < self.top - tolerance
        )


@dataclass(frozen=True)
class Sheet:
    page_number: int
    labels: tuple[PlacedLabel, ...] = ()


@dataclass(frozen=True)
class TextLineFit:
    """Resolved glyph height and position of one text line.

    ``baseline`` is measured from the label's bottom edge and ``center_x``
    from its left edge.
    """

    text: str
    desired_height: float
    height: float
    baseline: float
    center_x: float
    spacing_top: Spacing = AUTO
    spacing_left: Spacing = AUTO


@dataclass(frozen=True)
class HoleCentre:
    """Hole centre relative to the label's bottom-left corner."""

    x: float
    y: float
    diameter: float


class GroupKey(NamedTuple):
    text_colour: str
    background_colour: str
    thickness: float
    style: AdhesiveStyle

    def to_dict(self) -> dict[str, Any]:
        return {
            "textColour": self.text_colour,
            "backgroundColour": self.background_colour,
            "thickness": self.thickness,
            "style": self.style.value,
        }


@dataclass(frozen=True)
class LabelLayout:
    """Final geometry of one placed label."""

    placed: PlacedLabel
    lines: tuple[TextLineFit, ...] = ()
    holes: tuple[HoleCentre, ...] = ()
    oversized: bool = False

    def to_dict(self) -> dict[str, Any]:
        spec = self.placed.spec
        return {
            "name": spec.name,
            "copy": self.placed.unit.index,
            "x": self.placed.x,
            "y": self.placed.y,
            "width": spec.width,
            "height": spec.height,
            "oversized": self.oversized,
            "holes": [
                {"x": hole.x, "y": hole.y, "diameter": hole.diameter}
                for hole in self.holes
            ],
            "lines": [
                {
                    "text": line.text,
                    "desiredHeight": line.desired_height,
                    "height": line.height,
                    "baseline": line.baseline,
                    "centerX": line.center_x,
                    "spacingTop": line.spacing_top,
                    "spacingLeft": line.spacing_left,
                }
                for line in self.lines
            ],
        }


@dataclass(frozen=True)
class SheetLayout:
    key: GroupKey
    sheet: Sheet
    labels: tuple[LabelLayout, ...] = ()

    @property
    def page_number(self) -> int:
        return self.sheet.page_number

    def to_dict(self) -> dict[str, Any]:
        return {
            "group": self.key.to_dict(),
            "page": self.sheet.page_number,
            "labels": [label.to_dict() for label in self.labels],
        }


@dataclass(frozen=True)
class LayoutResult:
    """Everything a renderer needs, grouped in first-encountered group order."""

    config: SheetConfig
    groups: dict[GroupKey, tuple[SheetLayout, ...]] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    @property
    def sheets(self) -> list[SheetLayout]:
        return [sheet for sheets in self.groups.values() for sheet in sheets]

    @property
    def label_count(self) -> int:
        return sum(len(sheet.labels) for sheet in self.sheets)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sheet": {
                "width": self.config.width,
                "height": self.config.height,
                "margin": self.config.margin,
                "gap": self.config.gap,
            },
            "sheets": [sheet.to_dict() for sheet in self.sheets],
            "warnings": list(self.warnings),
        }

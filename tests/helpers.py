from __future__ import annotations

from label_types import AdhesiveStyle, LabelSpec, TextLine


def make_spec(
    width: float = 50.0,
    height: float = 20.0,
    quantity: int = 1,
    *,
    name: str = "",
    text_colour: str = "Black",
    background_colour: str = "White",
    thickness: float = 0.8,
    style: AdhesiveStyle = AdhesiveStyle.ADHESIVE,
    hole_count: int = 0,
    hole_diameter: float = 0.0,
    hole_edge_distance: float = 0.0,
    lines: tuple[TextLine, ...] = (),
) -> LabelSpec:
    return LabelSpec(
        name=name,
        width=width,
        height=height,
        thickness=thickness,
        background_colour=background_colour,
        text_colour=text_colour,
        quantity=quantity,
        style=style,
        hole_count=hole_count,
        hole_diameter=hole_diameter,
        hole_edge_distance=hole_edge_distance,
        lines=lines,
    )

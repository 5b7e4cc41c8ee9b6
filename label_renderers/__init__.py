"""Renderer loader for label sheet output formats."""

from __future__ import annotations

from typing import Any, Iterable
from importlib import import_module

from .base import LabelRenderer

_RENDERER_MODULES = {"pdf": "pdf", "json": "json_sheet"}


def get_renderer(
    name: str,
    **options: Any,
) -> LabelRenderer:
    """Instantiate the renderer implementation for ``name``."""

    key = name.lower()
    if key not in _RENDERER_MODULES:
        available = ", ".join(sorted(_RENDERER_MODULES))
        raise SystemExit(
            f"Unknown renderer '{name}'. Available renderers: {available}"
        )

    module = import_module(f"{__name__}.{_RENDERER_MODULES[key]}")

    renderer_cls: type[LabelRenderer] | None = getattr(
        module,
        "Renderer",
        None,
    )
    if not renderer_cls or not issubclass(renderer_cls, LabelRenderer):
        raise SystemExit(
            f"Renderer '{name}' does not export a valid Renderer class"
        )

    return renderer_cls(**options)


def list_renderers() -> Iterable[str]:
    """Return the renderer identifiers."""

    return sorted(_RENDERER_MODULES)

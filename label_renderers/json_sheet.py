"""JSON renderer: the sheet geometry as a standalone document."""

from __future__ import annotations

import json

from label_types import SheetConfig, SheetLayout
from .base import LabelRenderer


class Renderer(LabelRenderer):
    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    @property
    def extension(self) -> str:  # type: ignore[override]
        return "json"

    def render_sheet(
        self,
        sheet: SheetLayout,
        config: SheetConfig,
    ) -> bytes:  # type: ignore[override]
        document = {
            "sheet": {
                "width": config.width,
                "height": config.height,
                "margin": config.margin,
                "gap": config.gap,
            },
            **sheet.to_dict(),
        }
        return json.dumps(document, indent=self._indent).encode("utf-8")

"""Abstract base class for sheet renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from label_types import SheetConfig, SheetLayout


class LabelRenderer(ABC):
    """Translates one laid-out sheet into an output file format."""

    @property
    @abstractmethod
    def extension(self) -> str:
        """Return the file extension (without dot) of rendered sheets."""

    @abstractmethod
    def render_sheet(
        self,
        sheet: SheetLayout,
        config: SheetConfig,
    ) -> bytes:
        """Return the file contents for ``sheet``."""

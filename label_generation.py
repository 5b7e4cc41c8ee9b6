"""Writing laid-out label sheets to disk."""

from __future__ import annotations

from pathlib import Path

from label_renderers.base import LabelRenderer
from label_types import AdhesiveStyle, GroupKey, LayoutResult

DEFAULT_PREFIX = "MLA"
NON_ADHESIVE_SUFFIX = " Non AD"


def sheet_filename(
    key: GroupKey,
    page_number: int,
    extension: str,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """Return the file name for page ``page_number`` of group ``key``.

    Example: ``MLA Black on White 0.8mm 01.pdf``.
    """

    suffix = NON_ADHESIVE_SUFFIX if key.style is AdhesiveStyle.NON_ADHESIVE else ""
    stem = (
        f"{key.text_colour} on {key.background_colour} "
        f"{key.thickness:g}mm{suffix} {page_number:02d}"
    )
    if prefix:
        stem = f"{prefix} {stem}"
    return f"{stem}.{extension}"


def render(
    result: LayoutResult,
    renderer: LabelRenderer,
    output_dir: str | Path | None,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """Render every sheet of ``result`` into ``output_dir``, one file per sheet."""

    sheets = result.sheets
    if not sheets:
        return "No labels to lay out; no output generated."

    target = Path(output_dir or ".")
    target.mkdir(parents=True, exist_ok=True)

    for sheet in sheets:
        name = sheet_filename(sheet.key, sheet.page_number, renderer.extension, prefix)
        with open(target / name, "wb") as handle:
            handle.write(renderer.render_sheet(sheet, result.config))

    return (
        f"Wrote {len(sheets)} {renderer.extension.upper()} sheet(s) with "
        f"{result.label_count} label(s) to '{target}'."
    )

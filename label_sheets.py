#!/usr/bin/env python3
"""Lay out label specifications onto print sheets and write one file per sheet."""

import argparse
import logging
import os
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from label_data import LabelDataError, load_label_specs
from label_generation import DEFAULT_PREFIX, render
from label_layout import layout
from label_renderers import get_renderer, list_renderers
from label_types import LayoutResult, SheetConfig


def _build_sheet_config(args: argparse.Namespace) -> SheetConfig:
    """Validate the sheet geometry supplied on the command line."""

    try:
        return SheetConfig(
            width=args.sheet_width,
            height=args.sheet_height,
            margin=args.margin,
            gap=args.gap,
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid sheet configuration: {exc}") from exc


def _summary_lines(result: LayoutResult) -> List[str]:
    lines = []
    for key, sheets in result.groups.items():
        counts = ", ".join(str(len(sheet.labels)) for sheet in sheets)
        lines.append(
            f"{key.text_colour} on {key.background_colour} {key.thickness:g}mm "
            f"({key.style.value}): {len(sheets)} sheet(s) [{counts}]"
        )
    lines.append(
        f"Total: {len(result.sheets)} sheet(s), {result.label_count} label(s)"
    )
    for warning in result.warnings:
        lines.append(f"Warning: {warning}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point for laying out label sheets."""

    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Label specifications (JSON) -> print sheets"
    )
    parser.add_argument(
        "input",
        help="JSON file with a list of label records (or {\"labelSetups\": [...]}).",
    )
    parser.add_argument(
        "-o", "--output",
        help="Directory for rendered sheets (default: current directory).",
    )
    parser.add_argument(
        "-r", "--renderer",
        default="pdf",
        choices=list(list_renderers()),
        help="Output format (default: pdf).",
    )
    parser.add_argument(
        "--prefix",
        default=DEFAULT_PREFIX,
        help=f"File name prefix for rendered sheets (default: {DEFAULT_PREFIX}).",
    )
    parser.add_argument(
        "--sheet-width",
        type=float,
        default=os.getenv("LABEL_SHEET_WIDTH", "600"),
        help="Sheet width in mm (defaults to LABEL_SHEET_WIDTH or 600).",
    )
    parser.add_argument(
        "--sheet-height",
        type=float,
        default=os.getenv("LABEL_SHEET_HEIGHT", "300"),
        help="Sheet height in mm (defaults to LABEL_SHEET_HEIGHT or 300).",
    )
    parser.add_argument(
        "--margin",
        type=float,
        default=os.getenv("LABEL_SHEET_MARGIN", "0"),
        help="Sheet margin in mm (defaults to LABEL_SHEET_MARGIN or 0).",
    )
    parser.add_argument(
        "--gap",
        type=float,
        default=os.getenv("LABEL_SHEET_GAP", "0"),
        help="Gap between labels in mm (defaults to LABEL_SHEET_GAP or 0).",
    )
    parser.add_argument(
        "-s", "--summary",
        action="store_true",
        help="Only print the sheet summary; do not write any files.",
    )
    parser.add_argument(
        "--no-outline",
        action="store_true",
        help="Do not draw the sheet border (PDF only).",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v for info, -vv for debug).",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(logging.WARNING, logging.INFO, logging.DEBUG)[min(args.verbose, 2)],
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = _build_sheet_config(args)

    try:
        specs = load_label_specs(args.input)
    except FileNotFoundError as exc:
        raise SystemExit(f"Input file not found: {args.input}") from exc
    except LabelDataError as exc:
        raise SystemExit(f"Invalid label data: {exc}") from exc

    result = layout(specs, config)

    if args.summary:
        print("\n".join(_summary_lines(result)))
        return 0

    options = {"draw_outline": not args.no_outline} if args.renderer == "pdf" else {}
    renderer = get_renderer(args.renderer, **options)
    message = render(result, renderer, args.output, args.prefix)

    print(message)
    return 0


if __name__ == "__main__":

    raise SystemExit(main())

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .engine import MasonryGrid
from .layout_io import layout_to_dict, load_items, save_layout
from .sanity import check_layout
from .units import parse_float

logger = logging.getLogger("masonry_core")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="masonry_core", description="Stack items into masonry columns"
    )
    parser.add_argument("items", help="JSON or YAML file with the item list")
    parser.add_argument(
        "--container", required=True, type=parse_float, help="container inline size"
    )
    parser.add_argument("--settings", help="settings.yaml with masonry options")
    parser.add_argument("--direction", choices=("end", "start"), default="end")
    parser.add_argument("--output", help="write the layout JSON here instead of stdout")
    parser.add_argument("--preview", help="render a PNG preview to this path")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        grid = MasonryGrid.from_settings(args.container, args.settings)
        items = load_items(args.items)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    outlines = grid.apply_grid(items, args.direction, [])
    for warning in check_layout(items, args.container):
        logger.warning(warning)

    if args.output:
        save_layout(args.output, items, outlines)
    else:
        json.dump(layout_to_dict(items, outlines), sys.stdout, indent=2)
        sys.stdout.write("\n")

    if args.preview:
        from .preview import render_preview

        render_preview(items, args.container, args.preview)
    return 0


if __name__ == "__main__":
    sys.exit(main())

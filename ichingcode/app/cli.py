from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ..encoding import EncodedGrid, encode
from ..rendering import Bitmap, ExportSettings, render, save_bitmap
from ..rendering.image import DEFAULT_SCALE


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="IChing code: render short alphanumeric text as a 2D visual code."
    )
    parser.add_argument("text", help="Content to encode (letters and digits, up to 62 characters)")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write the rendered code to an image file (.png)")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE, help="Output pixels per code pixel")
    parser.add_argument("--invert", action="store_true", help="Draw white on black")
    parser.add_argument("--cells", action="store_true", help="Print the encoded grid cells and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def format_cells(grid: EncodedGrid) -> str:
    width = len(str(max(grid.cells)))
    return "\n".join(" ".join(str(v).rjust(width) for v in row) for row in grid.iter_rows())


def export(bitmap: Bitmap, args: argparse.Namespace) -> None:
    settings = ExportSettings(scale=args.scale, invert=args.invert)
    save_bitmap(bitmap, args.output, settings)
    print(f"Wrote {args.output} ({bitmap.width * args.scale}x{bitmap.height * args.scale})")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        grid = encode(args.text)
        if args.cells:
            print(format_cells(grid))
            return 0
        bitmap = render(grid)
        if args.output:
            export(bitmap, args)
        else:
            print(f"{bitmap.width}x{bitmap.height}")
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
extract_palette.py
Extract a small representative colour palette from an image with median cut
and print it as coloured terminal swatches.

Usage:
  python extract_palette.py IMAGE [ANSI] [--colours N] [--debug]

  Further positionals are accepted and select truecolor.

Modes:
  truecolor : 24-bit escapes (default; needs a truecolor terminal).
  ANSI      : nearest xterm 256-colour index. Selected only by the literal
              second argument "ANSI".

Output:
  A blank line, then one line per unique palette colour:
    <swatch>\t<r> <g> <b>
  In ANSI mode a trailing "ANSI" line follows.

Exit codes:
  0 on success, 1 on bad arguments, unreadable images or invalid --colours.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, NoReturn, Optional

from palette_swatch.constants import DEFAULT_PALETTE_SIZE
from palette_swatch.errors import ArgumentError, ImageLoadError, InvalidTargetCount
from palette_swatch.image_io import load_image_pixels
from palette_swatch.median_cut import validate_target_count
from palette_swatch.palette import generate_palette
from palette_swatch.render import render_mode_from_arg, render_palette
from palette_swatch.utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    key_value_pairs_to_string,
    print_config_line,
)


class _PaletteArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting with 2."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        image: Path to the input image
        mode: extra positionals; exactly one, equal to "ANSI", selects 256-colour output
        colours: target palette size before dedup
        debug: bool for verbose stats and timings

    Raises:
      ArgumentError when the image argument is missing or an option is malformed.
    """
    parser = _PaletteArgumentParser(
        prog="extract_palette",
        description="Print the dominant colours of an image as terminal swatches.",
    )
    parser.add_argument("image", type=Path, help="Input image")
    parser.add_argument(
        "mode",
        nargs="*",
        default=[],
        help='Pass "ANSI" for 256-colour output; anything else means truecolor.',
    )
    parser.add_argument(
        "--colours",
        "--colors",
        dest="colours",
        type=int,
        default=DEFAULT_PALETTE_SIZE,
        help=f"Target number of median-cut boxes (default {DEFAULT_PALETTE_SIZE}).",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose stats and timings")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit code.
    """
    enable_line_buffered_stdout()
    try:
        args = parse_cli_args(argv)
    except ArgumentError as e:
        error(f"invalid number of arguments: {e}")
        return 1

    try:
        target = validate_target_count(args.colours)
    except InvalidTargetCount as e:
        error(str(e))
        return 1

    # ANSI only when it is the sole extra argument; more extras mean truecolor
    mode = render_mode_from_arg(args.mode[0] if len(args.mode) == 1 else None)
    if args.debug:
        print_config_line(
            "run",
            [("Image", str(args.image)), ("Colours", target), ("Mode", mode)],
        )

    t_start = time.perf_counter()
    try:
        width, height, pixels = load_image_pixels(args.image)
    except ImageLoadError as e:
        error(str(e))
        return 1
    t_loaded = time.perf_counter()

    if args.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Loaded", f"{width}x{height}"),
                    ("Pixels", int(pixels.shape[0])),
                    ("Load time", format_seconds_compact(t_loaded - t_start)),
                ]
            )
        )

    colours = generate_palette(pixels, target, debug=args.debug)
    render_palette(colours, mode)

    if args.debug:
        debug_log(f"Total {format_seconds_compact(time.perf_counter() - t_start)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

# palette_swatch/render.py
from __future__ import annotations

"""
Terminal swatch rendering.

Each palette entry becomes one line:
  <escape>██████████<reset>\\t<r> <g> <b>
"""

import sys
from typing import Iterable, Optional, Sequence, TextIO

from .colour_convert import rgb_to_ansi256_escape, truecolor_escape
from .constants import (
    ANSI256_RESET,
    ANSI_FOOTER,
    ANSI_MODE_ARG,
    SWATCH_BLOCK,
    TRUECOLOR_RESET,
)
from .core_types import RenderMode, coerce_to_rgb_tuple


def render_mode_from_arg(arg: Optional[str]) -> RenderMode:
    """Only the literal 'ANSI' selects 256-colour mode; anything else is truecolor."""
    return "ansi" if arg == ANSI_MODE_ARG else "truecolor"


def format_swatch_line(rgb: Sequence[int], mode: RenderMode = "truecolor") -> str:
    """Coloured block, tab, then decimal 'R G B'."""
    colour = coerce_to_rgb_tuple(rgb)
    if mode == "ansi":
        block = f"{rgb_to_ansi256_escape(colour)}{SWATCH_BLOCK}{ANSI256_RESET}"
    else:
        block = f"{truecolor_escape(colour)}{SWATCH_BLOCK}{TRUECOLOR_RESET}"
    r, g, b = colour
    return f"{block}\t{r} {g} {b}"


def render_palette(
    colours: Iterable[Sequence[int]],
    mode: RenderMode = "truecolor",
    stream: Optional[TextIO] = None,
) -> None:
    """Write a blank line, one swatch per colour, and the footer in ANSI mode."""
    out = stream if stream is not None else sys.stdout
    out.write("\n")
    for colour in colours:
        out.write(format_swatch_line(colour, mode) + "\n")
    if mode == "ansi":
        out.write(ANSI_FOOTER)
    out.flush()


__all__ = ["render_mode_from_arg", "format_swatch_line", "render_palette"]

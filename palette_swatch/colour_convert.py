# palette_swatch/colour_convert.py
from __future__ import annotations

"""
RGB to terminal colour codes.

Exports:
  truecolor_escape(rgb)   -> "\\x1b[38;2;R;G;Bm"
  rgb_to_ansi256(rgb)     -> int in 16..255
  ansi256_escape(index)   -> "\\x1b[38;5;Nm"
  grey_to_ansi256(value)  -> grayscale ramp index (or cube black/white)
  cube_level(value)       -> 0..5

Notes:
  - Rounding is half away from zero, as C's round() does.
  - The grayscale ramp scales in floating point before rounding.
"""

import math
from typing import Sequence

from .constants import (
    ANSI256_FG,
    CHANNEL_MAX,
    CUBE_OFFSET,
    CUBE_STEPS,
    GREY_BLACK_INDEX,
    GREY_HIGH_CUTOFF,
    GREY_LOW_CUTOFF,
    GREY_RAMP_OFFSET,
    GREY_RAMP_SPAN,
    GREY_RAMP_STEPS,
    GREY_WHITE_INDEX,
    TRUECOLOR_FG,
)
from .core_types import RGBTuple, coerce_to_rgb_tuple


def round_half_away(x: float) -> int:
    """Round to nearest int, halves away from zero."""
    if x >= 0.0:
        return int(math.floor(x + 0.5))
    return -int(math.floor(-x + 0.5))


def truecolor_escape(rgb: Sequence[int]) -> str:
    """24-bit foreground escape for (r, g, b)."""
    r, g, b = coerce_to_rgb_tuple(rgb)
    return TRUECOLOR_FG.format(r=r, g=g, b=b)


def cube_level(value: int) -> int:
    """Quantize a 0..255 channel to one of the 6 cube levels."""
    return round_half_away(value / float(CHANNEL_MAX) * CUBE_STEPS)


def grey_to_ansi256(value: int) -> int:
    """
    Achromatic value to the 24-step grayscale ramp.

    < 8 maps to cube black (16), > 248 to cube white (231).
    """
    if value < GREY_LOW_CUTOFF:
        return GREY_BLACK_INDEX
    if value > GREY_HIGH_CUTOFF:
        return GREY_WHITE_INDEX
    step = round_half_away((value - GREY_LOW_CUTOFF) / GREY_RAMP_SPAN * GREY_RAMP_STEPS)
    return step + GREY_RAMP_OFFSET


def rgb_to_ansi256(rgb: Sequence[int]) -> int:
    """Nearest xterm 256-colour index: grayscale ramp for greys, 6x6x6 cube otherwise."""
    r, g, b = coerce_to_rgb_tuple(rgb)
    if r == g == b:
        return grey_to_ansi256(r)
    return CUBE_OFFSET + 36 * cube_level(r) + 6 * cube_level(g) + cube_level(b)


def ansi256_escape(index: int) -> str:
    """256-colour foreground escape for a palette index."""
    return ANSI256_FG.format(index=int(index))


def rgb_to_ansi256_escape(rgb: RGBTuple) -> str:
    return ansi256_escape(rgb_to_ansi256(rgb))


__all__ = [
    "round_half_away",
    "truecolor_escape",
    "cube_level",
    "grey_to_ansi256",
    "rgb_to_ansi256",
    "ansi256_escape",
    "rgb_to_ansi256_escape",
]

# palette_swatch/core_types.py
from __future__ import annotations

"""
Core type aliases, the median-cut Box value object, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Image = NDArray[np.uint8]  # (H, W, 3)
U8Pixels = NDArray[np.uint8]  # (N, 3) flat row-major pixels

Channel = Literal[0, 1, 2]  # red, green, blue
ChannelRanges = Tuple[int, int, int]
ScoreState = Literal["unscored", "scored"]
RenderMode = Literal["truecolor", "ansi"]

CHANNEL_NAMES = ("red", "green", "blue")

PixelInput = Union[U8Pixels, U8Image, Sequence[Sequence[int]]]

# Value objects


@dataclass(eq=False)
class Box:
    """
    A subset of the image's pixels plus its lazily computed range score.

    state flips from "unscored" to "scored" exactly once; a scored box with
    score 0 is a genuine single-colour region.
    """

    pixels: U8Pixels  # (n, 3)
    state: ScoreState = "unscored"
    ranges: Optional[ChannelRanges] = None
    score: int = 0

    def __len__(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def is_scored(self) -> bool:
        return self.state == "scored"

    @property
    def splittable(self) -> bool:
        """Boxes of fewer than two pixels are terminal."""
        return len(self) >= 2

    def ensure_scored(self) -> int:
        """Compute ranges and score once; later calls reuse the cache."""
        if self.state == "unscored":
            self.ranges = channel_ranges(self.pixels)
            self.score = max(self.ranges)
            self.state = "scored"
        return self.score


# Small helpers


def channel_ranges(pixels: U8Pixels) -> ChannelRanges:
    """Per-channel spread (max - min) of an (n,3) pixel array as Python ints."""
    if pixels.shape[0] == 0:
        return (0, 0, 0)
    spread = pixels.max(axis=0).astype(np.int16) - pixels.min(axis=0).astype(np.int16)
    return (int(spread[0]), int(spread[1]), int(spread[2]))


def clamp_value(value: int, lo: int, hi: int) -> int:
    """Clamp value to [lo, hi]."""
    return lo if value < lo else hi if value > hi else value


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3-length sequence or array row to an (int, int, int) RGB tuple.
    Helpful when extracting values from NumPy rows.
    """
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def as_pixel_array(pixels: PixelInput) -> U8Pixels:
    """
    Flatten an (H,W,3) image, an (N,3) array or a sequence of RGB triples into
    a contiguous uint8 (N,3) array. Extra channels (alpha) are dropped.
    """
    arr = np.asarray(pixels)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.uint8)
    if arr.ndim == 3:
        arr = arr.reshape(-1, arr.shape[-1])
    if arr.ndim != 2 or arr.shape[-1] < 3:
        raise TypeError("expected (N,3) pixels or (H,W,3) image")
    if arr.dtype != np.uint8:
        if not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"channel values must be integers, got dtype {arr.dtype}")
        if np.any(arr < 0) or np.any(arr > 255):
            raise ValueError("channel values must lie in 0..255")
        arr = arr.astype(np.uint8)
    return np.ascontiguousarray(arr[:, :3])


__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Image",
    "U8Pixels",
    "Channel",
    "ChannelRanges",
    "ScoreState",
    "RenderMode",
    "CHANNEL_NAMES",
    "PixelInput",
    # value objects
    "Box",
    # helpers
    "channel_ranges",
    "clamp_value",
    "rgb_to_hex",
    "coerce_to_rgb_tuple",
    "as_pixel_array",
]

# palette_swatch/palette.py
from __future__ import annotations

"""
Palette extraction on top of the median-cut partitioner.

Exports:
  average_box(box)                         -> RGBTuple
  extract_palette(boxes)                   -> list[RGBTuple]
  dedup_colours(colours)                   -> list[RGBTuple]
  generate_palette(pixels, target_count=8) -> list[RGBTuple]
"""

import time
from typing import Iterable, List, Sequence, Set

import numpy as np

from .constants import CHANNEL_MAX, CHANNEL_MIN, DEFAULT_PALETTE_SIZE
from .core_types import (
    CHANNEL_NAMES,
    Box,
    PixelInput,
    RGBTuple,
    clamp_value,
    rgb_to_hex,
)
from .median_cut import dominant_channel, partition
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


def average_box(box: Box) -> RGBTuple:
    """
    Channel-wise truncating mean of a non-empty box, clamped to [0, 255].
    """
    count = len(box)
    if count == 0:
        raise ValueError("cannot average an empty box")
    sums = box.pixels.astype(np.int64).sum(axis=0)
    r, g, b = (
        clamp_value(int(sums[c]) // count, CHANNEL_MIN, CHANNEL_MAX) for c in range(3)
    )
    return (r, g, b)


def extract_palette(boxes: Sequence[Box]) -> List[RGBTuple]:
    """One averaged colour per box, in box order."""
    return [average_box(box) for box in boxes]


def dedup_colours(colours: Iterable[Sequence[int]]) -> List[RGBTuple]:
    """Drop exact repeats, keeping first-occurrence order."""
    seen: Set[RGBTuple] = set()
    unique: List[RGBTuple] = []
    for colour in colours:
        key = (int(colour[0]), int(colour[1]), int(colour[2]))
        if key in seen:
            continue
        seen.add(key)
        unique.append(key)
    return unique


def generate_palette(
    pixels: PixelInput,
    target_count: int = DEFAULT_PALETTE_SIZE,
    *,
    debug: bool = False,
) -> List[RGBTuple]:
    """
    Median-cut palette: partition -> average each box -> dedup.

    Args:
      pixels       : (N,3) uint8 array, (H,W,3) image, or sequence of RGB triples
      target_count : number of boxes to aim for (>= 1)
      debug        : print box / palette stats and timings

    Returns:
      Unique palette colours in final box order. May hold fewer than
      target_count entries when boxes average to the same colour or the
      image has fewer pixels than target_count.

    Raises:
      InvalidTargetCount from partition() for bad targets or empty input.
    """
    t0 = time.perf_counter()
    boxes = partition(pixels, target_count)
    t1 = time.perf_counter()
    raw = extract_palette(boxes)
    palette = dedup_colours(raw)
    t2 = time.perf_counter()

    if debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Pixels", sum(len(box) for box in boxes)),
                    ("Target", int(target_count)),
                    ("Boxes", len(boxes)),
                    ("Unique colours", len(palette)),
                ]
            )
        )
        for box, colour in zip(boxes, raw):
            axis = CHANNEL_NAMES[dominant_channel(box.ranges or (0, 0, 0))]
            debug_log(
                f"  box n={len(box):,}  range={box.score} ({axis})  -> {rgb_to_hex(colour)}"
            )
        debug_log(
            f"partition={format_seconds_compact(t1 - t0)}  "
            f"extract={format_seconds_compact(t2 - t1)}"
        )
    return palette


__all__ = ["average_box", "extract_palette", "dedup_colours", "generate_palette"]

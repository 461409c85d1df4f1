# palette_swatch/median_cut.py
from __future__ import annotations

"""
Median-cut box partitioning.

Exports:
  channel_ranges(pixels)        -> (red_range, green_range, blue_range)
  dominant_channel(ranges)      -> 0 | 1 | 2
  split_box(box)                -> (left, right)
  select_box_to_split(boxes)    -> index or None
  partition(pixels, target)     -> list[Box]

Notes:
  - Boxes are scored lazily, once, between creation and split/finalisation.
  - The next box to split is the highest-scoring splittable one; ties go to
    the latest position in the worklist, so the newest child wins.
  - Dominant channel priority on equal ranges is red, then green, then blue.
  - Boxes holding a single pixel are terminal, so no box is ever empty. When
    the population is smaller than the target, partitioning stops early with
    one box per pixel.
"""

from typing import List, Optional, Tuple

import numpy as np

from .core_types import Box, Channel, ChannelRanges, PixelInput, as_pixel_array, channel_ranges
from .errors import InvalidTargetCount


def dominant_channel(ranges: ChannelRanges) -> Channel:
    """
    Channel to sort and split on.

    Red wins when its range is >= both others, else green when >= blue,
    else blue.
    """
    red, green, blue = ranges
    if red >= green and red >= blue:
        return 0
    if green >= blue:
        return 1
    return 2


def split_box(box: Box) -> Tuple[Box, Box]:
    """
    Stable-sort the box on its dominant channel and cut at floor(n / 2).

    The left child gets the first n // 2 pixels, the right child the rest.
    Both children come back unscored.
    """
    if not box.splittable:
        raise ValueError("cannot split a box holding fewer than two pixels")
    box.ensure_scored()
    assert box.ranges is not None
    channel = dominant_channel(box.ranges)
    order = np.argsort(box.pixels[:, channel], kind="stable")
    ordered = box.pixels[order]
    mid = ordered.shape[0] // 2
    return Box(ordered[:mid]), Box(ordered[mid:])


def select_box_to_split(boxes: List[Box]) -> Optional[int]:
    """Index of the highest-scoring splittable box, latest on ties."""
    best_idx: Optional[int] = None
    best_score = -1
    for idx, box in enumerate(boxes):
        if not box.splittable:
            continue
        if box.score >= best_score:
            best_idx = idx
            best_score = box.score
    return best_idx


def validate_target_count(target_count: int) -> int:
    """Reject non-integer or < 1 targets."""
    if isinstance(target_count, bool) or not isinstance(target_count, (int, np.integer)):
        raise InvalidTargetCount(f"target count must be an integer, got {target_count!r}")
    if target_count < 1:
        raise InvalidTargetCount(f"target count must be >= 1, got {target_count}")
    return int(target_count)


def partition(pixels: PixelInput, target_count: int) -> List[Box]:
    """
    Split the pixel population into at most target_count disjoint, non-empty
    boxes by repeated median cuts.

    Args:
      pixels       : (N,3) uint8 array, (H,W,3) image, or sequence of RGB triples
      target_count : desired number of boxes (>= 1)

    Returns:
      list[Box] in worklist order. Length is min(target_count, N).

    Raises:
      InvalidTargetCount if target_count < 1 or the pixel sequence is empty.
    """
    target = validate_target_count(target_count)
    flat = as_pixel_array(pixels)
    if flat.shape[0] == 0:
        raise InvalidTargetCount("cannot partition an empty pixel sequence")

    boxes: List[Box] = [Box(flat)]
    while len(boxes) < target:
        for box in boxes:
            if not box.is_scored:
                box.ensure_scored()

        idx = select_box_to_split(boxes)
        if idx is None:
            # every box holds a single pixel
            break

        chosen = boxes.pop(idx)
        left, right = split_box(chosen)
        boxes.append(left)
        boxes.append(right)

    for box in boxes:
        box.ensure_scored()
    return boxes


__all__ = [
    "channel_ranges",
    "dominant_channel",
    "split_box",
    "select_box_to_split",
    "validate_target_count",
    "partition",
]

# palette_swatch/__init__.py
"""
palette_swatch package.

Purpose:
  Median-cut palette extraction with terminal swatch output. See
  extract_palette.py for the CLI.

Public API:
  generate_palette : pixels -> unique median-cut palette.
  partition        : median-cut box partitioner.
  extract_palette  : boxes -> averaged colours.
  dedup_colours    : order-preserving exact dedup.
  rgb_to_ansi256   : nearest xterm 256-colour index.
  truecolor_escape : 24-bit foreground escape.
  load_image_pixels: Pillow-backed pixel source.
  render_palette   : write swatch lines to a stream.

Quick start:
  from palette_swatch import load_image_pixels, generate_palette, render_palette
  _, _, pixels = load_image_pixels("photo.jpg")
  render_palette(generate_palette(pixels, 8))
"""

__version__ = "0.1.0"

from .colour_convert import rgb_to_ansi256, truecolor_escape
from .core_types import Box, RGBTuple
from .errors import ArgumentError, ImageLoadError, InvalidTargetCount, PaletteError
from .image_io import load_image_pixels
from .median_cut import dominant_channel, partition
from .palette import dedup_colours, extract_palette, generate_palette
from .render import render_palette

__all__ = [
    "__version__",
    "Box",
    "RGBTuple",
    "PaletteError",
    "ArgumentError",
    "ImageLoadError",
    "InvalidTargetCount",
    "partition",
    "dominant_channel",
    "extract_palette",
    "dedup_colours",
    "generate_palette",
    "rgb_to_ansi256",
    "truecolor_escape",
    "load_image_pixels",
    "render_palette",
]

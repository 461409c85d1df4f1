# palette_swatch/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Tuple, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .core_types import U8Pixels
from .errors import ImageLoadError

"""
Image loading: decode with Pillow, normalise to sRGB, drop alpha, flatten.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


def _convert_to_srgb_rgb(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")

    if icc_bytes and ImageCms is not None and im.mode in ("RGB", "RGBA", "CMYK"):
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im.convert("RGB") if im.mode != "CMYK" else im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGB",
            )
            if im2 is not None:
                return im2
        except (ImageCms.PyCMSError, OSError):
            pass

    return im.convert("RGB")


def load_image_rgb(path: Union[str, Path]) -> np.ndarray:
    """
    Load an image as a uint8 (H,W,3) sRGB array.

    Raises:
      ImageLoadError for missing, unreadable, unsupported or empty images.
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(path, "no such file")
    try:
        with Image.open(path) as im0:
            im0.load()
            im = _convert_to_srgb_rgb(im0)
    except UnidentifiedImageError as e:
        raise ImageLoadError(path, "unsupported or corrupt image") from e
    except (OSError, ValueError, SyntaxError) as e:
        raise ImageLoadError(path, str(e)) from e

    arr = np.array(im, dtype=np.uint8)
    if arr.ndim != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ImageLoadError(path, "image has no pixels")
    return arr


def load_image_pixels(path: Union[str, Path]) -> Tuple[int, int, U8Pixels]:
    """
    Load an image as (width, height, pixels) with pixels a uint8 (W*H,3)
    array in row-major order.
    """
    arr = load_image_rgb(path)
    height, width = int(arr.shape[0]), int(arr.shape[1])
    pixels = np.ascontiguousarray(arr.reshape(-1, 3))
    return width, height, pixels


__all__ = [
    "load_image_rgb",
    "load_image_pixels",
]

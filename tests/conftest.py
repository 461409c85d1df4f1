"""Shared fixtures: synthetic images written with Pillow."""

from pathlib import Path
from typing import Callable

import numpy as np
import pytest
from PIL import Image


@pytest.fixture
def write_image(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a uint8 array to a PNG under tmp_path."""

    def _write(arr, name: str = "image.png") -> Path:
        path = tmp_path / name
        Image.fromarray(np.asarray(arr, dtype=np.uint8)).save(path)
        return path

    return _write


@pytest.fixture
def four_colour_image() -> np.ndarray:
    """2x2 image: red, green / blue, yellow."""
    return np.array(
        [
            [[255, 0, 0], [0, 255, 0]],
            [[0, 0, 255], [255, 255, 0]],
        ],
        dtype=np.uint8,
    )

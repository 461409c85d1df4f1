"""
Unit tests for palette extraction, dedup and the end-to-end pipeline.
"""

import numpy as np
import pytest

from palette_swatch import median_cut
from palette_swatch.core_types import Box, as_pixel_array
from palette_swatch.errors import InvalidTargetCount
from palette_swatch.median_cut import partition
from palette_swatch.palette import (
    average_box,
    dedup_colours,
    extract_palette,
    generate_palette,
)


def _px(rows):
    return np.array(rows, dtype=np.uint8)


class TestAverageBox:
    """Truncating channel-wise mean"""

    def test_truncates_not_rounds(self):
        assert average_box(Box(_px([[1, 2, 3], [2, 2, 4]]))) == (1, 2, 3)

    def test_single_pixel(self):
        assert average_box(Box(_px([[10, 20, 30]]))) == (10, 20, 30)

    def test_no_uint8_overflow(self):
        assert average_box(Box(_px([[255, 255, 255]] * 1000))) == (255, 255, 255)

    def test_returns_python_ints(self):
        colour = average_box(Box(_px([[5, 6, 7], [7, 8, 9]])))
        assert all(type(c) is int for c in colour)

    def test_empty_box_rejected(self):
        with pytest.raises(ValueError):
            average_box(Box(np.zeros((0, 3), dtype=np.uint8)))


class TestExtractPalette:
    """One entry per box, same order"""

    def test_order_preserved(self):
        boxes = [Box(_px([[9, 9, 9]])), Box(_px([[1, 1, 1], [3, 3, 3]]))]
        assert extract_palette(boxes) == [(9, 9, 9), (2, 2, 2)]

    def test_mean_within_box_bounds(self):
        rng = np.random.default_rng(11)
        pixels = rng.integers(0, 256, size=(400, 3), dtype=np.uint8)
        boxes = partition(pixels, 12)
        for box, colour in zip(boxes, extract_palette(boxes)):
            lo = box.pixels.min(axis=0)
            hi = box.pixels.max(axis=0)
            for c in range(3):
                assert int(lo[c]) <= colour[c] <= int(hi[c])


class TestDedupColours:
    """Exact, order-preserving dedup"""

    def test_keeps_first_occurrence(self):
        colours = [(1, 2, 3), (4, 5, 6), (1, 2, 3), (7, 8, 9), (4, 5, 6)]
        assert dedup_colours(colours) == [(1, 2, 3), (4, 5, 6), (7, 8, 9)]

    def test_near_duplicates_kept(self):
        colours = [(10, 10, 10), (10, 10, 11)]
        assert dedup_colours(colours) == colours

    def test_idempotent(self):
        rng = np.random.default_rng(5)
        colours = [tuple(int(v) for v in row) for row in rng.integers(0, 3, size=(50, 3))]
        once = dedup_colours(colours)
        assert dedup_colours(once) == once

    def test_empty(self):
        assert dedup_colours([]) == []

    def test_accepts_arrays_and_lists(self):
        colours = [np.array([1, 2, 3], dtype=np.uint8), [1, 2, 3], (3, 2, 1)]
        assert dedup_colours(colours) == [(1, 2, 3), (3, 2, 1)]


class TestGeneratePalette:
    """partition -> extract -> dedup"""

    def test_two_by_two_scenario(self, four_colour_image):
        assert generate_palette(four_colour_image, 2) == [(0, 127, 127), (255, 127, 0)]

    def test_default_target_is_eight(self):
        rng = np.random.default_rng(1)
        pixels = rng.integers(0, 256, size=(1000, 3), dtype=np.uint8)
        palette = generate_palette(pixels)
        assert len(palette) == 8

    def test_duplicates_collapse(self):
        assert generate_palette(_px([[9, 9, 9]] * 4), 4) == [(9, 9, 9)]

    def test_fewer_pixels_than_target(self):
        palette = generate_palette(_px([[1, 2, 3], [200, 100, 50]]), 8)
        assert sorted(palette) == [(1, 2, 3), (200, 100, 50)]

    def test_deterministic(self):
        rng = np.random.default_rng(2)
        pixels = rng.integers(0, 256, size=(300, 3), dtype=np.uint8)
        assert generate_palette(pixels, 6) == generate_palette(pixels, 6)

    def test_invalid_target(self, four_colour_image):
        with pytest.raises(InvalidTargetCount):
            generate_palette(four_colour_image, 0)

    def test_debug_output(self, four_colour_image, capsys):
        generate_palette(four_colour_image, 2, debug=True)
        out = capsys.readouterr().out
        assert "[debug] Pixels: 4" in out
        assert "Boxes: 2" in out
        assert "#007f7f" in out

    def test_equal_ranges_split_newest_box(self):
        pixels = [[0, 0, 0], [10, 0, 0], [100, 0, 0], [110, 0, 0]]
        assert generate_palette(pixels, 3) == [(5, 0, 0), (100, 0, 0), (110, 0, 0)]

    def test_float_pixels_rejected(self):
        with pytest.raises(ValueError):
            generate_palette([[1.7, 0, 0], [3, 4, 5]], 2)

    def test_validates_and_converts_once(self, monkeypatch):
        calls = {"validate": 0, "convert": 0}
        validate = median_cut.validate_target_count
        convert = median_cut.as_pixel_array

        def counting_validate(target_count):
            calls["validate"] += 1
            return validate(target_count)

        def counting_convert(pixels):
            calls["convert"] += 1
            return convert(pixels)

        monkeypatch.setattr(median_cut, "validate_target_count", counting_validate)
        monkeypatch.setattr(median_cut, "as_pixel_array", counting_convert)

        generate_palette(_px([[1, 2, 3], [9, 8, 7], [50, 50, 50]]), 2)
        assert calls == {"validate": 1, "convert": 1}


class TestAsPixelArray:
    """Input coercion to uint8 (N,3)"""

    def test_image_is_flattened_row_major(self, four_colour_image):
        flat = as_pixel_array(four_colour_image)
        assert flat.shape == (4, 3)
        assert flat[3].tolist() == [255, 255, 0]

    def test_int_lists_accepted(self):
        flat = as_pixel_array([[1, 2, 3], [255, 0, 9]])
        assert flat.dtype == np.uint8
        assert flat.tolist() == [[1, 2, 3], [255, 0, 9]]

    @pytest.mark.parametrize(
        "rows", [[[1.7, 0, 0]], [[1.0, 2.0, 3.0]], np.zeros((2, 3), dtype=np.float32)]
    )
    def test_non_integer_dtype_rejected(self, rows):
        with pytest.raises(ValueError):
            as_pixel_array(rows)

    @pytest.mark.parametrize("rows", [[[256, 0, 0]], [[-1, 0, 0]]])
    def test_out_of_range_rejected(self, rows):
        with pytest.raises(ValueError):
            as_pixel_array(rows)

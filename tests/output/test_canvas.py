"""
Tests for the Canvas framebuffer.
"""

import pytest

from raytracing.core.exceptions import ValidationError
from raytracing.geometry import Color
from raytracing.output import Canvas


class TestCanvas:

    def test_starts_black(self):
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert all(c == Color() for c in canvas.iter_pixels())

    def test_index(self):
        canvas = Canvas(10, 20)
        assert canvas[2, 3] == Color()

    def test_index_set(self):
        canvas = Canvas(10, 20)
        canvas[2, 3] = Color(0.5, 0.5, 0.5)
        assert canvas[2, 3] == Color(0.5, 0.5, 0.5)
        assert canvas.pixel_at(2, 3) == Color(0.5, 0.5, 0.5)

    def test_row_major_order(self):
        canvas = Canvas(3, 2)
        red = Color(1.0, 0.0, 0.0)
        canvas.set_pixel(1, 0, red)
        canvas.set_pixel(0, 1, red)
        pixels = list(canvas.iter_pixels())
        assert len(pixels) == 6
        assert [i for i, c in enumerate(pixels) if c == red] == [1, 3]

    def test_out_of_range(self):
        canvas = Canvas(4, 4)
        with pytest.raises(IndexError):
            canvas.pixel_at(4, 0)
        with pytest.raises(IndexError):
            canvas[0, -1] = Color()

    def test_only_colors_stored(self):
        with pytest.raises(ValidationError):
            Canvas(2, 2).set_pixel(0, 0, (1.0, 0.0, 0.0))

    @pytest.mark.parametrize("width, height", [(0, 5), (5, -1), (2.5, 3)])
    def test_bad_size(self, width, height):
        with pytest.raises(ValidationError):
            Canvas(width, height)

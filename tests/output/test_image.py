"""
Tests for color quantization and writing canvases with Pillow.
"""

import logging
import math

import numpy as np
import pytest

from raytracing.core.exceptions import ImageWriteError
from raytracing.geometry import Color
from raytracing.output import Canvas, canvas_to_array, color_to_rgb8, load_rgb8, save_canvas


class TestQuantize:

    def test_clamps_then_scales(self):
        assert color_to_rgb8(Color(1.5, 0.5, -20.0)) == (255, 127, 0)

    def test_extremes(self):
        assert color_to_rgb8(Color(0.0, 0.0, 0.0)) == (0, 0, 0)
        assert color_to_rgb8(Color(1.0, 1.0, 1.0)) == (255, 255, 255)

    def test_nan_channel_is_zero(self):
        assert color_to_rgb8(Color(math.nan, 0.5, 1.0)) == (0, 127, 255)

    def test_array_layout(self):
        canvas = Canvas(3, 2)
        canvas[2, 1] = Color(1.0, 0.0, 0.0)
        arr = canvas_to_array(canvas)
        assert arr.shape == (2, 3, 3)
        assert arr.dtype == np.uint8
        assert tuple(arr[1, 2]) == (255, 0, 0)
        assert arr.sum() == 255


class TestSaveCanvas:

    @pytest.mark.parametrize("suffix", [".png", ".bmp", ".ppm"])
    def test_round_trip(self, tmp_path, suffix):
        canvas = Canvas(4, 3)
        canvas[0, 0] = Color(1.0, 0.0, 0.0)
        canvas[3, 2] = Color(0.0, 2.0, 0.0)
        path = tmp_path / f"out{suffix}"
        save_canvas(canvas, path)
        np.testing.assert_array_equal(load_rgb8(path), canvas_to_array(canvas))

    def test_nan_pixels_still_written(self, tmp_path):
        canvas = Canvas(1, 1)
        canvas[0, 0] = Color(math.nan, math.nan, 1.0)
        path = tmp_path / "nan.png"
        save_canvas(canvas, path)
        assert tuple(load_rgb8(path)[0, 0]) == (0, 0, 255)

    def test_accepts_str_path(self, tmp_path):
        path = str(tmp_path / "out.png")
        save_canvas(Canvas(1, 1), path)
        assert load_rgb8(path).shape == (1, 1, 3)

    def test_logs_success(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="raytracing.output.image"):
            save_canvas(Canvas(2, 2), tmp_path / "out.png")
        assert "Wrote 2x2 canvas" in caplog.text

    def test_unknown_extension(self, tmp_path):
        path = tmp_path / "out.notaformat"
        with pytest.raises(ImageWriteError) as exc_info:
            save_canvas(Canvas(2, 2), path)
        assert exc_info.value.filename == str(path)
        assert exc_info.value.__cause__ is not None

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ImageWriteError):
            save_canvas(Canvas(2, 2), tmp_path / "missing" / "out.png")

"""
Canvas -> image file encoding.

Colors are clamped to [0, 1] and scaled to 8-bit channels here, not in the
core. Pillow picks the file format from the filename extension.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from raytracing.core.exceptions import ImageWriteError
from raytracing.geometry.color import Color
from raytracing.output.canvas import Canvas

logger = logging.getLogger(__name__)


def color_to_rgb8(color: Color) -> tuple[int, int, int]:
    """
    Quantize a color to an 8-bit RGB pixel.

    Each channel is clamped to [0, 1], scaled by 255 and truncated. A NaN
    channel (e.g. from a singular inversion upstream) becomes 0.

    Examples:
        >>> color_to_rgb8(Color(1.5, 0.5, -20.0))
        (255, 127, 0)
    """
    c = color.clamp()
    return (_to_u8(c.r), _to_u8(c.g), _to_u8(c.b))


def _to_u8(channel: float) -> int:
    if math.isnan(channel):
        return 0
    return int(channel * 255.0)


def canvas_to_array(canvas: Canvas) -> NDArray[np.uint8]:
    """(height, width, 3) uint8 array of quantized pixels."""
    flat = [color_to_rgb8(color) for color in canvas.iter_pixels()]
    return np.asarray(flat, dtype=np.uint8).reshape(canvas.height, canvas.width, 3)


def save_canvas(canvas: Canvas, filename: str | Path) -> None:
    """
    Encode a canvas and write it to disk.

    Args:
        canvas: Pixels to write
        filename: Target path; the extension selects the format
            (``.png``, ``.ppm``, ``.bmp``, ...)

    Raises:
        ImageWriteError: If the format is unknown or the write fails.
            The Pillow/OS exception is chained.
    """
    path = Path(filename)
    try:
        image = Image.fromarray(canvas_to_array(canvas))
        image.save(path)
    except (OSError, ValueError, KeyError) as e:
        logger.error("Failed to write %dx%d canvas to %s: %s",
                     canvas.width, canvas.height, path, e)
        raise ImageWriteError(
            f"Error while writing canvas to {path}: {e}", filename=str(path)
        ) from e
    logger.info("Wrote %dx%d canvas to %s", canvas.width, canvas.height, path)


def load_rgb8(filename: str | Path) -> NDArray[Any]:
    """Read an image back as a (height, width, 3) uint8 array."""
    with Image.open(Path(filename)) as img:
        return np.asarray(img.convert('RGB'))

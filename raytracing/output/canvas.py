"""
Canvas: a width x height framebuffer of Colors.
"""

from __future__ import annotations

from typing import Iterator

from raytracing.core.exceptions import ValidationError
from raytracing.geometry.color import Color


class Canvas:
    """
    Mutable grid of Color cells, stored row-major (x varies fastest).

    Access by ``pixel_at(x, y)`` / ``set_pixel(x, y, color)`` or by
    ``canvas[x, y]``. Every cell starts black.
    """

    __slots__ = ('width', 'height', '_pixels')

    def __init__(self, width: int, height: int):
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{name}: expected int, got {type(value).__name__}")
            if value < 1:
                raise ValidationError(f"{name}: must be at least 1, got {value}")
        self.width = width
        self.height = height
        self._pixels = [Color()] * (width * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas"
            )
        return y * self.width + x

    def pixel_at(self, x: int, y: int) -> Color:
        return self._pixels[self._offset(x, y)]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not isinstance(color, Color):
            raise ValidationError(f"color: expected Color, got {type(color).__name__}")
        self._pixels[self._offset(x, y)] = color

    def __getitem__(self, index: tuple[int, int]) -> Color:
        x, y = index
        return self.pixel_at(x, y)

    def __setitem__(self, index: tuple[int, int], color: Color) -> None:
        x, y = index
        self.set_pixel(x, y, color)

    def iter_pixels(self) -> Iterator[Color]:
        """Every cell in row-major order: (0,0), (1,0), ..., (w-1,h-1)."""
        return iter(self._pixels)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

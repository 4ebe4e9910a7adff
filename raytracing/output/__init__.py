"""
Framebuffer and image output.

Public API:
    Canvas          - width x height grid of Colors
    color_to_rgb8   - clamp and quantize one Color
    canvas_to_array - (h, w, 3) uint8 pixels
    save_canvas     - encode and write via Pillow
"""

from raytracing.output.canvas import Canvas
from raytracing.output.image import (
    color_to_rgb8,
    canvas_to_array,
    save_canvas,
    load_rgb8,
)

__all__ = [
    "Canvas",
    "color_to_rgb8",
    "canvas_to_array",
    "save_canvas",
    "load_rgb8",
]

"""
Geometric value types.

Public API:
    Vec3   - free direction (homogeneous w = 0)
    Point  - location (homogeneous w = 1)
    Color  - RGB triple, no homogeneous lift
"""

from raytracing.geometry.vec3 import Vec3
from raytracing.geometry.point import Point
from raytracing.geometry.color import Color

__all__ = [
    "Vec3",
    "Point",
    "Color",
]

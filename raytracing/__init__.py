"""
raytracing: linear-algebra and transform core for a 3D ray tracer.

Value types, fixed-size matrices and homogeneous transforms used by the
intersection, shading and scene stages of the renderer.

Submodules:
    core: exceptions, validation, tolerances, protocols
    geometry: Vec3, Point, Color
    linalg: Matrix and Gauss-Jordan inversion
    transform: transform() and the 4x4 builders
    output: Canvas and image writing
"""

__version__ = "0.1.0"

from raytracing import core
from raytracing import linalg
from raytracing import geometry
from raytracing import transform
from raytracing import output

from raytracing.core import abs_diff_eq
from raytracing.geometry import Vec3, Point, Color
from raytracing.linalg import Matrix

__all__ = [
    "__version__",
    "core",
    "linalg",
    "geometry",
    "transform",
    "output",
    "abs_diff_eq",
    "Vec3",
    "Point",
    "Color",
    "Matrix",
]

"""
Homogeneous transforms.

Public API:
    transform(entity, M)      - apply a 4x4 matrix to a Point or Vec3
    transform_all(items, M)   - same, batched over one entity type
    translate, scale          - affine builders
    rotate_x, rotate_y, rotate_z, rotate - rotation builders
"""

from raytracing.transform.apply import transform, transform_all
from raytracing.transform.builders import (
    translate,
    scale,
    rotate_x,
    rotate_y,
    rotate_z,
    rotate,
)

__all__ = [
    "transform",
    "transform_all",
    "translate",
    "scale",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "rotate",
]

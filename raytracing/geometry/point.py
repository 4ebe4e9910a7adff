"""
Point: a location in 3-space.

Kept distinct from Vec3 so that locations and directions cannot be mixed
by accident:

    Point - Point -> Vec3
    Point + Vec3  -> Point
    Point - Vec3  -> Point
    Point + Point -> TypeError
"""

from __future__ import annotations

from dataclasses import dataclass

from raytracing.core.tolerances import scalar_abs_diff_eq, select_tolerance
from raytracing.core.validation import check_shape
from raytracing.geometry.vec3 import Vec3
from raytracing.linalg.matrix import Matrix
from raytracing.transform.apply import transform


@dataclass(frozen=True)
class Point:
    """Immutable (x, y, z) location. Lifts to ``[x, y, z, 1]``."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    default_epsilon = select_tolerance('vector').atol

    @classmethod
    def from_tuple(cls, t: tuple[float, float, float]) -> Point:
        x, y, z = t
        return cls(x, y, z)

    def __add__(self, other: Vec3) -> Point:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point | Vec3) -> Vec3 | Point:
        if isinstance(other, Point):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vec3):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    # --- Homogeneous protocol --------------------------------------------

    def to_homogeneous(self) -> Matrix:
        return Matrix.column((self.x, self.y, self.z, 1.0))

    @classmethod
    def from_homogeneous(cls, column: Matrix) -> Point:
        # w is dropped, not divided out: affine transforms keep it at 1
        check_shape(column.shape, (4, 1), 'column')
        return cls(column[0, 0], column[1, 0], column[2, 0])

    def transform(self, matrix: Matrix) -> Point:
        return transform(self, matrix)

    def abs_diff_eq(self, other: Point, epsilon: float | None = None) -> bool:
        if not isinstance(other, type(self)):
            return False
        eps = self.default_epsilon if epsilon is None else epsilon
        return (
            scalar_abs_diff_eq(self.x, other.x, eps)
            and scalar_abs_diff_eq(self.y, other.y, eps)
            and scalar_abs_diff_eq(self.z, other.z, eps)
        )

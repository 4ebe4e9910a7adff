"""
Vec3: free direction / displacement in 3-space.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from raytracing.core.tolerances import scalar_abs_diff_eq, select_tolerance
from raytracing.core.validation import check_shape
from raytracing.linalg.matrix import Matrix
from raytracing.transform.apply import transform


@dataclass(frozen=True)
class Vec3:
    """
    Immutable 3-component vector with no positional meaning.

    Operators: ``+``/``-`` with another Vec3, unary ``-``, ``*`` and ``/``
    by a scalar. The two vector products are named (``dot``, ``cross``).

    Homogeneous lift is ``[x, y, z, 0]``: rotation and scaling act on a
    vector, translation does not.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    default_epsilon = select_tolerance('vector').atol

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real) or isinstance(scalar, bool):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, Real) or isinstance(scalar, bool):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Right-handed cross product; ``a.cross(b) == -(b.cross(a))``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """L1 norm ``|x| + |y| + |z|`` (not the Euclidean length)."""
        return abs(self.x) + abs(self.y) + abs(self.z)

    def normalize(self) -> Vec3:
        """
        Scale to unit L1 magnitude.

        The zero vector normalizes to itself rather than dividing by zero.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return Vec3()
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    # --- Homogeneous protocol --------------------------------------------

    def to_homogeneous(self) -> Matrix:
        return Matrix.column((self.x, self.y, self.z, 0.0))

    @classmethod
    def from_homogeneous(cls, column: Matrix) -> Vec3:
        check_shape(column.shape, (4, 1), 'column')
        return cls(column[0, 0], column[1, 0], column[2, 0])

    def transform(self, matrix: Matrix) -> Vec3:
        """Apply a 4x4 transform; translation components have no effect."""
        return transform(self, matrix)

    def abs_diff_eq(self, other: Vec3, epsilon: float | None = None) -> bool:
        if not isinstance(other, type(self)):
            return False
        eps = self.default_epsilon if epsilon is None else epsilon
        return (
            scalar_abs_diff_eq(self.x, other.x, eps)
            and scalar_abs_diff_eq(self.y, other.y, eps)
            and scalar_abs_diff_eq(self.z, other.z, eps)
        )

"""
Tolerance tiers for approximate (epsilon) equality.

Defines the default absolute tolerance for each family of values:
- Vectors, points and colors: tight, single-operation rounding only
- Matrices: looser, absorbs error accumulated by chained products
  and inversion

Used by every ``abs_diff_eq`` method, the module-level ``abs_diff_eq``
function and the test suite.
"""

from dataclasses import dataclass
from numbers import Real
from typing import Any, Literal


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Vec3, Point, Color: components compared after a handful of flops
VECTOR_TOLERANCE = ToleranceTier(
    atol=1e-10,
    name='vector',
    description='3-component value types, single-operation rounding',
)

# Matrix: chained multiplication and Gauss-Jordan inversion
MATRIX_TOLERANCE = ToleranceTier(
    atol=1e-4,
    name='matrix',
    description='matrices, cumulative error of products and inversion',
)

ToleranceKind = Literal['vector', 'matrix']


def select_tolerance(kind: ToleranceKind) -> ToleranceTier:
    """Select the tolerance tier for a family of values."""
    if kind == 'vector':
        return VECTOR_TOLERANCE
    if kind == 'matrix':
        return MATRIX_TOLERANCE
    raise ValueError(f"Unknown tolerance kind: {kind!r}")


def scalar_abs_diff_eq(a: float, b: float, epsilon: float) -> bool:
    """|a - b| <= epsilon, with exactly-equal values (including infinities) equal."""
    return a == b or abs(a - b) <= epsilon


def abs_diff_eq(a: Any, b: Any, epsilon: float | None = None) -> bool:
    """
    Absolute-difference equality for scalars and raytracing value types.

    Args:
        a: Left operand (float, Vec3, Point, Color or Matrix)
        b: Right operand, same kind as ``a``
        epsilon: Absolute tolerance. None uses the operand type's default
            (``VECTOR_TOLERANCE`` for scalars and 3-component types,
            ``MATRIX_TOLERANCE`` for matrices).

    Returns:
        True if every component differs by at most epsilon

    Raises:
        TypeError: If the operands are not comparable
    """
    if isinstance(a, Real) and isinstance(b, Real):
        eps = VECTOR_TOLERANCE.atol if epsilon is None else epsilon
        return scalar_abs_diff_eq(float(a), float(b), eps)

    if type(a) is not type(b) or not hasattr(a, 'abs_diff_eq'):
        raise TypeError(
            f"abs_diff_eq: cannot compare {type(a).__name__} with {type(b).__name__}"
        )
    return a.abs_diff_eq(b, epsilon)

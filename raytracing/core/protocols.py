"""
Core protocols for raytracing.

These define structural interfaces that geometric types must satisfy to
take part in shared machinery. We use Protocol (structural typing) rather
than ABC (nominal typing) so that value types stay plain frozen dataclasses.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Capability-driven: a type either can be lifted to homogeneous
      coordinates or it cannot; nothing in between
"""

from __future__ import annotations

from typing import Protocol, TypeVar, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from raytracing.linalg.matrix import Matrix

H = TypeVar('H', bound='Homogeneous')


@runtime_checkable
class Homogeneous(Protocol):
    """
    Protocol for entities that can be carried through a 4x4 transform.

    An implementer must round-trip losslessly through a 4x1 homogeneous
    column. The w component encodes what kind of entity it is:

        Point: [x, y, z, 1]  -- translation moves it
        Vec3:  [x, y, z, 0]  -- translation leaves it alone

    ``from_homogeneous`` ignores w on the way back (affine transforms only,
    no perspective divide).
    """

    def to_homogeneous(self) -> Matrix:
        """Lift into a 4x1 column matrix."""
        ...

    @classmethod
    def from_homogeneous(cls: type[H], column: Matrix) -> H:
        """
        Lower a 4x1 column back into this entity type.

        Raises:
            DimensionError: If column is not 4x1
        """
        ...


@runtime_checkable
class ApproxEq(Protocol):
    """
    Protocol for values supporting absolute-difference equality.

    ``default_epsilon`` is the per-type tolerance used when the caller
    passes no epsilon (see raytracing.core.tolerances).
    """

    default_epsilon: float

    def abs_diff_eq(self, other, epsilon: float | None = None) -> bool:
        """True if every component of self and other differ by <= epsilon."""
        ...

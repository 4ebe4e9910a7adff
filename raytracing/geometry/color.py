"""
Color: an RGB triple of floats.

Channels outside [0, 1] are valid intermediate values (additive light,
over-exposure). They are clamped only when a color is quantized to a
display pixel, see raytracing.output.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from raytracing.core.tolerances import scalar_abs_diff_eq, select_tolerance


def _clamp01(v: float) -> float:
    return min(max(v, 0.0), 1.0)


@dataclass(frozen=True)
class Color:
    """
    Immutable RGB color.

    ``c1 * c2`` is the component-wise product (also spelled ``blend``);
    ``c * 2.0`` scales every channel.

    Examples:
        >>> Color(1.5, 0.5, -20.0).clamp()
        Color(r=1.0, g=0.5, b=0.0)
    """
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    default_epsilon = select_tolerance('vector').atol

    @classmethod
    def from_tuple(cls, t: tuple[float, float, float]) -> Color:
        r, g, b = t
        return cls(r, g, b)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return self.blend(other)
        if isinstance(other, Real) and not isinstance(other, bool):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def blend(self, other: Color) -> Color:
        """Component-wise (Hadamard) product."""
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def clamp(self) -> Color:
        """Each channel clamped to [0, 1]; in-range channels unchanged."""
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b))

    def abs_diff_eq(self, other: Color, epsilon: float | None = None) -> bool:
        if not isinstance(other, type(self)):
            return False
        eps = self.default_epsilon if epsilon is None else epsilon
        return (
            scalar_abs_diff_eq(self.r, other.r, eps)
            and scalar_abs_diff_eq(self.g, other.g, eps)
            and scalar_abs_diff_eq(self.b, other.b, eps)
        )

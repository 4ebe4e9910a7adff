"""
Tests for Color arithmetic and clamping.
"""

import pytest
from hypothesis import given, strategies as st

from raytracing.core.protocols import Homogeneous
from raytracing.geometry import Color


channel = st.floats(-100.0, 100.0, allow_nan=False)
colors = st.builds(Color, channel, channel, channel)


class TestArithmetic:

    def test_add(self):
        c = Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25)
        assert c.abs_diff_eq(Color(1.6, 0.7, 1.0))

    def test_sub(self):
        c = Color(0.8, 0.6, 0.75) - Color(0.7, 0.1, 0.25)
        assert c.abs_diff_eq(Color(0.1, 0.5, 0.5))

    def test_mul_scalar(self):
        c = Color(0.2, 0.3, 0.4)
        assert (c * 2.0).abs_diff_eq(Color(0.4, 0.6, 0.8))
        assert (4.5 * c).abs_diff_eq(c * 4.5)

    def test_mul_color_is_component_wise(self):
        c = Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1)
        assert c.abs_diff_eq(Color(0.9, 0.2, 0.04))

    def test_blend_matches_operator(self):
        a = Color(1.0, 0.2, 0.4)
        b = Color(0.9, 1.0, 0.1)
        assert a.blend(b) == a * b

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            Color(1.0, 1.0, 1.0) * "2"

    def test_tuple_conversions(self):
        c = Color.from_tuple((0.1, 0.2, 0.3))
        assert c == Color(0.1, 0.2, 0.3)
        assert c.as_tuple() == (0.1, 0.2, 0.3)

    def test_no_homogeneous_lift(self):
        assert not isinstance(Color(), Homogeneous)


class TestClamp:

    def test_clamp(self):
        assert Color(1.5, 0.5, -20.0).clamp() == Color(1.0, 0.5, 0.0)

    def test_in_range_unchanged(self):
        c = Color(0.0, 0.25, 1.0)
        assert c.clamp() == c

    @given(colors)
    def test_clamped_channels_in_unit_interval(self, c):
        clamped = c.clamp()
        for value in clamped.as_tuple():
            assert 0.0 <= value <= 1.0

    @given(colors)
    def test_idempotent(self, c):
        assert c.clamp().clamp() == c.clamp()

"""
Tests for transform() and transform_all().
"""

import math

import pytest
from hypothesis import given, strategies as st

from raytracing.core.exceptions import DimensionError, ValidationError
from raytracing.geometry import Color, Point, Vec3
from raytracing.linalg import Matrix
from raytracing.transform import rotate, scale, transform, transform_all, translate


coord = st.floats(-1000.0, 1000.0, allow_nan=False, allow_infinity=False)
points = st.builds(Point, coord, coord, coord)


class TestTransform:

    def test_returns_same_type(self):
        assert isinstance(transform(Point(1.0, 2.0, 3.0), scale(2.0, 2.0, 2.0)), Point)
        assert isinstance(transform(Vec3(1.0, 2.0, 3.0), scale(2.0, 2.0, 2.0)), Vec3)

    def test_method_spelling(self):
        t = translate(5.0, -3.0, 2.0)
        p = Point(-3.0, 4.0, 5.0)
        assert p.transform(t) == transform(p, t)
        v = Vec3(-3.0, 4.0, 5.0)
        assert v.transform(t) == transform(v, t) == v

    def test_input_unchanged(self):
        p = Point(1.0, 2.0, 3.0)
        transform(p, translate(1.0, 1.0, 1.0))
        assert p == Point(1.0, 2.0, 3.0)

    def test_identity(self):
        p = Point(-7.5, 0.25, 3.0)
        assert transform(p, Matrix.identity(4)) == p

    def test_projective_row_ignored(self):
        # the w row is dropped, so a non-affine bottom row has no effect on xyz
        m = Matrix([
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
        ])
        assert transform(Point(1.0, 2.0, 3.0), m) == Point(1.0, 2.0, 3.0)

    def test_color_rejected(self):
        with pytest.raises(ValidationError, match="Color"):
            transform(Color(1.0, 1.0, 1.0), Matrix.identity(4))

    def test_plain_tuple_rejected(self):
        with pytest.raises(ValidationError):
            transform((1.0, 2.0, 3.0), Matrix.identity(4))

    @pytest.mark.parametrize("matrix", [Matrix.identity(3), Matrix.filled(4, 1, 0.0)])
    def test_wrong_matrix_shape(self, matrix):
        with pytest.raises(DimensionError):
            transform(Point(1.0, 2.0, 3.0), matrix)

    def test_non_matrix_rejected(self):
        with pytest.raises(ValidationError):
            transform(Point(1.0, 2.0, 3.0), [[1.0, 0.0], [0.0, 1.0]])

    @given(points)
    def test_composition_matches_sequential(self, p):
        a = rotate(0.4, -0.2, 1.0)
        b = translate(1.0, 2.0, -3.0)
        assert transform(p, b @ a).abs_diff_eq(transform(transform(p, a), b), 1e-9)


class TestTransformAll:

    def test_matches_single(self):
        m = rotate(0.1, 0.2, 0.3) @ translate(1.0, -2.0, 0.5)
        pts = [Point(1.0, 2.0, 3.0), Point(-4.0, 0.0, 9.5), Point(0.0, 0.0, 0.0)]
        for got, p in zip(transform_all(pts, m), pts):
            assert got.abs_diff_eq(transform(p, m))

    def test_vectors_ignore_translation(self):
        vs = [Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0)]
        assert transform_all(vs, translate(3.0, 3.0, 3.0)) == vs

    def test_empty(self):
        assert transform_all([], Matrix.identity(4)) == []

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError, match=r"entities\[1\]"):
            transform_all([Point(), Vec3()], Matrix.identity(4))

    def test_non_homogeneous_rejected(self):
        with pytest.raises(ValidationError):
            transform_all([Color(), Color()], Matrix.identity(4))

    def test_wrong_matrix_shape(self):
        with pytest.raises(DimensionError):
            transform_all([Point()], Matrix.identity(3))

    @given(st.lists(points, min_size=1, max_size=8))
    def test_quarter_turn_batch(self, pts):
        m = rotate(math.pi / 2, 0.0, 0.0)
        for got, p in zip(transform_all(pts, m), pts):
            assert got.abs_diff_eq(Point(p.x, -p.z, p.y), 1e-9)

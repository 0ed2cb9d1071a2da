"""
Unit tests for the primitive value classes and coercion helpers.

Tests that each primitive delegates its queries to geoprim.ops and
serializes through to_dict/from_dict.
"""

import pytest
import numpy as np

from geoprim.core import (
    AABB,
    PrimitiveShapeError,
    Rectangle,
    Segment,
    Tetrahedron,
    Triangle,
    as_points,
    as_vector,
)


class TestCoercion:
    """Tests for as_vector() and as_points()."""

    def test_as_vector_returns_float_copy(self):
        src = np.array([1, 2, 3])
        out = as_vector(src)
        assert out.dtype == np.float64
        out[0] = 99
        assert src[0] == 1

    def test_as_vector_rejects_wrong_size(self):
        with pytest.raises(PrimitiveShapeError):
            as_vector((1, 2, 3, 4))
        with pytest.raises(PrimitiveShapeError):
            as_vector((1, 2), dim=3)

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            as_vector([[1, 2], [3, 4]])

    def test_as_points_empty(self):
        assert as_points([]).shape == (0, 3)
        assert as_points([], 2).shape == (0, 2)


class TestSegment:
    """Tests for Segment."""

    def test_closest_point_carries_parameter(self):
        seg = Segment(p=(0, 0, 0), q=(4, 0, 0))
        result = seg.closest_point((1, 2, 0))
        np.testing.assert_array_almost_equal(result.point, [1, 0, 0])
        assert result.sq_distance == pytest.approx(4.0)
        assert result.distance == pytest.approx(2.0)
        assert result.params == pytest.approx((0.25,))

    def test_sq_distance_matches_closest_point(self):
        seg = Segment(p=(0, 0), q=(1, 1))
        assert seg.sq_distance_to((2, 0)) == pytest.approx(seg.closest_point((2, 0)).sq_distance)

    def test_closest_points_to_other_segment(self):
        a = Segment(p=(0, 0, 0), q=(1, 0, 0))
        b = Segment(p=(0, 1, 0), q=(1, 1, 0))
        assert a.closest_points_to(b).sq_distance == pytest.approx(1.0)

    def test_length_and_point_at(self):
        seg = Segment(p=(0, 0, 0), q=(0, 3, 4))
        assert seg.length == pytest.approx(5.0)
        np.testing.assert_array_almost_equal(seg.point_at(0.5), [0, 1.5, 2])

    def test_mixed_dimensions_rejected(self):
        with pytest.raises(PrimitiveShapeError):
            Segment(p=(0, 0), q=(1, 1, 1))

    def test_dict_round_trip(self):
        seg = Segment(p=(1, 2, 3), q=(4, 5, 6))
        d = seg.to_dict()
        assert d["type"] == "segment"
        restored = Segment.from_dict(d)
        np.testing.assert_array_equal(restored.p, seg.p)
        np.testing.assert_array_equal(restored.q, seg.q)


class TestRectangle:
    """Tests for Rectangle."""

    def test_closest_point(self):
        rect = Rectangle(a=(0, 0, 0), b=(2, 0, 0), c=(0, 3, 0))
        result = rect.closest_point((1, 5, 2))
        np.testing.assert_array_almost_equal(result.point, [1, 3, 0])
        assert result.sq_distance == pytest.approx(4.0 + 4.0)

    def test_dict_round_trip(self):
        rect = Rectangle(a=(0, 0, 0), b=(2, 0, 0), c=(0, 3, 0))
        restored = Rectangle.from_dict(rect.to_dict())
        np.testing.assert_array_equal(restored.c, rect.c)


class TestTriangle:
    """Tests for Triangle."""

    tri = Triangle(a=(0, 0, 0), b=(1, 0, 0), c=(0, 1, 0))

    def test_normal_and_area(self):
        np.testing.assert_array_almost_equal(self.tri.normal, [0, 0, 1])
        assert self.tri.area == pytest.approx(0.5)

    def test_closest_point_reports_barycentric(self):
        result = self.tri.closest_point((0.25, 0.25, 3.0))
        np.testing.assert_array_almost_equal(result.point, [0.25, 0.25, 0])
        assert result.sq_distance == pytest.approx(9.0)
        assert result.params == pytest.approx((0.5, 0.25, 0.25))

    def test_contains_and_signed_distance(self):
        assert self.tri.contains((0.1, 0.1, 5.0)) is True
        assert self.tri.contains((1.0, 1.0, 0.0)) is False
        assert self.tri.signed_distance((0, 0, 1)) == pytest.approx(-1.0)

    def test_dict_round_trip(self):
        d = self.tri.to_dict()
        assert d["type"] == "triangle"
        restored = Triangle.from_dict(d)
        np.testing.assert_array_equal(restored.b, self.tri.b)


class TestTetrahedron:
    """Tests for Tetrahedron."""

    tet = Tetrahedron(a=(0, 0, 0), b=(1, 0, 0), c=(0, 1, 0), d=(0, 0, 1))

    def test_centroid(self):
        np.testing.assert_array_almost_equal(self.tet.centroid, [0.25, 0.25, 0.25])

    def test_contains(self):
        assert self.tet.contains((0.1, 0.1, 0.1)) is True
        assert self.tet.contains((1, 1, 1)) is False

    def test_closest_point_outside(self):
        result = self.tet.closest_point((0.2, 0.2, -3))
        np.testing.assert_array_almost_equal(result.point, [0.2, 0.2, 0])
        assert result.sq_distance == pytest.approx(9.0)

    def test_dict_round_trip(self):
        restored = Tetrahedron.from_dict(self.tet.to_dict())
        np.testing.assert_array_equal(restored.d, self.tet.d)


class TestAABB:
    """Tests for AABB."""

    def test_defaults_to_point_box(self):
        box = AABB(center=(1, 2, 3))
        np.testing.assert_array_equal(box.radius, [0, 0, 0])

    def test_negative_radius_rejected(self):
        with pytest.raises(ValueError):
            AABB(center=(0, 0, 0), radius=(1, -1, 1))

    def test_from_min_max(self):
        box = AABB.from_min_max((0, 0, 0), (2, 4, 6))
        np.testing.assert_array_almost_equal(box.center, [1, 2, 3])
        np.testing.assert_array_almost_equal(box.radius, [1, 2, 3])
        np.testing.assert_array_almost_equal(box.min_corner, [0, 0, 0])
        np.testing.assert_array_almost_equal(box.max_corner, [2, 4, 6])

    def test_get_bounds(self):
        box = AABB(center=(0, 0), radius=(1, 2))
        assert box.get_bounds() == (-1.0, 1.0, -2.0, 2.0)

    def test_closest_point(self):
        box = AABB(center=(0, 0, 0), radius=(1, 1, 1))
        result = box.closest_point((2, 0, 0))
        np.testing.assert_array_almost_equal(result.point, [1, 0, 0])
        assert result.sq_distance == pytest.approx(1.0)

    def test_dict_round_trip(self):
        box = AABB(center=(1, 2, 3), radius=(0.5, 0.5, 0.5))
        restored = AABB.from_dict(box.to_dict())
        np.testing.assert_array_equal(restored.center, box.center)
        np.testing.assert_array_equal(restored.radius, box.radius)

"""
Unit tests for point-segment and segment-segment closest-point queries.

Covers the clamped-projection regions (before a, after b, interior), the
degenerate-segment policy and the parallel/intersecting configurations.
"""

import pytest
import numpy as np

from geoprim.ops.closest import (
    closest_point_on_segment,
    sq_dist_point_segment,
    closest_points_segment_segment,
)
from gp_policies import ToleranceParams


class TestClosestPointOnSegment:
    """Tests for closest_point_on_segment()."""
    
    def test_before_a_clamps_to_a(self):
        """Points projecting before a return (0, a)."""
        t, point = closest_point_on_segment((0, 0, 0), (2, 0, 0), (-1, 3, 0))
        assert t == 0.0
        np.testing.assert_array_almost_equal(point, [0, 0, 0])
    
    def test_after_b_clamps_to_b(self):
        """Points projecting past b return (1, b)."""
        t, point = closest_point_on_segment((0, 0, 0), (2, 0, 0), (5, -1, 0))
        assert t == 1.0
        np.testing.assert_array_almost_equal(point, [2, 0, 0])
    
    def test_interior_projection(self):
        """Interior projections divide by |ab|^2 to get the true t."""
        t, point = closest_point_on_segment((0, 0, 0), (2, 0, 0), (0.5, 1, 0))
        assert t == pytest.approx(0.25)
        np.testing.assert_array_almost_equal(point, [0.5, 0, 0])
    
    def test_works_in_2d(self):
        """The same query works for 2D vectors."""
        t, point = closest_point_on_segment((0, 0), (0, 4), (3, 1))
        assert t == pytest.approx(0.25)
        np.testing.assert_array_almost_equal(point, [0, 1])
    
    def test_degenerate_segment_returns_a(self):
        """A zero-length segment returns its single point."""
        t, point = closest_point_on_segment((1, 1, 1), (1, 1, 1), (4, 5, 6))
        assert t == 0.0
        np.testing.assert_array_almost_equal(point, [1, 1, 1])
    
    def test_inputs_not_aliased(self):
        """Returned points are fresh arrays, not the caller's input."""
        a = np.array([0.0, 0.0, 0.0])
        _, point = closest_point_on_segment(a, np.array([1.0, 0.0, 0.0]), np.array([-1.0, 0.0, 0.0]))
        point[0] = 42.0
        assert a[0] == 0.0


class TestSqDistPointSegment:
    """Tests for sq_dist_point_segment()."""
    
    @pytest.mark.parametrize("c", [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (0.5, 0.0, 0.0),
        (0.25, 0.0, 0.0),
    ])
    def test_zero_on_segment(self, c):
        """Points on the segment, endpoints included, have zero distance."""
        assert sq_dist_point_segment((0, 0, 0), (1, 0, 0), c) == pytest.approx(0.0, abs=1e-12)
    
    def test_three_regions(self):
        """Before a, after b and interior regions give the expected values."""
        a, b = (0, 0, 0), (1, 0, 0)
        assert sq_dist_point_segment(a, b, (-1, 1, 0)) == pytest.approx(2.0)
        assert sq_dist_point_segment(a, b, (3, 0, 1)) == pytest.approx(5.0)
        assert sq_dist_point_segment(a, b, (0.5, 2, 0)) == pytest.approx(4.0)
    
    def test_matches_closest_point(self):
        """Squared distance agrees with the materialized closest point."""
        rng = np.random.default_rng(7)
        for _ in range(50):
            a, b, c = rng.normal(size=(3, 3))
            _, point = closest_point_on_segment(a, b, c)
            expected = float(np.dot(c - point, c - point))
            assert sq_dist_point_segment(a, b, c) == pytest.approx(expected, rel=1e-9, abs=1e-12)
    
    def test_2d(self):
        """2D segments are supported."""
        assert sq_dist_point_segment((0, 0), (2, 0), (1, 3)) == pytest.approx(9.0)


class TestClosestPointsSegmentSegment:
    """Tests for closest_points_segment_segment()."""
    
    def test_parallel_segments(self):
        """Parallel segments one unit apart have squared distance 1."""
        r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0))
        assert r.sq_distance == pytest.approx(1.0)
        assert r.distance == pytest.approx(1.0)
    
    def test_identical_segments(self):
        """Identical, fully overlapping segments have squared distance 0."""
        r = closest_points_segment_segment((0, 0, 0), (1, 2, 3), (0, 0, 0), (1, 2, 3))
        assert r.sq_distance == pytest.approx(0.0, abs=1e-12)
    
    def test_crossing_segments(self):
        """Perpendicular crossing segments meet at the crossing point."""
        r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (0.5, -0.5, 0), (0.5, 0.5, 0))
        assert r.sq_distance == pytest.approx(0.0, abs=1e-12)
        assert r.s == pytest.approx(0.5)
        assert r.t == pytest.approx(0.5)
        np.testing.assert_array_almost_equal(r.c1, [0.5, 0, 0])
        np.testing.assert_array_almost_equal(r.c2, [0.5, 0, 0])
    
    def test_skew_segments(self):
        """Skew segments: x-axis segment and a segment along z offset in y."""
        r = closest_points_segment_segment((0, 0, 0), (2, 0, 0), (1, 3, -1), (1, 3, 1))
        assert r.sq_distance == pytest.approx(9.0)
        np.testing.assert_array_almost_equal(r.c1, [1, 0, 0])
        np.testing.assert_array_almost_equal(r.c2, [1, 3, 0])
    
    def test_t_clamped_high_recomputes_s(self):
        """When the unclamped t exceeds 1, t is clamped and s recomputed."""
        r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (3, 1, 0), (2, 1, 0))
        assert r.t == pytest.approx(1.0)
        assert r.s == pytest.approx(1.0)
        np.testing.assert_array_almost_equal(r.c2, [2, 1, 0])
        assert r.sq_distance == pytest.approx(2.0)
    
    def test_t_clamped_low_recomputes_s(self):
        """When the unclamped t is negative, t is clamped to 0."""
        r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (2, 1, 0), (3, 1, 0))
        assert r.t == pytest.approx(0.0)
        assert r.s == pytest.approx(1.0)
        assert r.sq_distance == pytest.approx(2.0)
    
    def test_both_degenerate(self):
        """Two points: direct squared distance, s = t = 0."""
        r = closest_points_segment_segment((0, 0, 0), (0, 0, 0), (1, 2, 2), (1, 2, 2))
        assert (r.s, r.t) == (0.0, 0.0)
        assert r.sq_distance == pytest.approx(9.0)
    
    def test_first_degenerate(self):
        """First segment a point: clamp using the second segment's projection."""
        r = closest_points_segment_segment((0.5, 1, 0), (0.5, 1, 0), (0, 0, 0), (1, 0, 0))
        assert r.s == 0.0
        assert r.t == pytest.approx(0.5)
        assert r.sq_distance == pytest.approx(1.0)
    
    def test_second_degenerate(self):
        """Second segment a point: clamp using the first segment's projection."""
        r = closest_points_segment_segment((0, 0, 0), (1, 0, 0), (2, 1, 0), (2, 1, 0))
        assert r.t == 0.0
        assert r.s == pytest.approx(1.0)
        assert r.sq_distance == pytest.approx(2.0)
    
    def test_near_degenerate_uses_epsilon(self):
        """A segment shorter than the degeneracy epsilon is treated as a point."""
        tiny = 1e-7  # squared length 1e-14 < 1e-10
        r = closest_points_segment_segment((0, 0, 0), (tiny, 0, 0), (0, 1, 0), (1, 1, 0))
        assert r.s == 0.0
        
        strict = ToleranceParams(degeneracy_epsilon=0.0)
        r_strict = closest_points_segment_segment(
            (0, 0, 0), (tiny, 0, 0), (0, 1, 0), (1, 1, 0), policy=strict,
        )
        assert r_strict.sq_distance == pytest.approx(r.sq_distance)
    
    def test_closest_points_lie_on_segments(self):
        """c1 and c2 always lie on their respective segments."""
        rng = np.random.default_rng(11)
        for _ in range(100):
            p1, q1, p2, q2 = rng.normal(size=(4, 3))
            r = closest_points_segment_segment(p1, q1, p2, q2)
            assert 0.0 <= r.s <= 1.0
            assert 0.0 <= r.t <= 1.0
            np.testing.assert_array_almost_equal(r.c1, p1 + r.s * (q1 - p1))
            np.testing.assert_array_almost_equal(r.c2, p2 + r.t * (q2 - p2))
            assert r.sq_distance == pytest.approx(float(np.dot(r.c1 - r.c2, r.c1 - r.c2)))
    
    def test_not_farther_than_endpoint_queries(self):
        """The result is never worse than any endpoint-to-segment distance."""
        rng = np.random.default_rng(3)
        for _ in range(100):
            p1, q1, p2, q2 = rng.normal(size=(4, 3))
            r = closest_points_segment_segment(p1, q1, p2, q2)
            bound = min(
                sq_dist_point_segment(p2, q2, p1),
                sq_dist_point_segment(p2, q2, q1),
                sq_dist_point_segment(p1, q1, p2),
                sq_dist_point_segment(p1, q1, q2),
            )
            assert r.sq_distance <= bound + 1e-9

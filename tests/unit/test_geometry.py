"""Unit tests for the line algebra in snapgeom.geometry.

Covers:
    - intersection / intersect: infinite-line intersection, parallel detection
    - closest_point_on_line / closest_pt: unclamped projection
    - shortest_distance_to_line: clamped projection and distance
    - unit_normal, visible
"""

from types import SimpleNamespace

import numpy as np

from snapgeom.geometry import (
    closest_point_on_line,
    closest_pt,
    intersect,
    intersection,
    shortest_distance_to_line,
    unit_normal,
    visible,
)


def _seg(a, b):
    return SimpleNamespace(p1=np.array(a, dtype=float), p2=np.array(b, dtype=float))


class TestIntersection:

    def test_perpendicular_lines(self):
        ip = intersection((0, 0), (10, 0), (5, -5), (5, 5))
        np.testing.assert_array_equal(ip, [5.0, 0.0])

    def test_parallel_lines(self):
        assert intersection((0, 0), (10, 0), (0, 1), (10, 1)) is None

    def test_coincident_lines(self):
        assert intersection((0, 0), (10, 0), (2, 0), (7, 0)) is None

    def test_point_order_within_a_line_does_not_matter(self):
        expected = intersection((0, 0), (4, 4), (0, 4), (4, 0))
        np.testing.assert_allclose(expected, [2.0, 2.0])
        for a, b, c, d in [
            ((4, 4), (0, 0), (0, 4), (4, 0)),
            ((0, 0), (4, 4), (4, 0), (0, 4)),
            ((4, 4), (0, 0), (4, 0), (0, 4)),
        ]:
            np.testing.assert_allclose(intersection(a, b, c, d), expected)

    def test_parallel_regardless_of_order(self):
        assert intersection((10, 0), (0, 0), (0, 1), (10, 1)) is None
        assert intersection((0, 0), (10, 0), (10, 1), (0, 1)) is None

    def test_intersection_outside_both_segments(self):
        # Infinite lines, not segments
        ip = intersection((0, 0), (1, 0), (5, 1), (5, 2))
        np.testing.assert_allclose(ip, [5.0, 0.0])

    def test_exact_zero_default_tolerance(self):
        # determinant is 0.01: reported with the default tol, dropped with a looser one
        args = ((0, 0), (10, 0), (0, 1), (10, 1.001))
        assert intersection(*args) is not None
        assert intersection(*args, tol=0.1) is None

    def test_intersect_on_entities(self):
        ip = intersect(_seg((0, 0), (10, 0)), _seg((5, -5), (5, 5)))
        np.testing.assert_array_equal(ip, [5.0, 0.0])


class TestClosestPointOnLine:

    def test_projection_inside(self):
        np.testing.assert_allclose(closest_point_on_line((5, 5), (0, 0), (10, 0)), [5, 0])

    def test_projection_is_not_clamped(self):
        np.testing.assert_allclose(closest_point_on_line((20, 3), (0, 0), (10, 0)), [20, 0])
        np.testing.assert_allclose(closest_point_on_line((-4, -1), (0, 0), (10, 0)), [-4, 0])

    def test_degenerate_line_returns_first_point(self):
        np.testing.assert_array_equal(closest_point_on_line((5, 6), (2, 2), (2, 2)), [2, 2])

    def test_result_lies_on_the_line(self):
        rng = np.random.default_rng(7)
        for _ in range(200):
            p, p1, p2 = rng.uniform(-1000, 1000, size=(3, 2))
            q = closest_point_on_line(p, p1, p2)
            d = p2 - p1
            r = q - p1
            cross = d[0] * r[1] - d[1] * r[0]
            scale = np.linalg.norm(d) * max(np.linalg.norm(r), 1.0)
            assert abs(cross) / scale < 1e-9

    def test_closest_pt_on_entity(self):
        np.testing.assert_allclose(closest_pt((5, 5), _seg((0, 0), (10, 0))), [5, 0])


class TestShortestDistanceToLine:

    def test_inside_segment(self):
        d, cp = shortest_distance_to_line((0, 0), (10, 0), (5, 5))
        assert d == 5.0
        np.testing.assert_allclose(cp, [5, 0])

    def test_clamped_past_end(self):
        d, cp = shortest_distance_to_line((0, 0), (10, 0), (13, 4))
        assert d == 5.0
        np.testing.assert_allclose(cp, [10, 0])

    def test_clamped_before_start(self):
        d, cp = shortest_distance_to_line((0, 0), (10, 0), (-6, 8))
        assert d == 10.0
        np.testing.assert_allclose(cp, [0, 0])

    def test_zero_length_segment(self):
        d, cp = shortest_distance_to_line((2, 2), (2, 2), (5, 6))
        assert d == 5.0
        np.testing.assert_array_equal(cp, [2, 2])

    def test_clamping_and_distance_properties(self):
        rng = np.random.default_rng(11)
        for _ in range(200):
            p1, p2, pt = rng.uniform(-500, 500, size=(3, 2))
            d, cp = shortest_distance_to_line(p1, p2, pt)

            seg = p2 - p1
            t = np.dot(cp - p1, seg) / np.dot(seg, seg)
            assert -1e-9 <= t <= 1 + 1e-9

            assert np.isclose(d, np.linalg.norm(pt - cp))
            assert d <= np.linalg.norm(pt - p1) + 1e-9
            assert d <= np.linalg.norm(pt - p2) + 1e-9


class TestUnitNormal:

    def test_horizontal(self):
        np.testing.assert_allclose(unit_normal((0, 0), (10, 0)), [0, 1], atol=1e-12)

    def test_unit_length_and_perpendicular(self):
        n = unit_normal((100, 100), (300, 200))
        assert np.isclose(np.linalg.norm(n), 1.0)
        assert np.isclose(np.dot(n, [200, 100]), 0.0)

    def test_degenerate(self):
        assert unit_normal((3, 3), (3, 3)) is None


class TestVisible:

    def test_inside_and_edges(self):
        assert visible((50, 25), (100, 50))
        assert visible((0, 0), (100, 50))
        assert visible((100, 50), (100, 50))

    def test_outside(self):
        assert not visible((101, 0), (100, 50))
        assert not visible((-0.1, 10), (100, 50))
        assert not visible((10, 51), (100, 50))

    def test_returns_plain_bool(self):
        assert type(visible(np.array([1.0, 1.0]), (10, 10))) is bool

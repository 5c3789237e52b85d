"""Tests for point-location classification against a directed segment."""

from __future__ import annotations

import random
import unittest

from geolib.config import GeometryTolerances
from geolib.errors import OutOfRangeError
from geolib.geometry import Location, classify_point, orientation, segments_intersect
from geolib.points import Point
from geolib.polyline import Polyline
from tests.polyline_fixture import make_store, make_open_square


class TestLocationOfPoint(unittest.TestCase):
    """Segment 0 of the open square runs (0,0) → (10,0)."""

    def setUp(self):
        self.ply = make_open_square()

    def test_left_and_right(self):
        self.assertEqual(self.ply.location_of_point(0, Point(5, 5)), Location.LEFT)
        self.assertEqual(self.ply.location_of_point(0, Point(5, -5)), Location.RIGHT)

    def test_collinear_cases(self):
        cases = [
            (Point(-5, 0), Location.BEHIND),
            (Point(0, 0), Location.SOURCE),
            (Point(5, 0), Location.BETWEEN),
            (Point(10, 0), Location.DESTINATION),
            (Point(15, 0), Location.BEYOND),
        ]
        for pnt, expected in cases:
            with self.subTest(pnt=pnt):
                self.assertEqual(self.ply.location_of_point(0, pnt), expected)

    def test_direction_matters(self):
        """Segment 2 runs (10,10) → (0,10); left and behind flip."""
        self.assertEqual(self.ply.location_of_point(2, Point(5, 5)), Location.LEFT)
        self.assertEqual(self.ply.location_of_point(2, Point(5, 15)), Location.RIGHT)
        self.assertEqual(self.ply.location_of_point(2, Point(15, 10)), Location.BEHIND)
        self.assertEqual(self.ply.location_of_point(2, Point(-5, 10)), Location.BEYOND)

    def test_z_is_ignored(self):
        self.assertEqual(self.ply.location_of_point(0, Point(5, 5, 100)), Location.LEFT)
        self.assertEqual(self.ply.location_of_point(0, Point(5, 0, -3)), Location.BETWEEN)

    def test_reflection_flips_side(self):
        """A LEFT point mirrored across the segment's line is RIGHT."""
        ply = Polyline(make_store(), [0, 2])   # (0,0) → (10,10), line y = x
        for x, y in [(2, 6), (-3, 1), (7, 9.5), (20, 21)]:
            with self.subTest(pnt=(x, y)):
                self.assertEqual(ply.location_of_point(0, Point(x, y)), Location.LEFT)
                self.assertEqual(ply.location_of_point(0, Point(y, x)), Location.RIGHT)

    def test_segment_index_out_of_range(self):
        with self.assertRaises(OutOfRangeError):
            self.ply.location_of_point(3, Point(0, 0))
        with self.assertRaises(OutOfRangeError):
            self.ply.location_of_point(-1, Point(0, 0))
        with self.assertRaises(OutOfRangeError):
            Polyline(make_store(), [0]).location_of_point(0, Point(0, 0))


class TestClassifyPoint(unittest.TestCase):

    def test_degenerate_segment(self):
        p = Point(1, 1)
        self.assertEqual(classify_point(p, p, Point(1, 1)), Location.SOURCE)
        self.assertEqual(classify_point(p, p, Point(2, 2)), Location.BEYOND)

    def test_near_endpoint_snaps(self):
        src, dst = Point(0, 0), Point(10, 0)
        self.assertEqual(classify_point(src, dst, Point(1e-10, 0)), Location.SOURCE)
        self.assertEqual(classify_point(src, dst, Point(10 - 1e-10, 0)), Location.DESTINATION)

    def test_custom_tolerance(self):
        src, dst = Point(0, 0), Point(10, 0)
        loose = GeometryTolerances(collinear_eps=1.0)
        self.assertEqual(classify_point(src, dst, Point(5, 0.05)), Location.LEFT)
        self.assertEqual(classify_point(src, dst, Point(5, 0.05), loose), Location.BETWEEN)


class TestCollinearOffAxis(unittest.TestCase):
    """Points computed along slanted segments with non-integer coordinates."""

    def _along(self, src, dst, t):
        return Point(src.x + t * (dst.x - src.x), src.y + t * (dst.y - src.y))

    def test_interior_point_is_between(self):
        src, dst = Point(0.3, 1.7), Point(7.9, 4.1)
        self.assertEqual(classify_point(src, dst, self._along(src, dst, 0.37)), Location.BETWEEN)
        self.assertEqual(classify_point(src, dst, self._along(src, dst, -0.4)), Location.BEHIND)
        self.assertEqual(classify_point(src, dst, self._along(src, dst, 1.6)), Location.BEYOND)

    def test_large_coordinates(self):
        src = Point(1e6 + 0.123, 2e6 + 0.456)
        dst = Point(1e6 + 345.678, 2e6 - 789.01)
        self.assertEqual(classify_point(src, dst, self._along(src, dst, 0.37)), Location.BETWEEN)
        self.assertEqual(classify_point(src, dst, Point(src.x, src.y + 1.0)), Location.LEFT)

    def test_many_segments(self):
        rng = random.Random(7)
        for _ in range(500):
            src = Point(rng.uniform(0, 10), rng.uniform(0, 10))
            dst = Point(rng.uniform(0, 10), rng.uniform(0, 10))
            if src.distance_to(dst) < 0.1:
                continue
            t = rng.uniform(0.1, 0.9)
            with self.subTest(src=src, dst=dst, t=t):
                self.assertEqual(
                    classify_point(src, dst, self._along(src, dst, t)), Location.BETWEEN)

    def test_tiny_offsets_agree(self):
        """1e-10 off the line and 1e-10 along it both snap to SOURCE."""
        src, dst = Point(0, 0), Point(10, 0)
        self.assertEqual(classify_point(src, dst, Point(0, 1e-10)), Location.SOURCE)
        self.assertEqual(classify_point(src, dst, Point(1e-10, 0)), Location.SOURCE)

    def test_intersection_sees_computed_touch(self):
        src, dst = Point(0.3, 1.7), Point(7.9, 4.1)
        q = self._along(src, dst, 0.37)
        self.assertEqual(orientation(src, dst, q), 0)
        self.assertTrue(segments_intersect(src, dst, q, Point(q.x + 1.0, q.y - 3.0)))


if __name__ == "__main__":
    unittest.main()

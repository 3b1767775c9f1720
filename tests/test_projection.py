"""
Unit tests for the stereographic projection.
"""

import math
import unittest

from starfield.api.core.exceptions import UnsupportedEqualityError
from starfield.api.coordinates.projection import StereographicProjection
from starfield.api.coordinates.types import HorizontalCoordinates, PlaneCoordinates


class TestStereographicProjection(unittest.TestCase):
    """Test suite for StereographicProjection"""

    def test_apply_known_value(self):
        """Test projecting (80°, 20°) around (45°, 15°)"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(45, 15))
        xy = projection.apply(HorizontalCoordinates.of_deg(80, 20))
        self.assertAlmostEqual(xy.x, 0.29419904562328, delta=1e-13)
        self.assertAlmostEqual(xy.y, 0.071581167995944, delta=1e-14)

    def test_center_maps_to_origin(self):
        """Test that the centre projects onto the origin"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(0, 0))
        xy = projection(HorizontalCoordinates.of_deg(0, 0))
        self.assertEqual(xy.x, 0.0)
        self.assertEqual(xy.y, 0.0)

    def test_inverse_of_origin_is_center(self):
        """Test that the origin maps back to the centre"""
        center = HorizontalCoordinates.of_deg(120, 33)
        projection = StereographicProjection(center)
        self.assertIs(projection.inverse_apply(PlaneCoordinates.of(0, 0)), center)

    def test_round_trip(self):
        """Test that inverse_apply undoes apply away from the antipode"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(180, 22))
        for az in (0.0, 45.0, 123.4, 180.0, 270.0, 359.0):
            for alt in (-60.0, -10.0, 0.0, 22.0, 45.0, 80.0):
                with self.subTest(az=az, alt=alt):
                    hor = HorizontalCoordinates.of_deg(az, alt)
                    back = projection.inverse_apply(projection.apply(hor))
                    self.assertAlmostEqual(back.alt, hor.alt, delta=1e-9)
                    self.assertAlmostEqual(math.cos(back.az - hor.az), 1.0, delta=1e-12)

    def test_apply_to_angle(self):
        """Test the projected size of a small angle"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(23, 45))
        self.assertAlmostEqual(projection.apply_to_angle(math.radians(0.5)), 2 * math.tan(math.radians(0.5) / 4))
        self.assertAlmostEqual(projection.apply_to_angle(math.radians(0.5)), math.radians(0.25), delta=1e-7)

    def test_circle_for_parallel(self):
        """Test centre and radius of a projected parallel"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(180, 22))
        horizon = HorizontalCoordinates.of_deg(0, 0)
        sin_phi1 = math.sin(math.radians(22))
        self.assertEqual(projection.circle_center_for_parallel(horizon).x, 0.0)
        self.assertAlmostEqual(
            projection.circle_center_for_parallel(horizon).y, math.cos(math.radians(22)) / sin_phi1, delta=1e-12
        )
        self.assertAlmostEqual(projection.circle_radius_for_parallel(horizon), 1 / sin_phi1, delta=1e-12)

    def test_circle_for_parallel_through_antipode(self):
        """Test that a parallel through the antipode has an infinite circle"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(33, 0))
        horizon = HorizontalCoordinates.of_deg(56.7, 0)
        self.assertEqual(projection.circle_center_for_parallel(horizon).y, math.inf)
        self.assertEqual(projection.circle_radius_for_parallel(horizon), math.inf)

    def test_str(self):
        """Test textual form"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(25.45, 5.2436789))
        self.assertEqual(str(projection), "StereographicProjection(center=(az=25.4500°, alt=5.2437°))")

    def test_equality_is_unsupported(self):
        """Test that projections cannot be compared or hashed"""
        projection = StereographicProjection(HorizontalCoordinates.of_deg(0, 0))
        with self.assertRaises(UnsupportedEqualityError):
            _ = projection == projection
        with self.assertRaises(UnsupportedEqualityError):
            hash(projection)


if __name__ == "__main__":
    unittest.main()

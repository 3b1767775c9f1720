"""
Unit tests for the planet models.

Reference values come from Practical Astronomy with your Calculator or
Spreadsheet (Duffett-Smith & Zwart), 22 November 2003 at 0h UT.
"""

import unittest
from datetime import UTC, datetime

from starfield.api.astronomy.epoch import Epoch
from starfield.api.core.exceptions import InvalidArgumentError
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.ephemeris import (
    ALL_PLANETS,
    EARTH,
    INNER_PLANETS,
    JUPITER,
    MERCURY,
    OBSERVED_PLANETS,
    OUTER_PLANETS,
)
from starfield.api.math import angle


WHEN = datetime(2003, 11, 22, tzinfo=UTC)


class TestPlanetModel(unittest.TestCase):
    """Test suite for PlanetModel"""

    def setUp(self):
        """Set up the conversion for the book date"""
        self.days = Epoch.J2010.days_until(WHEN)
        self.conversion = EclipticToEquatorialConversion(WHEN)

    def test_jupiter(self):
        """Test Jupiter, an outer planet"""
        jupiter = JUPITER.at(self.days, self.conversion)
        self.assertEqual(jupiter.name, "Jupiter")
        self.assertAlmostEqual(jupiter.equatorial_pos.ra_hr, 11 + 11 / 60 + 14 / 3600, delta=1 / 3600)
        self.assertAlmostEqual(jupiter.equatorial_pos.dec, angle.of_dms(6, 21, 25), delta=1e-5)
        self.assertAlmostEqual(jupiter.equatorial_pos.dec_deg, 6.35663550668575, delta=1e-12)

    def test_jupiter_size_and_magnitude(self):
        """Test Jupiter's angular size and magnitude"""
        jupiter = JUPITER(self.days, self.conversion)
        self.assertAlmostEqual(angle.to_deg(jupiter.angular_size * 3600), 35.11141185362771, delta=1e-13)
        self.assertEqual(jupiter.magnitude, -1.9885659217834473)

    def test_mercury(self):
        """Test Mercury, an inner planet"""
        mercury = MERCURY.at(self.days, self.conversion)
        self.assertAlmostEqual(mercury.equatorial_pos.ra_hr, 16 + 49 / 60 + 12 / 3600, delta=1 / 3600)
        self.assertAlmostEqual(mercury.equatorial_pos.dec, -angle.of_dms(24, 30, 9), delta=1e-1)

    def test_earth_is_rejected(self):
        """Test that the Earth has no geocentric position"""
        with self.assertRaises(InvalidArgumentError):
            EARTH.at(self.days, self.conversion)

    def test_all_observed_planets_compute(self):
        """Test every planet other than the Earth over several dates"""
        for days in (-5000.0, -2231.0, 0.0, 3650.0):
            for model in OBSERVED_PLANETS:
                with self.subTest(planet=model.name, days=days):
                    planet = model.at(days, self.conversion)
                    self.assertGreater(planet.angular_size, 0.0)
                    self.assertEqual(planet.name, model.name)

    def test_planet_tables(self):
        """Test the planet groupings"""
        self.assertEqual(len(ALL_PLANETS), 8)
        self.assertEqual([p.name for p in INNER_PLANETS], ["Mercury", "Venus"])
        self.assertEqual([p.name for p in OUTER_PLANETS], ["Mars", "Jupiter", "Saturn", "Uranus", "Neptune"])
        self.assertEqual(
            [p.name for p in OBSERVED_PLANETS],
            ["Mercury", "Venus", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"],
        )
        self.assertNotIn(EARTH, OBSERVED_PLANETS)
        self.assertTrue(all(p.inner for p in INNER_PLANETS))
        self.assertFalse(any(p.inner for p in OUTER_PLANETS))

    def test_true_anomaly_in_full_turn(self):
        """Test that true anomalies are normalized"""
        for days in (-100000.0, -1.0, 0.0, 77777.7):
            value = JUPITER.true_anomaly(days)
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, angle.TAU)


if __name__ == "__main__":
    unittest.main()

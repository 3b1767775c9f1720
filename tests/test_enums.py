"""
Unit tests for the shared enumerations.
"""

import unittest

from starfield.api.astronomy.objects import Moon, Planet, Satellite, Star, Sun
from starfield.api.core.enums import CelestialObjectType


class TestCelestialObjectType(unittest.TestCase):
    """Test suite for CelestialObjectType"""

    def test_values(self):
        """Test the string values"""
        self.assertEqual([t.value for t in CelestialObjectType], ["sun", "moon", "planet", "star", "satellite"])

    def test_str_enum(self):
        """Test that members behave as strings"""
        self.assertEqual(CelestialObjectType.STAR, "star")
        self.assertEqual(f"{CelestialObjectType.PLANET}", "planet")
        self.assertIs(CelestialObjectType("moon"), CelestialObjectType.MOON)

    def test_object_kinds(self):
        """Test that each object class declares its kind"""
        self.assertIs(Sun.kind, CelestialObjectType.SUN)
        self.assertIs(Moon.kind, CelestialObjectType.MOON)
        self.assertIs(Planet.kind, CelestialObjectType.PLANET)
        self.assertIs(Star.kind, CelestialObjectType.STAR)
        self.assertIs(Satellite.kind, CelestialObjectType.SATELLITE)


if __name__ == "__main__":
    unittest.main()

"""
Unit tests for the observed sky snapshot.
"""

import unittest
from datetime import UTC, datetime

import numpy as np

from starfield.api.astronomy.epoch import Epoch
from starfield.api.astronomy.objects import Satellite, Star
from starfield.api.catalogs.satellites import SatelliteCatalogueBuilder
from starfield.api.catalogs.star_catalogue import Asterism, StarCatalogueBuilder
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.coordinates.projection import StereographicProjection
from starfield.api.coordinates.types import EquatorialCoordinates, GeographicCoordinates, HorizontalCoordinates, PlaneCoordinates
from starfield.api.core.exceptions import InvalidArgumentError
from starfield.api.ephemeris import OBSERVED_PLANETS, SUN
from starfield.api.observed_sky import ObservedSky


WHEN = datetime(2020, 2, 17, 20, 15, tzinfo=UTC)
WHERE = GeographicCoordinates.of_deg(6.57, 46.52)
PROJECTION = StereographicProjection(HorizontalCoordinates.of_deg(180.0, 45.0))


def make_star(hipparcos_id, ra, dec, name=None):
    return Star(
        hipparcos_id=hipparcos_id,
        name=name or f"HIP {hipparcos_id}",
        equatorial_pos=EquatorialCoordinates.of(ra, dec),
        magnitude=1.0,
        color_index=0.5,
    )


class TestObservedSky(unittest.TestCase):
    """Test suite for ObservedSky"""

    def setUp(self):
        """Set up a small catalogue and a snapshot"""
        self.stars = [
            make_star(1, 1.0, 0.3),
            make_star(2, 2.0, -0.2),
            make_star(3, 4.0, 0.8),
        ]
        builder = StarCatalogueBuilder()
        for star in self.stars:
            builder.add_star(star)
        self.asterism = Asterism([self.stars[2], self.stars[0]])
        builder.add_asterism(self.asterism)
        self.catalogue = builder.build()

        self.satellite = Satellite(name="Sat", country="CH", purpose="Test", norad_id=1, lon=3.0)
        self.satellites = SatelliteCatalogueBuilder().add_satellite(self.satellite).build()
        self.sky = ObservedSky(WHEN, WHERE, PROJECTION, self.catalogue, self.satellites)

    def test_contents(self):
        """Test the objects held by the snapshot"""
        self.assertEqual(self.sky.sun.name, "Sun")
        self.assertEqual(self.sky.moon.name, "Moon")
        self.assertEqual([p.name for p in self.sky.planets], [m.name for m in OBSERVED_PLANETS])
        self.assertEqual(len(self.sky.planets), 7)
        self.assertEqual(self.sky.stars, tuple(self.stars))
        self.assertEqual(self.sky.satellites, (self.satellite,))
        self.assertIs(self.sky.where, WHERE)
        self.assertIs(self.sky.projection, PROJECTION)

    def test_position_array_shapes(self):
        """Test the shape of the position arrays"""
        self.assertEqual(self.sky.planet_positions.shape, (7, 2))
        self.assertEqual(self.sky.star_positions.shape, (3, 2))
        self.assertEqual(self.sky.satellite_positions.shape, (1, 2))

    def test_position_arrays_read_only(self):
        """Test that position arrays cannot be modified"""
        with self.assertRaises(ValueError):
            self.sky.star_positions[0, 0] = 1.0
        with self.assertRaises(ValueError):
            self.sky.planet_positions[0, 0] = 1.0

    def test_without_satellites(self):
        """Test a snapshot without a satellite catalogue"""
        sky = ObservedSky(WHEN, WHERE, PROJECTION, self.catalogue)
        self.assertEqual(sky.satellites, ())
        self.assertEqual(sky.satellite_positions.shape, (0, 2))

    def test_empty_catalogue(self):
        """Test a snapshot without stars"""
        sky = ObservedSky(WHEN, WHERE, PROJECTION, StarCatalogueBuilder().build())
        self.assertEqual(sky.star_positions.shape, (0, 2))
        self.assertIs(sky.object_closest_to(sky.sun_position, 1e-6), sky.sun)

    def test_naive_datetime_is_utc(self):
        """Test that naive instants are interpreted as UTC"""
        sky = ObservedSky(WHEN.replace(tzinfo=None), WHERE, PROJECTION, self.catalogue)
        self.assertEqual(sky.when, WHEN)
        self.assertEqual(sky.sun_position.x, self.sky.sun_position.x)

    def test_positions_match_arrays(self):
        """Test that position_of agrees with the position arrays"""
        for i, star in enumerate(self.stars):
            position = self.sky.position_of(star)
            self.assertEqual(position.x, self.sky.star_positions[i, 0])
            self.assertEqual(position.y, self.sky.star_positions[i, 1])
        self.assertEqual(self.sky.position_of(self.sky.sun).x, self.sky.sun_position.x)
        self.assertEqual(self.sky.position_of(self.sky.moon).y, self.sky.moon_position.y)
        self.assertEqual(self.sky.position_of(self.satellite).x, self.sky.satellite_positions[0, 0])

    def test_position_of_foreign_object(self):
        """Test that objects outside the snapshot are rejected"""
        with self.assertRaises(InvalidArgumentError):
            self.sky.position_of(make_star(1, 1.0, 0.3))

    def test_asterisms(self):
        """Test that asterisms come from the catalogue"""
        self.assertEqual(self.sky.asterisms, (self.asterism,))
        self.assertEqual(self.sky.asterism_indices(self.asterism), (2, 0))

    def test_closest_at_exact_position(self):
        """Test that an object is found at its own position"""
        for star in self.stars:
            self.assertIs(self.sky.object_closest_to(self.sky.position_of(star), 1e-6), star)
        self.assertIs(self.sky.object_closest_to(self.sky.position_of(self.satellite), 1e-6), self.satellite)
        for planet in self.sky.planets:
            self.assertIs(self.sky.object_closest_to(self.sky.position_of(planet), 1e-9), planet)

    def test_closest_prefers_nearer(self):
        """Test that the nearer of two candidates wins"""
        position = self.sky.position_of(self.stars[0])
        point = PlaneCoordinates.of(position.x + 1e-4, position.y)
        self.assertIs(self.sky.object_closest_to(point, 1e-3), self.stars[0])

    def test_closest_none_out_of_range(self):
        """Test that nothing is returned when every object is too far"""
        position = self.sky.position_of(self.stars[0])
        point = PlaneCoordinates.of(position.x + 1e-3, position.y)
        self.assertIsNone(self.sky.object_closest_to(point, 5e-4))
        self.assertIsNone(self.sky.object_closest_to(PlaneCoordinates.of(1e6, 1e6), 1.0))

    def test_closest_rejects_non_positive_distance(self):
        """Test that the search radius must be positive"""
        with self.assertRaises(InvalidArgumentError):
            self.sky.object_closest_to(PlaneCoordinates.of(0.0, 0.0), 0.0)
        with self.assertRaises(InvalidArgumentError):
            self.sky.object_closest_to(PlaneCoordinates.of(0.0, 0.0), -1.0)

    def test_tie_between_stars(self):
        """Test that the first star in catalogue order wins a tie"""
        first = make_star(10, 1.5, 0.1, "First")
        second = make_star(11, 1.5, 0.1, "Second")
        catalogue = StarCatalogueBuilder().add_star(first).add_star(second).build()
        sky = ObservedSky(WHEN, WHERE, PROJECTION, catalogue)
        self.assertIs(sky.object_closest_to(sky.position_of(second), 1e-6), first)

    def test_tie_sun_before_star(self):
        """Test that the Sun wins a tie against a star"""
        days = Epoch.J2010.days_until(WHEN)
        sun = SUN.at(days, EclipticToEquatorialConversion(WHEN))
        twin = Star(hipparcos_id=99, name="Twin", equatorial_pos=sun.equatorial_pos, magnitude=1.0, color_index=0.0)
        sky = ObservedSky(WHEN, WHERE, PROJECTION, StarCatalogueBuilder().add_star(twin).build())
        self.assertEqual(sky.position_of(twin).x, sky.sun_position.x)
        self.assertIs(sky.object_closest_to(sky.sun_position, 1e-6), sky.sun)

    def test_positions_are_finite(self):
        """Test that catalogue positions are finite numbers"""
        self.assertTrue(np.all(np.isfinite(self.sky.star_positions)))


if __name__ == "__main__":
    unittest.main()

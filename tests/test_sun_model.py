"""
Unit tests for the Sun model.
"""

import unittest
from datetime import UTC, datetime

from starfield.api.astronomy.epoch import Epoch
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.ephemeris import SUN
from starfield.api.math import angle


def sun_at(when):
    return SUN.at(Epoch.J2010.days_until(when), EclipticToEquatorialConversion(when))


class TestSunModel(unittest.TestCase):
    """Test suite for SunModel"""

    def test_book_example_2003(self):
        """Test the position on 27 July 2003"""
        sun = sun_at(datetime(2003, 7, 27, tzinfo=UTC))
        self.assertAlmostEqual(sun.equatorial_pos.ra_hr, 8.392682808297808, delta=1e-14)
        self.assertAlmostEqual(sun.equatorial_pos.dec_deg, 19.35288373097352, delta=1e-12)
        self.assertAlmostEqual(sun.equatorial_pos.ra_hr, 8 + 23 / 60 + 34 / 3600, delta=10 / 3600)
        self.assertAlmostEqual(sun.equatorial_pos.dec, angle.of_dms(19, 21, 10), delta=angle.of_dms(0, 0, 0.5))

    def test_position_1988(self):
        """Test declination and angular size on 27 July 1988"""
        sun = sun_at(datetime(1988, 7, 27, tzinfo=UTC))
        self.assertAlmostEqual(sun.equatorial_pos.dec, 0.3353207024580374, delta=1e-12)
        self.assertAlmostEqual(sun.angular_size, 0.009162353351712227, delta=1e-12)

    def test_right_ascension_2010(self):
        """Test right ascension 58 days after J2010"""
        when = datetime(2010, 2, 27, tzinfo=UTC)
        sun = SUN(27 + 31, EclipticToEquatorialConversion(when))
        self.assertAlmostEqual(sun.equatorial_pos.ra, 5.9325494700300885, delta=1e-12)

    def test_mean_anomaly_is_normalized(self):
        """Test that the stored mean anomaly lies in [0, τ)"""
        for days in (-10000.0, -2349.0, 0.0, 58.0, 12345.6):
            sun = SUN.at(days, EclipticToEquatorialConversion(datetime(2010, 1, 1, tzinfo=UTC)))
            self.assertGreaterEqual(sun.mean_anomaly, 0.0)
            self.assertLess(sun.mean_anomaly, angle.TAU)
            self.assertAlmostEqual(sun.mean_anomaly, angle.normalize_positive(SUN.mean_anomaly(days)), delta=1e-15)

    def test_sun_on_ecliptic(self):
        """Test that the Sun's ecliptic latitude is zero"""
        self.assertEqual(sun_at(datetime(2020, 6, 21, tzinfo=UTC)).ecliptic_pos.lat, 0.0)


if __name__ == "__main__":
    unittest.main()

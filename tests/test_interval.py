"""
Unit tests for interval module.
"""

import unittest

from starfield.api.core.exceptions import InvalidArgumentError, UnsupportedEqualityError
from starfield.api.math.interval import ClosedInterval, RightOpenInterval


class TestClosedInterval(unittest.TestCase):
    """Test suite for ClosedInterval"""

    def test_bounds_and_size(self):
        """Test accessors"""
        interval = ClosedInterval(-2.0, 3.0)
        self.assertEqual(interval.low, -2.0)
        self.assertEqual(interval.high, 3.0)
        self.assertEqual(interval.size, 5.0)

    def test_contains_both_bounds(self):
        """Test that both bounds are included"""
        interval = ClosedInterval(0.0, 1.0)
        self.assertTrue(interval.contains(0.0))
        self.assertTrue(interval.contains(1.0))
        self.assertFalse(interval.contains(1.0000001))
        self.assertFalse(interval.contains(-1e-9))

    def test_clip(self):
        """Test saturation to the bounds"""
        interval = ClosedInterval(-1.0, 1.0)
        self.assertEqual(interval.clip(-5.0), -1.0)
        self.assertEqual(interval.clip(5.0), 1.0)
        self.assertEqual(interval.clip(0.25), 0.25)

    def test_symmetric(self):
        """Test building an interval centred on zero"""
        interval = ClosedInterval.symmetric(4.0)
        self.assertIsInstance(interval, ClosedInterval)
        self.assertEqual(interval.low, -2.0)
        self.assertEqual(interval.high, 2.0)

    def test_invalid_bounds(self):
        """Test that low must be strictly below high"""
        with self.assertRaises(InvalidArgumentError):
            ClosedInterval(1.0, 1.0)
        with self.assertRaises(InvalidArgumentError):
            ClosedInterval(2.0, 1.0)
        with self.assertRaises(InvalidArgumentError):
            ClosedInterval.symmetric(0.0)

    def test_repr(self):
        """Test textual form"""
        self.assertEqual(repr(ClosedInterval(0.0, 1.0)), "[0.0,1.0]")

    def test_equality_is_unsupported(self):
        """Test that intervals cannot be compared or hashed"""
        interval = ClosedInterval(0.0, 1.0)
        with self.assertRaises(UnsupportedEqualityError):
            _ = interval == ClosedInterval(0.0, 1.0)
        with self.assertRaises(UnsupportedEqualityError):
            hash(interval)


class TestRightOpenInterval(unittest.TestCase):
    """Test suite for RightOpenInterval"""

    def test_contains_excludes_high(self):
        """Test that the high bound is excluded"""
        interval = RightOpenInterval(0.0, 360.0)
        self.assertTrue(interval.contains(0.0))
        self.assertFalse(interval.contains(360.0))

    def test_reduce(self):
        """Test floored modulo reduction"""
        interval = RightOpenInterval(-180.0, 180.0)
        self.assertAlmostEqual(interval.reduce(190.0), -170.0)
        self.assertAlmostEqual(interval.reduce(-190.0), 170.0)
        self.assertEqual(interval.reduce(180.0), -180.0)
        self.assertEqual(interval.reduce(0.0), 0.0)

    def test_reduce_stays_below_high(self):
        """Test that tiny negative values never reduce onto the high bound"""
        interval = RightOpenInterval(0.0, 1.0)
        self.assertLess(interval.reduce(-1e-20), 1.0)

    def test_symmetric(self):
        """Test the symmetric constructor"""
        interval = RightOpenInterval.symmetric(2.0)
        self.assertIsInstance(interval, RightOpenInterval)
        self.assertEqual(repr(interval), "[-1.0,1.0[")


if __name__ == "__main__":
    unittest.main()

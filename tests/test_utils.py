"""
Unit tests for the shared argument-checking helpers.
"""

import unittest

from starfield.api.core.exceptions import (
    InvalidArgumentError,
    InvalidCoordinateError,
    MissingValueError,
    UnsupportedEqualityError,
)
from starfield.api.core.utils import NoValueEquality, check_argument, check_in_interval, require_not_none
from starfield.api.math.interval import ClosedInterval, RightOpenInterval


class Value(NoValueEquality):
    pass


class TestNoValueEquality(unittest.TestCase):
    """Test suite for NoValueEquality"""

    def test_equality_raises(self):
        """Test that == and != raise"""
        value = Value()
        with self.assertRaises(UnsupportedEqualityError):
            value == value  # noqa: B015
        with self.assertRaises(UnsupportedEqualityError):
            value != Value()  # noqa: B015

    def test_hash_raises(self):
        """Test that values cannot be hashed"""
        with self.assertRaises(UnsupportedEqualityError):
            hash(Value())
        with self.assertRaises(UnsupportedEqualityError):
            {Value()}

    def test_identity_still_works(self):
        """Test that identity comparison is unaffected"""
        value = Value()
        self.assertIs(value, value)


class TestChecks(unittest.TestCase):
    """Test suite for the argument checks"""

    def test_check_argument(self):
        """Test that a false condition raises with the message"""
        check_argument(True)
        with self.assertRaises(InvalidArgumentError) as context:
            check_argument(False, "size must be positive")
        self.assertEqual(str(context.exception), "size must be positive")

    def test_check_in_interval(self):
        """Test that values inside the interval are returned"""
        self.assertEqual(check_in_interval(ClosedInterval(0.0, 1.0), 1.0), 1.0)
        with self.assertRaises(InvalidArgumentError):
            check_in_interval(RightOpenInterval(0.0, 1.0), 1.0)

    def test_check_in_interval_custom_error(self):
        """Test raising a more specific error"""
        with self.assertRaises(InvalidCoordinateError):
            check_in_interval(ClosedInterval(-90.0, 90.0), 91.0, InvalidCoordinateError)

    def test_require_not_none(self):
        """Test that None is rejected and other values returned"""
        self.assertEqual(require_not_none(0, "value"), 0)
        with self.assertRaises(MissingValueError):
            require_not_none(None, "name")


if __name__ == "__main__":
    unittest.main()

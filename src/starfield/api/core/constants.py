"""
Physical and Astronomical Constants

Constants used throughout the starfield API for calculations.
"""

import math
from typing import Final


__all__ = [
    "ARCSEC_PER_DEGREE",
    "DAYS_PER_JULIAN_CENTURY",
    "HOURS_PER_DAY",
    "SECONDS_PER_DAY",
    "TAU",
    "TROPICAL_YEAR_DAYS",
]


TAU: Final[float] = 2.0 * math.pi
"""A full turn in radians."""

# Conversion factors
ARCSEC_PER_DEGREE: Final[float] = 3600.0
"""Arcseconds per degree."""

HOURS_PER_DAY: Final[float] = 24.0
"""Hours per day, also hours of Right Ascension per full turn."""

SECONDS_PER_DAY: Final[float] = 86400.0
"""Seconds per day."""

# Astronomical constants
DAYS_PER_JULIAN_CENTURY: Final[float] = 36525.0
"""Days in a Julian century."""

TROPICAL_YEAR_DAYS: Final[float] = 365.242191
"""Length of the tropical year in days."""

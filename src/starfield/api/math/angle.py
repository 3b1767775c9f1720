"""
Angle conversions and normalization.

All angles in starfield are radian floats. Functions here convert to and
from degrees, hours, arcseconds and degree/minute/second triples.
"""

from __future__ import annotations

import math
from typing import Final

from starfield.api.core.constants import ARCSEC_PER_DEGREE, HOURS_PER_DAY, TAU
from starfield.api.core.utils import check_argument

from .interval import RightOpenInterval


__all__ = [
    "TAU",
    "normalize_positive",
    "of_arcsec",
    "of_deg",
    "of_dms",
    "of_hr",
    "to_deg",
    "to_hr",
]

_RAD_PER_HOUR: Final[float] = TAU / HOURS_PER_DAY
_HOUR_PER_RAD: Final[float] = HOURS_PER_DAY / TAU

_FULL_TURN = RightOpenInterval(0.0, TAU)
_SEXAGESIMAL = RightOpenInterval(0.0, 60.0)


def normalize_positive(rad: float) -> float:
    """Wrap an angle into [0, τ)."""
    return _FULL_TURN.reduce(rad)


def of_arcsec(sec: float) -> float:
    """Convert arcseconds to radians."""
    return math.radians(sec / ARCSEC_PER_DEGREE)


def of_dms(deg: int, minutes: int, sec: float) -> float:
    """
    Convert a degree/minute/second triple to radians.

    Args:
        deg: Whole degrees (the sign applies to the whole value)
        minutes: Arcminutes in [0, 60)
        sec: Arcseconds in [0, 60)

    Returns:
        Angle in radians

    Raises:
        InvalidArgumentError: If minutes or seconds are outside [0, 60)
    """
    check_argument(_SEXAGESIMAL.contains(minutes), f"Minutes must be in [0, 60) (got {minutes})")
    check_argument(_SEXAGESIMAL.contains(sec), f"Seconds must be in [0, 60) (got {sec})")
    sign = -1.0 if deg < 0 else 1.0
    return sign * math.radians(abs(deg) + minutes / 60.0 + sec / ARCSEC_PER_DEGREE)


def of_deg(deg: float) -> float:
    return math.radians(deg)


def to_deg(rad: float) -> float:
    return math.degrees(rad)


def of_hr(hr: float) -> float:
    """Convert hours of right ascension to radians (1h = τ/24)."""
    return hr * _RAD_PER_HOUR


def to_hr(rad: float) -> float:
    """Convert radians to hours of right ascension."""
    return rad * _HOUR_PER_RAD

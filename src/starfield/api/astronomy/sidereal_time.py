"""
Greenwich and local sidereal time.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Final

from starfield.api.core.constants import HOURS_PER_DAY
from starfield.api.math import angle
from starfield.api.math.interval import RightOpenInterval
from starfield.api.math.polynomial import Polynomial

from .epoch import Epoch, as_utc


if TYPE_CHECKING:
    from starfield.api.coordinates.types import GeographicCoordinates


__all__ = ["greenwich", "local"]

_S0: Final = Polynomial.of(0.000025862, 2400.051336, 6.697374558)
_S1: Final = Polynomial.of(1.002737909, 0.0)
_HOURS = RightOpenInterval(0.0, HOURS_PER_DAY)


def greenwich(when: datetime) -> float:
    """
    Greenwich sidereal time at the given instant.

    Args:
        when: Observation instant (naive datetimes are taken as UTC)

    Returns:
        Sidereal time in radians, in [0, τ)
    """
    when_utc = as_utc(when)
    day_start = when_utc.replace(hour=0, minute=0, second=0, microsecond=0)
    centuries = Epoch.J2000.julian_centuries_until(day_start)
    hours = (when_utc - day_start).total_seconds() / 3600.0

    s0 = _HOURS.reduce(_S0.at(centuries))
    s1 = _HOURS.reduce(_S1.at(hours))
    return angle.normalize_positive(angle.of_hr(_HOURS.reduce(s0 + s1)))


def local(when: datetime, where: GeographicCoordinates) -> float:
    """Local sidereal time in radians, in [0, τ), at longitude where.lon."""
    return angle.normalize_positive(greenwich(when) + where.lon)

"""
Reference epochs used as origins for day and century counts.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from starfield.api.core.constants import DAYS_PER_JULIAN_CENTURY, SECONDS_PER_DAY


__all__ = ["Epoch", "as_utc"]


def as_utc(when: datetime) -> datetime:
    """
    Express a datetime in UTC.

    Naive datetimes are assumed to already be UTC.
    """
    if when.tzinfo is None:
        return when.replace(tzinfo=UTC)
    return when.astimezone(UTC)


class Epoch(Enum):
    """
    Astronomical reference epochs.

    J2000 is 2000-01-01 12:00 UTC; J2010 is 2009-12-31 00:00 UTC (the epoch
    of the orbital elements used by the Sun, Moon and planet models).
    """

    J2000 = datetime(2000, 1, 1, 12, 0, tzinfo=UTC)
    J2010 = datetime(2009, 12, 31, 0, 0, tzinfo=UTC)

    def days_until(self, when: datetime) -> float:
        """
        Signed, fractional number of days from this epoch to when.

        Args:
            when: Target instant (naive datetimes are taken as UTC)

        Returns:
            Days between the epoch and the instant (negative if before)
        """
        return (as_utc(when) - self.value).total_seconds() / SECONDS_PER_DAY

    def julian_centuries_until(self, when: datetime) -> float:
        """Number of Julian centuries (36525 days) from this epoch to when."""
        return self.days_until(when) / DAYS_PER_JULIAN_CENTURY

"""
Closed and right-open intervals of real numbers.

Intervals are used to validate coordinates and to wrap angles into their
canonical range.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from starfield.api.core.utils import NoValueEquality, check_argument


__all__ = [
    "ClosedInterval",
    "Interval",
    "RightOpenInterval",
]


class Interval(NoValueEquality, ABC):
    """An interval with bounds low < high."""

    __slots__ = ("_high", "_low")

    def __init__(self, low: float, high: float) -> None:
        check_argument(low < high, f"Interval bounds must satisfy low < high (got {low}, {high})")
        self._low = low
        self._high = high

    @property
    def low(self) -> float:
        return self._low

    @property
    def high(self) -> float:
        return self._high

    @property
    def size(self) -> float:
        return self._high - self._low

    @abstractmethod
    def contains(self, value: float) -> bool:
        """Whether value lies in the interval."""

    @classmethod
    def symmetric(cls, size: float) -> Interval:
        """Build the interval of the given size centred on 0."""
        check_argument(size > 0, f"Interval size must be positive (got {size})")
        return cls(-size / 2.0, size / 2.0)


class ClosedInterval(Interval):
    """The closed interval [low, high]."""

    __slots__ = ()

    def contains(self, value: float) -> bool:
        return self._low <= value <= self._high

    def clip(self, value: float) -> float:
        """Saturate value to the interval bounds."""
        if value <= self._low:
            return self._low
        if value >= self._high:
            return self._high
        return value

    def __repr__(self) -> str:
        return f"[{self._low},{self._high}]"


class RightOpenInterval(Interval):
    """The right-open interval [low, high)."""

    __slots__ = ()

    def contains(self, value: float) -> bool:
        return self._low <= value < self._high

    def reduce(self, value: float) -> float:
        """
        Wrap value into the interval using a floored modulo.

        Args:
            value: Any real number

        Returns:
            low + ((value - low) mod size), always in [low, high)
        """
        size = self._high - self._low
        offset = value - self._low
        reduced = self._low + (offset - size * math.floor(offset / size))
        # Rounding can land exactly on high for tiny negative offsets
        return self._low if reduced >= self._high else reduced

    def __repr__(self) -> str:
        return f"[{self._low},{self._high}["

"""
Shared helpers for value types and argument checking.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, TypeVar

from .exceptions import InvalidArgumentError, MissingValueError, UnsupportedEqualityError


if TYPE_CHECKING:
    from starfield.api.math.interval import Interval


__all__ = [
    "NoValueEquality",
    "check_argument",
    "check_in_interval",
    "require_not_none",
]

T = TypeVar("T")


class NoValueEquality:
    """
    Mixin that forbids structural equality and hashing.

    Subclasses can only be compared with ``is``; ``==`` and ``hash()`` raise.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> NoReturn:
        raise UnsupportedEqualityError(f"{type(self).__name__} does not support equality")

    def __ne__(self, other: object) -> NoReturn:
        raise UnsupportedEqualityError(f"{type(self).__name__} does not support equality")

    def __hash__(self) -> NoReturn:
        raise UnsupportedEqualityError(f"{type(self).__name__} is not hashable")


def check_argument(condition: bool, message: str = "Invalid argument") -> None:
    """Raise InvalidArgumentError unless condition holds."""
    if not condition:
        raise InvalidArgumentError(message)


def check_in_interval(interval: Interval, value: float, error: type[InvalidArgumentError] = InvalidArgumentError) -> float:
    """
    Return value if the interval contains it.

    Args:
        interval: Interval the value must belong to
        value: Value to check
        error: Exception type to raise (InvalidArgumentError or a subclass)

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If the value is outside the interval
    """
    if not interval.contains(value):
        raise error(f"{value} is not in {interval}")
    return value


def require_not_none(value: T | None, name: str) -> T:
    """Return value, or raise MissingValueError if it is None."""
    if value is None:
        raise MissingValueError(f"{name} must not be None")
    return value

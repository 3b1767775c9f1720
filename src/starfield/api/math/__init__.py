"""Angle, interval and polynomial primitives."""

from starfield.api.math import angle
from starfield.api.math.interval import ClosedInterval, Interval, RightOpenInterval
from starfield.api.math.polynomial import Polynomial


__all__ = [
    "ClosedInterval",
    "Interval",
    "Polynomial",
    "RightOpenInterval",
    "angle",
]

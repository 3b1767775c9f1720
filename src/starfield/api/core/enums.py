"""
Common Enums

Enumerations used throughout the starfield API.
"""

from enum import StrEnum


__all__ = [
    "CelestialObjectType",
]


class CelestialObjectType(StrEnum):
    """Kinds of celestial objects the observed sky can contain."""

    SUN = "sun"
    MOON = "moon"
    PLANET = "planet"
    STAR = "star"
    SATELLITE = "satellite"

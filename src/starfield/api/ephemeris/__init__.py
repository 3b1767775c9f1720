"""
Orbital models for the Sun, the Moon and the planets.

Every model is a callable taking the number of days since J2010 and an
ecliptic to equatorial conversion for the same instant.
"""

from starfield.api.ephemeris.model import CelestialObjectModel
from starfield.api.ephemeris.moon import MOON, MoonModel
from starfield.api.ephemeris.planets import (
    ALL_PLANETS,
    EARTH,
    INNER_PLANETS,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    OBSERVED_PLANETS,
    OUTER_PLANETS,
    SATURN,
    URANUS,
    VENUS,
    PlanetModel,
)
from starfield.api.ephemeris.sun import SUN, SunModel


__all__ = [
    "ALL_PLANETS",
    "EARTH",
    "INNER_PLANETS",
    "JUPITER",
    "MARS",
    "MERCURY",
    "MOON",
    "NEPTUNE",
    "OBSERVED_PLANETS",
    "OUTER_PLANETS",
    "SATURN",
    "SUN",
    "URANUS",
    "VENUS",
    "CelestialObjectModel",
    "MoonModel",
    "PlanetModel",
    "SunModel",
]

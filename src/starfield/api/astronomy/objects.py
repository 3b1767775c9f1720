"""
Celestial objects

The sky contains five kinds of objects: the Sun, the Moon, planets, stars
and geostationary satellites. Each kind is a frozen dataclass compared by
identity; together they form the closed ``CelestialObject`` union, and all
of them satisfy the ``CelestialBody`` protocol.

Angular sizes, magnitudes, colour indices and phases are stored at single
precision, matching the precision of the catalogue data they are derived
from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Protocol, runtime_checkable

import numpy as np

from starfield.api.core.enums import CelestialObjectType
from starfield.api.core.utils import check_argument, check_in_interval, require_not_none
from starfield.api.coordinates.types import EclipticCoordinates, EquatorialCoordinates
from starfield.api.math.interval import ClosedInterval


__all__ = [
    "CelestialBody",
    "CelestialObject",
    "Moon",
    "Planet",
    "Satellite",
    "Star",
    "Sun",
    "single_precision",
]

_COLOR_INDEX = ClosedInterval(-0.5, 5.5)
_PHASE = ClosedInterval(0.0, 1.0)

SUN_MAGNITUDE = -26.7


def single_precision(value: float) -> float:
    """Round a float to the nearest IEEE 754 single-precision value."""
    return float(np.float32(value))


@runtime_checkable
class CelestialBody(Protocol):
    """Attributes shared by every celestial object."""

    kind: ClassVar[CelestialObjectType]

    @property
    def name(self) -> str: ...

    @property
    def equatorial_pos(self) -> EquatorialCoordinates: ...

    @property
    def angular_size(self) -> float: ...

    @property
    def magnitude(self) -> float: ...

    def info(self) -> str: ...


def _validate_common(name: str | None, equatorial_pos: EquatorialCoordinates | None, angular_size: float) -> None:
    require_not_none(name, "name")
    require_not_none(equatorial_pos, "equatorial_pos")
    check_argument(angular_size >= 0, f"Angular size must be non-negative (got {angular_size})")


@dataclass(frozen=True, eq=False)
class Sun:
    """The Sun, with its ecliptic position and mean anomaly."""

    kind: ClassVar[CelestialObjectType] = CelestialObjectType.SUN

    ecliptic_pos: EclipticCoordinates
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    mean_anomaly: float
    name: str = "Sun"
    magnitude: float = field(default=single_precision(SUN_MAGNITUDE))

    def __post_init__(self) -> None:
        require_not_none(self.ecliptic_pos, "ecliptic_pos")
        _validate_common(self.name, self.equatorial_pos, self.angular_size)
        object.__setattr__(self, "angular_size", single_precision(self.angular_size))

    def info(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True, eq=False)
class Moon:
    """The Moon, with the illuminated fraction of its disc in [0, 1]."""

    kind: ClassVar[CelestialObjectType] = CelestialObjectType.MOON

    equatorial_pos: EquatorialCoordinates
    angular_size: float
    magnitude: float
    phase: float
    name: str = "Moon"

    def __post_init__(self) -> None:
        _validate_common(self.name, self.equatorial_pos, self.angular_size)
        check_in_interval(_PHASE, self.phase)
        object.__setattr__(self, "angular_size", single_precision(self.angular_size))
        object.__setattr__(self, "magnitude", single_precision(self.magnitude))
        object.__setattr__(self, "phase", single_precision(self.phase))

    def info(self) -> str:
        """
        Name and illuminated percentage.

        Example:
            "Moon (37.5%)"
        """
        return f"{self.name} ({self.phase * 100.0:.1f}%)"

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True, eq=False)
class Planet:
    """A solar-system planet other than the Earth."""

    kind: ClassVar[CelestialObjectType] = CelestialObjectType.PLANET

    name: str
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    magnitude: float

    def __post_init__(self) -> None:
        _validate_common(self.name, self.equatorial_pos, self.angular_size)
        object.__setattr__(self, "angular_size", single_precision(self.angular_size))
        object.__setattr__(self, "magnitude", single_precision(self.magnitude))

    def info(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True, eq=False)
class Star:
    """
    A catalogue star.

    Attributes:
        hipparcos_id: Hipparcos catalogue number (0 when unknown)
        name: Proper name, or Bayer designation and constellation
        equatorial_pos: Position on the celestial sphere
        magnitude: Apparent magnitude
        color_index: B-V colour index in [-0.5, 5.5]
    """

    kind: ClassVar[CelestialObjectType] = CelestialObjectType.STAR

    hipparcos_id: int
    name: str
    equatorial_pos: EquatorialCoordinates
    magnitude: float
    color_index: float
    angular_size: float = 0.0

    def __post_init__(self) -> None:
        _validate_common(self.name, self.equatorial_pos, self.angular_size)
        check_argument(self.hipparcos_id >= 0, f"Hipparcos id must be non-negative (got {self.hipparcos_id})")
        color_index = single_precision(self.color_index)
        check_in_interval(_COLOR_INDEX, color_index)
        object.__setattr__(self, "color_index", color_index)
        object.__setattr__(self, "magnitude", single_precision(self.magnitude))

    def color_temperature(self) -> int:
        """Approximate colour temperature in kelvins, derived from the colour index."""
        c = self.color_index
        return math.floor(4600.0 * (1.0 / (0.92 * c + 1.7) + 1.0 / (0.92 * c + 0.62)))

    def info(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True, eq=False)
class Satellite:
    """
    A geostationary satellite.

    Its position is fixed above the equator at the longitude of its orbital
    slot; it has no angular size and no magnitude.
    """

    kind: ClassVar[CelestialObjectType] = CelestialObjectType.SATELLITE

    name: str
    country: str
    purpose: str
    norad_id: int
    lon: float
    equatorial_pos: EquatorialCoordinates = field(init=False)
    angular_size: float = field(default=0.0, init=False)
    magnitude: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        require_not_none(self.name, "name")
        require_not_none(self.country, "country")
        require_not_none(self.purpose, "purpose")
        check_argument(self.norad_id >= 0, f"NORAD id must be non-negative (got {self.norad_id})")
        object.__setattr__(self, "equatorial_pos", EquatorialCoordinates.of(self.lon, 0.0))

    def info(self) -> str:
        return f"{self.name} ({self.country}, {self.purpose})"

    def __str__(self) -> str:
        return self.info()


CelestialObject = Sun | Moon | Planet | Star | Satellite

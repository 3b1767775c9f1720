"""
Coordinate systems used by the sky engine.

Spherical coordinates are validated at construction and stored in radians.
None of the types here support ``==`` or ``hash()``: compare them by
identity or through their accessors.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import ClassVar

from starfield.api.core.constants import TAU
from starfield.api.core.exceptions import InvalidCoordinateError
from starfield.api.core.utils import NoValueEquality, check_in_interval
from starfield.api.math import angle
from starfield.api.math.interval import ClosedInterval, Interval, RightOpenInterval


__all__ = [
    "CardinalPoint",
    "EclipticCoordinates",
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "PlaneCoordinates",
    "SphericalCoordinates",
]

_FULL_TURN_RAD = RightOpenInterval(0.0, TAU)
_HALF_TURN_RAD = ClosedInterval(-math.pi / 2.0, math.pi / 2.0)
_SIGNED_HALF_CIRCLE_RAD = RightOpenInterval(-math.pi, math.pi)
_LON_DEG = RightOpenInterval(-180.0, 180.0)
_LAT_DEG = ClosedInterval(-90.0, 90.0)
_AZ_DEG = RightOpenInterval(0.0, 360.0)

_OCTANT_WIDTH_DEG = 45.0


class SphericalCoordinates(NoValueEquality):
    """
    A (longitude, latitude) pair in radians.

    Subclasses name the valid interval of each component; building a
    coordinate outside them raises InvalidCoordinateError.
    """

    __slots__ = ("_lat", "_lon")

    _LON_RANGE: ClassVar[Interval] = _FULL_TURN_RAD
    _LAT_RANGE: ClassVar[Interval] = _HALF_TURN_RAD

    def __init__(self, lon: float, lat: float) -> None:
        check_in_interval(self._LON_RANGE, lon, InvalidCoordinateError)
        check_in_interval(self._LAT_RANGE, lat, InvalidCoordinateError)
        self._lon = lon
        self._lat = lat

    @property
    def lon(self) -> float:
        return self._lon

    @property
    def lon_deg(self) -> float:
        return angle.to_deg(self._lon)

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lat_deg(self) -> float:
        return angle.to_deg(self._lat)


class GeographicCoordinates(SphericalCoordinates):
    """
    Observer's geographic location on Earth.

    Longitude in [-180°, 180°) (positive east), latitude in [-90°, 90°].
    """

    __slots__ = ()

    _LON_RANGE = _SIGNED_HALF_CIRCLE_RAD

    @classmethod
    def of_deg(cls, lon_deg: float, lat_deg: float) -> GeographicCoordinates:
        check_in_interval(_LON_DEG, lon_deg, InvalidCoordinateError)
        check_in_interval(_LAT_DEG, lat_deg, InvalidCoordinateError)
        return cls(angle.of_deg(lon_deg), angle.of_deg(lat_deg))

    @staticmethod
    def is_valid_lon_deg(lon_deg: float) -> bool:
        return _LON_DEG.contains(lon_deg)

    @staticmethod
    def is_valid_lat_deg(lat_deg: float) -> bool:
        return _LAT_DEG.contains(lat_deg)

    def __str__(self) -> str:
        return f"(lon={self.lon_deg:.4f}°, lat={self.lat_deg:.4f}°)"

    __repr__ = __str__


class EquatorialCoordinates(SphericalCoordinates):
    """
    Equatorial coordinate system (RA/Dec).

    Right ascension in [0, 2π), declination in [-π/2, π/2].
    """

    __slots__ = ()

    @classmethod
    def of(cls, ra: float, dec: float) -> EquatorialCoordinates:
        return cls(ra, dec)

    @property
    def ra(self) -> float:
        return self._lon

    @property
    def ra_deg(self) -> float:
        return self.lon_deg

    @property
    def ra_hr(self) -> float:
        return angle.to_hr(self._lon)

    @property
    def dec(self) -> float:
        return self._lat

    @property
    def dec_deg(self) -> float:
        return self.lat_deg

    def __str__(self) -> str:
        return f"(ra={self.ra_hr:.4f}h, dec={self.dec_deg:.4f}°)"

    __repr__ = __str__


class EclipticCoordinates(SphericalCoordinates):
    """Ecliptic longitude in [0, 2π) and latitude in [-π/2, π/2]."""

    __slots__ = ()

    @classmethod
    def of(cls, lon: float, lat: float) -> EclipticCoordinates:
        return cls(lon, lat)

    def __str__(self) -> str:
        return f"(λ={self.lon_deg:.4f}°, β={self.lat_deg:.4f}°)"

    __repr__ = __str__


class HorizontalCoordinates(SphericalCoordinates):
    """
    Horizontal coordinate system (Alt/Az).

    Azimuth in [0, 2π) measured from north towards east, altitude in
    [-π/2, π/2] where 0 is the horizon.
    """

    __slots__ = ()

    @classmethod
    def of(cls, az: float, alt: float) -> HorizontalCoordinates:
        return cls(az, alt)

    @classmethod
    def of_deg(cls, az_deg: float, alt_deg: float) -> HorizontalCoordinates:
        check_in_interval(_AZ_DEG, az_deg, InvalidCoordinateError)
        check_in_interval(_LAT_DEG, alt_deg, InvalidCoordinateError)
        return cls(angle.of_deg(az_deg), angle.of_deg(alt_deg))

    @property
    def az(self) -> float:
        return self._lon

    @property
    def az_deg(self) -> float:
        return self.lon_deg

    @property
    def alt(self) -> float:
        return self._lat

    @property
    def alt_deg(self) -> float:
        return self.lat_deg

    def az_octant_name(self, n: str, e: str, s: str, w: str) -> str:
        """
        Name the octant the azimuth falls in.

        Octants are 45° wide and centred on N, NE, E, SE, S, SW, W and NW.

        Example:
            >>> HorizontalCoordinates.of_deg(335, 0).az_octant_name("N", "E", "S", "O")
            'NO'
        """
        names = (n, n + e, e, s + e, s, s + w, w, n + w)
        octant = int(((self.az_deg + _OCTANT_WIDTH_DEG / 2.0) % 360.0) // _OCTANT_WIDTH_DEG)
        return names[octant]

    def angular_distance_to(self, that: HorizontalCoordinates) -> float:
        """Angular distance in radians, using the spherical law of cosines."""
        cos_distance = math.sin(self.alt) * math.sin(that.alt) + math.cos(self.alt) * math.cos(that.alt) * math.cos(
            self.az - that.az
        )
        return math.acos(max(-1.0, min(1.0, cos_distance)))

    def __str__(self) -> str:
        return f"(az={self.az_deg:.4f}°, alt={self.alt_deg:.4f}°)"

    __repr__ = __str__


class PlaneCoordinates(NoValueEquality):
    """Cartesian coordinates on the projection plane."""

    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float) -> None:
        self._x = x
        self._y = y

    @classmethod
    def of(cls, x: float, y: float) -> PlaneCoordinates:
        return cls(x, y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def distance_to(self, that: PlaneCoordinates) -> float:
        return math.hypot(self._x - that.x, self._y - that.y)

    def is_contained_in_square(self, center: PlaneCoordinates, half_side: float) -> bool:
        """Whether this point lies in the closed axis-aligned square around center."""
        return abs(self._x - center.x) <= half_side and abs(self._y - center.y) <= half_side

    def __str__(self) -> str:
        return f"(x={self._x:.4f}, y={self._y:.4f})"

    __repr__ = __str__


class CardinalPoint(Enum):
    """
    The eight compass points, placed just under the horizon.

    Renderers use them to label the horizon.
    """

    NORTH = 0.0
    NORTH_EAST = 45.0
    EAST = 90.0
    SOUTH_EAST = 135.0
    SOUTH = 180.0
    SOUTH_WEST = 225.0
    WEST = 270.0
    NORTH_WEST = 315.0

    @property
    def position(self) -> HorizontalCoordinates:
        return HorizontalCoordinates.of_deg(self.value, -0.5)

    @property
    def label(self) -> str:
        return self.position.az_octant_name("N", "E", "S", "W")

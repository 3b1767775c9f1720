"""
Conversions between coordinate systems.

Each conversion is an immutable callable built once for an instant (and a
location where relevant); the trigonometric values that only depend on the
construction parameters are cached. The chain used by the sky snapshot is
ecliptic -> equatorial -> horizontal -> plane.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime

from starfield.api.astronomy import sidereal_time
from starfield.api.astronomy.epoch import Epoch
from starfield.api.core.utils import NoValueEquality
from starfield.api.math import angle
from starfield.api.math.interval import ClosedInterval
from starfield.api.math.polynomial import Polynomial

from .projection import StereographicProjection
from .types import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    PlaneCoordinates,
)


logger = logging.getLogger(__name__)

__all__ = [
    "EclipticToEquatorialConversion",
    "EquatorialToHorizontalConversion",
    "EquatorialToPlaneConversion",
]

_SINE = ClosedInterval(-1.0, 1.0)

_OBLIQUITY = Polynomial.of(
    angle.of_arcsec(0.00181),
    -angle.of_arcsec(0.0006),
    -angle.of_arcsec(46.815),
    angle.of_dms(23, 26, 21.45),
)


class EclipticToEquatorialConversion(NoValueEquality):
    """
    Ecliptic to equatorial conversion at a given instant.

    The obliquity of the ecliptic is derived from the Julian centuries
    elapsed since J2000.
    """

    __slots__ = ("_cos_obliquity", "_obliquity", "_sin_obliquity")

    def __init__(self, when: datetime) -> None:
        self._obliquity = _OBLIQUITY.at(Epoch.J2000.julian_centuries_until(when))
        self._cos_obliquity = math.cos(self._obliquity)
        self._sin_obliquity = math.sin(self._obliquity)

    @property
    def obliquity(self) -> float:
        """Obliquity of the ecliptic in radians."""
        return self._obliquity

    def __call__(self, ecl: EclipticCoordinates) -> EquatorialCoordinates:
        return self.apply(ecl)

    def apply(self, ecl: EclipticCoordinates) -> EquatorialCoordinates:
        lam, beta = ecl.lon, ecl.lat
        sin_lam = math.sin(lam)
        ra = math.atan2(sin_lam * self._cos_obliquity - math.tan(beta) * self._sin_obliquity, math.cos(lam))
        dec = math.asin(
            _SINE.clip(math.sin(beta) * self._cos_obliquity + math.cos(beta) * self._sin_obliquity * sin_lam)
        )
        return EquatorialCoordinates.of(angle.normalize_positive(ra), dec)


class EquatorialToHorizontalConversion(NoValueEquality):
    """Equatorial to horizontal conversion for an observer at an instant."""

    __slots__ = ("_cos_phi", "_local_sidereal_time", "_sin_phi")

    def __init__(self, when: datetime, where: GeographicCoordinates) -> None:
        self._local_sidereal_time = sidereal_time.local(when, where)
        self._cos_phi = math.cos(where.lat)
        self._sin_phi = math.sin(where.lat)

    @property
    def local_sidereal_time(self) -> float:
        return self._local_sidereal_time

    def __call__(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        return self.apply(equ)

    def apply(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        hour_angle = self._local_sidereal_time - equ.ra
        sin_dec = math.sin(equ.dec)
        cos_dec = math.cos(equ.dec)

        alt = math.asin(_SINE.clip(sin_dec * self._sin_phi + cos_dec * self._cos_phi * math.cos(hour_angle)))
        az = math.atan2(-cos_dec * self._cos_phi * math.sin(hour_angle), sin_dec - self._sin_phi * math.sin(alt))
        return HorizontalCoordinates.of(angle.normalize_positive(az), alt)


class EquatorialToPlaneConversion(NoValueEquality):
    """Equatorial coordinates to projection plane, through the horizontal system."""

    __slots__ = ("_equatorial_to_horizontal", "_projection")

    def __init__(self, when: datetime, where: GeographicCoordinates, projection: StereographicProjection) -> None:
        self._equatorial_to_horizontal = EquatorialToHorizontalConversion(when, where)
        self._projection = projection
        logger.debug(f"Equatorial to plane conversion built for {where} with {projection}")

    def __call__(self, equ: EquatorialCoordinates) -> PlaneCoordinates:
        return self.apply(equ)

    def apply(self, equ: EquatorialCoordinates) -> PlaneCoordinates:
        return self._projection.apply(self._equatorial_to_horizontal.apply(equ))

    def to_horizontal(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        """The intermediate horizontal position of equ."""
        return self._equatorial_to_horizontal.apply(equ)

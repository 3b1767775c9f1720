"""
Observed Sky

A snapshot of the sky for one instant, one observer location and one
projection: the Sun, the Moon, the planets, the catalogue stars and
(optionally) geostationary satellites, with their positions on the
projection plane. Everything is computed once, at construction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

import deal
import numpy as np
import numpy.typing as npt

from starfield.api.astronomy.epoch import Epoch, as_utc
from starfield.api.astronomy.objects import CelestialObject, Moon, Planet, Satellite, Star, Sun
from starfield.api.catalogs.satellites import SatelliteCatalogue
from starfield.api.catalogs.star_catalogue import Asterism, StarCatalogue
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion, EquatorialToPlaneConversion
from starfield.api.coordinates.projection import StereographicProjection
from starfield.api.coordinates.types import EquatorialCoordinates, GeographicCoordinates, PlaneCoordinates
from starfield.api.core.exceptions import InvalidArgumentError
from starfield.api.ephemeris import MOON, OBSERVED_PLANETS, SUN


logger = logging.getLogger(__name__)

__all__ = ["ObservedSky"]

Positions = npt.NDArray[np.float64]


def _frozen(array: Positions) -> Positions:
    array.flags.writeable = False
    return array


class ObservedSky:
    """
    Immutable sky snapshot.

    Positions of several objects are returned as read-only ``(n, 2)`` arrays
    of plane coordinates, row ``i`` belonging to object ``i`` of the matching
    tuple (planets in model order, stars and satellites in catalogue order).

    Example:
        >>> sky = ObservedSky(datetime.now(UTC), where, projection, catalogue)
        >>> sky.object_closest_to(PlaneCoordinates.of(0.1, 0.2), 0.05)
    """

    def __init__(
        self,
        when: datetime,
        where: GeographicCoordinates,
        projection: StereographicProjection,
        catalogue: StarCatalogue,
        satellites: SatelliteCatalogue | None = None,
    ) -> None:
        """
        Compute the snapshot.

        Args:
            when: Observation instant (naive datetimes are taken as UTC)
            where: Observer location
            projection: Projection onto the plane
            catalogue: Stars and asterisms to place
            satellites: Optional geostationary satellites to place
        """
        self._when = as_utc(when)
        self._where = where
        self._projection = projection
        self._catalogue = catalogue

        days = Epoch.J2010.days_until(self._when)
        ecliptic_to_equatorial = EclipticToEquatorialConversion(self._when)
        self._to_plane = EquatorialToPlaneConversion(self._when, where, projection)

        self._sun: Sun = SUN.at(days, ecliptic_to_equatorial)
        self._moon: Moon = MOON.at(days, ecliptic_to_equatorial)
        self._planets: tuple[Planet, ...] = tuple(model.at(days, ecliptic_to_equatorial) for model in OBSERVED_PLANETS)
        self._stars: tuple[Star, ...] = catalogue.stars
        self._satellites: tuple[Satellite, ...] = satellites.satellites if satellites is not None else ()

        self._sun_position = self._to_plane.apply(self._sun.equatorial_pos)
        self._moon_position = self._to_plane.apply(self._moon.equatorial_pos)
        self._planet_positions = self._project(p.equatorial_pos for p in self._planets)
        self._star_positions = self._project(s.equatorial_pos for s in self._stars)
        self._satellite_positions = self._project(s.equatorial_pos for s in self._satellites)

        # Arena in search order: Sun, Moon, planets, stars, satellites
        self._objects: tuple[CelestialObject, ...] = (
            self._sun,
            self._moon,
            *self._planets,
            *self._stars,
            *self._satellites,
        )
        self._positions: Positions = _frozen(
            np.vstack(
                [
                    np.array([[self._sun_position.x, self._sun_position.y]]),
                    np.array([[self._moon_position.x, self._moon_position.y]]),
                    self._planet_positions,
                    self._star_positions,
                    self._satellite_positions,
                ]
            )
        )
        self._index = {id(obj): i for i, obj in enumerate(self._objects)}

        logger.debug(
            f"Observed sky at {self._when.isoformat()} for {where}: "
            f"{len(self._planets)} planets, {len(self._stars)} stars, {len(self._satellites)} satellites"
        )

    def _project(self, positions: Iterable[EquatorialCoordinates]) -> Positions:
        points = [self._to_plane.apply(equ) for equ in positions]
        array = np.array([[p.x, p.y] for p in points], dtype=np.float64).reshape(len(points), 2)
        return _frozen(array)

    @property
    def when(self) -> datetime:
        return self._when

    @property
    def where(self) -> GeographicCoordinates:
        return self._where

    @property
    def projection(self) -> StereographicProjection:
        return self._projection

    @property
    def sun(self) -> Sun:
        return self._sun

    @property
    def sun_position(self) -> PlaneCoordinates:
        return self._sun_position

    @property
    def moon(self) -> Moon:
        return self._moon

    @property
    def moon_position(self) -> PlaneCoordinates:
        return self._moon_position

    @property
    def planets(self) -> tuple[Planet, ...]:
        return self._planets

    @property
    def planet_positions(self) -> Positions:
        return self._planet_positions

    @property
    def stars(self) -> tuple[Star, ...]:
        return self._stars

    @property
    def star_positions(self) -> Positions:
        return self._star_positions

    @property
    def satellites(self) -> tuple[Satellite, ...]:
        return self._satellites

    @property
    def satellite_positions(self) -> Positions:
        return self._satellite_positions

    @property
    def asterisms(self) -> tuple[Asterism, ...]:
        return self._catalogue.asterisms

    def asterism_indices(self, asterism: Asterism) -> tuple[int, ...]:
        """Indices in ``stars`` of the stars of an asterism of the catalogue."""
        return self._catalogue.asterism_indices(asterism)

    def position_of(self, obj: CelestialObject) -> PlaneCoordinates:
        """
        Plane position of an object of this snapshot.

        Raises:
            InvalidArgumentError: If the object is not part of the snapshot
        """
        index = self._index.get(id(obj))
        if index is None or self._objects[index] is not obj:
            raise InvalidArgumentError(f"{obj} is not part of this sky")
        x, y = self._positions[index]
        return PlaneCoordinates.of(float(x), float(y))

    @deal.pre(
        lambda self, point, max_distance: max_distance > 0,
        message="max_distance must be positive",
        exception=InvalidArgumentError,
    )
    def object_closest_to(self, point: PlaneCoordinates, max_distance: float) -> CelestialObject | None:
        """
        Object nearest to a plane point, if closer than max_distance.

        Candidates are first restricted to the square of half-side
        max_distance around the point. On ties, the first object in the
        order Sun, Moon, planets, stars, satellites wins.

        Args:
            point: Point on the projection plane
            max_distance: Strictly positive search radius

        Returns:
            The closest object, or None if none lies strictly within max_distance

        Raises:
            InvalidArgumentError: If max_distance is not positive
        """
        offsets = self._positions - np.array([point.x, point.y])
        (candidates,) = np.nonzero(np.all(np.abs(offsets) <= max_distance, axis=1))
        if candidates.size == 0:
            return None

        distances = np.hypot(offsets[candidates, 0], offsets[candidates, 1])
        best = int(np.argmin(distances))
        if distances[best] >= max_distance:
            return None
        return self._objects[int(candidates[best])]

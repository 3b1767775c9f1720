"""
Planet models

Heliocentric positions of the planets from their orbital elements at
J2010, combined with the Earth's position to give geocentric positions.
Planets inside the Earth's orbit (Mercury, Venus) and outside it use
different formulas for the geocentric ecliptic longitude.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Final

import deal

from starfield.api.astronomy.objects import Planet
from starfield.api.core.constants import TAU, TROPICAL_YEAR_DAYS
from starfield.api.core.exceptions import InvalidArgumentError
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.coordinates.types import EclipticCoordinates
from starfield.api.math import angle


logger = logging.getLogger(__name__)

__all__ = [
    "ALL_PLANETS",
    "EARTH",
    "INNER_PLANETS",
    "JUPITER",
    "MARS",
    "MERCURY",
    "NEPTUNE",
    "OBSERVED_PLANETS",
    "OUTER_PLANETS",
    "SATURN",
    "URANUS",
    "VENUS",
    "PlanetModel",
]

_EARTH_DAILY_MOTION: Final[float] = TAU / TROPICAL_YEAR_DAYS


@dataclass(frozen=True, eq=False)
class PlanetModel:
    """
    Orbital elements of a planet at J2010.

    Angles are given in degrees (angular size in arcseconds) and converted
    to radians on construction.

    Attributes:
        name: Display name
        tropical_year: Orbital period in tropical years
        lon_j2010: Longitude at J2010
        lon_perihelion: Longitude of the perihelion
        eccentricity: Orbital eccentricity
        semi_major_axis: Semi-major axis in AU
        inclination: Inclination of the orbit on the ecliptic
        lon_ascending_node: Longitude of the ascending node
        angular_size_1au: Angular size at a distance of 1 AU
        magnitude_1au: Magnitude at a distance of 1 AU
        inner: Whether the orbit lies inside the Earth's
    """

    name: str
    tropical_year: float
    lon_j2010_deg: float
    lon_perihelion_deg: float
    eccentricity: float
    semi_major_axis: float
    inclination_deg: float
    lon_ascending_node_deg: float
    angular_size_1au_arcsec: float
    magnitude_1au: float
    inner: bool = False
    lon_j2010: float = field(init=False, repr=False)
    lon_perihelion: float = field(init=False, repr=False)
    inclination: float = field(init=False, repr=False)
    lon_ascending_node: float = field(init=False, repr=False)
    angular_size_1au: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lon_j2010", angle.of_deg(self.lon_j2010_deg))
        object.__setattr__(self, "lon_perihelion", angle.of_deg(self.lon_perihelion_deg))
        object.__setattr__(self, "inclination", angle.of_deg(self.inclination_deg))
        object.__setattr__(self, "lon_ascending_node", angle.of_deg(self.lon_ascending_node_deg))
        object.__setattr__(self, "angular_size_1au", angle.of_arcsec(self.angular_size_1au_arcsec))

    def true_anomaly(self, days_since_j2010: float) -> float:
        """True anomaly in [0, τ), with a first-order eccentricity correction."""
        mean_anomaly = (
            angle.normalize_positive(_EARTH_DAILY_MOTION * (days_since_j2010 / self.tropical_year))
            + self.lon_j2010
            - self.lon_perihelion
        )
        return angle.normalize_positive(mean_anomaly + 2.0 * self.eccentricity * math.sin(mean_anomaly))

    def orbital_radius(self, true_anomaly: float) -> float:
        """Distance to the Sun in AU."""
        return (self.semi_major_axis * (1.0 - self.eccentricity**2)) / (1.0 + self.eccentricity * math.cos(true_anomaly))

    def heliocentric_longitude(self, true_anomaly: float) -> float:
        return true_anomaly + self.lon_perihelion

    @deal.pre(
        lambda self, days_since_j2010, ecliptic_to_equatorial: self is not EARTH,
        message="The Earth has no geocentric position",
        exception=InvalidArgumentError,
    )
    def at(self, days_since_j2010: float, ecliptic_to_equatorial: EclipticToEquatorialConversion) -> Planet:
        """
        Compute the planet as seen from the Earth.

        Args:
            days_since_j2010: Days since J2010 (negative before)
            ecliptic_to_equatorial: Conversion for the same instant

        Returns:
            Planet with its equatorial position, angular size and magnitude

        Raises:
            InvalidArgumentError: If called on the Earth
        """
        # Position in the planet's own orbit
        true_anomaly = self.true_anomaly(days_since_j2010)
        radius = self.orbital_radius(true_anomaly)
        helio_lon = self.heliocentric_longitude(true_anomaly)

        # Projection on the ecliptic
        from_node = helio_lon - self.lon_ascending_node
        helio_lat = math.asin(math.sin(from_node) * math.sin(self.inclination))
        ecliptic_radius = radius * math.cos(helio_lat)
        helio_ecliptic_lon = angle.normalize_positive(
            math.atan2(math.sin(from_node) * math.cos(self.inclination), math.cos(from_node)) + self.lon_ascending_node
        )

        # Position of the Earth
        earth_true_anomaly = EARTH.true_anomaly(days_since_j2010)
        earth_radius = EARTH.orbital_radius(earth_true_anomaly)
        earth_lon = angle.normalize_positive(EARTH.heliocentric_longitude(earth_true_anomaly))

        geocentric = self._geocentric_position(earth_radius, earth_lon, ecliptic_radius, helio_ecliptic_lon, helio_lat)

        distance = math.sqrt(
            earth_radius**2
            + radius**2
            - 2.0 * earth_radius * radius * math.cos(helio_lon - earth_lon) * math.cos(helio_lat)
        )
        phase = (1.0 + math.cos(geocentric.lon - helio_lon)) / 2.0
        magnitude = self.magnitude_1au + 5.0 * math.log10((radius * distance) / math.sqrt(phase))

        return Planet(
            name=self.name,
            equatorial_pos=ecliptic_to_equatorial.apply(geocentric),
            angular_size=self.angular_size_1au / distance,
            magnitude=magnitude,
        )

    def __call__(self, days_since_j2010: float, ecliptic_to_equatorial: EclipticToEquatorialConversion) -> Planet:
        return self.at(days_since_j2010, ecliptic_to_equatorial)

    def _geocentric_position(
        self, earth_radius: float, earth_lon: float, ecliptic_radius: float, helio_lon: float, helio_lat: float
    ) -> EclipticCoordinates:
        if self.inner:
            lon = angle.normalize_positive(
                math.pi
                + earth_lon
                + math.atan2(
                    ecliptic_radius * math.sin(earth_lon - helio_lon),
                    earth_radius - ecliptic_radius * math.cos(earth_lon - helio_lon),
                )
            )
            lat_denominator = earth_radius * math.sin(helio_lon - earth_lon)
        else:
            lat_denominator = earth_radius * math.sin(helio_lon - earth_lon)
            lon = angle.normalize_positive(
                helio_lon
                + math.atan2(lat_denominator, ecliptic_radius - earth_radius * math.cos(helio_lon - earth_lon))
            )
        # atan keeps the latitude in [-π/2, π/2]
        lat = math.atan(ecliptic_radius * math.tan(helio_lat) * math.sin(lon - helio_lon) / lat_denominator)
        return EclipticCoordinates.of(lon, lat)

    def __str__(self) -> str:
        return self.name


MERCURY: Final = PlanetModel("Mercury", 0.24085, 75.5671, 77.612, 0.205627, 0.387098, 7.0051, 48.449, 6.74, -0.42, inner=True)
VENUS: Final = PlanetModel("Venus", 0.615207, 272.30044, 131.54, 0.006812, 0.723329, 3.3947, 76.769, 16.92, -4.40, inner=True)
EARTH: Final = PlanetModel("Earth", 0.999996, 99.556772, 103.2055, 0.016671, 0.999985, 0.0, 0.0, 0.0, 0.0)
MARS: Final = PlanetModel("Mars", 1.880765, 109.09646, 336.217, 0.093348, 1.523689, 1.8497, 49.632, 9.36, -1.52)
JUPITER: Final = PlanetModel("Jupiter", 11.857911, 337.917132, 14.6633, 0.048907, 5.20278, 1.3035, 100.595, 196.74, -9.40)
SATURN: Final = PlanetModel("Saturn", 29.310579, 172.398316, 89.567, 0.053853, 9.51134, 2.4873, 113.752, 165.60, -8.88)
URANUS: Final = PlanetModel("Uranus", 84.039492, 271.063148, 172.884833, 0.046321, 19.21814, 0.773059, 73.926961, 65.80, -7.19)
NEPTUNE: Final = PlanetModel("Neptune", 165.84539, 326.895127, 23.07, 0.010483, 30.1985, 1.7673, 131.879, 62.20, -6.87)

ALL_PLANETS: Final[tuple[PlanetModel, ...]] = (MERCURY, VENUS, EARTH, MARS, JUPITER, SATURN, URANUS, NEPTUNE)
INNER_PLANETS: Final[tuple[PlanetModel, ...]] = (MERCURY, VENUS)
OUTER_PLANETS: Final[tuple[PlanetModel, ...]] = (MARS, JUPITER, SATURN, URANUS, NEPTUNE)
OBSERVED_PLANETS: Final[tuple[PlanetModel, ...]] = INNER_PLANETS + OUTER_PLANETS

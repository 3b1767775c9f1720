"""
Moon model

Position, phase and angular size of the Moon. The mean orbit is corrected
for evection, the annual equation, the equation of the centre and the
variation, then the ascending node is used to place the Moon relative to
the ecliptic.
"""

from __future__ import annotations

import math
from typing import Final

from starfield.api.astronomy.objects import Moon
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.coordinates.types import EclipticCoordinates
from starfield.api.math import angle

from .sun import SUN


__all__ = ["MOON", "MoonModel"]

MEAN_LONGITUDE_J2010: Final[float] = angle.of_deg(91.929336)
PERIGEE_LONGITUDE_J2010: Final[float] = angle.of_deg(130.143076)
NODE_LONGITUDE_J2010: Final[float] = angle.of_deg(291.682547)
INCLINATION: Final[float] = angle.of_deg(5.145396)
ECCENTRICITY: Final[float] = 0.0549
# Angular size at a distance equal to the semi-major axis
THETA_0: Final[float] = angle.of_deg(0.5181)

# Daily motions
LONGITUDE_RATE: Final[float] = angle.of_deg(13.1763966)
PERIGEE_RATE: Final[float] = angle.of_deg(0.1114041)
NODE_RATE: Final[float] = angle.of_deg(0.0529539)

# Perturbation amplitudes
EVECTION: Final[float] = angle.of_deg(1.2739)
ANNUAL_EQUATION: Final[float] = angle.of_deg(0.1858)
CORRECTION_3: Final[float] = angle.of_deg(0.37)
CENTER_EQUATION: Final[float] = angle.of_deg(6.2886)
CORRECTION_4: Final[float] = angle.of_deg(0.214)
VARIATION: Final[float] = angle.of_deg(0.6583)
NODE_CORRECTION: Final[float] = angle.of_deg(0.16)


class MoonModel:
    """Stateless Moon model; depends on the Sun model for the same epoch."""

    __slots__ = ()

    def at(self, days_since_j2010: float, ecliptic_to_equatorial: EclipticToEquatorialConversion) -> Moon:
        sun = SUN.at(days_since_j2010, ecliptic_to_equatorial)
        sun_mean_anomaly = sun.mean_anomaly
        sun_lon = sun.ecliptic_pos.lon
        sin_sun_anomaly = math.sin(sun_mean_anomaly)

        # Orbital longitude
        mean_lon = angle.normalize_positive(LONGITUDE_RATE * days_since_j2010 + MEAN_LONGITUDE_J2010)
        mean_anomaly = angle.normalize_positive(mean_lon - PERIGEE_RATE * days_since_j2010 - PERIGEE_LONGITUDE_J2010)
        evection = EVECTION * math.sin(2.0 * (mean_lon - sun_lon) - mean_anomaly)
        annual_equation = ANNUAL_EQUATION * sin_sun_anomaly
        a3 = CORRECTION_3 * sin_sun_anomaly
        corrected_anomaly = mean_anomaly + evection - annual_equation - a3
        center_equation = CENTER_EQUATION * math.sin(corrected_anomaly)
        a4 = CORRECTION_4 * math.sin(2.0 * corrected_anomaly)
        corrected_lon = mean_lon + evection + center_equation - annual_equation + a4
        variation = VARIATION * math.sin(2.0 * (corrected_lon - sun_lon))
        true_lon = corrected_lon + variation

        # Ecliptic position
        node_lon = angle.normalize_positive(NODE_LONGITUDE_J2010 - NODE_RATE * days_since_j2010)
        corrected_node_lon = node_lon - NODE_CORRECTION * sin_sun_anomaly
        sin_from_node = math.sin(true_lon - corrected_node_lon)
        lon = angle.normalize_positive(
            math.atan2(sin_from_node * math.cos(INCLINATION), math.cos(true_lon - corrected_node_lon))
            + corrected_node_lon
        )
        lat = math.asin(sin_from_node * math.sin(INCLINATION))

        phase = (1.0 - math.cos(true_lon - sun_lon)) / 2.0
        distance = (1.0 - ECCENTRICITY * ECCENTRICITY) / (1.0 + ECCENTRICITY * math.cos(corrected_anomaly + center_equation))

        return Moon(
            equatorial_pos=ecliptic_to_equatorial.apply(EclipticCoordinates.of(lon, lat)),
            angular_size=THETA_0 / distance,
            magnitude=0.0,
            phase=phase,
        )

    __call__ = at


MOON: Final = MoonModel()

"""
Sun model

Position and angular size of the Sun from a circular mean orbit with a
first-order eccentricity correction.
"""

from __future__ import annotations

import math
from typing import Final

from starfield.api.astronomy.objects import Sun
from starfield.api.core.constants import TAU, TROPICAL_YEAR_DAYS
from starfield.api.coordinates.conversions import EclipticToEquatorialConversion
from starfield.api.coordinates.types import EclipticCoordinates
from starfield.api.math import angle


__all__ = ["SUN", "SunModel"]

# Ecliptic longitude of the Sun at J2010
EPSILON_G: Final[float] = angle.of_deg(279.557208)
# Ecliptic longitude of the Sun at perigee
OMEGA_G: Final[float] = angle.of_deg(283.112438)
ECCENTRICITY: Final[float] = 0.016705
# Angular size at a distance of 1 AU
THETA_0: Final[float] = angle.of_deg(0.533128)


class SunModel:
    """
    Stateless Sun model.

    The mean anomaly stored on the returned Sun is normalized to [0, τ).
    """

    __slots__ = ()

    def mean_anomaly(self, days_since_j2010: float) -> float:
        """Unnormalized mean anomaly of the Sun in radians."""
        return (TAU / TROPICAL_YEAR_DAYS) * days_since_j2010 + EPSILON_G - OMEGA_G

    def at(self, days_since_j2010: float, ecliptic_to_equatorial: EclipticToEquatorialConversion) -> Sun:
        mean_anomaly = self.mean_anomaly(days_since_j2010)
        true_anomaly = mean_anomaly + 2.0 * ECCENTRICITY * math.sin(mean_anomaly)
        longitude = angle.normalize_positive(true_anomaly + OMEGA_G)
        angular_size = THETA_0 * ((1.0 + ECCENTRICITY * math.cos(true_anomaly)) / (1.0 - ECCENTRICITY * ECCENTRICITY))

        ecliptic_pos = EclipticCoordinates.of(longitude, 0.0)
        return Sun(
            ecliptic_pos=ecliptic_pos,
            equatorial_pos=ecliptic_to_equatorial.apply(ecliptic_pos),
            angular_size=angular_size,
            mean_anomaly=angle.normalize_positive(mean_anomaly),
        )

    __call__ = at


SUN: Final = SunModel()

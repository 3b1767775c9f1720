"""
Stereographic projection of the horizontal sphere onto a plane.
"""

from __future__ import annotations

import math

from starfield.api.core.utils import NoValueEquality
from starfield.api.math import angle
from starfield.api.math.interval import ClosedInterval

from .types import HorizontalCoordinates, PlaneCoordinates


__all__ = ["StereographicProjection"]

_SINE = ClosedInterval(-1.0, 1.0)


def _safe_divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.copysign(math.inf, numerator) if numerator != 0 else math.inf
    return numerator / denominator


class StereographicProjection(NoValueEquality):
    """
    Stereographic projection centred on a fixed horizontal point.

    The centre maps to the origin of the plane; the projection preserves
    angles and maps circles on the sphere to circles (or lines) on the plane.
    """

    __slots__ = ("_center", "_cos_phi1", "_sin_phi1")

    def __init__(self, center: HorizontalCoordinates) -> None:
        self._center = center
        self._cos_phi1 = math.cos(center.alt)
        self._sin_phi1 = math.sin(center.alt)

    @property
    def center(self) -> HorizontalCoordinates:
        return self._center

    def __call__(self, azalt: HorizontalCoordinates) -> PlaneCoordinates:
        return self.apply(azalt)

    def apply(self, azalt: HorizontalCoordinates) -> PlaneCoordinates:
        """
        Project horizontal coordinates onto the plane.

        Args:
            azalt: Point on the sphere

        Returns:
            Plane coordinates; the point antipodal to the centre has no image
            and maps to infinite coordinates
        """
        delta_lambda = azalt.az - self._center.az
        sin_phi = math.sin(azalt.alt)
        cos_phi = math.cos(azalt.alt)
        cos_delta = math.cos(delta_lambda)

        d = _safe_divide(1.0, 1.0 + sin_phi * self._sin_phi1 + cos_phi * self._cos_phi1 * cos_delta)
        x = d * cos_phi * math.sin(delta_lambda)
        y = d * (sin_phi * self._cos_phi1 - cos_phi * self._sin_phi1 * cos_delta)
        return PlaneCoordinates(x, y)

    def inverse_apply(self, xy: PlaneCoordinates) -> HorizontalCoordinates:
        """Recover the horizontal coordinates whose projection is xy."""
        x, y = xy.x, xy.y
        rho_squared = x * x + y * y
        if rho_squared == 0:
            return self._center
        rho = math.sqrt(rho_squared)
        sin_c = 2.0 * rho / (rho_squared + 1.0)
        cos_c = (1.0 - rho_squared) / (rho_squared + 1.0)

        az = angle.normalize_positive(
            math.atan2(x * sin_c, rho * self._cos_phi1 * cos_c - y * self._sin_phi1 * sin_c) + self._center.az
        )
        alt = math.asin(_SINE.clip(cos_c * self._sin_phi1 + y * sin_c * self._cos_phi1 / rho))
        return HorizontalCoordinates.of(az, alt)

    def apply_to_angle(self, rad: float) -> float:
        """Projected diameter of an object of angular size rad near the centre."""
        return 2.0 * math.tan(rad / 4.0)

    def circle_center_for_parallel(self, parallel: HorizontalCoordinates) -> PlaneCoordinates:
        """Centre of the circle onto which the parallel at parallel.alt projects."""
        return PlaneCoordinates(0.0, _safe_divide(self._cos_phi1, math.sin(parallel.alt) + self._sin_phi1))

    def circle_radius_for_parallel(self, parallel: HorizontalCoordinates) -> float:
        """Radius of the circle onto which the parallel at parallel.alt projects."""
        return _safe_divide(math.cos(parallel.alt), math.sin(parallel.alt) + self._sin_phi1)

    def __str__(self) -> str:
        return f"StereographicProjection(center={self._center})"

    __repr__ = __str__

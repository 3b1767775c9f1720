"""Protocol shared by the orbital models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar


if TYPE_CHECKING:
    from starfield.api.coordinates.conversions import EclipticToEquatorialConversion


__all__ = ["CelestialObjectModel"]

O_co = TypeVar("O_co", covariant=True)


class CelestialObjectModel(Protocol[O_co]):
    """Computes a celestial object at a given number of days since J2010."""

    def at(self, days_since_j2010: float, ecliptic_to_equatorial: EclipticToEquatorialConversion) -> O_co: ...

"""Coordinate systems, conversions and the stereographic projection."""

from starfield.api.coordinates.conversions import (
    EclipticToEquatorialConversion,
    EquatorialToHorizontalConversion,
    EquatorialToPlaneConversion,
)
from starfield.api.coordinates.projection import StereographicProjection
from starfield.api.coordinates.types import (
    CardinalPoint,
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    PlaneCoordinates,
)


__all__ = [
    "CardinalPoint",
    "EclipticCoordinates",
    "EclipticToEquatorialConversion",
    "EquatorialCoordinates",
    "EquatorialToHorizontalConversion",
    "EquatorialToPlaneConversion",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "PlaneCoordinates",
    "StereographicProjection",
]

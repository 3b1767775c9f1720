"""Core subpackage for shared constants, enums, utilities, and exceptions."""

from starfield.api.core.enums import CelestialObjectType
from starfield.api.core.exceptions import (
    CatalogIntegrityError,
    CatalogLoadError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidCoordinateError,
    MissingValueError,
    StarfieldError,
    UnsupportedEqualityError,
)


__all__ = [
    "CatalogIntegrityError",
    "CatalogLoadError",
    "CelestialObjectType",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "MissingValueError",
    "StarfieldError",
    "UnsupportedEqualityError",
]

"""
Custom exception classes for starfield.

This module defines specific exceptions for the different kinds of errors
that can occur while building catalogues and computing sky positions.
"""

from __future__ import annotations


__all__ = [
    "CatalogIntegrityError",
    "CatalogLoadError",
    "ConfigurationError",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "MissingValueError",
    "StarfieldError",
    "UnsupportedEqualityError",
]


class StarfieldError(Exception):
    """
    Base exception for all starfield errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch all sky-computation errors.
    """

    pass


class InvalidArgumentError(StarfieldError, ValueError):
    """
    Raised when a value lies outside its valid domain.

    This occurs when:
    - An interval is built with low >= high or a non-positive size
    - An angular size is negative
    - A colour index lies outside [-0.5, 5.5]
    - A catalogue identifier is negative
    - A contract on a public function is violated
    """

    pass


class InvalidCoordinateError(InvalidArgumentError):
    """
    Raised when coordinates are out of valid range.

    This occurs when attempting to build coordinates that are:
    - Right ascension or azimuth outside [0, 2π)
    - Declination, latitude or altitude outside [-π/2, π/2]
    - Geographic longitude outside [-180°, 180°)
    """

    pass


class MissingValueError(StarfieldError, TypeError):
    """
    Raised when a required value is None.

    Celestial objects must always have a name and a position.
    """

    pass


class CatalogIntegrityError(StarfieldError):
    """
    Raised when a catalogue would reference stars it does not contain.

    Catalogue construction is all-or-nothing: no partial catalogue is returned.
    """

    pass


class CatalogLoadError(StarfieldError):
    """
    Raised when a catalogue stream cannot be read or parsed.

    This can occur when:
    - The stream cannot be read or decoded
    - A record has missing columns or non-numeric fields
    - An asterism references an unknown Hipparcos identifier
    """

    pass


class UnsupportedEqualityError(StarfieldError, TypeError):
    """
    Raised when a value type is compared structurally or hashed.

    Coordinates, intervals, conversions and projections must only be compared
    by identity and never used as keys by value.
    """

    pass


class ConfigurationError(StarfieldError):
    """Raised when the configuration file cannot be read or is invalid."""

    pass

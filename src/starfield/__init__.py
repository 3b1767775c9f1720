"""
Starfield Sky Computation Library

Computes, for an instant and an observer location, the apparent positions
of the Sun, the Moon, the planets and a star catalogue, projects them on a
plane with a stereographic projection and finds the object nearest to a
point of that plane.

Example:
    >>> from datetime import UTC, datetime
    >>> from starfield import GeographicCoordinates, HorizontalCoordinates, ObservedSky
    >>> from starfield import StarCatalogueBuilder, StereographicProjection
    >>> where = GeographicCoordinates.of_deg(6.57, 46.52)
    >>> projection = StereographicProjection(HorizontalCoordinates.of_deg(180, 22))
    >>> sky = ObservedSky(datetime.now(UTC), where, projection, StarCatalogueBuilder().build())
    >>> print(sky.moon.info())
"""

# Catalogues
from starfield.api.catalogs import (
    Asterism,
    AsterismLoader,
    HygDatabaseLoader,
    SatelliteCatalogue,
    SatelliteCatalogueBuilder,
    SatelliteDatabaseLoader,
    StarCatalogue,
    StarCatalogueBuilder,
)

# Configuration
from starfield.api.config import SkyConfig, load_config

# Coordinates
from starfield.api.coordinates import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    PlaneCoordinates,
    StereographicProjection,
)

# Exceptions
from starfield.api.core.exceptions import (
    CatalogIntegrityError,
    CatalogLoadError,
    ConfigurationError,
    InvalidArgumentError,
    InvalidCoordinateError,
    StarfieldError,
)

# Snapshot
from starfield.api.observed_sky import ObservedSky


__version__ = "0.1.0"

__all__ = [
    "Asterism",
    "AsterismLoader",
    "CatalogIntegrityError",
    "CatalogLoadError",
    "ConfigurationError",
    "EclipticCoordinates",
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "HygDatabaseLoader",
    "InvalidArgumentError",
    "InvalidCoordinateError",
    "ObservedSky",
    "PlaneCoordinates",
    "SatelliteCatalogue",
    "SatelliteCatalogueBuilder",
    "SatelliteDatabaseLoader",
    "SkyConfig",
    "StarCatalogue",
    "StarCatalogueBuilder",
    "StarfieldError",
    "StereographicProjection",
    "load_config",
]

"""
Star, asterism and satellite catalogues and their file loaders.
"""

from starfield.api.catalogs.loaders import AsterismLoader, HygDatabaseLoader, SatelliteDatabaseLoader
from starfield.api.catalogs.satellites import SatelliteCatalogue, SatelliteCatalogueBuilder, SatelliteLoader
from starfield.api.catalogs.star_catalogue import Asterism, Loader, StarCatalogue, StarCatalogueBuilder


__all__ = [
    "Asterism",
    "AsterismLoader",
    "HygDatabaseLoader",
    "Loader",
    "SatelliteCatalogue",
    "SatelliteCatalogueBuilder",
    "SatelliteDatabaseLoader",
    "SatelliteLoader",
    "StarCatalogue",
    "StarCatalogueBuilder",
]

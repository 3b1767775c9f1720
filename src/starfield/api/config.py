"""
Configuration

Observer location, projection centre, search radius and catalogue paths,
read from an optional YAML file and overridden by ``STARFIELD_*``
environment variables. Catalogue files named by the configuration are
loaded once and cached.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final

import yaml
from cachetools import TTLCache, cached

from starfield.api.catalogs.loaders import AsterismLoader, HygDatabaseLoader, SatelliteDatabaseLoader
from starfield.api.catalogs.satellites import SatelliteCatalogue, SatelliteCatalogueBuilder
from starfield.api.catalogs.star_catalogue import StarCatalogue, StarCatalogueBuilder
from starfield.api.coordinates.projection import StereographicProjection
from starfield.api.coordinates.types import GeographicCoordinates, HorizontalCoordinates
from starfield.api.core.exceptions import CatalogLoadError, ConfigurationError
from starfield.api.core.utils import check_argument


logger = logging.getLogger(__name__)

__all__ = [
    "ENV_PREFIX",
    "SkyConfig",
    "load_config",
    "load_satellite_catalogue",
    "load_star_catalogue",
]

ENV_PREFIX: Final[str] = "STARFIELD_"
"""Prefix of the environment variables overriding configuration fields."""


@dataclass(frozen=True)
class SkyConfig:
    """
    Parameters of a sky computation.

    Attributes:
        lon_deg: Observer longitude in degrees, positive east
        lat_deg: Observer latitude in degrees
        center_az_deg: Azimuth of the projection centre in degrees
        center_alt_deg: Altitude of the projection centre in degrees
        search_radius: Radius of nearest-object searches, in plane units
        stars: Path of a HYG star database
        asterisms: Path of an asterism file (needs stars)
        satellites: Path of a UCS satellite database
    """

    lon_deg: float = 6.57
    lat_deg: float = 46.52
    center_az_deg: float = 180.0
    center_alt_deg: float = 22.0
    search_radius: float = 0.05
    stars: Path | None = None
    asterisms: Path | None = None
    satellites: Path | None = None

    def __post_init__(self) -> None:
        check_argument(GeographicCoordinates.is_valid_lon_deg(self.lon_deg), f"Invalid longitude {self.lon_deg}")
        check_argument(GeographicCoordinates.is_valid_lat_deg(self.lat_deg), f"Invalid latitude {self.lat_deg}")
        check_argument(0.0 <= self.center_az_deg < 360.0, f"Invalid centre azimuth {self.center_az_deg}")
        check_argument(-90.0 <= self.center_alt_deg <= 90.0, f"Invalid centre altitude {self.center_alt_deg}")
        check_argument(self.search_radius > 0.0, f"Search radius must be positive (got {self.search_radius})")
        check_argument(self.asterisms is None or self.stars is not None, "Asterisms need a star database")

    def observer(self) -> GeographicCoordinates:
        return GeographicCoordinates.of_deg(self.lon_deg, self.lat_deg)

    def projection(self) -> StereographicProjection:
        return StereographicProjection(HorizontalCoordinates.of_deg(self.center_az_deg, self.center_alt_deg))


_PATH_FIELDS: Final = frozenset({"stars", "asterisms", "satellites"})


def _coerce(values: Mapping[str, Any], source: str) -> dict[str, Any]:
    known = {f.name for f in fields(SkyConfig)}
    result: dict[str, Any] = {}
    for key, value in values.items():
        if key not in known:
            raise ConfigurationError(f"Unknown configuration key '{key}' in {source}")
        if value is None:
            result[key] = None
        elif key in _PATH_FIELDS:
            result[key] = Path(value).expanduser()
        else:
            try:
                result[key] = float(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Configuration key '{key}' in {source} must be a number") from e
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping")
    return data


def _read_environment(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for f in fields(SkyConfig):
        value = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            overrides[f.name] = value
    return overrides


def load_config(path: Path | str | None = None, environ: Mapping[str, str] | None = None) -> SkyConfig:
    """
    Build the configuration.

    Defaults are overridden by the YAML file (if any), which is in turn
    overridden by environment variables such as ``STARFIELD_LAT_DEG``.

    Args:
        path: Optional YAML file with SkyConfig field names as keys
        environ: Environment to read overrides from (default: os.environ)

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file cannot be read or holds bad values
        InvalidArgumentError: If a value is out of range
    """
    config = SkyConfig()
    if path is not None:
        path = Path(path)
        logger.debug(f"Reading configuration from {path}")
        config = replace(config, **_coerce(_read_yaml(path), str(path)))

    overrides = _read_environment(os.environ if environ is None else environ)
    if overrides:
        logger.debug(f"Configuration overrides from environment: {sorted(overrides)}")
        config = replace(config, **_coerce(overrides, "environment"))
    return config


# Cache for loaded catalogues (TTL=3600 seconds / 1 hour)
_catalogue_cache: TTLCache[Any, StarCatalogue] = TTLCache(maxsize=16, ttl=3600)
_satellite_cache: TTLCache[Any, SatelliteCatalogue] = TTLCache(maxsize=16, ttl=3600)


@cached(_catalogue_cache)
def load_star_catalogue(stars: Path | None, asterisms: Path | None = None) -> StarCatalogue:
    """
    Load a star catalogue from files.

    Results are cached per pair of paths. Without a star database the
    catalogue is empty.

    Raises:
        CatalogLoadError: If a file is missing or malformed
    """
    builder = StarCatalogueBuilder()
    if stars is not None:
        _load_file(builder, stars, HygDatabaseLoader())
    if asterisms is not None:
        _load_file(builder, asterisms, AsterismLoader())
    catalogue = builder.build()
    logger.info(f"Loaded catalogue with {len(catalogue.stars)} stars and {len(catalogue.asterisms)} asterisms")
    return catalogue


@cached(_satellite_cache)
def load_satellite_catalogue(satellites: Path) -> SatelliteCatalogue:
    """
    Load a satellite catalogue from a UCS database file, cached per path.

    Raises:
        CatalogLoadError: If the file is missing or malformed
    """
    builder = SatelliteCatalogueBuilder()
    _load_file(builder, satellites, SatelliteDatabaseLoader())
    return builder.build()


def _load_file(builder: Any, path: Path, loader: Any) -> None:
    logger.debug(f"Loading {path} with {type(loader).__name__}")
    try:
        with path.open("rb") as stream:
            builder.load_from(stream, loader)
    except OSError as e:
        raise CatalogLoadError(f"Cannot open {path}: {e}") from e

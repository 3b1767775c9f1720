"""
Satellite Catalogue

Geostationary satellites, kept in load order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import BinaryIO, Protocol

from starfield.api.astronomy.objects import Satellite
from starfield.api.core.utils import require_not_none


logger = logging.getLogger(__name__)

__all__ = [
    "SatelliteCatalogue",
    "SatelliteCatalogueBuilder",
    "SatelliteLoader",
]


class SatelliteCatalogue:
    """Immutable list of satellites."""

    __slots__ = ("_satellites",)

    def __init__(self, satellites: Iterable[Satellite]) -> None:
        self._satellites: tuple[Satellite, ...] = tuple(satellites)
        logger.debug(f"Built satellite catalogue with {len(self._satellites)} satellites")

    @property
    def satellites(self) -> tuple[Satellite, ...]:
        return self._satellites

    def __len__(self) -> int:
        return len(self._satellites)


class SatelliteCatalogueBuilder:
    def __init__(self) -> None:
        self._satellites: list[Satellite] = []

    def add_satellite(self, satellite: Satellite) -> SatelliteCatalogueBuilder:
        self._satellites.append(require_not_none(satellite, "satellite"))
        return self

    @property
    def satellites(self) -> tuple[Satellite, ...]:
        return tuple(self._satellites)

    def load_from(self, stream: BinaryIO, loader: SatelliteLoader) -> SatelliteCatalogueBuilder:
        loader.load(stream, self)
        return self

    def build(self) -> SatelliteCatalogue:
        return SatelliteCatalogue(self._satellites)


class SatelliteLoader(Protocol):
    """Reads satellites from a binary stream into a builder."""

    def load(self, stream: BinaryIO, builder: SatelliteCatalogueBuilder) -> None: ...

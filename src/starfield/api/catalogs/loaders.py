"""
Catalogue file loaders

Readers for the HYG star database, for asterism definitions and for the
UCS satellite database. Each loader reads a binary stream and feeds the
entries it parses into a catalogue builder.
"""

from __future__ import annotations

import csv
import io
import logging
import re
from collections.abc import Iterator
from typing import BinaryIO, Final

from starfield.api.astronomy.objects import Satellite, Star
from starfield.api.catalogs.satellites import SatelliteCatalogueBuilder
from starfield.api.catalogs.star_catalogue import Asterism, StarCatalogueBuilder
from starfield.api.coordinates.types import EquatorialCoordinates
from starfield.api.core.exceptions import CatalogLoadError
from starfield.api.math import angle


logger = logging.getLogger(__name__)

__all__ = [
    "AsterismLoader",
    "HygDatabaseLoader",
    "SatelliteDatabaseLoader",
]


def _rows(stream: BinaryIO, encoding: str) -> Iterator[list[str]]:
    """CSV rows of a binary stream, without the header row."""
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        reader = csv.reader(text)
        next(reader, None)
        yield from reader
    finally:
        # Leave the caller's stream open
        text.detach()


def _float_or_zero(value: str) -> float:
    return float(value) if value else 0.0


class HygDatabaseLoader:
    """
    Loader for the HYG v3 star database (CSV with a header row).

    Missing Hipparcos ids, magnitudes and colour indices default to 0. A star
    without a proper name is named after its Bayer designation (or ``?``)
    followed by its constellation.
    """

    HIP: Final[int] = 1
    PROPER: Final[int] = 6
    MAG: Final[int] = 13
    CI: Final[int] = 16
    RARAD: Final[int] = 23
    DECRAD: Final[int] = 24
    BAYER: Final[int] = 27
    CON: Final[int] = 29

    def load(self, stream: BinaryIO, builder: StarCatalogueBuilder) -> None:
        """
        Add every star of the stream to the builder.

        Raises:
            CatalogLoadError: If the stream cannot be read or a row is malformed
        """
        count = 0
        try:
            for line_number, row in enumerate(_rows(stream, "ascii"), start=2):
                builder.add_star(self._parse_star(row, line_number))
                count += 1
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CatalogLoadError(f"Cannot read star database: {e}") from e
        logger.debug(f"Loaded {count} stars from HYG database")

    def _parse_star(self, row: list[str], line_number: int) -> Star:
        try:
            hipparcos_id = int(row[self.HIP]) if row[self.HIP] else 0
            name = row[self.PROPER] or f"{row[self.BAYER] or '?'} {row[self.CON]}"
            return Star(
                hipparcos_id=hipparcos_id,
                name=name,
                equatorial_pos=EquatorialCoordinates.of(float(row[self.RARAD]), float(row[self.DECRAD])),
                magnitude=_float_or_zero(row[self.MAG]),
                color_index=_float_or_zero(row[self.CI]),
            )
        except (IndexError, ValueError) as e:
            raise CatalogLoadError(f"Malformed star on line {line_number}: {e}") from e


_ID_SEPARATOR = re.compile(r"[,\s]+")


class AsterismLoader:
    """
    Loader for asterism definitions.

    Each non-blank line lists the Hipparcos ids of the stars of one asterism,
    separated by commas or whitespace. Ids are resolved against the stars
    already added to the builder, so the star database must be loaded first.
    """

    def load(self, stream: BinaryIO, builder: StarCatalogueBuilder) -> None:
        """
        Add every asterism of the stream to the builder.

        Raises:
            CatalogLoadError: If the stream cannot be read, a token is not an
                integer or an id matches no star
        """
        stars_by_id: dict[int, Star] = {}
        for star in builder.stars:
            stars_by_id.setdefault(star.hipparcos_id, star)

        count = 0
        try:
            text = io.TextIOWrapper(stream, encoding="ascii")
            try:
                for line_number, line in enumerate(text, start=1):
                    tokens = [token for token in _ID_SEPARATOR.split(line.strip()) if token]
                    if not tokens:
                        continue
                    builder.add_asterism(Asterism(self._resolve(token, stars_by_id, line_number) for token in tokens))
                    count += 1
            finally:
                text.detach()
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CatalogLoadError(f"Cannot read asterisms: {e}") from e
        logger.debug(f"Loaded {count} asterisms")

    @staticmethod
    def _resolve(token: str, stars_by_id: dict[int, Star], line_number: int) -> Star:
        try:
            hipparcos_id = int(token)
        except ValueError as e:
            raise CatalogLoadError(f"Invalid Hipparcos id '{token}' on line {line_number}") from e
        try:
            return stars_by_id[hipparcos_id]
        except KeyError as e:
            raise CatalogLoadError(f"Unknown Hipparcos id {hipparcos_id} on line {line_number}") from e


class SatelliteDatabaseLoader:
    """
    Loader for the UCS satellite database (CSV with a header row).

    Only active geostationary satellites are kept: rows whose orbit class is
    ``GEO`` and whose status does not mention ``EOL``. Rows too short or with
    an unreadable longitude are skipped with a warning.
    """

    NAME: Final[int] = 0
    COUNTRY: Final[int] = 1
    PURPOSE: Final[int] = 5
    ORBIT_CLASS: Final[int] = 7
    LONGITUDE: Final[int] = 9
    STATUS: Final[int] = 18
    NORAD: Final[int] = 25

    def load(self, stream: BinaryIO, builder: SatelliteCatalogueBuilder) -> None:
        """
        Add every active geostationary satellite of the stream to the builder.

        Raises:
            CatalogLoadError: If the stream cannot be read
        """
        count = 0
        try:
            for line_number, row in enumerate(_rows(stream, "utf-8"), start=2):
                satellite = self._parse_satellite(row, line_number)
                if satellite is not None:
                    builder.add_satellite(satellite)
                    count += 1
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise CatalogLoadError(f"Cannot read satellite database: {e}") from e
        logger.debug(f"Loaded {count} geostationary satellites")

    def _parse_satellite(self, row: list[str], line_number: int) -> Satellite | None:
        if len(row) <= self.STATUS:
            if row:
                logger.warning(f"Skipping short satellite row on line {line_number}")
            return None
        if row[self.ORBIT_CLASS] != "GEO" or "EOL" in row[self.STATUS]:
            return None

        try:
            lon_deg = _float_or_zero(row[self.LONGITUDE])
        except ValueError:
            logger.warning(f"Skipping satellite '{row[self.NAME]}' on line {line_number}: bad longitude")
            return None

        norad = row[self.NORAD].strip() if len(row) > self.NORAD else ""
        return Satellite(
            name=row[self.NAME],
            country=row[self.COUNTRY],
            purpose=row[self.PURPOSE],
            norad_id=int(norad) if norad.isdigit() else 0,
            lon=angle.normalize_positive(angle.of_deg(lon_deg)),
        )

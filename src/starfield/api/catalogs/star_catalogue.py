"""
Star Catalogue

An immutable list of stars together with the asterisms drawn between them.
Asterisms refer to stars by identity, and the catalogue exposes for each
asterism the positions of its stars in the star list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import BinaryIO, Protocol

from starfield.api.astronomy.objects import Star
from starfield.api.core.exceptions import CatalogIntegrityError, InvalidArgumentError
from starfield.api.core.utils import check_argument, require_not_none


logger = logging.getLogger(__name__)

__all__ = [
    "Asterism",
    "Loader",
    "StarCatalogue",
    "StarCatalogueBuilder",
]


@dataclass(frozen=True, eq=False)
class Asterism:
    """A non-empty, ordered group of stars, compared by identity."""

    stars: tuple[Star, ...]

    def __init__(self, stars: Iterable[Star]) -> None:
        stars = tuple(stars)
        check_argument(len(stars) > 0, "An asterism needs at least one star")
        object.__setattr__(self, "stars", stars)

    def __len__(self) -> int:
        return len(self.stars)

    def __str__(self) -> str:
        return " - ".join(star.name for star in self.stars)


class StarCatalogue:
    """
    Immutable catalogue of stars and asterisms.

    Use StarCatalogueBuilder to create one; the constructor is public so
    that catalogues can be built directly from already validated data.
    """

    __slots__ = ("_asterism_indices", "_asterisms", "_stars")

    def __init__(self, stars: Iterable[Star], asterisms: Iterable[Asterism]) -> None:
        """
        Build a catalogue.

        Args:
            stars: Stars of the catalogue, in order
            asterisms: Asterisms whose stars all belong to the catalogue

        Raises:
            CatalogIntegrityError: If an asterism references a star missing from the catalogue
        """
        self._stars: tuple[Star, ...] = tuple(stars)
        self._asterisms: tuple[Asterism, ...] = tuple(asterisms)

        # First occurrence wins, by identity
        position: dict[int, int] = {}
        for index, star in enumerate(self._stars):
            position.setdefault(id(star), index)

        indices: dict[int, tuple[int, ...]] = {}
        for asterism in self._asterisms:
            try:
                indices[id(asterism)] = tuple(position[id(star)] for star in asterism.stars)
            except KeyError as e:
                raise CatalogIntegrityError(f"Asterism '{asterism}' references a star missing from the catalogue") from e
        self._asterism_indices = MappingProxyType(indices)

        logger.debug(f"Built star catalogue with {len(self._stars)} stars and {len(self._asterisms)} asterisms")

    @property
    def stars(self) -> tuple[Star, ...]:
        return self._stars

    @property
    def asterisms(self) -> tuple[Asterism, ...]:
        return self._asterisms

    def asterism_indices(self, asterism: Asterism) -> tuple[int, ...]:
        """
        Indices in ``stars`` of the stars of an asterism.

        Raises:
            InvalidArgumentError: If the asterism does not belong to this catalogue
        """
        indices = self._asterism_indices.get(id(asterism))
        if indices is None:
            raise InvalidArgumentError(f"Asterism '{asterism}' is not part of the catalogue")
        return indices

    def __len__(self) -> int:
        return len(self._stars)


class StarCatalogueBuilder:
    """Mutable scratch space for assembling a StarCatalogue."""

    def __init__(self) -> None:
        self._stars: list[Star] = []
        self._asterisms: list[Asterism] = []

    def add_star(self, star: Star) -> StarCatalogueBuilder:
        self._stars.append(require_not_none(star, "star"))
        return self

    def add_asterism(self, asterism: Asterism) -> StarCatalogueBuilder:
        self._asterisms.append(require_not_none(asterism, "asterism"))
        return self

    @property
    def stars(self) -> tuple[Star, ...]:
        """Snapshot of the stars added so far."""
        return tuple(self._stars)

    @property
    def asterisms(self) -> tuple[Asterism, ...]:
        """Snapshot of the asterisms added so far."""
        return tuple(self._asterisms)

    def load_from(self, stream: BinaryIO, loader: Loader) -> StarCatalogueBuilder:
        """
        Let a loader add stars or asterisms read from a binary stream.

        Raises:
            CatalogLoadError: If the stream is malformed
        """
        loader.load(stream, self)
        return self

    def build(self) -> StarCatalogue:
        return StarCatalogue(self._stars, self._asterisms)


class Loader(Protocol):
    """Reads catalogue entries from a binary stream into a builder."""

    def load(self, stream: BinaryIO, builder: StarCatalogueBuilder) -> None: ...

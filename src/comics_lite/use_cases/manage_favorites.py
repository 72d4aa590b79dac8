"""Favorite comics use case."""

from __future__ import annotations

import logging

from comics_lite.domain.comic import CatalogItem
from comics_lite.domain.errors import NotFoundError
from comics_lite.domain.favorite import FavoriteComic
from comics_lite.ports.favorites_store import FavoritesStore

logger = logging.getLogger(__name__)


class ManageFavorites:
    """
    Use case for marking comics as favorites.

    Responsibilities:
    - Convert catalog comics to persisted favorite records
    - Delegate storage to the injected FavoritesStore
    - Raise NotFoundError when removing a comic that is not a favorite
    """

    def __init__(self, favorites_store: FavoritesStore) -> None:
        self._store = favorites_store

    def add(self, item: CatalogItem) -> FavoriteComic:
        favorite = FavoriteComic.from_item(item)
        self.save(favorite)
        return favorite

    def save(self, favorite: FavoriteComic) -> None:
        self._store.upsert(favorite)
        logger.info("Favorite saved", extra={"comic_id": favorite.id})

    def remove(self, comic_id: int) -> None:
        """
        Raises:
            NotFoundError: If the comic is not a favorite
        """
        if not self._store.exists(comic_id):
            raise NotFoundError(resource="Favorite", identifier=str(comic_id))

        self._store.delete(comic_id)
        logger.info("Favorite removed", extra={"comic_id": comic_id})

    def toggle(self, item: CatalogItem) -> bool:
        """Flip the favorite state of ``item``; returns the new state."""
        if self._store.exists(item.id):
            self.remove(item.id)
            return False

        self.add(item)
        return True

    def is_favorite(self, comic_id: int) -> bool:
        return self._store.exists(comic_id)

    def list(self) -> list[FavoriteComic]:
        return self._store.list()

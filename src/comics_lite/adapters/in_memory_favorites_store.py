from __future__ import annotations

from comics_lite.domain.favorite import FavoriteComic
from comics_lite.ports.favorites_store import FavoritesStore


class InMemoryFavoritesStore(FavoritesStore):
    """
    Canonical contract implementation for tests.

    - Keeps favorites in insertion order
    - Upserting an existing id replaces the record in place
    """

    def __init__(self, favorites: list[FavoriteComic] | None = None) -> None:
        self._favorites: dict[int, FavoriteComic] = {}
        for favorite in favorites or []:
            self.upsert(favorite)

    def upsert(self, favorite: FavoriteComic) -> None:
        self._favorites[favorite.id] = favorite

    def delete(self, comic_id: int) -> None:
        self._favorites.pop(comic_id, None)

    def list(self) -> list[FavoriteComic]:
        return list(self._favorites.values())

    def exists(self, comic_id: int) -> bool:
        return comic_id in self._favorites

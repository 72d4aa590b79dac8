from __future__ import annotations

from abc import ABC, abstractmethod

from comics_lite.domain.favorite import FavoriteComic


class FavoritesStore(ABC):
    """
    Port for local persistence of favorite comics.

    Identity is the comic id: upserting an existing id replaces the record.
    """

    @abstractmethod
    def upsert(self, favorite: FavoriteComic) -> None: ...

    @abstractmethod
    def delete(self, comic_id: int) -> None:
        """Remove a favorite. Deleting an unknown id is a no-op."""
        ...

    @abstractmethod
    def list(self) -> list[FavoriteComic]:
        """All favorites, oldest first."""
        ...

    @abstractmethod
    def exists(self, comic_id: int) -> bool: ...

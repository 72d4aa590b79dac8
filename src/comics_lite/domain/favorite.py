from __future__ import annotations

from dataclasses import dataclass

from comics_lite.domain.comic import CatalogItem


@dataclass(frozen=True)
class FavoriteComic:
    """A comic the user marked as favorite. Only these fields are persisted."""

    id: int
    title: str
    description: str
    thumbnail_url: str

    @classmethod
    def from_item(cls, item: CatalogItem) -> FavoriteComic:
        return cls(
            id=item.id,
            title=item.title,
            description=item.description,
            thumbnail_url=item.thumbnail.resolved_url,
        )

"""SQLAlchemy implementation of FavoritesStore."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from comics_lite.domain.favorite import FavoriteComic
from comics_lite.infra.db.models.favorite import FavoriteRow
from comics_lite.ports.favorites_store import FavoritesStore


class SqlFavoritesStore(FavoritesStore):
    """
    SQLAlchemy implementation of FavoritesStore.

    - Works with any SQLAlchemy dialect (PostgreSQL in deployment, SQLite in tests)
    - Flushes on every write; committing is the session owner's job
    - Converts FavoriteRow (infrastructure) to FavoriteComic (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize store with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def upsert(self, favorite: FavoriteComic) -> None:
        row = self._session.get(FavoriteRow, favorite.id)
        if row is None:
            self._session.add(
                FavoriteRow(
                    id=favorite.id,
                    title=favorite.title,
                    description=favorite.description,
                    thumbnail_url=favorite.thumbnail_url,
                )
            )
        else:
            row.title = favorite.title
            row.description = favorite.description
            row.thumbnail_url = favorite.thumbnail_url
        self._session.flush()

    def delete(self, comic_id: int) -> None:
        self._session.execute(delete(FavoriteRow).where(FavoriteRow.id == comic_id))
        self._session.flush()

    def list(self) -> list[FavoriteComic]:
        query = select(FavoriteRow).order_by(FavoriteRow.created_at, FavoriteRow.id)
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def exists(self, comic_id: int) -> bool:
        return self._session.get(FavoriteRow, comic_id) is not None

    def _to_domain(self, row: FavoriteRow) -> FavoriteComic:
        return FavoriteComic(
            id=row.id,
            title=row.title,
            description=row.description or "",
            thumbnail_url=row.thumbnail_url or "",
        )

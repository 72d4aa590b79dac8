"""
Dependency injection for FastAPI routes.

Key principle: database sessions and HTTP clients are per-request, never
process-wide singletons.
"""

from __future__ import annotations

from typing import AsyncIterator, Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from comics_lite.adapters.sql_favorites_store import SqlFavoritesStore
from comics_lite.infra.db.session import get_session
from comics_lite.infra.marvel.config import marvel_credentials
from comics_lite.infra.marvel.http import build_catalog_client, build_http_client
from comics_lite.ports.catalog_client import CatalogClient
from comics_lite.use_cases.load_comic_detail import LoadComicDetail
from comics_lite.use_cases.manage_favorites import ManageFavorites


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


async def get_catalog_client() -> AsyncIterator[CatalogClient]:
    """
    Provides a catalog client bound to a per-request ``httpx.AsyncClient``.

    Credentials are read on every request so rotated keys apply without a restart.

    Raises:
        RuntimeError: If MARVEL_PUBLIC_KEY or MARVEL_PRIVATE_KEY is not set
    """
    credentials = marvel_credentials()
    async with build_http_client() as http_client:
        yield build_catalog_client(http_client, credentials)


def get_load_comic_detail_use_case(
    catalog_client: CatalogClient = Depends(get_catalog_client),
) -> LoadComicDetail:
    return LoadComicDetail(catalog_client=catalog_client)


def get_manage_favorites_use_case(db: Session = Depends(get_db)) -> ManageFavorites:
    """
    Factory function that returns a ManageFavorites use case bound to the
    request's database session.
    """
    return ManageFavorites(favorites_store=SqlFavoritesStore(session=db))

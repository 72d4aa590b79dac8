from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from comics_lite.infra.db.config import database_url

# Lazy initialization - the favorites database is only touched when a
# favorites route or store is actually used
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def engine_options(url: str) -> dict[str, Any]:
    """
    Engine keyword arguments for ``url``.

    SQLite (local app database, tests) uses the default single-file pool and
    may be shared across FastAPI's worker threads. Server databases get a
    bounded, health-checked pool.
    """
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}

    return {
        "pool_size": 5,
        "max_overflow": 10,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def get_engine() -> Engine:
    """Get or create the favorites database engine."""
    global _engine
    if _engine is None:
        url = database_url()
        _engine = create_engine(url, **engine_options(url))
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory (lazy initialization)."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Get a database session with automatic commit/rollback."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()

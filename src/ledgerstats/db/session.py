"""Engine and session handling for the SQLite transaction store.

One engine and one session factory exist per database file. Callers
own the sessions they open.
"""

from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ledgerstats.config import get_settings
from ledgerstats.db.schema import Base


def _db_key(db_path: Path | None) -> str:
    """Absolute path of the database file; the configured one when None."""
    if db_path is None:
        db_path = get_settings().db_path
    return str(Path(db_path).resolve())


@lru_cache(maxsize=None)
def _engine_for(db_key: str) -> Engine:
    Path(db_key).parent.mkdir(parents=True, exist_ok=True)
    # A single shared connection; the API serves requests from worker threads
    return create_engine(
        f"sqlite:///{db_key}",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@lru_cache(maxsize=None)
def _factory_for(db_key: str) -> sessionmaker:
    return sessionmaker(bind=_engine_for(db_key))


def get_engine(db_path: Path | None = None) -> Engine:
    """Engine for a database file, created on first use."""
    return _engine_for(_db_key(db_path))


def get_session(db_path: Path | None = None) -> Session:
    """Open a new session. The caller must close it."""
    return _factory_for(_db_key(db_path))()


@contextmanager
def session_scope(db_path: Path | None = None) -> Iterator[Session]:
    """Session that commits on success and rolls back on error.

    Example:
        with session_scope(path) as session:
            seed_if_empty(session, seed_path)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create missing tables."""
    Base.metadata.create_all(get_engine(db_path))

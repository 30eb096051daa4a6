"""Request dependencies shared by the API routes."""

from __future__ import annotations

from typing import Generator

from fastapi import Request

from ledgerstats.db.repo import DbSession
from ledgerstats.db.session import get_session


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Opens a session on the database the app was created for and closes
    it after the request.
    """
    session = get_session(request.app.state.db_path)
    try:
        yield session
    finally:
        session.close()

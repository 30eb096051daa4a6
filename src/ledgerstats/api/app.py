"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from ledgerstats import __version__
from ledgerstats.api.routes import stats
from ledgerstats.db.session import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema before serving so a fresh database is usable."""
    init_db(app.state.db_path)
    yield


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        db_path: Database file to serve. Defaults to the configured path.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Ledgerstats API",
        description="Aggregate statistics over stored financial transactions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    app.include_router(stats.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()

"""FastAPI application for the liftcoach API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..db.engine import get_db_path, init_db
from .routers import blocks, dashboard, history, program


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: Initialize database
    db_path = get_db_path()
    if not db_path.exists():
        await init_db(db_path)
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="liftcoach",
        description="Periodization and progression coach",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(program.router)
    app.include_router(history.router)
    app.include_router(dashboard.router)
    app.include_router(blocks.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app

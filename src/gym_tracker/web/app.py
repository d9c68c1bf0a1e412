"""FastAPI application for the gym-tracker API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import Settings, get_settings
from ..db import SessionStore, SlotStorage, SqliteSlotStorage, get_db_path
from ..services.analysis import ProgressAnalyzer
from .routers import analysis, progress, sessions


def create_app(
    settings: Settings | None = None,
    storage: SlotStorage | None = None,
    analyzer: ProgressAnalyzer | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to the environment)
        storage: Slot storage for sessions (defaults to the SQLite database)
        analyzer: AI coach (defaults to one built from settings)
    """
    settings = settings or get_settings()
    if storage is None:
        storage = SqliteSlotStorage(get_db_path(settings.data_dir), slot=settings.storage_slot)
    if analyzer is None:
        analyzer = ProgressAnalyzer(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            history_limit=settings.analysis_history_limit,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Load the session history on startup."""
        await app.state.store.load()
        yield

    app = FastAPI(
        title="gym-tracker",
        description="Personal workout log with progress metrics and an AI coach",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = SessionStore(storage)
    app.state.analyzer = analyzer

    app.include_router(sessions.router)
    app.include_router(progress.router)
    app.include_router(analysis.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app


"""Request dependencies for the API routers."""

from fastapi import Request

from ..db import SessionStore
from ..services.analysis import ProgressAnalyzer


def get_store(request: Request) -> SessionStore:
    """Get the session store from app state."""
    return request.app.state.store


def get_analyzer(request: Request) -> ProgressAnalyzer:
    """Get the analyzer from app state."""
    return request.app.state.analyzer

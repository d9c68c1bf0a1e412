"""Progress and statistics routes."""

from fastapi import APIRouter, Depends

from ...db import SessionStore
from ...services.metrics import derive_progress, extract_exercise_catalog, summarize_sessions
from ..deps import get_store

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("/exercises")
async def exercise_catalog(store: SessionStore = Depends(get_store)):
    """Distinct exercise names in the history, sorted."""
    return {"exercises": extract_exercise_catalog(store.all())}


@router.get("/stats")
async def stats(store: SessionStore = Depends(get_store)):
    """Overall counters."""
    return summarize_sessions(store.all()).to_dict()


@router.get("/exercise/{name:path}")
async def exercise_progress(name: str, store: SessionStore = Depends(get_store)):
    """Chart series (max weight and volume per session) for one exercise."""
    return derive_progress(store.all(), name).to_dict()

"""AI coach routes."""

from fastapi import APIRouter, Depends

from ...db import SessionStore
from ...services.analysis import ProgressAnalyzer
from ..deps import get_analyzer, get_store

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.get("/status")
async def analysis_status(analyzer: ProgressAnalyzer = Depends(get_analyzer)):
    """Whether an analysis is currently running."""
    return {"busy": analyzer.busy}


@router.post("")
async def run_analysis(
    store: SessionStore = Depends(get_store),
    analyzer: ProgressAnalyzer = Depends(get_analyzer),
):
    """Request a coaching summary of the recent sessions.

    Always answers 200; failures are reported through ``status`` and a
    readable ``text``.
    """
    result = await analyzer.analyze(store.all())
    return result.to_dict()

"""Services for gym-tracker."""

from .analysis import AnalysisResult, AnalysisStatus, ProgressAnalyzer
from .metrics import (
    ProgressSeries,
    SessionSummary,
    derive_progress,
    extract_exercise_catalog,
    recent_sessions,
    summarize_sessions,
)

__all__ = [
    "AnalysisResult",
    "AnalysisStatus",
    "derive_progress",
    "extract_exercise_catalog",
    "ProgressAnalyzer",
    "ProgressSeries",
    "recent_sessions",
    "SessionSummary",
    "summarize_sessions",
]

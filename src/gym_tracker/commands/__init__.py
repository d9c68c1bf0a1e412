"""CLI commands for gym-tracker."""

from .analyze import analyze
from .history import history
from .init import init
from .log import add, log
from .progress import exercises, progress, stats
from .serve import serve

__all__ = [
    "add",
    "analyze",
    "exercises",
    "history",
    "init",
    "log",
    "progress",
    "serve",
    "stats",
]

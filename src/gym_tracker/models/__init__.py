"""Data models for gym-tracker."""

from .draft import WorkoutDraft
from .exercises import DEFAULT_EXERCISES, suggested_exercises
from .workout import (
    DayType,
    ExerciseEntry,
    ExerciseRecord,
    ProgressPoint,
    Session,
    SetEntry,
    SetRecord,
    to_utc,
)

__all__ = [
    "DayType",
    "DEFAULT_EXERCISES",
    "ExerciseEntry",
    "ExerciseRecord",
    "ProgressPoint",
    "Session",
    "SetEntry",
    "SetRecord",
    "suggested_exercises",
    "to_utc",
    "WorkoutDraft",
]

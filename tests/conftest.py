"""Pytest configuration and fixtures."""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

from gym_tracker.config import get_settings
from gym_tracker.models.workout import DayType, ExerciseEntry, Session, SetEntry


def make_session(
    date: str,
    exercises: dict[str, list[tuple[int, float]]] | list[tuple[str, list[tuple[int, float]]]],
    day_type: DayType = DayType.CHEST,
    notes: str | None = None,
) -> Session:
    """Build a session from ``{name: [(reps, weight), ...]}`` at an ISO date."""
    if isinstance(exercises, dict):
        exercises = list(exercises.items())
    entries = [
        ExerciseEntry(name=name, sets=[SetEntry(reps=r, weight=w) for r, w in sets])
        for name, sets in exercises
    ]
    when = datetime.fromisoformat(date)
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return Session.create(day_type=day_type, exercises=entries, notes=notes, date=when)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def sample_sessions():
    """Three sessions, most recent first, as the store keeps them."""
    return [
        make_session(
            "2024-01-15T18:00:00",
            {"Bench": [(5, 90), (5, 90)], "Squat": [(5, 120)]},
        ),
        make_session(
            "2024-01-08T18:00:00",
            {"Bench": [(5, 85), (4, 85)]},
        ),
        make_session(
            "2024-01-01T18:00:00",
            {"Bench": [(5, 80)], "Remo con Barra": [(10, 60)]},
            day_type=DayType.BACK,
        ),
    ]


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at a temporary data directory with no API key."""
    monkeypatch.setenv("GYM_TRACKER_DATA_DIR", str(tmp_path / "data"))
    for var in ("GEMINI_API_KEY", "API_KEY", "GYM_TRACKER_GEMINI_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def session_factory():
    """Factory building sessions, see make_session."""
    return make_session

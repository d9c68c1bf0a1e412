"""Progress metrics derived from the session history.

Every function here is a pure function of the session collection it is
given: nothing is cached and inputs are never mutated.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models.workout import ProgressPoint, Session, to_utc
from ..utils.formatting import format_short_date

logger = logging.getLogger(__name__)


@dataclass
class ProgressSeries:
    """Chronological progress points for one exercise.

    ``skipped`` lists the ids of sessions where the exercise was logged
    without any sets, which are left out of ``points``.
    """

    exercise: str
    points: list[ProgressPoint] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def __iter__(self):
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def personal_record(self) -> float | None:
        """Heaviest weight across all points."""
        if not self.points:
            return None
        return max(p.max_weight for p in self.points)

    @property
    def best_volume(self) -> float | None:
        if not self.points:
            return None
        return max(p.volume for p in self.points)

    def to_dict(self) -> dict:
        return {
            "exercise": self.exercise,
            "points": [p.to_dict() for p in self.points],
            "skipped": list(self.skipped),
            "personal_record": self.personal_record,
            "best_volume": self.best_volume,
        }


@dataclass(frozen=True)
class SessionSummary:
    """Scalar counters over the whole history."""

    total_sessions: int = 0
    active_days: int = 0
    total_sets: int = 0
    total_volume: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total_sessions": self.total_sessions,
            "active_days": self.active_days,
            "total_sets": self.total_sets,
            "total_volume": self.total_volume,
        }


def derive_progress(sessions: Iterable[Session], exercise_name: str | None) -> ProgressSeries:
    """Build the progress series for one exercise.

    One point per session containing the exercise (exact, case-sensitive
    name match). When a session lists the exercise more than once only the
    first entry is used. Points are ordered by session timestamp; sessions
    with equal timestamps keep their collection order.

    Args:
        sessions: Session history in any order
        exercise_name: Exercise to chart; empty means nothing selected

    Returns:
        ProgressSeries, empty if no exercise is selected or none matches
    """
    series = ProgressSeries(exercise=exercise_name or "")
    if not exercise_name:
        return series

    points = []
    for session in sessions:
        entry = session.first_exercise(exercise_name)
        if entry is None:
            continue

        max_weight = entry.max_weight
        if max_weight is None:
            series.skipped.append(session.id)
            continue

        points.append(
            ProgressPoint(
                date=format_short_date(session.date),
                raw_date=session.date,
                max_weight=max_weight,
                volume=entry.volume,
                session_id=session.id,
            )
        )

    if series.skipped:
        logger.warning(
            "Skipped %d session(s) with no sets for %r: %s",
            len(series.skipped),
            exercise_name,
            ", ".join(series.skipped),
        )

    # sorted() is stable, so equal timestamps keep collection order
    series.points = sorted(points, key=lambda p: p.raw_date)
    return series


def extract_exercise_catalog(sessions: Iterable[Session]) -> list[str]:
    """Distinct exercise names across all sessions, sorted.

    Names are compared exactly as typed. "Squat" and "squat " are two
    different exercises here, just as they are for derive_progress.
    """
    # TODO: offer case/whitespace normalization once stored names can be migrated
    names = {exercise.name for session in sessions for exercise in session.exercises}
    return sorted(names)


def summarize_sessions(sessions: Iterable[Session]) -> SessionSummary:
    """Count sessions and distinct training days.

    Days are UTC calendar dates of the session timestamps.
    """
    sessions = list(sessions)
    days = {to_utc(session.date).date() for session in sessions}
    return SessionSummary(
        total_sessions=len(sessions),
        active_days=len(days),
        total_sets=sum(s.total_sets for s in sessions),
        total_volume=sum(s.volume for s in sessions),
    )


def recent_sessions(sessions: Iterable[Session], limit: int = 10) -> list[Session]:
    """Most recent sessions first, at most ``limit`` of them."""
    ordered = sorted(sessions, key=lambda s: s.date, reverse=True)
    return ordered[:limit]

"""Tests for the workout draft."""

from datetime import datetime, timezone

import pytest

from gym_tracker.models.draft import WorkoutDraft
from gym_tracker.models.workout import DayType


@pytest.fixture
def draft():
    return WorkoutDraft(day_type=DayType.LEGS)


class TestDraftEditing:
    """Tests for draft editing operations."""

    def test_add_exercise_seeds_empty_set(self, draft):
        exercise = draft.add_exercise("Sentadilla (Squat)")

        assert draft.exercises == [exercise]
        assert len(exercise.sets) == 1
        assert exercise.sets[0].reps == 0
        assert exercise.sets[0].weight == 0

    def test_add_set_copies_previous(self, draft):
        exercise = draft.add_exercise("Squat")
        first = exercise.sets[0]
        draft.update_set(exercise.id, first.id, reps=5, weight=100)

        second = draft.add_set(exercise.id)

        assert second.reps == 5
        assert second.weight == 100
        assert second.id != first.id

    def test_add_set_after_removing_all(self, draft):
        exercise = draft.add_exercise("Squat")
        draft.remove_set(exercise.id, exercise.sets[0].id)

        new_set = draft.add_set(exercise.id)
        assert (new_set.reps, new_set.weight) == (0, 0)

    def test_update_set_partial(self, draft):
        exercise = draft.add_exercise("Squat")
        entry = exercise.sets[0]

        draft.update_set(exercise.id, entry.id, weight=60)
        draft.update_set(exercise.id, entry.id, reps=8)

        assert (entry.reps, entry.weight) == (8, 60)

    def test_update_set_rejects_negative(self, draft):
        exercise = draft.add_exercise("Squat")
        with pytest.raises(ValueError):
            draft.update_set(exercise.id, exercise.sets[0].id, weight=-5)

    @pytest.mark.parametrize("weight", [float("nan"), float("inf")])
    def test_update_set_rejects_non_finite(self, draft, weight):
        exercise = draft.add_exercise("Squat")
        entry = exercise.sets[0]
        with pytest.raises(ValueError):
            draft.update_set(exercise.id, entry.id, weight=weight)
        assert entry.weight == 0

    def test_remove_exercise(self, draft):
        squat = draft.add_exercise("Squat")
        press = draft.add_exercise("Prensa de Piernas")

        draft.remove_exercise(squat.id)

        assert draft.exercises == [press]

    def test_unknown_ids(self, draft):
        exercise = draft.add_exercise("Squat")
        with pytest.raises(ValueError):
            draft.add_set("missing")
        with pytest.raises(ValueError):
            draft.remove_set(exercise.id, "missing")


class TestDraftFinalize:
    """Tests for turning a draft into a session."""

    def test_empty_draft_is_noop(self, draft):
        assert draft.finalize() is None
        assert draft.is_empty

    def test_finalize_builds_session_and_clears(self, draft):
        exercise = draft.add_exercise("Squat")
        draft.update_set(exercise.id, exercise.sets[0].id, reps=5, weight=100)
        draft.notes = "Pesado"
        now = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

        session = draft.finalize(now=now)

        assert session is not None
        assert session.date == now
        assert session.day_type == DayType.LEGS
        assert session.notes == "Pesado"
        assert [e.name for e in session.exercises] == ["Squat"]
        assert draft.is_empty
        assert draft.notes is None

    def test_finalize_defaults_to_now_utc(self, draft):
        draft.add_exercise("Squat")
        session = draft.finalize()
        assert session.date.tzinfo == timezone.utc

    def test_session_independent_of_later_edits(self, draft):
        exercise = draft.add_exercise("Squat")
        set_id = exercise.sets[0].id
        session = draft.finalize()

        exercise.sets[0].weight = 999

        assert session.exercises[0].sets[0].weight == 0
        assert session.exercises[0].sets[0].id == set_id

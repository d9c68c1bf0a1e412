"""In-progress workout draft."""

from dataclasses import dataclass, field
from datetime import datetime

from .workout import DayType, ExerciseEntry, Session, SetEntry, check_reps, check_weight


@dataclass
class WorkoutDraft:
    """Mutable list of exercises being logged before a session is saved.

    Editing methods mutate entries in place. ``finalize`` turns the draft
    into an immutable Session and clears it.
    """

    day_type: DayType = DayType.CHEST
    exercises: list[ExerciseEntry] = field(default_factory=list)
    notes: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.exercises

    def find_exercise(self, exercise_id: str) -> ExerciseEntry:
        for exercise in self.exercises:
            if exercise.id == exercise_id:
                return exercise
        raise ValueError(f"Exercise {exercise_id} not found in draft")

    def add_exercise(self, name: str) -> ExerciseEntry:
        """Add an exercise seeded with a single empty set."""
        exercise = ExerciseEntry(name=name, sets=[SetEntry()])
        self.exercises.append(exercise)
        return exercise

    def add_set(self, exercise_id: str) -> SetEntry:
        """Append a set that repeats the previous set's reps and weight."""
        exercise = self.find_exercise(exercise_id)
        if exercise.sets:
            last = exercise.sets[-1]
            new_set = SetEntry(reps=last.reps, weight=last.weight)
        else:
            new_set = SetEntry()
        exercise.sets.append(new_set)
        return new_set

    def update_set(
        self,
        exercise_id: str,
        set_id: str,
        reps: int | None = None,
        weight: float | None = None,
    ) -> SetEntry:
        """Edit a set's reps and/or weight in place."""
        entry = self.find_exercise(exercise_id).find_set(set_id)
        if reps is not None:
            entry.reps = check_reps(reps)
        if weight is not None:
            entry.weight = check_weight(weight)
        return entry

    def remove_set(self, exercise_id: str, set_id: str) -> None:
        exercise = self.find_exercise(exercise_id)
        exercise.sets.remove(exercise.find_set(set_id))

    def remove_exercise(self, exercise_id: str) -> None:
        self.exercises.remove(self.find_exercise(exercise_id))

    def clear(self) -> None:
        self.exercises = []
        self.notes = None

    def finalize(self, now: datetime | None = None) -> Session | None:
        """Turn the draft into a Session.

        Args:
            now: Session timestamp (defaults to the current UTC time)

        Returns:
            The new Session, or None if the draft has no exercises (in
            which case nothing changes)
        """
        if self.is_empty:
            return None

        session = Session.create(
            day_type=self.day_type,
            exercises=self.exercises,
            notes=self.notes,
            date=now,
        )
        self.clear()
        return session

"""Workout session data models."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


def new_id() -> str:
    """Generate a short unique identifier."""
    return uuid4().hex[:12]


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime.

    Accepts the trailing ``Z`` written by browsers' ``toISOString``.
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(value))


def check_reps(reps: int) -> int:
    if reps < 0:
        raise ValueError(f"reps must be non-negative, got {reps}")
    return reps


def check_weight(weight: float) -> float:
    """Reject negative weights and NaN/infinity."""
    if not math.isfinite(weight) or weight < 0:
        raise ValueError(f"weight must be a finite non-negative number, got {weight}")
    return weight


class DayType(str, Enum):
    """Workout day category."""

    CHEST = "Pecho"
    BACK = "Espalda"
    LEGS = "Pierna"


class _SetFields:
    """Behaviour shared by editable and saved sets."""

    def __post_init__(self):
        check_reps(self.reps)
        check_weight(self.weight)

    @property
    def volume(self) -> float:
        return self.reps * self.weight

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"id": self.id, "reps": self.reps, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict):
        """Create from dictionary.

        Null reps or weight (an empty field in the editor) count as zero.
        """
        return cls(
            reps=int(data.get("reps") or 0),
            weight=float(data.get("weight") or 0),
            id=data.get("id") or new_id(),
        )


@dataclass(frozen=True)
class SetRecord(_SetFields):
    """A set as saved in a Session."""

    reps: int = 0
    weight: float = 0.0  # in kg
    id: str = field(default_factory=new_id)

    def freeze(self) -> "SetRecord":
        return self


@dataclass
class SetEntry(_SetFields):
    """One performed set, editable while drafting."""

    reps: int = 0
    weight: float = 0.0  # in kg
    id: str = field(default_factory=new_id)

    def freeze(self) -> SetRecord:
        return SetRecord(reps=self.reps, weight=self.weight, id=self.id)


class _ExerciseFields:
    """Behaviour shared by editable and saved exercise entries."""

    set_type: type
    sets_type: type

    @property
    def max_weight(self) -> float | None:
        """Heaviest set weight, or None if there are no sets."""
        if not self.sets:
            return None
        return max(s.weight for s in self.sets)

    @property
    def volume(self) -> float:
        """Sum of reps x weight over all sets."""
        return sum(s.volume for s in self.sets)

    def find_set(self, set_id: str):
        for s in self.sets:
            if s.id == set_id:
                return s
        raise ValueError(f"Set {set_id} not found in exercise {self.name!r}")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "sets": [s.to_dict() for s in self.sets],
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create from dictionary."""
        return cls(
            name=data["name"],
            sets=cls.sets_type(cls.set_type.from_dict(s) for s in data.get("sets", [])),
            id=data.get("id") or new_id(),
        )


@dataclass(frozen=True)
class ExerciseRecord(_ExerciseFields):
    """An exercise as saved in a Session; its sets cannot change."""

    name: str
    sets: tuple[SetRecord, ...] = ()
    id: str = field(default_factory=new_id)

    set_type = SetRecord
    sets_type = tuple

    def freeze(self) -> "ExerciseRecord":
        return self


@dataclass
class ExerciseEntry(_ExerciseFields):
    """One exercise being logged in a draft.

    Set order is insertion order. An entry may have no sets while it is
    being edited.
    """

    name: str
    sets: list[SetEntry] = field(default_factory=list)
    id: str = field(default_factory=new_id)

    set_type = SetEntry
    sets_type = list

    def freeze(self) -> ExerciseRecord:
        """Copy into a read-only record."""
        return ExerciseRecord(
            name=self.name,
            sets=tuple(s.freeze() for s in self.sets),
            id=self.id,
        )


@dataclass(frozen=True)
class Session:
    """A finalized workout.

    Sessions are immutable: exercises and their sets are frozen records
    copied from the draft. ``date`` is always aware UTC.
    """

    date: datetime
    day_type: DayType
    exercises: tuple[ExerciseRecord, ...]
    notes: str | None = None
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        object.__setattr__(self, "date", to_utc(self.date))
        object.__setattr__(self, "day_type", DayType(self.day_type))
        object.__setattr__(self, "exercises", tuple(e.freeze() for e in self.exercises))

    @classmethod
    def create(
        cls,
        day_type: DayType,
        exercises: list[ExerciseEntry],
        notes: str | None = None,
        date: datetime | None = None,
    ) -> "Session":
        """Build a session from editable entries, copying them."""
        return cls(
            date=date if date is not None else datetime.now(timezone.utc),
            day_type=day_type,
            exercises=tuple(exercises),
            notes=notes or None,
        )

    def first_exercise(self, name: str) -> ExerciseRecord | None:
        """Return the first entry whose name matches exactly."""
        for exercise in self.exercises:
            if exercise.name == name:
                return exercise
        return None

    @property
    def total_sets(self) -> int:
        return sum(len(e.sets) for e in self.exercises)

    @property
    def volume(self) -> float:
        return sum(e.volume for e in self.exercises)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "id": self.id,
            "date": self.date.isoformat(),
            "type": self.day_type.value,
            "exercises": [e.to_dict() for e in self.exercises],
        }
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        """Create from dictionary."""
        return cls(
            id=data.get("id") or new_id(),
            date=parse_timestamp(data["date"]),
            day_type=DayType(data["type"]),
            exercises=tuple(ExerciseRecord.from_dict(e) for e in data.get("exercises", [])),
            notes=data.get("notes") or None,
        )


@dataclass(frozen=True)
class ProgressPoint:
    """Per-session metric snapshot for one exercise."""

    date: str  # display label, e.g. "08 ene"
    raw_date: datetime
    max_weight: float
    volume: float
    session_id: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for charting."""
        return {
            "date": self.date,
            "raw_date": self.raw_date.isoformat(),
            "max_weight": self.max_weight,
            "volume": self.volume,
            "session_id": self.session_id,
        }

"""Workout session routes."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...db import SessionStore, StorageError
from ...models.draft import WorkoutDraft
from ...models.workout import DayType
from ..deps import get_store

router = APIRouter(prefix="/sessions", tags=["sessions"])


class SetIn(BaseModel):
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0, ge=0, allow_inf_nan=False)


class ExerciseIn(BaseModel):
    name: str = Field(min_length=1)
    sets: list[SetIn] = Field(default_factory=list)


class DraftIn(BaseModel):
    """A whole draft submitted for saving."""

    type: DayType
    exercises: list[ExerciseIn] = Field(default_factory=list)
    notes: str | None = None
    date: datetime | None = None


def build_draft(payload: DraftIn) -> WorkoutDraft:
    draft = WorkoutDraft(day_type=payload.type, notes=payload.notes)
    for item in payload.exercises:
        exercise = draft.add_exercise(item.name)
        # Replace the seeded empty set with the submitted ones
        seeded = exercise.sets[0]
        for s in item.sets:
            entry = draft.add_set(exercise.id)
            draft.update_set(exercise.id, entry.id, reps=s.reps, weight=s.weight)
        draft.remove_set(exercise.id, seeded.id)
    return draft


@router.get("")
async def list_sessions(limit: int | None = None, store: SessionStore = Depends(get_store)):
    """List sessions, most recent first."""
    sessions = store.all()
    if limit is not None:
        sessions = sessions[:limit]
    return {"sessions": [s.to_dict() for s in sessions], "total": len(store)}


@router.get("/{session_id}")
async def get_session(session_id: str, store: SessionStore = Depends(get_store)):
    """Get a single session."""
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session.to_dict()


@router.post("")
async def create_session(payload: DraftIn, store: SessionStore = Depends(get_store)):
    """Finalize a draft into a new session.

    A draft with no exercises is accepted and ignored.
    """
    draft = build_draft(payload)
    session = draft.finalize(now=payload.date)
    if session is None:
        return {"created": False, "session": None}

    try:
        await store.append(session)
    except StorageError as e:
        raise HTTPException(status_code=503, detail=f"Session not persisted: {e}") from e

    return {"created": True, "session": session.to_dict()}

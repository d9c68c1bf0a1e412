"""Named storage slots holding a serialized payload."""

from pathlib import Path
from typing import Protocol, runtime_checkable

import aiosqlite

from .engine import create_schema, get_db_path

DEFAULT_SLOT = "gym_tracker_workouts"


class StorageError(Exception):
    """Raised when a storage slot cannot be read or written."""


@runtime_checkable
class SlotStorage(Protocol):
    """A single slot that is read and overwritten as a whole."""

    async def load(self) -> str | None:
        """Return the stored payload, or None if nothing was saved."""
        ...

    async def save(self, payload: str) -> None:
        """Overwrite the slot with ``payload``."""
        ...


class SqliteSlotStorage:
    """Slot kept as one row of the ``storage_slots`` table."""

    def __init__(self, db_path: Path | None = None, slot: str = DEFAULT_SLOT):
        self.db_path = db_path or get_db_path()
        self.slot = slot

    async def load(self) -> str | None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                cursor = await db.execute(
                    "SELECT value FROM storage_slots WHERE name = ?", (self.slot,)
                )
                row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StorageError(f"Could not read slot {self.slot!r}: {e}") from e
        if row is None:
            return None
        return row[0]

    async def save(self, payload: str) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await create_schema(db)
                await db.execute(
                    """
                    INSERT INTO storage_slots (name, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(name) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (self.slot, payload),
                )
                await db.commit()
        except aiosqlite.Error as e:
            raise StorageError(f"Could not write slot {self.slot!r}: {e}") from e


class MemorySlotStorage:
    """Slot held in process memory."""

    def __init__(self, payload: str | None = None):
        self.payload = payload
        self.saves = 0

    async def load(self) -> str | None:
        return self.payload

    async def save(self, payload: str) -> None:
        self.payload = payload
        self.saves += 1

"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import get_settings

SCHEMA = """
    CREATE TABLE IF NOT EXISTS storage_slots (
        name TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "gym_tracker.db"


async def create_schema(db: aiosqlite.Connection) -> None:
    """Create tables on an open connection if they are missing."""
    await db.execute(SCHEMA)
    await db.commit()


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await create_schema(db)

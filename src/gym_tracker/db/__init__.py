"""Storage layer for gym-tracker."""

from .engine import get_db_path, init_db
from .repositories import SessionStore
from .storage import MemorySlotStorage, SlotStorage, SqliteSlotStorage, StorageError

__all__ = [
    "get_db_path",
    "init_db",
    "MemorySlotStorage",
    "SessionStore",
    "SlotStorage",
    "SqliteSlotStorage",
    "StorageError",
]

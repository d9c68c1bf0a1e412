"""Session collection backed by a storage slot."""

import json
import logging

from ..models.workout import Session
from .storage import SlotStorage, StorageError

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns the in-memory session collection, most recent first.

    The whole collection is serialized into the storage slot after every
    change.
    """

    def __init__(self, storage: SlotStorage):
        self.storage = storage
        self._sessions: list[Session] = []

    def __len__(self) -> int:
        return len(self._sessions)

    async def load(self) -> list[Session]:
        """Replace the in-memory collection with the stored one.

        A missing slot, unreadable storage, or a payload that does not
        decode into sessions all leave an empty collection.
        """
        try:
            payload = await self.storage.load()
        except StorageError as e:
            logger.warning("Starting with no sessions: %s", e)
            payload = None

        self._sessions = self._decode(payload) if payload else []
        logger.debug("Loaded %d session(s)", len(self._sessions))
        return self.all()

    def all(self) -> list[Session]:
        """Snapshot of the collection (most recent first)."""
        return list(self._sessions)

    def get(self, session_id: str) -> Session | None:
        for session in self._sessions:
            if session.id == session_id:
                return session
        return None

    async def append(self, session: Session) -> None:
        """Prepend a session and persist the collection.

        Raises:
            StorageError: If the slot could not be written. The session
                stays in the in-memory collection.
        """
        self._sessions = [session, *self._sessions]
        try:
            await self.storage.save(self.serialize())
        except StorageError:
            logger.error("Failed to persist %d session(s)", len(self._sessions))
            raise

    def serialize(self) -> str:
        return json.dumps([s.to_dict() for s in self._sessions], ensure_ascii=False)

    @staticmethod
    def _decode(payload: str) -> list[Session]:
        try:
            records = json.loads(payload)
            if not isinstance(records, list):
                raise TypeError(f"expected a list, got {type(records).__name__}")
            return [Session.from_dict(record) for record in records]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Ignoring unreadable session data: %s", e)
            return []

"""Per-session delivery history and bulk retraction."""

import logging
from collections.abc import Iterable

from core.metrics import history_retractions_total
from engine.store import ChatStore
from engine.transport import Transport

logger = logging.getLogger(__name__)


class HistoryTracker:
    """Remembers which messages were delivered to each user in the current session."""

    def __init__(self, store: ChatStore, transport: Transport) -> None:
        self.store = store
        self.transport = transport

    async def record(self, user_id: int, handle: int) -> None:
        """Append a delivered message handle to the user's history."""
        async with self.store.transaction():
            self.store.history.setdefault(user_id, []).append(handle)

    def take(self, user_id: int) -> list[int]:
        """
        Detach and return the user's history, leaving it empty.

        Must be called inside ``store.transaction()``.
        """
        handles = self.store.history.get(user_id, [])
        self.store.history[user_id] = []
        return handles

    def handles(self, user_id: int) -> tuple[int, ...]:
        return tuple(self.store.history.get(user_id, ()))

    async def retract(self, user_id: int, handles: Iterable[int]) -> int:
        """
        Retract each handle from the user's chat; return how many succeeded.

        A failure on one handle (already deleted, too old) does not stop the rest.
        """
        retracted = 0
        for handle in handles:
            try:
                await self.transport.retract(user_id, handle)
                retracted += 1
                history_retractions_total.labels(outcome="ok").inc()
            except Exception as e:
                history_retractions_total.labels(outcome="failed").inc()
                logger.debug(f"Could not retract message {handle} for user {user_id}: {e}")
        return retracted

    async def clear_chat_history(self, user_id: int) -> int:
        """Empty the user's history and retract everything that was in it."""
        async with self.store.transaction():
            handles = self.take(user_id)
        return await self.retract(user_id, handles)

"""Block registry with lazy expiry."""

import logging
from datetime import timedelta

from engine.store import ChatStore
from models import FOREVER

logger = logging.getLogger(__name__)

# Stored expiry for blocks that never lapse
PERMANENT_BLOCK = float("inf")


class BlockRegistry:
    """Answers whether a user may currently queue or be matched."""

    def __init__(self, store: ChatStore) -> None:
        self.store = store

    def is_blocked(self, user_id: int) -> bool:
        """
        Check whether a user is blocked right now.

        Expired entries are removed on lookup, so this is the only place block
        expiry is evaluated. Permanent blocks never expire.
        """
        until = self.store.blocked_until.get(user_id)
        if until is None:
            return False
        if until == PERMANENT_BLOCK:
            return True
        if self.store.clock() > until:
            del self.store.blocked_until[user_id]
            logger.info(f"Block expired for user {user_id}")
            return False
        return True

    def block(self, user_id: int, duration: timedelta) -> float:
        """Block a user for ``duration`` (or permanently for ``FOREVER``); return the expiry."""
        if duration == FOREVER:
            until = PERMANENT_BLOCK
        else:
            until = self.store.clock() + duration.total_seconds()
        self.store.blocked_until[user_id] = until
        return until

    def blocked_until(self, user_id: int) -> float | None:
        """Raw stored expiry, without expiring anything."""
        return self.store.blocked_until.get(user_id)

"""Process-wide in-memory chat state."""

import asyncio
import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from core.metrics import active_sessions, match_queue_size


class ChatStore:
    """
    All mutable engine state behind a single lock.

    Components read and mutate the maps synchronously while holding
    ``transaction()``; nothing awaits transport I/O inside it. State is lost on
    restart.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self.clock = clock
        self.waiting: set[int] = set()
        self.partners: dict[int, int] = {}
        self.report_counts: dict[int, int] = {}
        self.blocked_until: dict[int, float] = {}
        self.history: dict[int, list[int]] = {}
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Hold the store lock; refresh queue/session gauges on exit."""
        async with self._lock:
            try:
                yield
            finally:
                match_queue_size.set(len(self.waiting))
                active_sessions.set(len(self.partners))

    def snapshot(self) -> dict[str, int]:
        """Counts for health checks."""
        return {
            "waiting": len(self.waiting),
            "sessions": len(self.partners) // 2,
            "blocked": len(self.blocked_until),
        }

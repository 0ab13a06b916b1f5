"""Waiting queue and pairing algorithm."""

import logging

from core.metrics import match_requests_total, matches_created_total
from engine.blocks import BlockRegistry
from engine.history import HistoryTracker
from engine.notifier import Notifier
from engine.sessions import SessionRegistry
from engine.store import ChatStore
from models import FindAction, MatchResult, MatchStatus

logger = logging.getLogger(__name__)


class Matchmaker:
    """Pairs users from the waiting set."""

    def __init__(
        self,
        store: ChatStore,
        blocks: BlockRegistry,
        history: HistoryTracker,
        sessions: SessionRegistry,
        notifier: Notifier,
    ) -> None:
        self.store = store
        self.blocks = blocks
        self.history = history
        self.sessions = sessions
        self.notifier = notifier

    def _pick_candidate(self, user_id: int) -> int | None:
        """
        First waiting user other than ``user_id`` who is not blocked.

        Set iteration order is arbitrary, so there is no FIFO fairness. Blocked
        candidates are skipped but stay queued until their block lapses.
        """
        for candidate in self.store.waiting:
            if candidate != user_id and not self.blocks.is_blocked(candidate):
                return candidate
        return None

    async def find_partner(self, user_id: int, action: FindAction = FindAction.FRESH_JOIN) -> MatchResult:
        """
        Match the user with someone waiting, or queue them.

        Guards are checked in order: blocked, already paired. With
        ``REJOIN_AFTER_LEAVE`` the user's old messages are retracted and, when a
        partner is found, the partner's are too.
        """
        match_requests_total.labels(action=action.value).inc()
        stale: dict[int, list[int]] = {}

        async with self.store.transaction():
            if self.blocks.is_blocked(user_id):
                result = MatchResult(status=MatchStatus.BLOCKED)
            elif self.sessions.partner_of(user_id) is not None:
                result = MatchResult(status=MatchStatus.ALREADY_IN_SESSION)
            else:
                if action.clears_history:
                    stale[user_id] = self.history.take(user_id)
                    self.store.waiting.discard(user_id)

                partner_id = self._pick_candidate(user_id)
                if partner_id is not None:
                    self.store.waiting.discard(partner_id)
                    if action.clears_history:
                        stale[partner_id] = self.history.take(partner_id)
                    self.sessions.pair(user_id, partner_id)
                    result = MatchResult(status=MatchStatus.MATCHED, partner_id=partner_id)
                else:
                    self.store.waiting.add(user_id)
                    result = MatchResult(status=MatchStatus.WAITING)

        for owner, handles in stale.items():
            await self.history.retract(owner, handles)

        if result.status is MatchStatus.BLOCKED:
            await self.notifier.send_blocked(user_id)
        elif result.status is MatchStatus.ALREADY_IN_SESSION:
            await self.notifier.send_already_in_chat(user_id)
        elif result.matched:
            matches_created_total.inc()
            logger.info(f"Matched users {user_id} and {result.partner_id}")
            await self.notifier.send_matched(user_id)
            await self.notifier.send_matched(result.partner_id)
        else:
            logger.info(f"User {user_id} is waiting for a partner")
            await self.notifier.send_waiting(user_id, action)

        return result

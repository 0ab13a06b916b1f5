"""Active pairing table and session teardown."""

import logging

from engine.notifier import Notifier
from engine.store import ChatStore

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Who is talking to whom. Pairs are always stored in both directions."""

    def __init__(self, store: ChatStore, notifier: Notifier) -> None:
        self.store = store
        self.notifier = notifier

    def partner_of(self, user_id: int) -> int | None:
        return self.store.partners.get(user_id)

    def pair(self, user_id: int, partner_id: int) -> None:
        """Link two users. Must be called inside ``store.transaction()``."""
        if user_id == partner_id:
            raise ValueError("cannot pair a user with themselves")
        self.store.partners[user_id] = partner_id
        self.store.partners[partner_id] = user_id

    def detach(self, user_id: int) -> int | None:
        """
        Remove the user's pairing in both directions and return the former partner.

        Must be called inside ``store.transaction()``. Returns None when the
        user was not paired.
        """
        partner_id = self.store.partners.pop(user_id, None)
        if partner_id is None:
            return None
        self.store.partners.pop(partner_id, None)
        return partner_id

    async def announce_end(self, user_id: int, partner_id: int, notify_with_options: bool = True) -> None:
        """
        Notify both sides that a session ended.

        Only the leaving user's buttons are optional; the partner always gets
        the "find another / report" options.
        """
        await self.notifier.send_left_chat(user_id, with_options=notify_with_options)
        await self.notifier.send_partner_left(partner_id)

    async def end_session(self, user_id: int, notify_with_options: bool = True) -> int | None:
        """End the user's session, if any; return the former partner."""
        async with self.store.transaction():
            partner_id = self.detach(user_id)

        if partner_id is None:
            return None

        logger.info(f"Session ended: user={user_id}, partner={partner_id}")
        await self.announce_end(user_id, partner_id, notify_with_options)
        return partner_id

"""Single entry point translating inbound events into engine operations."""

import logging
from collections.abc import Awaitable, Callable

from engine.matchmaker import Matchmaker
from engine.notifier import Notifier
from engine.relay import RelayEngine
from engine.reports import ReportLedger
from engine.sessions import SessionRegistry
from engine.store import ChatStore
from models import Action, BlockOutcome, FindAction, InboundEvent

logger = logging.getLogger(__name__)


class ActionDispatcher:
    """
    Routes each user event to the component that owns it.

    Users move between three states: idle, waiting (in the queue) and paired.
    Payload events are relayed to the partner; commands and button callbacks
    drive matchmaking, teardown and reporting.
    """

    def __init__(
        self,
        store: ChatStore,
        matchmaker: Matchmaker,
        sessions: SessionRegistry,
        ledger: ReportLedger,
        relay: RelayEngine,
        notifier: Notifier,
    ) -> None:
        self.store = store
        self.matchmaker = matchmaker
        self.sessions = sessions
        self.ledger = ledger
        self.relay = relay
        self.notifier = notifier

        self._handlers: dict[Action, Callable[[int], Awaitable[object]]] = {
            Action.START: notifier.send_welcome,
            Action.HELP: notifier.send_help,
            Action.PREMIUM: notifier.send_premium,
            Action.WEBCHAT: notifier.send_webchat,
            Action.FIND: self.find,
            Action.FIND_AGAIN: self.find_again,
            Action.STOP: self.stop,
            Action.STOP_CHAT: self.stop,
            Action.REPORT: self.report_partner,
            Action.REPORT_PARTNER: self.report_partner,
        }

    async def dispatch(self, event: InboundEvent) -> None:
        if event.payload is not None:
            await self.relay.relay(event.user_id, event.payload)
            return

        handler = self._handlers[event.action]
        logger.debug(f"Dispatching {event.action.value} for user {event.user_id}")
        await handler(event.user_id)

    async def find(self, user_id: int) -> None:
        await self.matchmaker.find_partner(user_id, FindAction.FRESH_JOIN)

    async def find_again(self, user_id: int) -> None:
        await self.matchmaker.find_partner(user_id, FindAction.REJOIN_AFTER_LEAVE)

    async def stop(self, user_id: int) -> None:
        await self.sessions.end_session(user_id, notify_with_options=True)

    async def report_partner(self, user_id: int) -> BlockOutcome | None:
        """
        Report the user's current partner and end the session.

        The partner lookup, teardown and tally update happen in one critical
        section so a concurrent stop cannot report the wrong user.
        """
        async with self.store.transaction():
            partner_id = self.sessions.detach(user_id)
            outcome = self.ledger.report_user(partner_id) if partner_id is not None else None

        if partner_id is None or outcome is None:
            await self.notifier.send_no_chat_to_report(user_id)
            return None

        logger.info(f"User {user_id} reported partner {partner_id}")
        await self.notifier.send_report_confirmed(user_id)
        await self.sessions.announce_end(user_id, partner_id)
        if outcome.blocked:
            await self.notifier.send_block_imposed(outcome)
        return outcome

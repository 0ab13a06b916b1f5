"""Forwarding chat payloads between paired users."""

import logging

from core.metrics import messages_relayed_total, relay_failures_total
from engine.history import HistoryTracker
from engine.sessions import SessionRegistry
from engine.transport import Transport
from models import Payload, RelayOutcome

logger = logging.getLogger(__name__)


class RelayEngine:
    """Delivers a sender's payload to their partner and records the delivery."""

    def __init__(self, sessions: SessionRegistry, history: HistoryTracker, transport: Transport) -> None:
        self.sessions = sessions
        self.history = history
        self.transport = transport

    async def relay(self, from_user: int, payload: Payload) -> RelayOutcome:
        partner_id = self.sessions.partner_of(from_user)
        if partner_id is None:
            return RelayOutcome.NO_PARTNER

        if not payload.relayable:
            logger.debug(f"Dropping unsupported {payload.kind.value} payload from user {from_user}")
            return RelayOutcome.UNSUPPORTED

        outgoing = payload.largest_variant()
        try:
            handle = await self.transport.deliver(partner_id, outgoing)
        except Exception as e:
            relay_failures_total.inc()
            logger.error(f"Failed to relay {outgoing.kind.value} from {from_user} to {partner_id}: {e}")
            return RelayOutcome.FAILED

        await self.history.record(partner_id, handle)
        messages_relayed_total.labels(kind=outgoing.kind.value).inc()
        return RelayOutcome.RELAYED

"""Delivery contract between the engine and the messaging platform."""

from typing import Protocol

from models import Payload


class Transport(Protocol):
    """
    Outbound channel to end users.

    Implementations deliver any relayable payload kind and return an opaque
    message handle that can later be passed to ``retract``. Both calls may
    raise; the engine treats failures as non-fatal.
    """

    async def deliver(self, user_id: int, payload: Payload) -> int: ...

    async def retract(self, user_id: int, handle: int) -> None: ...

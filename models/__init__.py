"""Domain models."""

from models.actions import Action, FindAction
from models.events import InboundEvent
from models.payload import RELAYABLE_KINDS, Button, Payload, PayloadKind, PhotoVariant
from models.results import FOREVER, BlockOutcome, MatchResult, MatchStatus, RelayOutcome

__all__ = [
    "Action",
    "FindAction",
    "InboundEvent",
    "Payload",
    "PayloadKind",
    "PhotoVariant",
    "Button",
    "RELAYABLE_KINDS",
    "FOREVER",
    "BlockOutcome",
    "MatchResult",
    "MatchStatus",
    "RelayOutcome",
]

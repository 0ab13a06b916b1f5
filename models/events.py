"""Inbound events delivered by the transport."""

from pydantic import BaseModel, ConfigDict, model_validator

from models.actions import Action
from models.payload import Payload


class InboundEvent(BaseModel):
    """A single update from a user: either an action or a chat payload, never both."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    action: Action | None = None
    payload: Payload | None = None

    @model_validator(mode="after")
    def _action_or_payload(self) -> "InboundEvent":
        if (self.action is None) == (self.payload is None):
            raise ValueError("event needs exactly one of action or payload")
        return self

"""User actions understood by the engine."""

from enum import Enum


class Action(str, Enum):
    """
    Discrete requests a user can make.

    Callback values double as Telegram ``callback_data`` for inline buttons.
    """

    START = "start"
    FIND = "find"
    STOP = "stop"
    REPORT = "report"
    HELP = "help"
    PREMIUM = "premium"
    WEBCHAT = "webchat"

    # Inline button callbacks
    FIND_AGAIN = "find_again"
    REPORT_PARTNER = "report_partner"
    STOP_CHAT = "stop_chat"


class FindAction(str, Enum):
    """How a user asks for a partner."""

    FRESH_JOIN = "fresh_join"
    REJOIN_AFTER_LEAVE = "rejoin_after_leave"

    @property
    def clears_history(self) -> bool:
        """Rejoining retracts the requester's and the new partner's old messages."""
        return self is FindAction.REJOIN_AFTER_LEAVE

    @property
    def waiting_text(self) -> str:
        if self is FindAction.REJOIN_AFTER_LEAVE:
            return "⏳ Waiting for a new partner..."
        return "⏳ Waiting for someone to chat with..."

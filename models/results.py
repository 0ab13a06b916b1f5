"""Results returned by engine operations."""

from datetime import timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict

# Block term meaning "until further notice"
FOREVER = timedelta.max


class MatchStatus(str, Enum):
    MATCHED = "matched"
    WAITING = "waiting"
    BLOCKED = "blocked"
    ALREADY_IN_SESSION = "already_in_session"


class MatchResult(BaseModel):
    """Outcome of a find-partner request."""

    model_config = ConfigDict(frozen=True)

    status: MatchStatus
    partner_id: int | None = None

    @property
    def matched(self) -> bool:
        return self.status is MatchStatus.MATCHED


class BlockOutcome(BaseModel):
    """
    Result of filing a report against a user.

    ``duration`` is ``None`` when the new tally triggers no block and ``FOREVER``
    for a permanent block.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int
    reports: int
    duration: timedelta | None = None

    @property
    def blocked(self) -> bool:
        return self.duration is not None

    @property
    def permanent(self) -> bool:
        return self.duration == FOREVER

    def describe(self) -> str:
        """Human-readable term, e.g. ``"5 minutes"`` or ``"indefinitely"``."""
        if self.duration is None:
            return "not blocked"
        if self.permanent:
            return "indefinitely"
        return f"{int(self.duration.total_seconds() // 60)} minutes"


class RelayOutcome(str, Enum):
    RELAYED = "relayed"
    NO_PARTNER = "no_partner"
    UNSUPPORTED = "unsupported"
    FAILED = "failed"

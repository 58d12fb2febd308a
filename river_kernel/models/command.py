"""Command Result — the engine's report on a single load/unload/cross/reset call."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class RejectionReason(str, Enum):
    GAME_OVER = "game_over"
    CROSSING_IN_PROGRESS = "crossing_in_progress"
    FERRY_OCCUPIED = "ferry_occupied"
    WRONG_BANK = "wrong_bank"
    FERRY_EMPTY = "ferry_empty"


class CommandResult(BaseModel):
    """
    Outcome of an engine command.

    Illegal gestures are expected in an interactive toy, so they are reported
    here rather than raised. A rejected command leaves all state untouched.
    """

    accepted: bool
    reason: Optional[RejectionReason] = None    # Machine-readable, set when rejected
    deferred: bool = False                      # Accepted but applied after the current crossing

    @classmethod
    def ok(cls) -> "CommandResult":
        return cls(accepted=True)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "CommandResult":
        return cls(accepted=False, reason=reason)

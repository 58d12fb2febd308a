"""Game Outcome — the terminal-condition classification after each crossing."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, model_validator


class OutcomeStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    LOST = "lost"
    WON = "won"


class LossReason(str, Enum):
    """The only two unsupervised-pair conflicts among the cargo items."""
    WOLF_ATE_GOAT = "wolf ate goat"
    GOAT_ATE_CABBAGE = "goat ate cabbage"

    @property
    def message(self) -> str:
        if self is LossReason.WOLF_ATE_GOAT:
            return "The wolf ate the goat"
        return "The goat ate the cabbage"


class GameOutcome(BaseModel):
    """Current outcome. `reason` is present iff the game is lost."""

    status: OutcomeStatus = OutcomeStatus.IN_PROGRESS
    reason: Optional[LossReason] = None

    @model_validator(mode="after")
    def _reason_matches_status(self) -> "GameOutcome":
        if (self.status == OutcomeStatus.LOST) != (self.reason is not None):
            raise ValueError("a loss reason is required for, and only for, a lost game")
        return self

    @classmethod
    def in_progress(cls) -> "GameOutcome":
        return cls()

    @classmethod
    def lost(cls, reason: LossReason) -> "GameOutcome":
        return cls(status=OutcomeStatus.LOST, reason=reason)

    @classmethod
    def won(cls) -> "GameOutcome":
        return cls(status=OutcomeStatus.WON)

    @property
    def is_terminal(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS

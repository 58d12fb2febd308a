"""River crossing data models."""

from river_kernel.models.command import CommandResult, RejectionReason
from river_kernel.models.engine import EngineConfig, GameSnapshot
from river_kernel.models.outcome import GameOutcome, LossReason, OutcomeStatus
from river_kernel.models.world import Bank, Cargo, FerryState, WorldState

__all__ = [
    "Bank",
    "Cargo",
    "CommandResult",
    "EngineConfig",
    "FerryState",
    "GameOutcome",
    "GameSnapshot",
    "LossReason",
    "OutcomeStatus",
    "RejectionReason",
    "WorldState",
]

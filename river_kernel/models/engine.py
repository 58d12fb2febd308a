"""Engine configuration and the read-only snapshot handed to presentation."""

from typing import List

from pydantic import BaseModel, Field

from river_kernel.models.outcome import GameOutcome
from river_kernel.models.world import Cargo, FerryState, WorldState


class EngineConfig(BaseModel):
    """Configuration for the Puzzle Engine and its HTTP boundary."""

    transit_seconds: float = Field(ge=0, default=1.1)
    hint: str = (
        "Minimal winning sequence is Goat, alone, Wolf, Goat back, "
        "Cabbage, alone, Goat."
    )


class GameSnapshot(BaseModel):
    """Everything presentation needs to render one frame."""

    world: WorldState
    ferry: FerryState
    outcome: GameOutcome
    is_crossing: bool
    crossings: int
    status_message: str
    near_bank: List[str]
    far_bank: List[str]
    draggable: List[Cargo] = []

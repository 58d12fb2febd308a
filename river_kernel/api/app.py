"""
River Crossing API — FastAPI endpoints.

The outward face of the Puzzle Engine for a browser front end:
- Game state inspection (world, ferry, outcome, bank contents)
- The draggable predicate used to enable gestures
- The load / unload / cross / reset commands
- Configuration inspection

Rejected commands answer 200 with `accepted: false`; they are expected,
not exceptional.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel

from river_kernel.engine.puzzle import PuzzleEngine
from river_kernel.models.command import CommandResult
from river_kernel.models.engine import EngineConfig
from river_kernel.models.world import Bank, Cargo

logger = logging.getLogger(__name__)


# --- Request/Response Models ---

class LoadRequest(BaseModel):
    item: Cargo


class UnloadRequest(BaseModel):
    bank: Optional[Bank] = None


def _command_response(engine: PuzzleEngine, result: CommandResult) -> dict:
    return {
        "result": result.model_dump(mode="json"),
        "state": engine.snapshot().model_dump(mode="json"),
    }


# --- Application Factory ---

def create_app(
    engine: Optional[PuzzleEngine] = None,
    config: Optional[EngineConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="River Crossing API",
        description="Farmer, wolf, goat and cabbage puzzle engine",
        version="0.1.0",
    )

    eng = engine or PuzzleEngine(config=config)
    if engine is not None and config is not None:
        eng.config = config

    # Store the engine on app state for access in endpoints.
    # Every endpoint is async so commands run on the event loop, never
    # concurrently with a crossing from a worker thread.
    app.state.engine = eng
    logger.info("River crossing API ready (transit %.2fs)", eng.config.transit_seconds)

    # === GAME STATE ===

    @app.get("/game/state")
    async def get_game_state():
        """Current game snapshot."""
        return eng.snapshot().model_dump(mode="json")

    @app.get("/game/banks/{bank}")
    async def get_bank(bank: Bank):
        """Who is on a bank, farmer first."""
        return {"bank": bank.value, "contents": eng.bank_contents(bank)}

    @app.get("/game/cargo/{item}/draggable")
    async def get_draggable(item: Cargo):
        """Whether the item may be picked up right now."""
        return {"item": item.value, "draggable": eng.is_draggable(item)}

    # === COMMANDS ===

    @app.post("/game/load")
    async def load_cargo(req: LoadRequest):
        """Stage an item on the ferry."""
        return _command_response(eng, eng.load_cargo(req.item))

    @app.post("/game/unload")
    async def unload_cargo(req: Optional[UnloadRequest] = None):
        """Drop the staged item back on the ferry's bank."""
        bank = req.bank if req is not None else None
        return _command_response(eng, eng.unload_cargo(bank))

    @app.post("/game/cross")
    async def cross():
        """Sail to the other bank; answers once the crossing has committed."""
        result = await eng.cross_async()
        return _command_response(eng, result)

    @app.post("/game/reset")
    async def reset():
        """Start over from the initial configuration."""
        return _command_response(eng, eng.reset())

    # === CONFIG ===

    @app.get("/config")
    async def get_config():
        """Current engine configuration."""
        return eng.config.model_dump()

    return app


# Default application instance
app = create_app()

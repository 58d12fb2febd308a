"""
Puzzle Engine — authoritative state of the river crossing game.

Holds the WorldState and FerryState, validates loading, executes crossings
and classifies the outcome after each one.

Behavioral Contract:
- Mutated only through load_cargo, unload_cargo, cross (or its two phases) and reset
- Illegal commands are no-ops reported through CommandResult, never raised
- A crossing is a critical section: once begun, nothing else applies until it commits
- Lost and Won are absorbing; reset is the only way out
"""

import asyncio
import logging
from typing import Callable, List, Optional

from river_kernel.engine.rules import bank_contents, check_loss, check_win, opposite
from river_kernel.models.command import CommandResult, RejectionReason
from river_kernel.models.engine import EngineConfig, GameSnapshot
from river_kernel.models.outcome import GameOutcome
from river_kernel.models.world import Bank, Cargo, FerryState, WorldState

logger = logging.getLogger(__name__)

STATUS_STARTED = "Game started"
STATUS_WON = "Congratulations, you win"

OutcomeListener = Callable[[GameOutcome], None]


class CrossingError(Exception):
    """Raised when the two-phase crossing protocol is misused."""
    pass


class PuzzleEngine:
    """
    Single-player, cooperative engine. No locks: the `is_crossing` flag is
    the only guard needed.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._listeners: List[OutcomeListener] = []
        self._restore_initial()

    def _restore_initial(self) -> None:
        self._world = WorldState()
        self._ferry = FerryState()
        self._outcome = GameOutcome.in_progress()
        self._crossing = False
        self._reset_pending = False
        self._crossings = 0
        self._status = STATUS_STARTED

    # --- Queries ---

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def ferry(self) -> FerryState:
        return self._ferry

    @property
    def outcome(self) -> GameOutcome:
        return self._outcome

    @property
    def is_crossing(self) -> bool:
        """True between begin_crossing and complete_crossing."""
        return self._crossing

    @property
    def crossings(self) -> int:
        """Committed crossings since the last reset."""
        return self._crossings

    @property
    def status_message(self) -> str:
        return self._status

    def is_draggable(self, item: Cargo) -> bool:
        """Whether presentation should let the user pick `item` up right now."""
        return (
            not self._outcome.is_terminal
            and not self._crossing
            and self._world.bank_of(item) == self._ferry.bank
        )

    def bank_contents(self, bank: Bank) -> List[str]:
        return bank_contents(self._world, bank)

    def snapshot(self) -> GameSnapshot:
        """Get a serializable copy of everything presentation renders."""
        return GameSnapshot(
            world=self._world.model_copy(deep=True),
            ferry=self._ferry.model_copy(),
            outcome=self._outcome.model_copy(),
            is_crossing=self._crossing,
            crossings=self._crossings,
            status_message=self._status,
            near_bank=self.bank_contents(Bank.NEAR),
            far_bank=self.bank_contents(Bank.FAR),
            draggable=[item for item in Cargo if self.is_draggable(item)],
        )

    def on_outcome(self, listener: OutcomeListener) -> None:
        """Register a callback for terminal outcomes and resets."""
        self._listeners.append(listener)

    # --- Commands ---

    def load_cargo(self, item: Cargo) -> CommandResult:
        """Stage `item` on the ferry. No bank assignment changes."""
        rejection = self._guard()
        if rejection is None and not self._ferry.is_empty:
            rejection = RejectionReason.FERRY_OCCUPIED
        if rejection is None and self._world.bank_of(item) != self._ferry.bank:
            rejection = RejectionReason.WRONG_BANK
        if rejection is not None:
            return self._reject("load", rejection)

        self._ferry.cargo = item
        logger.debug("Loaded %s at the %s bank", item.value, self._ferry.bank.value)
        return CommandResult.ok()

    def unload_cargo(self, bank: Optional[Bank] = None) -> CommandResult:
        """
        Return staged cargo to the bank it never left.

        If `bank` is given it must be the bank the ferry is moored at.
        """
        rejection = self._guard()
        if rejection is None and self._ferry.is_empty:
            rejection = RejectionReason.FERRY_EMPTY
        if rejection is None and bank is not None and bank != self._ferry.bank:
            rejection = RejectionReason.WRONG_BANK
        if rejection is not None:
            return self._reject("unload", rejection)

        logger.debug("Unloaded %s", self._ferry.cargo.value)
        self._ferry.cargo = None
        return CommandResult.ok()

    def begin_crossing(self) -> CommandResult:
        """Enter the crossing critical section."""
        rejection = self._guard()
        if rejection is not None:
            return self._reject("cross", rejection)

        self._crossing = True
        if self._ferry.cargo is None:
            self._status = "Farmer sails alone"
        else:
            self._status = f"Farmer sails with {self._ferry.cargo.label}"
        logger.info("Crossing started: %s", self._status)
        return CommandResult.ok()

    def complete_crossing(self) -> CommandResult:
        """
        Commit the crossing begun by begin_crossing.

        Applies the move to a working copy, classifies the outcome, then
        commits everything at once. A reset requested mid-crossing is
        applied right after the commit.
        """
        if not self._crossing:
            raise CrossingError("complete_crossing called with no crossing in progress")

        next_bank = opposite(self._ferry.bank)
        working = self._world.model_copy(deep=True)
        working.farmer_bank = next_bank
        if self._ferry.cargo is not None:
            working.cargo_bank[self._ferry.cargo] = next_bank

        loss = check_loss(working)
        if loss is not None:
            outcome = GameOutcome.lost(loss)
        elif check_win(working):
            outcome = GameOutcome.won()
        else:
            outcome = GameOutcome.in_progress()

        self._world = working
        self._ferry = FerryState(bank=next_bank)
        self._outcome = outcome
        self._crossings += 1
        self._crossing = False
        logger.info(
            "Crossing %d committed: farmer on the %s bank, outcome %s",
            self._crossings, next_bank.value, outcome.status.value,
        )

        if outcome.reason is not None:
            self._status = f"Game over: {outcome.reason.message}"
        elif outcome.is_terminal:
            self._status = STATUS_WON
        if outcome.is_terminal:
            self._notify()

        if self._reset_pending:
            logger.info("Applying reset deferred during crossing")
            self._apply_reset()
        return CommandResult.ok()

    def cross(self) -> CommandResult:
        """Cross the river in one step, with no transit delay."""
        result = self.begin_crossing()
        if not result.accepted:
            return result
        return self.complete_crossing()

    async def cross_async(self, transit_seconds: Optional[float] = None) -> CommandResult:
        """
        Cross the river, holding the critical section for the transit time.

        Once begun the crossing always commits, even if the awaiting task
        is cancelled.
        """
        result = self.begin_crossing()
        if not result.accepted:
            return result

        delay = self.config.transit_seconds if transit_seconds is None else transit_seconds
        try:
            await asyncio.sleep(delay)
        finally:
            # Another caller may already have committed this crossing
            if self._crossing:
                self.complete_crossing()
        return result

    def reset(self) -> CommandResult:
        """Reinstate the initial configuration from any state."""
        if self._crossing:
            self._reset_pending = True
            logger.info("Reset requested mid-crossing; deferring until the crossing commits")
            return CommandResult(accepted=True, deferred=True)

        self._apply_reset()
        return CommandResult.ok()

    # --- Internals ---

    def _apply_reset(self) -> None:
        self._restore_initial()
        logger.info("Game reset")
        self._notify()

    def _guard(self) -> Optional[RejectionReason]:
        """Shared precondition of every mutating gesture."""
        if self._outcome.is_terminal:
            return RejectionReason.GAME_OVER
        if self._crossing:
            return RejectionReason.CROSSING_IN_PROGRESS
        return None

    def _reject(self, command: str, reason: RejectionReason) -> CommandResult:
        logger.debug("Rejected %s: %s", command, reason.value)
        return CommandResult.rejected(reason)

    def _notify(self) -> None:
        """Call every outcome listener. A failing listener never aborts a command."""
        for listener in self._listeners:
            try:
                listener(self._outcome)
            except Exception:
                logger.exception("Outcome listener %r failed", listener)

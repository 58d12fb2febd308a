"""
Puzzle Rules — pure checks over a WorldState.

None of these functions mutate their input. The engine applies them to a
working copy after every crossing.
"""

from typing import List, Optional

from river_kernel.models.outcome import LossReason
from river_kernel.models.world import Bank, Cargo, WorldState

FARMER = "Farmer"


def opposite(bank: Bank) -> Bank:
    """The other riverbank."""
    return Bank.FAR if bank == Bank.NEAR else Bank.NEAR


def check_loss(state: WorldState) -> Optional[LossReason]:
    """
    Evaluate the bank the farmer is NOT on.

    Wolf and goat are checked before goat and cabbage; that order is the
    tie-break if both pairs were ever left together.
    """
    unsupervised = opposite(state.farmer_bank)
    left_behind = {
        item for item, bank in state.cargo_bank.items() if bank == unsupervised
    }

    if {Cargo.WOLF, Cargo.GOAT} <= left_behind:
        return LossReason.WOLF_ATE_GOAT
    if {Cargo.GOAT, Cargo.CABBAGE} <= left_behind:
        return LossReason.GOAT_ATE_CABBAGE
    return None


def check_win(state: WorldState) -> bool:
    """Farmer and all three cargo items together on the far bank."""
    return state.farmer_bank == Bank.FAR and all(
        state.cargo_bank[item] == Bank.FAR for item in Cargo
    )


def bank_contents(state: WorldState, bank: Bank) -> List[str]:
    """Display labels of everyone on `bank`, farmer first, cargo in enum order."""
    contents = []
    if state.farmer_bank == bank:
        contents.append(FARMER)
    for item in Cargo:
        if state.cargo_bank[item] == bank:
            contents.append(item.label)
    return contents

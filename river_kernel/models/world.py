"""World State — who and what is on which riverbank."""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class Bank(str, Enum):
    NEAR = "near"       # Start side
    FAR = "far"         # Goal side


class Cargo(str, Enum):
    """The three items the farmer ferries across. Closed set."""
    GOAT = "goat"
    WOLF = "wolf"
    CABBAGE = "cabbage"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class WorldState(BaseModel):
    """
    Authoritative bank assignment of the farmer and every cargo item.

    Every entity is on exactly one bank at all times. Transit is ferry-local
    and never appears here.
    """

    farmer_bank: Bank = Bank.NEAR
    cargo_bank: Dict[Cargo, Bank] = Field(
        default_factory=lambda: {item: Bank.NEAR for item in Cargo}
    )

    @model_validator(mode="after")
    def _every_item_placed(self) -> "WorldState":
        missing = [item.value for item in Cargo if item not in self.cargo_bank]
        if missing:
            raise ValueError(f"cargo_bank is missing items: {', '.join(missing)}")
        return self

    def bank_of(self, item: Cargo) -> Bank:
        """Bank the given cargo item is currently on."""
        return self.cargo_bank[item]


class FerryState(BaseModel):
    """The crossing vehicle. The farmer is always aboard."""

    bank: Bank = Bank.NEAR
    cargo: Optional[Cargo] = None

    @property
    def is_empty(self) -> bool:
        return self.cargo is None

"""Button supply for a placement task — unlimited or drawn from an inventory."""

from dataclasses import dataclass
from enum import StrEnum

from spawnproof.models.catalogue import CANONICAL_BUTTON, is_button
from spawnproof.world.inventory import Inventory


class ResourceMode(StrEnum):
    UNLIMITED = "unlimited"
    CONSUMABLE = "consumable"


@dataclass(frozen=True)
class Consumed:
    """One unit of `kind` was drawn."""

    kind: str


@dataclass(frozen=True)
class Empty:
    """Nothing left to draw."""


EMPTY = Empty()

ConsumeResult = Consumed | Empty


@dataclass
class UnlimitedPool:
    """Always hands out the canonical button. Used for operators."""

    kind: str = CANONICAL_BUTTON

    @property
    def mode(self) -> ResourceMode:
        return ResourceMode.UNLIMITED

    def try_consume(self) -> ConsumeResult:
        return Consumed(self.kind)

    def available(self) -> int | None:
        """None means infinite."""
        return None


@dataclass
class InventoryPool:
    """Draws buttons of any kind from a player's inventory, first slot first.

    The inventory is owned by the player; anything else may withdraw from it
    between calls, which simply shows up as EMPTY sooner.
    """

    inventory: Inventory

    @property
    def mode(self) -> ResourceMode:
        return ResourceMode.CONSUMABLE

    def try_consume(self) -> ConsumeResult:
        kind = self.inventory.take_first_matching(is_button)
        if kind is None:
            return EMPTY
        return Consumed(kind)

    def available(self) -> int | None:
        return self.inventory.count_matching(is_button)


ResourcePool = UnlimitedPool | InventoryPool


def pool_for(operator: bool, inventory: Inventory) -> ResourcePool:
    """Operators place for free; everyone else pays from their inventory."""
    if operator:
        return UnlimitedPool()
    return InventoryPool(inventory)

"""Slot-based player inventory."""

from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_SLOTS = 36
MAX_STACK = 64


@dataclass
class ItemStack:
    """A stack of identical items in one slot."""

    item: str
    count: int

    def is_empty(self) -> bool:
        return self.count <= 0

    def decrement(self, amount: int = 1) -> None:
        self.count = max(0, self.count - amount)


@dataclass
class Inventory:
    """Fixed number of slots, each holding an ItemStack or None.

    Iteration order is slot index order, so scans are deterministic.
    """

    size: int = DEFAULT_SLOTS
    _slots: list[ItemStack | None] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self._slots:
            self._slots = [None] * self.size
        elif len(self._slots) != self.size:
            raise ValueError(f"Expected {self.size} slots, got {len(self._slots)}")

    @classmethod
    def from_counts(cls, counts: dict[str, int], size: int = DEFAULT_SLOTS) -> "Inventory":
        """Build an inventory by filling slots with full stacks, in dict order."""
        inventory = cls(size=size)
        for item, count in counts.items():
            remaining = count
            while remaining > 0:
                added = inventory.add(item, min(remaining, MAX_STACK))
                if added == 0:
                    raise ValueError("Inventory is full")
                remaining -= added
        return inventory

    def __len__(self) -> int:
        return self.size

    def get_stack(self, slot: int) -> ItemStack | None:
        return self._slots[slot]

    def set_stack(self, slot: int, stack: ItemStack | None) -> None:
        self._slots[slot] = stack

    def add(self, item: str, count: int) -> int:
        """Put up to `count` items into the first free slot. Returns how many went in."""
        for i, stack in enumerate(self._slots):
            if stack is None or stack.is_empty():
                placed = min(count, MAX_STACK)
                self._slots[i] = ItemStack(item=item, count=placed)
                return placed
        return 0

    def count_matching(self, predicate: Callable[[str], bool]) -> int:
        """Total number of items across all slots whose item matches."""
        return sum(
            stack.count
            for stack in self._slots
            if stack is not None and not stack.is_empty() and predicate(stack.item)
        )

    def take_first_matching(self, predicate: Callable[[str], bool]) -> str | None:
        """Remove one item from the first matching stack. Returns its item name.

        A slot whose stack runs out is cleared. Returns None if nothing matches.
        """
        for i, stack in enumerate(self._slots):
            if stack is None or stack.is_empty():
                continue
            if predicate(stack.item):
                stack.decrement()
                if stack.is_empty():
                    self._slots[i] = None
                return stack.item
        return None

    def counts(self) -> dict[str, int]:
        """Summed counts per item name."""
        totals: dict[str, int] = {}
        for stack in self._slots:
            if stack is not None and not stack.is_empty():
                totals[stack.item] = totals.get(stack.item, 0) + stack.count
        return totals

"""In-memory state for the SpawnProof server.

Tracks the tick counter, the world, joined players and their active
placement tasks. All state is in-memory only, with no persistence between
restarts.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from spawnproof import Position
from spawnproof.placement import PROGRESS_INTERVAL, TaskRegistry
from spawnproof.world import Inventory, VoxelWorld

DEFAULT_TICK_INTERVAL = 0.05  # 20 ticks per second


@dataclass
class Player:
    """A joined player: where they stand and what they carry."""

    player_id: str
    name: str
    position: Position
    operator: bool = False
    inventory: Inventory = field(default_factory=Inventory)


@dataclass
class ServerState:
    """Tracks the tick counter, world, players and task registry."""

    current_tick: int = 0
    world: VoxelWorld = field(default_factory=VoxelWorld.flat)
    registry: TaskRegistry = field(default_factory=TaskRegistry)
    progress_interval: int = PROGRESS_INTERVAL
    dedicated: bool = True
    clock: Callable[[], float] = time.monotonic
    _players: dict[str, Player] = field(default_factory=dict)

    def advance_tick(self) -> int:
        """Advance to the next tick. Returns the new tick number."""
        self.current_tick += 1
        return self.current_tick

    # --- Players ---

    def add_player(self, player: Player) -> None:
        """Register a player, replacing any previous record with the same ID."""
        self._players[player.player_id] = player

    def get_player(self, player_id: str) -> Player | None:
        return self._players.get(player_id)

    def has_player(self, player_id: str) -> bool:
        return player_id in self._players

    def player_count(self) -> int:
        return len(self._players)

    # --- Tasks ---

    def has_active_task(self, player_id: str) -> bool:
        return player_id in self.registry

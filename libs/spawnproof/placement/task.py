"""PlacementTask — places buttons over many ticks, one step per tick.

A task owns an immutable Plan and a cursor into it. Each call to step()
asks the rate policy for a budget, re-checks the next positions against the
live world, draws a button for each one that is still valid and places it.
The task leaves the registry exactly once, when it completes, runs out of
buttons, or is cancelled. A task that is no longer the registry entry for
its owner ignores further steps.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from spawnproof.models.geometry import Position
from spawnproof.models.messages import TaskCompleted, TaskExhausted, TaskProgress
from spawnproof.placement.enumerator import enumerate_positions
from spawnproof.placement.rate import RateProfile, units_permitted
from spawnproof.placement.registry import TaskRegistry
from spawnproof.placement.resources import Empty, ResourcePool

logger = logging.getLogger(__name__)

PROGRESS_INTERVAL = 500

TaskEvent = TaskProgress | TaskCompleted | TaskExhausted


class TaskState(StrEnum):
    RUNNING = "running"
    COMPLETED = "completed"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


TERMINAL_STATES = frozenset({TaskState.COMPLETED, TaskState.EXHAUSTED, TaskState.CANCELLED})


@dataclass(frozen=True)
class Plan:
    """The positions a task will visit, fixed when the scan ran."""

    center: Position
    radius: int
    positions: tuple[Position, ...]

    @classmethod
    def scan(
        cls,
        center: Position,
        radius: int,
        is_candidate: Callable[[Position], bool],
        min_y: int | None = None,
        max_y: int | None = None,
    ) -> "Plan":
        found = enumerate_positions(center, radius, is_candidate, min_y, max_y)
        return cls(center=center, radius=radius, positions=tuple(found))

    def __len__(self) -> int:
        return len(self.positions)


class PlacementTask:
    """One player's spawn-proofing job."""

    def __init__(
        self,
        owner: str,
        plan: Plan,
        pool: ResourcePool,
        registry: TaskRegistry,
        is_valid: Callable[[Position], bool],
        place: Callable[[Position, str], None],
        profile: RateProfile = RateProfile.SAFE,
        progress_interval: int = PROGRESS_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if progress_interval <= 0:
            raise ValueError("progress_interval must be positive")
        self.owner = owner
        self.plan = plan
        self.pool = pool
        self.profile = profile
        self.progress_interval = progress_interval
        self._registry = registry
        self._is_valid = is_valid
        self._place = place
        self._clock = clock

        self.cursor = 0
        self.placed_count = 0
        self.tick_accumulator = 0
        self.last_progress_at = 0
        self.inventory_exhausted = False
        self.state = TaskState.RUNNING
        self.started_at = clock()

    @property
    def remaining(self) -> int:
        return len(self.plan) - self.cursor

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def elapsed_seconds(self) -> float:
        return max(0.0, self._clock() - self.started_at)

    def start(self) -> bool:
        """Register under the owner. Returns False if the owner is busy."""
        if self.is_terminal or not self._registry.register(self.owner, self):
            return False
        self.started_at = self._clock()
        logger.info(
            "Task for %s started: %d positions, radius %d, %s pool, %s rate",
            self.owner,
            len(self.plan),
            self.plan.radius,
            self.pool.mode,
            self.profile,
        )
        return True

    def step(self) -> list[TaskEvent]:
        """Advance by one tick. Returns the events produced, possibly none."""
        if not self._registry.is_current(self.owner, self):
            return []

        if self.cursor >= len(self.plan):
            return self._complete()

        budget, self.tick_accumulator = units_permitted(self.profile, self.tick_accumulator)
        if budget == 0:
            return []

        positions = self.plan.positions
        for _ in range(budget):
            if self.cursor >= len(positions):
                break
            # Cancelled from another thread mid-step
            if self.state is TaskState.CANCELLED:
                return []
            pos = positions[self.cursor]
            self.cursor += 1

            # The world may have changed since the scan
            if not self._is_valid(pos):
                continue

            result = self.pool.try_consume()
            if isinstance(result, Empty):
                self.inventory_exhausted = True
                return self._exhaust()

            self._place(pos, result.kind)
            self.placed_count += 1

        events: list[TaskEvent] = []
        if self.placed_count - self.last_progress_at >= self.progress_interval:
            self.last_progress_at = self.placed_count
            events.append(
                TaskProgress(
                    player_id=self.owner,
                    placed=self.placed_count,
                    remaining=self.remaining,
                )
            )
            logger.info(
                "Task for %s: %d placed, %d remaining",
                self.owner,
                self.placed_count,
                self.remaining,
            )
        return events

    def cancel(self) -> bool:
        """Stop the task if it is still registered. Returns False otherwise."""
        if not self._registry.remove_if(self.owner, self):
            return False
        self.state = TaskState.CANCELLED
        logger.info("Task for %s cancelled after %d placed", self.owner, self.placed_count)
        return True

    # --- Terminal transitions ---

    def _complete(self) -> list[TaskEvent]:
        # A concurrent cancel already took the task out and reported it
        if not self._registry.remove_if(self.owner, self):
            return []
        self.state = TaskState.COMPLETED
        elapsed = self.elapsed_seconds
        logger.info(
            "Task for %s complete: %d placed in %.1fs",
            self.owner,
            self.placed_count,
            elapsed,
        )
        return [
            TaskCompleted(
                player_id=self.owner,
                placed=self.placed_count,
                elapsed_seconds=round(elapsed, 3),
            )
        ]

    def _exhaust(self) -> list[TaskEvent]:
        if not self._registry.remove_if(self.owner, self):
            return []
        self.state = TaskState.EXHAUSTED
        # The position that found no button still needs one
        still_needed = self.remaining + 1
        logger.info(
            "Task for %s ran out of buttons: %d placed, %d still needed",
            self.owner,
            self.placed_count,
            still_needed,
        )
        return [
            TaskExhausted(
                player_id=self.owner,
                placed=self.placed_count,
                remaining=still_needed,
            )
        ]

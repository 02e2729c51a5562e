"""Placement core — scan, rate limiting, button supply and the task state machine."""

from spawnproof.placement.enumerator import enumerate_positions
from spawnproof.placement.preview import PreviewEstimate, estimate_preview
from spawnproof.placement.rate import (
    RATE_LIMITS,
    TICKS_PER_SECOND,
    RateLimit,
    RateProfile,
    profile_for,
    units_permitted,
)
from spawnproof.placement.registry import TaskRegistry
from spawnproof.placement.resources import (
    EMPTY,
    Consumed,
    Empty,
    InventoryPool,
    ResourceMode,
    ResourcePool,
    UnlimitedPool,
    pool_for,
)
from spawnproof.placement.task import (
    PROGRESS_INTERVAL,
    TERMINAL_STATES,
    PlacementTask,
    Plan,
    TaskEvent,
    TaskState,
)

__all__ = [
    "Consumed",
    "EMPTY",
    "Empty",
    "InventoryPool",
    "PROGRESS_INTERVAL",
    "PlacementTask",
    "Plan",
    "PreviewEstimate",
    "RATE_LIMITS",
    "RateLimit",
    "RateProfile",
    "ResourceMode",
    "ResourcePool",
    "TERMINAL_STATES",
    "TICKS_PER_SECOND",
    "TaskEvent",
    "TaskRegistry",
    "TaskState",
    "UnlimitedPool",
    "enumerate_positions",
    "estimate_preview",
    "pool_for",
    "profile_for",
    "units_permitted",
]

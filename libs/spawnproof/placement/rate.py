"""Rate profiles — how many placements a task may make per tick."""

from dataclasses import dataclass
from enum import StrEnum

# The host tick rate every throughput figure is derived from
TICKS_PER_SECOND = 20


class RateProfile(StrEnum):
    SAFE = "safe"
    FAST = "fast"


@dataclass(frozen=True)
class RateLimit:
    """`units` placements every `every_ticks` ticks."""

    units: int
    every_ticks: int

    @property
    def per_second(self) -> float:
        return self.units * TICKS_PER_SECOND / self.every_ticks


RATE_LIMITS: dict[RateProfile, RateLimit] = {
    RateProfile.SAFE: RateLimit(units=1, every_ticks=2),  # ~10/sec, server safe
    RateProfile.FAST: RateLimit(units=10, every_ticks=1),  # ~200/sec, single-player
}


def units_permitted(profile: RateProfile, tick_accumulator: int) -> tuple[int, int]:
    """Return (units allowed this tick, new accumulator value).

    Profiles that fire every tick ignore the accumulator. Others count ticks
    and release their units once the count reaches `every_ticks`.
    """
    limit = RATE_LIMITS[profile]
    if limit.every_ticks <= 1:
        return limit.units, tick_accumulator

    tick_accumulator += 1
    if tick_accumulator < limit.every_ticks:
        return 0, tick_accumulator
    return limit.units, 0


def profile_for(fast: bool) -> RateProfile:
    return RateProfile.FAST if fast else RateProfile.SAFE

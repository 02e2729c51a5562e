"""Preview estimates — pure arithmetic over a scan result."""

from dataclasses import dataclass

from spawnproof.placement.rate import RATE_LIMITS, RateProfile


@dataclass(frozen=True)
class PreviewEstimate:
    radius: int
    needed: int
    available: int | None  # None = unlimited supply
    shortfall: int
    safe_seconds: int
    fast_seconds: int

    @property
    def unlimited(self) -> bool:
        return self.available is None

    @property
    def enough(self) -> bool:
        return self.shortfall == 0


def seconds_for(count: int, profile: RateProfile) -> int:
    """Whole seconds needed to place `count` buttons at the profile's steady rate."""
    per_second = RATE_LIMITS[profile].per_second
    return int(count // per_second)


def estimate_preview(radius: int, needed: int, available: int | None) -> PreviewEstimate:
    """Counts and time estimates for placing `needed` buttons.

    `available` is the number of buttons the player holds, or None when the
    player does not pay for them.
    """
    if needed < 0:
        raise ValueError("needed must be non-negative")
    shortfall = 0 if available is None else max(0, needed - available)
    return PreviewEstimate(
        radius=radius,
        needed=needed,
        available=available,
        shortfall=shortfall,
        safe_seconds=seconds_for(needed, RateProfile.SAFE),
        fast_seconds=seconds_for(needed, RateProfile.FAST),
    )

"""Unit tests for rate profiles."""

from spawnproof.placement import (
    RATE_LIMITS,
    RateProfile,
    profile_for,
    units_permitted,
)


def _units_over(profile: RateProfile, ticks: int) -> list[int]:
    acc = 0
    granted: list[int] = []
    for _ in range(ticks):
        units, acc = units_permitted(profile, acc)
        granted.append(units)
    return granted


class TestUnitsPermitted:
    def test_safe_alternates(self):
        assert _units_over(RateProfile.SAFE, 6) == [0, 1, 0, 1, 0, 1]

    def test_safe_resets_accumulator(self):
        units, acc = units_permitted(RateProfile.SAFE, 1)
        assert units == 1
        assert acc == 0

    def test_safe_counts_up(self):
        units, acc = units_permitted(RateProfile.SAFE, 0)
        assert units == 0
        assert acc == 1

    def test_fast_every_tick(self):
        assert _units_over(RateProfile.FAST, 3) == [10, 10, 10]

    def test_fast_ignores_accumulator(self):
        assert units_permitted(RateProfile.FAST, 7) == (10, 7)

    def test_throughput(self):
        assert sum(_units_over(RateProfile.SAFE, 20)) == 10
        assert sum(_units_over(RateProfile.FAST, 20)) == 200


class TestProfiles:
    def test_per_second(self):
        assert RATE_LIMITS[RateProfile.SAFE].per_second == 10
        assert RATE_LIMITS[RateProfile.FAST].per_second == 200

    def test_profile_for(self):
        assert profile_for(True) == RateProfile.FAST
        assert profile_for(False) == RateProfile.SAFE

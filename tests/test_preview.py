"""Unit tests for preview estimates."""

import pytest

from spawnproof.placement import RateProfile, estimate_preview
from spawnproof.placement.preview import seconds_for


class TestEstimatePreview:
    def test_unlimited(self):
        estimate = estimate_preview(64, 5000, None)
        assert estimate.unlimited is True
        assert estimate.shortfall == 0
        assert estimate.enough is True

    def test_shortfall(self):
        estimate = estimate_preview(32, 500, 320)
        assert estimate.shortfall == 180
        assert estimate.enough is False

    def test_enough(self):
        estimate = estimate_preview(32, 500, 640)
        assert estimate.shortfall == 0
        assert estimate.enough is True

    def test_time_estimates(self):
        estimate = estimate_preview(128, 4567, None)
        assert estimate.safe_seconds == 456
        assert estimate.fast_seconds == 22

    def test_small_counts_round_down(self):
        estimate = estimate_preview(8, 9, 0)
        assert estimate.safe_seconds == 0
        assert estimate.fast_seconds == 0
        assert estimate.shortfall == 9

    def test_negative_needed_rejected(self):
        with pytest.raises(ValueError):
            estimate_preview(8, -1, None)


class TestSecondsFor:
    def test_rates(self):
        assert seconds_for(1000, RateProfile.SAFE) == 100
        assert seconds_for(1000, RateProfile.FAST) == 5

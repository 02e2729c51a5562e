"""Unit tests for the sphere scan."""

import pytest

from spawnproof import Position
from spawnproof.placement import enumerate_positions


def _always(_: Position) -> bool:
    return True


def _brute_force(center: Position, radius: int) -> set[Position]:
    r = radius
    return {
        Position(center.x + dx, center.y + dy, center.z + dz)
        for dx in range(-r, r + 1)
        for dy in range(-r, r + 1)
        for dz in range(-r, r + 1)
        if dx * dx + dy * dy + dz * dz <= r * r
    }


class TestSphereBounds:
    def test_radius_zero_is_center_only(self):
        center = Position(3, 4, 5)
        assert enumerate_positions(center, 0, _always) == [center]

    def test_radius_one_is_center_and_faces(self):
        assert len(enumerate_positions(Position(0, 0, 0), 1, _always)) == 7

    def test_radius_two_count(self):
        # 1 + 6 + 12 + 8 + 6 lattice points at squared distance 0..4
        assert len(enumerate_positions(Position(0, 0, 0), 2, _always)) == 33

    def test_negative_radius_rejected(self):
        with pytest.raises(ValueError):
            enumerate_positions(Position(0, 0, 0), -1, _always)

    @pytest.mark.parametrize("radius", [8, 12])
    def test_matches_brute_force(self, radius):
        center = Position(10, 64, -7)
        found = enumerate_positions(center, radius, _always)
        assert len(found) == len(set(found))
        assert set(found) == _brute_force(center, radius)

    def test_all_within_squared_radius(self):
        center = Position(0, 64, 0)
        for pos in enumerate_positions(center, 8, _always):
            assert pos.squared_distance(center) <= 64


class TestOrdering:
    def test_y_then_x_then_z(self):
        found = enumerate_positions(Position(0, 0, 0), 3, _always)
        assert found == sorted(found, key=lambda p: (p.y, p.x, p.z))

    def test_deterministic(self):
        center = Position(5, 70, 5)
        first = enumerate_positions(center, 8, lambda p: (p.x + p.z) % 3 == 0)
        second = enumerate_positions(center, 8, lambda p: (p.x + p.z) % 3 == 0)
        assert first == second


class TestFiltering:
    def test_predicate_applied(self):
        found = enumerate_positions(Position(0, 0, 0), 8, lambda p: p.y == 0)
        assert found
        assert all(p.y == 0 for p in found)

    def test_predicate_rejects_everything(self):
        assert enumerate_positions(Position(0, 0, 0), 8, lambda p: False) == []

    def test_predicate_only_called_inside_sphere(self):
        center = Position(0, 0, 0)
        seen: list[Position] = []

        def record(pos: Position) -> bool:
            seen.append(pos)
            return True

        enumerate_positions(center, 4, record)
        assert all(p.squared_distance(center) <= 16 for p in seen)

    def test_min_y_clamp(self):
        # y=0: 13 cells, y=1: 9 cells, y=2: 1 cell
        found = enumerate_positions(Position(0, 0, 0), 2, _always, min_y=0)
        assert len(found) == 23
        assert min(p.y for p in found) == 0

    def test_max_y_clamp(self):
        found = enumerate_positions(Position(0, 0, 0), 2, _always, max_y=0)
        assert len(found) == 23
        assert max(p.y for p in found) == 0

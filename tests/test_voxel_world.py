"""Unit tests for VoxelWorld block access and spawn checks."""

import pytest

from spawnproof import Position
from spawnproof.world import VoxelWorld


class TestFlatWorld:
    def test_layers(self, flat_world: VoxelWorld):
        assert flat_world.get_block(Position(0, 63, 0)) == "grass_block"
        assert flat_world.get_block(Position(0, 10, 0)) == "stone"
        assert flat_world.get_block(Position(0, -64, 0)) == "bedrock"
        assert flat_world.get_block(Position(0, 64, 0)) == "air"

    def test_out_of_bounds_is_air(self, flat_world: VoxelWorld):
        assert flat_world.get_block(Position(0, -65, 0)) == "air"
        assert flat_world.get_block(Position(0, 320, 0)) == "air"

    def test_surface_must_be_inside_limits(self):
        with pytest.raises(ValueError):
            VoxelWorld.flat(surface_y=-64)

    def test_chunks_loaded(self, flat_world: VoxelWorld):
        assert flat_world.is_chunk_loaded(Position(31, 64, -16))
        assert not flat_world.is_chunk_loaded(Position(32, 64, 0))


class TestEdits:
    def test_set_block_overrides_layer(self, flat_world: VoxelWorld):
        pos = Position(1, 63, 1)
        flat_world.set_block(pos, "dirt")
        assert flat_world.get_block(pos) == "dirt"

    def test_unknown_block_rejected(self, flat_world: VoxelWorld):
        with pytest.raises(ValueError):
            flat_world.set_block(Position(0, 64, 0), "unobtainium")

    def test_outside_limits_rejected(self, flat_world: VoxelWorld):
        with pytest.raises(ValueError):
            flat_world.set_block(Position(0, 400, 0), "stone")

    def test_place_button_requires_button(self, flat_world: VoxelWorld):
        with pytest.raises(ValueError):
            flat_world.place_button(Position(0, 64, 0), "stone")

    def test_count_blocks(self, flat_world: VoxelWorld):
        flat_world.place_button(Position(0, 64, 0), "oak_button")
        flat_world.place_button(Position(1, 64, 0), "stone_button")
        assert flat_world.count_blocks("oak_button") == 1
        assert flat_world.count_blocks("stone_button") == 1


class TestIsSpawnable:
    def test_on_grass(self, flat_world: VoxelWorld):
        assert flat_world.is_spawnable(Position(0, 64, 0))

    def test_inside_ground(self, flat_world: VoxelWorld):
        assert not flat_world.is_spawnable(Position(0, 63, 0))

    def test_floating(self, flat_world: VoxelWorld):
        assert not flat_world.is_spawnable(Position(0, 65, 0))

    def test_after_button_placed(self, flat_world: VoxelWorld):
        pos = Position(0, 64, 0)
        flat_world.place_button(pos, "stone_button")
        assert not flat_world.is_spawnable(pos)

    def test_headroom_required(self, flat_world: VoxelWorld):
        flat_world.set_block(Position(0, 65, 0), "stone")
        assert not flat_world.is_spawnable(Position(0, 64, 0))

    def test_not_on_bedrock(self):
        world = VoxelWorld.flat(chunk_radius=0)
        world.set_block(Position(0, 63, 0), "air")
        world.set_block(Position(0, 64, 0), "bedrock")
        assert not world.is_spawnable(Position(0, 65, 0))

    @pytest.mark.parametrize(
        ("below", "expected"),
        [
            ("soul_sand", True),
            ("soul_soil", True),
            ("netherrack", True),
            ("glass", True),
            ("bottom_slab", False),
            ("fence", False),
            ("water", False),
        ],
    )
    def test_surfaces(self, flat_world: VoxelWorld, below: str, expected: bool):
        flat_world.set_block(Position(0, 63, 0), below)
        assert flat_world.is_spawnable(Position(0, 64, 0)) is expected

    def test_unloaded_chunk(self, flat_world: VoxelWorld):
        assert not flat_world.is_spawnable(Position(100, 64, 100))

    def test_can_place_floor_button(self, flat_world: VoxelWorld):
        assert flat_world.can_place_floor_button(Position(0, 64, 0))
        assert not flat_world.can_place_floor_button(Position(0, 65, 0))
        assert not flat_world.can_place_floor_button(Position(0, -64, 0))

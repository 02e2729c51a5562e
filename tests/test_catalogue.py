"""Unit tests for the block catalogue."""

import pytest

from spawnproof import (
    BLOCKS,
    BUTTON_KINDS,
    CANONICAL_BUTTON,
    block_info,
    is_button,
    is_valid_block,
)


class TestButtons:
    def test_canonical_is_a_button(self):
        assert is_button(CANONICAL_BUTTON)

    def test_all_kinds_registered(self):
        assert len(BUTTON_KINDS) == 13
        assert {"oak_button", "warped_button", "polished_blackstone_button"} <= BUTTON_KINDS

    def test_non_buttons(self):
        assert not is_button("stone")
        assert not is_button(None)
        assert not is_button("")


class TestBlocks:
    def test_air(self):
        assert block_info("air").air is True

    def test_solids_support_buttons(self):
        for name in ("stone", "grass_block", "netherrack", "top_slab"):
            info = block_info(name)
            assert info.full_top_face and info.supports_attachment

    def test_soul_sand_counts_as_a_full_face(self):
        info = block_info("soul_sand")
        assert info.full_top_face and info.supports_attachment

    def test_bottom_slab_rejects_spawns(self):
        assert block_info("bottom_slab").full_top_face is False

    def test_unknown_block(self):
        assert not is_valid_block("unobtainium")
        with pytest.raises(ValueError):
            block_info("unobtainium")

    def test_names_match_keys(self):
        assert all(info.name == key for key, info in BLOCKS.items())

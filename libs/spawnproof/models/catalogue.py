"""Catalogue data — blocks and button items known to SpawnProof."""

from pydantic import BaseModel

BUTTONS_PER_STACK = 64


class BlockInfo(BaseModel):
    """Physical properties of a block that matter for spawn-proofing."""

    name: str
    air: bool = False
    full_top_face: bool = False  # solid full square on the upward face
    supports_attachment: bool = False  # floor buttons can attach on top
    button: bool = False


def _solid(name: str) -> BlockInfo:
    return BlockInfo(name=name, full_top_face=True, supports_attachment=True)


def _button(name: str) -> BlockInfo:
    return BlockInfo(name=name, button=True)


# --- Block catalogue ---

BLOCKS: dict[str, BlockInfo] = {
    "air": BlockInfo(name="air", air=True),
    "bedrock": _solid("bedrock"),
    "stone": _solid("stone"),
    "dirt": _solid("dirt"),
    "grass_block": _solid("grass_block"),
    "netherrack": _solid("netherrack"),
    "soul_sand": _solid("soul_sand"),
    "soul_soil": _solid("soul_soil"),
    "blackstone": _solid("blackstone"),
    "glass": _solid("glass"),
    "bottom_slab": BlockInfo(name="bottom_slab"),
    "top_slab": _solid("top_slab"),
    "fence": BlockInfo(name="fence", supports_attachment=True),
    "water": BlockInfo(name="water"),
    "lava": BlockInfo(name="lava"),
    "torch": BlockInfo(name="torch"),
    # Buttons (placed blocks)
    "stone_button": _button("stone_button"),
    "polished_blackstone_button": _button("polished_blackstone_button"),
    "oak_button": _button("oak_button"),
    "spruce_button": _button("spruce_button"),
    "birch_button": _button("birch_button"),
    "jungle_button": _button("jungle_button"),
    "acacia_button": _button("acacia_button"),
    "dark_oak_button": _button("dark_oak_button"),
    "mangrove_button": _button("mangrove_button"),
    "cherry_button": _button("cherry_button"),
    "bamboo_button": _button("bamboo_button"),
    "crimson_button": _button("crimson_button"),
    "warped_button": _button("warped_button"),
}

# Placed when the player does not pay for buttons (operator mode)
CANONICAL_BUTTON = "stone_button"

# The block that can never be built on
BOUNDARY_BLOCK = "bedrock"

BUTTON_KINDS: frozenset[str] = frozenset(
    name for name, info in BLOCKS.items() if info.button
)


def is_valid_block(name: str) -> bool:
    """Check if a block name exists in the catalogue."""
    return name in BLOCKS


def is_button(name: str | None) -> bool:
    """Check if an item name is a placeable button of any kind."""
    return name in BUTTON_KINDS


def block_info(name: str) -> BlockInfo:
    """Look up a block's properties.

    Raises:
        ValueError: If the block is not in the catalogue.
    """
    info = BLOCKS.get(name)
    if info is None:
        raise ValueError(f"Unknown block: {name!r}")
    return info

"""In-memory voxel world: layered base terrain plus sparse edits."""

from dataclasses import dataclass, field

from spawnproof.models.catalogue import BOUNDARY_BLOCK, block_info, is_button
from spawnproof.models.geometry import Position


DEFAULT_BOTTOM_Y = -64
DEFAULT_TOP_Y = 319


@dataclass
class VoxelWorld:
    """A world made of horizontal base layers with per-block overrides.

    `layers` maps a y level to the block filling that whole level.
    `overrides` holds individual edits and wins over the layers.
    Only positions in `loaded_chunks` are visible to spawn checks.
    """

    bottom_y: int = DEFAULT_BOTTOM_Y
    top_y: int = DEFAULT_TOP_Y
    layers: dict[int, str] = field(default_factory=dict)
    overrides: dict[Position, str] = field(default_factory=dict)
    loaded_chunks: set[tuple[int, int]] = field(default_factory=set)

    @classmethod
    def flat(
        cls,
        surface_y: int = 63,
        chunk_radius: int = 10,
        surface_block: str = "grass_block",
        bottom_y: int = DEFAULT_BOTTOM_Y,
        top_y: int = DEFAULT_TOP_Y,
    ) -> "VoxelWorld":
        """Bedrock floor, stone up to the surface, `surface_block` on top.

        Chunks within `chunk_radius` of the origin column are loaded.
        """
        if not bottom_y < surface_y <= top_y:
            raise ValueError("surface_y must lie inside the build limits")
        layers = {bottom_y: BOUNDARY_BLOCK}
        for y in range(bottom_y + 1, surface_y):
            layers[y] = "stone"
        layers[surface_y] = surface_block
        world = cls(bottom_y=bottom_y, top_y=top_y, layers=layers)
        world.load_chunks_around(Position(0, surface_y, 0), chunk_radius)
        return world

    # --- Chunks ---

    def load_chunks_around(self, center: Position, chunk_radius: int) -> None:
        cx, cz = center.chunk
        for x in range(cx - chunk_radius, cx + chunk_radius + 1):
            for z in range(cz - chunk_radius, cz + chunk_radius + 1):
                self.loaded_chunks.add((x, z))

    def is_chunk_loaded(self, pos: Position) -> bool:
        return pos.chunk in self.loaded_chunks

    # --- Blocks ---

    def in_bounds(self, pos: Position) -> bool:
        return self.bottom_y <= pos.y <= self.top_y

    def get_block(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            return "air"
        block = self.overrides.get(pos)
        if block is not None:
            return block
        return self.layers.get(pos.y, "air")

    def set_block(self, pos: Position, block: str) -> None:
        block_info(block)  # validates the name
        if not self.in_bounds(pos):
            raise ValueError(f"{pos} is outside the build limits")
        self.overrides[pos] = block

    def place_button(self, pos: Position, kind: str) -> None:
        """Place a floor-oriented button of `kind` at `pos`."""
        if not is_button(kind):
            raise ValueError(f"Not a button: {kind!r}")
        self.set_block(pos, kind)

    # --- Spawn checks ---

    def is_spawnable(self, pos: Position) -> bool:
        """True if a mob could spawn at `pos` and a floor button can go there.

        The cell and the one above must be air, the block below must not be
        the boundary block and must present a full top face a button can
        attach to, and the chunk must be loaded.
        """
        if not self.is_chunk_loaded(pos):
            return False
        if not block_info(self.get_block(pos)).air:
            return False
        if not block_info(self.get_block(pos.up())).air:
            return False
        below = block_info(self.get_block(pos.down()))
        if below.name == BOUNDARY_BLOCK:
            return False
        if not below.full_top_face:
            return False
        return self.can_place_floor_button(pos)

    def can_place_floor_button(self, pos: Position) -> bool:
        """A floor button needs an attachable block directly beneath it."""
        if not self.in_bounds(pos) or not self.in_bounds(pos.down()):
            return False
        return block_info(self.get_block(pos.down())).supports_attachment

    def count_blocks(self, block: str) -> int:
        """Number of overridden cells currently holding `block`."""
        return sum(1 for name in self.overrides.values() if name == block)

"""World collaborators — voxel grid and player inventories."""

from spawnproof.world.inventory import Inventory, ItemStack
from spawnproof.world.voxel import VoxelWorld

__all__ = [
    "Inventory",
    "ItemStack",
    "VoxelWorld",
]

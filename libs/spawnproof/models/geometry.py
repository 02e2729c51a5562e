"""Block positions in world space."""

from dataclasses import dataclass

CHUNK_SHIFT = 4  # 16x16 columns


@dataclass(frozen=True, order=True)
class Position:
    """An integer block coordinate. Hashable, compared by value."""

    x: int
    y: int
    z: int

    def offset(self, dx: int = 0, dy: int = 0, dz: int = 0) -> "Position":
        return Position(self.x + dx, self.y + dy, self.z + dz)

    def up(self) -> "Position":
        return self.offset(dy=1)

    def down(self) -> "Position":
        return self.offset(dy=-1)

    def squared_distance(self, other: "Position") -> int:
        """Squared Euclidean distance, exact in integers."""
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    @property
    def chunk(self) -> tuple[int, int]:
        """The (cx, cz) column this position belongs to."""
        return self.x >> CHUNK_SHIFT, self.z >> CHUNK_SHIFT

    def as_list(self) -> list[int]:
        return [self.x, self.y, self.z]

    @classmethod
    def from_list(cls, coords: list[int] | tuple[int, int, int]) -> "Position":
        if len(coords) != 3:
            raise ValueError(f"Position needs 3 coordinates, got {len(coords)}")
        x, y, z = coords
        return cls(int(x), int(y), int(z))

"""Sphere scan — ordered list of candidate positions around a center."""

from collections.abc import Callable

from spawnproof.models.geometry import Position


def enumerate_positions(
    center: Position,
    radius: int,
    is_candidate: Callable[[Position], bool],
    min_y: int | None = None,
    max_y: int | None = None,
) -> list[Position]:
    """Return every position within `radius` of `center` that passes `is_candidate`.

    Cells of the cube `[center - radius, center + radius]` are visited y first,
    then x, then z, all ascending, so the result order is reproducible. A cell
    is kept when `dx² + dy² + dz² <= radius²` and the predicate holds.
    `min_y`/`max_y` clamp the vertical range to the world's build limits.

    Raises:
        ValueError: If radius is negative.
    """
    if radius < 0:
        raise ValueError(f"Radius must be non-negative, got {radius}")

    limit = radius * radius
    y_start = center.y - radius
    y_stop = center.y + radius
    if min_y is not None:
        y_start = max(y_start, min_y)
    if max_y is not None:
        y_stop = min(y_stop, max_y)

    found: list[Position] = []
    for y in range(y_start, y_stop + 1):
        dy2 = (y - center.y) ** 2
        for x in range(center.x - radius, center.x + radius + 1):
            dxy2 = dy2 + (x - center.x) ** 2
            if dxy2 > limit:
                continue
            for z in range(center.z - radius, center.z + radius + 1):
                if dxy2 + (z - center.z) ** 2 > limit:
                    continue
                pos = Position(x, y, z)
                if is_candidate(pos):
                    found.append(pos)
    return found


"""Random target selection around an anchor cell."""

import random
from typing import Callable, Optional

from .cell import Position


def in_bounds(position: Position, grid_size: int) -> bool:
    x, y = position
    return 0 <= x < grid_size and 0 <= y < grid_size


def random_position(
    anchor: Position,
    radius: int,
    is_clear: Callable[[Position], bool],
    rng: random.Random,
    grid_size: int,
) -> Optional[Position]:
    """Pick one random target within ``radius`` of ``anchor``.

    Each offset component is drawn uniformly from ``[-radius, radius)``. The
    attempt is single-shot: a zero offset, an out-of-bounds target or a
    target rejected by ``is_clear`` all yield ``None``.

    Args:
        anchor: (x, y) position the offset is applied to
        radius: Maximum offset on each axis
        is_clear: Occupancy oracle deciding whether a target is acceptable
        rng: Source of random draws
        grid_size: Side length of the square grid

    Returns:
        The target position, or None if this attempt found nothing
    """
    if radius <= 0:
        return None

    dx = rng.randrange(-radius, radius)
    dy = rng.randrange(-radius, radius)
    if dx == 0 and dy == 0:
        return None

    target = (anchor[0] + dx, anchor[1] + dy)
    if not in_bounds(target, grid_size):
        return None
    if not is_clear(target):
        return None
    return target

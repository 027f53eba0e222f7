"""Per-kind transition and reproduction rules.

The scheduler in :mod:`forest_growth.model` decides *when* these rules fire;
this module only decides *what* they produce, given an occupancy oracle that
reads the start-of-tick grid.
"""

import random
from typing import Callable, Dict, Set, Tuple

from .cell import Cell, OccupantKind, Position
from .constants import (
    FAST_ATTEMPTS,
    FAST_RADIUS,
    FIRE_ATTEMPTS,
    FIRE_RADIUS,
    PIONEER_ODDS,
    SLOW_ATTEMPTS,
    SLOW_RADIUS,
    TREE_FALL_FAST_ABOVE,
    TREE_FALL_LENGTH,
    TREE_FALL_ROLL,
    TREE_FALL_SLOW_BELOW,
)
from .positions import in_bounds, random_position

# north, east, south, west
DIRECTIONS: Tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def _spawn(
    position: Position,
    radius: int,
    attempts: int,
    offspring: Cell,
    is_clear: Callable[[Position], bool],
    rng: random.Random,
    grid_size: int,
) -> Dict[Position, Cell]:
    spawned: Dict[Position, Cell] = {}
    for _ in range(attempts):
        target = random_position(position, radius, is_clear, rng, grid_size)
        if target is not None:
            spawned[target] = offspring
    return spawned


def reproduce(
    cell: Cell,
    position: Position,
    is_clear: Callable[[Position], bool],
    rng: random.Random,
    grid_size: int,
) -> Dict[Position, Cell]:
    """Compute the offspring ``cell`` spawns this tick.

    Every attempt is an independent call to the position generator against
    the same oracle, so attempts within one tick never see each other's
    placements. Duplicate targets collapse to a single entry.

    Args:
        cell: The (already aged) parent cell
        position: Where the parent sits
        is_clear: Occupancy oracle; for fire it must accept only flammable targets
        rng: Source of random draws
        grid_size: Side length of the square grid

    Returns:
        Mapping of target position to the cell to be written there
    """
    kind = cell.kind
    if kind == OccupantKind.SlowGrowing:
        return _spawn(position, SLOW_RADIUS, SLOW_ATTEMPTS,
                      Cell.fresh(OccupantKind.SlowGrowing), is_clear, rng, grid_size)
    if kind == OccupantKind.FastGrowing:
        return _spawn(position, FAST_RADIUS, FAST_ATTEMPTS,
                      Cell.fresh(OccupantKind.FastGrowing), is_clear, rng, grid_size)
    if kind == OccupantKind.Burning:
        # Spread fire inherits what is left of the parent's burn time
        spread = Cell(age=max(cell.age - 1, 0), kind=OccupantKind.Burning)
        return _spawn(position, FIRE_RADIUS, FIRE_ATTEMPTS,
                      spread, is_clear, rng, grid_size)
    return {}


def tree_fall(
    position: Position,
    rng: random.Random,
    grid_size: int,
) -> Tuple[Dict[Position, Cell], Set[Position]]:
    """Resolve a dying slow-growing tree falling over.

    A direction is chosen uniformly and the trunk covers the next
    ``TREE_FALL_LENGTH`` cells. Each covered cell independently becomes a
    slow-growing seedling, a fast-growing seedling or cleared ground.

    Returns:
        (plants, clears) to be merged into the pending-change sets
    """
    dx, dy = DIRECTIONS[rng.randrange(len(DIRECTIONS))]
    plants: Dict[Position, Cell] = {}
    clears: Set[Position] = set()

    for distance in range(1, TREE_FALL_LENGTH + 1):
        target = (position[0] + dx * distance, position[1] + dy * distance)
        if not in_bounds(target, grid_size):
            continue
        roll = rng.randrange(TREE_FALL_ROLL)
        if roll < TREE_FALL_SLOW_BELOW:
            plants[target] = Cell.fresh(OccupantKind.SlowGrowing)
        elif roll > TREE_FALL_FAST_ABOVE:
            plants[target] = Cell.fresh(OccupantKind.FastGrowing)
        else:
            clears.add(target)

    return plants, clears


def pioneer_seedling(rng: random.Random) -> bool:
    """Whether a patch of ash is colonised by a fast-growing seedling."""
    return rng.randrange(PIONEER_ODDS) == 0

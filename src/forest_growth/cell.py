"""Cell and occupant kind definitions for the forest growth simulation."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from .constants import BURNED_MAX, BURNING_MAX, FAST_MAX, SLOW_MAX

Position = Tuple[int, int]


class OccupantKind(Enum):
    """Possible occupants of a grid cell."""
    SlowGrowing = 0
    FastGrowing = 1
    Burning = 2
    Burned = 3

    @property
    def max_age(self) -> int:
        return MAX_AGE[self]


MAX_AGE = {
    OccupantKind.SlowGrowing: SLOW_MAX,
    OccupantKind.FastGrowing: FAST_MAX,
    OccupantKind.Burning: BURNING_MAX,
    OccupantKind.Burned: BURNED_MAX,
}

TREE_KINDS = frozenset({OccupantKind.SlowGrowing, OccupantKind.FastGrowing})
FIRE_KINDS = frozenset({OccupantKind.Burning, OccupantKind.Burned})


@dataclass(frozen=True)
class Cell:
    """A single occupant of the grid.

    ``age`` counts the ticks remaining before the occupant expires, so a
    fresh cell starts at its kind's maximum and counts down to zero.
    """

    age: int
    kind: OccupantKind

    def __post_init__(self):
        if self.age < 0:
            raise ValueError(f"Cell age cannot be negative, got {self.age}")

    @classmethod
    def fresh(cls, kind: OccupantKind) -> "Cell":
        """Create a cell of ``kind`` at its maximum age."""
        return cls(age=kind.max_age, kind=kind)

    @property
    def is_tree(self) -> bool:
        return self.kind in TREE_KINDS

    @property
    def is_fire(self) -> bool:
        return self.kind in FIRE_KINDS

    def aged(self) -> "Cell":
        """Return a copy one tick older, floored at zero."""
        return replace(self, age=max(self.age - 1, 0))

    def __str__(self) -> str:
        return f"{self.kind.name}(age={self.age})"


def is_flammable(cell: Optional[Cell]) -> bool:
    """Fire may only spread onto living trees."""
    return cell is not None and cell.is_tree

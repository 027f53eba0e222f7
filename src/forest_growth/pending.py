"""Per-tick scratch sets of changes waiting to be applied to the grid."""

from dataclasses import dataclass, field
from typing import Dict, Set

from .cell import Cell, Position


@dataclass
class PendingChanges:
    """The four pending-change sets reconciled at the end of every tick.

    Both the scan phase and externally injected mutations write here; the
    apply phase consumes and drains them.
    """

    to_burning: Dict[Position, Cell] = field(default_factory=dict)
    to_burned: Set[Position] = field(default_factory=set)
    to_cleared: Set[Position] = field(default_factory=set)
    to_planted: Dict[Position, Cell] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.to_burning or self.to_burned or self.to_cleared or self.to_planted)

    def drain(self) -> None:
        self.to_burning.clear()
        self.to_burned.clear()
        self.to_cleared.clear()
        self.to_planted.clear()

    def __len__(self) -> int:
        return (len(self.to_burning) + len(self.to_burned)
                + len(self.to_cleared) + len(self.to_planted))

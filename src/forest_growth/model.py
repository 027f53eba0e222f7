"""Forest growth and fire model implementation."""

import logging
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple

from mesa import Model

from .cell import Cell, OccupantKind, Position, TREE_KINDS, is_flammable
from .config import SimulationConfig
from .constants import BURNED_MAX
from .grid import GridStore
from .pending import PendingChanges
from .rules import pioneer_seedling, reproduce, tree_fall

logger = logging.getLogger(__name__)


class SimState(Enum):
    """Lifecycle of the whole engine."""
    Setup = 0
    Running = 1
    Ended = 2


class ForestModel(Model):
    """Cellular automaton of forest growth, tree fall and fire.

    Each tick runs in two phases. The scan phase reads the grid as it was at
    the start of the tick and fills the pending-change sets; the apply phase
    then writes those sets to the grid in a fixed priority order (ignite,
    burn out, clear, plant). Mutations coming from outside are queued into
    the same sets so they are resolved by the same rules.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize the forest model.

        Args:
            config: Simulation parameters; defaults are used when omitted
        """
        self.config = config or SimulationConfig()
        super().__init__(seed=self.config.seed)
        self.grid = GridStore(self.config.grid_size)
        self.pending = PendingChanges()
        self._aged: Dict[Position, Cell] = {}
        self._state = SimState.Setup
        self._last_tick_time: Optional[float] = None
        self.running = False

    @property
    def state(self) -> SimState:
        return self._state

    @property
    def grid_size(self) -> int:
        return self.grid.size

    @property
    def ticks(self) -> int:
        """Completed steps since creation or the last reset (mesa's step counter)."""
        return self.steps

    def _set_state(self, state: SimState) -> None:
        logger.info(f"Simulation state: {self._state.name} -> {state.name}")
        self._state = state
        self.running = state == SimState.Running

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Leave setup and start ticking.

        Returns:
            True if the simulation is now running
        """
        if self._state != SimState.Setup:
            return self._state == SimState.Running
        count = self.occupant_count()
        if count < self.config.min_trees_to_start:
            logger.info(
                f"Cannot start: {count} trees planted, "
                f"{self.config.min_trees_to_start} required"
            )
            return False
        self._last_tick_time = None
        self._set_state(SimState.Running)
        return True

    def quit(self) -> None:
        """Freeze the simulation until it is reset."""
        if self._state != SimState.Ended:
            self._set_state(SimState.Ended)

    def reset(self) -> None:
        """Clear the grid and go back to setup."""
        self.grid.clear_all()
        self.pending.drain()
        self._aged.clear()
        self._last_tick_time = None
        self.steps = 0
        if self._state != SimState.Setup:
            self._set_state(SimState.Setup)

    def restart(self) -> None:
        self.reset()

    # ------------------------------------------------------------------
    # External mutations
    # ------------------------------------------------------------------

    def mutate_plant(self, position: Position, kind: OccupantKind) -> None:
        """Queue planting a tree of ``kind`` at ``position``.

        Accepted during setup and while running. During setup no tick will
        consume the queue, so the plant is applied right away.
        """
        if kind not in TREE_KINDS:
            raise ValueError(f"Only trees can be planted, got {kind.name}")
        if self._state == SimState.Ended or not self.grid.contains(position):
            logger.debug(f"Dropped plant of {kind.name} at {position} ({self._state.name})")
            return
        self.pending.to_planted[position] = Cell.fresh(kind)
        if self._state == SimState.Setup:
            self._apply()

    def mutate_ignite(self, position: Position) -> None:
        """Queue an ignition at ``position`` for the next tick."""
        if self._state != SimState.Running or not self.grid.contains(position):
            logger.debug(f"Dropped ignition at {position} ({self._state.name})")
            return
        self.pending.to_burning[position] = Cell.fresh(OccupantKind.Burning)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def snapshot(self) -> Iterator[Tuple[Position, Cell]]:
        """Occupied cells as of the last completed apply phase."""
        return iter(list(self.grid.cells()))

    def occupant_count(self) -> int:
        """Number of living trees; fire and ash are not counted."""
        return sum(1 for _, cell in self.grid.cells() if cell.is_tree)

    # ------------------------------------------------------------------
    # Ticking
    # ------------------------------------------------------------------

    def tick(self, now: float) -> bool:
        """Advance one step if running and the tick period has elapsed.

        Args:
            now: Current monotonic timestamp

        Returns:
            True if a step was executed
        """
        if self._state != SimState.Running:
            return False
        if self._last_tick_time is not None and now - self._last_tick_time <= self.config.tick_period:
            return False
        self._last_tick_time = now
        self.step()
        return True

    def step(self):
        """
        Execute one step of the simulation.

        Uses a two-phase update: first every occupied cell is scanned against
        the unchanged grid, then all pending changes are applied at once.
        """
        self._scan()
        self._apply()
        logger.debug(f"Tick {self.steps}: {self.occupant_count()} trees")

    def _scan(self) -> None:
        """Fill the pending-change sets from the start-of-tick grid."""
        grid = self.grid
        pending = self.pending

        for position, current in grid.cells():
            cell = current.aged()
            self._aged[position] = cell
            kind = cell.kind

            if kind in TREE_KINDS:
                if cell.age == 0:
                    pending.to_cleared.add(position)
                    if kind == OccupantKind.SlowGrowing:
                        plants, clears = tree_fall(position, self.random, grid.size)
                        pending.to_planted.update(plants)
                        pending.to_cleared.update(clears)
                else:
                    pending.to_planted.update(
                        reproduce(cell, position, grid.is_empty, self.random, grid.size)
                    )

            elif kind == OccupantKind.Burning:
                if cell.age == 0:
                    pending.to_burned.add(position)
                else:
                    pending.to_burning.update(
                        reproduce(cell, position, self._is_flammable, self.random, grid.size)
                    )

            elif kind == OccupantKind.Burned:
                pending.to_cleared.add(position)
                if pioneer_seedling(self.random):
                    pending.to_planted[position] = Cell.fresh(OccupantKind.FastGrowing)

    def _is_flammable(self, position: Position) -> bool:
        return is_flammable(self.grid.get(position))

    def _apply(self) -> None:
        """Write pending changes to the grid in priority order, then drain."""
        grid = self.grid
        pending = self.pending

        for position, cell in self._aged.items():
            grid.set(position, cell)
        self._aged.clear()

        # 1. Fire only takes hold on living trees
        ignited = set()
        for position, cell in pending.to_burning.items():
            if is_flammable(grid.get(position)):
                grid.set(position, cell)
                ignited.add(position)

        # 2. Burnt-out fire leaves ash
        burned = Cell(age=BURNED_MAX, kind=OccupantKind.Burned)
        for position in pending.to_burned:
            if grid.get(position) is not None:
                grid.set(position, burned)

        # 3. Dead trees, fallen trunks and ash are removed unless they just caught fire
        for position in pending.to_cleared - ignited:
            if grid.get(position) is not None:
                grid.clear(position)

        # 4. New growth only takes empty or just-cleared ground
        for position, cell in pending.to_planted.items():
            if grid.get(position) is None:
                grid.set(position, cell)

        pending.drain()

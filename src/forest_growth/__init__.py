"""
Forest Growth Simulation using Cellular Automata.

A discrete-time model of forest growth, tree senescence and fire
propagation on a fixed square grid.
"""

from .cell import Cell, OccupantKind, Position
from .config import SimulationConfig
from .grid import GridStore
from .model import ForestModel, SimState

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "OccupantKind",
    "Position",
    "SimulationConfig",
    "GridStore",
    "ForestModel",
    "SimState",
]

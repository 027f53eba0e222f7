"""Simulation configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_GRID_SIZE: int = 64                         # Grid side length in cells
DEFAULT_TICK_PERIOD: float = 0.1                    # Seconds between ticks
DEFAULT_MIN_TREES_TO_START: int = 1                 # Trees needed to leave setup


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters a host application passes to :class:`ForestModel`.

    Attributes:
        grid_size: Side length of the square grid.
        tick_period: Minimum time between two ticks, in the units of the
            timestamps passed to ``ForestModel.tick``.
        seed: Seed for the model's random generator (None for a random seed).
        min_trees_to_start: Trees that must be planted before setup can end.
    """

    grid_size: int = DEFAULT_GRID_SIZE
    tick_period: float = DEFAULT_TICK_PERIOD
    seed: Optional[int] = None
    min_trees_to_start: int = DEFAULT_MIN_TREES_TO_START

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {self.grid_size}")
        if self.tick_period < 0:
            raise ValueError(f"tick_period cannot be negative, got {self.tick_period}")
        if self.min_trees_to_start < 0:
            raise ValueError(
                f"min_trees_to_start cannot be negative, got {self.min_trees_to_start}"
            )

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any]) -> SimulationConfig:
        """Build a config from a plain mapping, e.g. a setup menu's result.

        Unknown keys are ignored and logged; missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")
        return cls(**{k: v for k, v in params.items() if k in known})

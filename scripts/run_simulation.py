#!/usr/bin/env python3
"""Headless console runner for the forest growth simulation."""

import logging
import sys
import time
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_growth import ForestModel, OccupantKind, SimulationConfig

logger = logging.getLogger(__name__)

SYMBOLS = {
    OccupantKind.SlowGrowing: "🌲",
    OccupantKind.FastGrowing: "🌱",
    OccupantKind.Burning: "🔥",
    OccupantKind.Burned: "⬛",
}
EMPTY_SYMBOL = "  "


def print_grid(model: ForestModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The ForestModel instance to visualize
    """
    occupied = dict(model.snapshot())
    grid_str = ""
    for y in range(model.grid_size):
        for x in range(model.grid_size):
            cell = occupied.get((x, y))
            grid_str += SYMBOLS[cell.kind] if cell else EMPTY_SYMBOL
        grid_str += "\n"
    print(grid_str)


def seed_forest(model: ForestModel) -> None:
    """Plant the starting trees, the way a player would during setup."""
    size = model.grid_size
    model.mutate_plant((size // 4, size // 4), OccupantKind.SlowGrowing)
    model.mutate_plant((3 * size // 4, size // 4), OccupantKind.FastGrowing)
    model.mutate_plant((size // 2, 3 * size // 4), OccupantKind.SlowGrowing)


def ignite_first_tree(model: ForestModel) -> None:
    """Queue an ignition on the first living tree found."""
    for position, cell in model.snapshot():
        if cell.is_tree:
            model.mutate_ignite(position)
            logger.info(f"Ignition queued at {position}")
            return


def main():
    """Run the forest growth simulation."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # Simulation parameters
    STEPS = 60
    IGNITE_AT_STEP = 20

    config = SimulationConfig(grid_size=24, tick_period=0.05, seed=7)
    model = ForestModel(config)

    print("--- SETUP ---")
    seed_forest(model)
    print_grid(model)
    if not model.start():
        print("Not enough trees planted to start.")
        return

    step = 0
    while step < STEPS:
        if model.tick(time.monotonic()):
            step += 1
            print(f"\n--- STEP {step} ({model.occupant_count()} trees) ---")
            print_grid(model)
            if not any(True for _ in model.snapshot()):
                print("\nThe forest is gone.")
                break
            if step == IGNITE_AT_STEP:
                ignite_first_tree(model)
        else:
            time.sleep(config.tick_period / 4)

    model.quit()
    model.restart()
    print(f"Simulation ended after {step} steps; model reset to {model.state.name}.")


if __name__ == "__main__":
    main()

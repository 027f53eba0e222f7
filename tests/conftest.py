import random
import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_growth.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom(random.Random):
    """Random generator whose ``randrange`` returns queued values in order."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, start, stop=None, step=1):
        return self.values.pop(0)


@pytest.fixture
def scripted_rng():
    """Factory for generators with predetermined draws."""
    return ScriptedRandom


@pytest.fixture
def grid_size():
    """Provide the standard grid size for tests."""
    return 64

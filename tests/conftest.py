import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from maze import create_grid, remove_walls


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def open_row():
    """1x3 grid with both inner walls carved."""
    grid = create_grid(1, 3)
    remove_walls(grid[0][0], grid[0][1])
    remove_walls(grid[0][1], grid[0][2])
    return grid

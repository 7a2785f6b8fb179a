# items.py

import logging
import random
from config import STAR_COUNT, MAX_PLACEMENT_TRIES

logger = logging.getLogger(__name__)


class PlacementError(ValueError):
    """The grid has too few free cells for the requested items."""


class Star:
    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.collected = False

    def center(self, cell_size):
        return (self.col*cell_size + cell_size/2,
                self.row*cell_size + cell_size/2)

    def __repr__(self):
        return f"Star({self.row}, {self.col}, collected={self.collected})"


class Door:
    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.is_open = False

    def center(self, cell_size):
        return (self.col*cell_size + cell_size/2,
                self.row*cell_size + cell_size/2)

    def __repr__(self):
        return f"Door({self.row}, {self.col}, is_open={self.is_open})"


def _pick_free_cell(rows, cols, used, rng):
    tries = 0
    while tries < MAX_PLACEMENT_TRIES:
        tries += 1
        r = rng.randrange(rows)
        c = rng.randrange(cols)
        if (r, c) not in used:
            return r, c

    # unlucky streak on a crowded grid, pick from what is left
    free = [(r, c) for r in range(rows) for c in range(cols)
            if (r, c) not in used]
    logger.debug("placement fell back to %d free cells after %d tries",
                 len(free), tries)
    return rng.choice(free)


def _check_capacity(rows, cols, used, count):
    free = rows*cols - len({(r, c) for (r, c) in used
                            if 0 <= r < rows and 0 <= c < cols})
    if free < count:
        raise PlacementError(
            f"{rows}x{cols} grid has {free} free cells, {count} needed")


def place_stars(rows, cols, excluded, count=STAR_COUNT, rng=None):
    """Put 'count' stars on distinct cells outside 'excluded'."""
    rng = rng or random
    used = set(excluded)
    _check_capacity(rows, cols, used, count)

    stars = []
    for _ in range(count):
        r, c = _pick_free_cell(rows, cols, used, rng)
        used.add((r, c))
        stars.append(Star(r, c))
    logger.debug("placed stars at %s", [(s.row, s.col) for s in stars])
    return stars


def place_door(rows, cols, excluded, rng=None):
    rng = rng or random
    used = set(excluded)
    _check_capacity(rows, cols, used, 1)
    r, c = _pick_free_cell(rows, cols, used, rng)
    logger.debug("placed door at (%d,%d)", r, c)
    return Door(r, c)

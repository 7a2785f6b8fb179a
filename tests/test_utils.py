import random

import pytest

from config import BASE_CELL_SIZE, MIN_CELL_SIZE
from utils import random_dimensions, compute_cell_size, hue_color


def test_random_dimensions_in_bounds():
    rng = random.Random(0)
    seen = set()
    for _ in range(500):
        rows, cols = random_dimensions(rng)
        assert 10 <= rows <= 20
        assert 10 <= cols <= 20
        seen.add(rows)
    assert min(seen) == 10 and max(seen) == 20


def test_random_dimensions_custom_range():
    assert random_dimensions(random.Random(1), 3, 3) == (3, 3)


@pytest.mark.parametrize("rows, cols, w, h, expected", [
    (10, 10, 1000, 1000, BASE_CELL_SIZE),
    (20, 20, 500, 500, 22),
    (10, 20, 600, 1000, 27),
    (20, 20, 100, 100, MIN_CELL_SIZE),
])
def test_compute_cell_size(rows, cols, w, h, expected):
    assert compute_cell_size(rows, cols, w, h) == expected


@pytest.mark.parametrize("hue, rgb", [
    (0, (255, 0, 0)),
    (120, (0, 255, 0)),
    (240, (0, 0, 255)),
    (360, (255, 0, 0)),
])
def test_hue_color(hue, rgb):
    c = hue_color(hue)
    assert (c.r, c.g, c.b) == rgb

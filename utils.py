# utils.py

import random
import pygame

from config import (
    MIN_SIZE, MAX_SIZE, SCREEN_USAGE,
    BASE_CELL_SIZE, MIN_CELL_SIZE
)


def random_dimensions(rng=None, min_size=MIN_SIZE, max_size=MAX_SIZE):
    """Pick (rows, cols), each in [min_size, max_size] inclusive."""
    rng = rng or random
    rows = rng.randint(min_size, max_size)
    cols = rng.randint(min_size, max_size)
    return rows, cols


def compute_cell_size(rows, cols, available_w, available_h):
    """Shrink BASE_CELL_SIZE until the grid fits, but not under MIN_CELL_SIZE."""
    max_w = available_w*SCREEN_USAGE
    max_h = available_h*SCREEN_USAGE
    cell_size = BASE_CELL_SIZE
    if rows*cell_size > max_h or cols*cell_size > max_w:
        by_height = int(max_h // rows)
        by_width = int(max_w // cols)
        cell_size = min(by_height, by_width)
        cell_size = max(cell_size, MIN_CELL_SIZE)
    return cell_size


def hue_color(hue):
    """Fully saturated RGB for a hue in degrees."""
    color = pygame.Color(0, 0, 0)
    color.hsla = (hue % 360, 100, 50, 100)
    return color

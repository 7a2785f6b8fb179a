import random

import pygame
import pytest

from config import (
    WALL_COLOR, STAR_COLOR, DOOR_CLOSED_COLOR, DOOR_OPEN_COLOR, BG_COLOR, HUD_HEIGHT
)
from game_logic import create_session
from items import Star, Door
from maze import create_grid
from rendering import draw_maze, draw_stars, draw_door, draw_player, draw_session, grid_offset
from utils import hue_color


@pytest.fixture
def surface():
    s = pygame.Surface((300, 300))
    s.fill(BG_COLOR)
    return s


def _rgb(surface, x, y):
    c = surface.get_at((x, y))
    return (c.r, c.g, c.b)


def test_walls_are_drawn(surface):
    draw_maze(surface, create_grid(1, 1), 40, 10, 10)
    # top edge, somewhere along the middle
    assert WALL_COLOR in [_rgb(surface, 30, y) for y in (9, 10, 11)]
    # cell interior stays empty
    assert _rgb(surface, 30, 30) == BG_COLOR


def test_collected_stars_are_not_drawn(surface):
    a, b = Star(0, 0), Star(0, 1)
    b.collected = True
    draw_stars(surface, [a, b], 40, 0, 0)
    assert _rgb(surface, 20, 20) == STAR_COLOR
    assert _rgb(surface, 60, 20) == BG_COLOR


def test_door_color_follows_state(surface):
    door = Door(0, 0)
    draw_door(surface, door, 40, 0, 0)
    assert _rgb(surface, 20, 20) == DOOR_CLOSED_COLOR
    door.is_open = True
    draw_door(surface, door, 40, 0, 0)
    assert _rgb(surface, 20, 20) == DOOR_OPEN_COLOR


def test_player_uses_hue(surface):
    session = create_session(5, 5, 40, rng=random.Random(0))
    session.player.color_hue = 120
    draw_player(surface, session.player, 0, 0)
    c = hue_color(120)
    assert _rgb(surface, 20, 20) == (c.r, c.g, c.b)


def test_grid_offset_leaves_room_for_hud(surface):
    session = create_session(5, 5, 40, rng=random.Random(0))
    ox, oy = grid_offset(surface, session)
    assert ox == (300 - 200)//2
    assert oy >= HUD_HEIGHT


def test_draw_session_does_not_mutate(surface):
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    session = create_session(5, 5, 40, rng=random.Random(3))
    before = ([[c.walls[:] for c in row] for row in session.grid],
              session.player.x, session.player.y, session.player.color_hue)
    draw_session(surface, session, font)
    draw_session(surface, session)
    after = ([[c.walls[:] for c in row] for row in session.grid],
             session.player.x, session.player.y, session.player.color_hue)
    assert before == after

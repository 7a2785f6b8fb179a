# rendering.py

import pygame
from config import (
    WALL_COLOR, WALL_WIDTH, STAR_COLOR, STAR_EMPTY_COLOR,
    DOOR_CLOSED_COLOR, DOOR_OPEN_COLOR, TEXT_COLOR,
    STAR_RADIUS_RATIO, DOOR_RADIUS_RATIO, HUD_HEIGHT
)
from maze import TOP, RIGHT, BOTTOM, LEFT
from utils import hue_color


def draw_maze(screen, grid, cell_size, offset_x, offset_y):
    for row in grid:
        for cell in row:
            x = offset_x + cell.col*cell_size
            y = offset_y + cell.row*cell_size
            if cell.walls[TOP]:
                pygame.draw.line(screen, WALL_COLOR, (x, y), (x+cell_size, y), WALL_WIDTH)
            if cell.walls[RIGHT]:
                pygame.draw.line(screen, WALL_COLOR, (x+cell_size, y),
                                 (x+cell_size, y+cell_size), WALL_WIDTH)
            if cell.walls[BOTTOM]:
                pygame.draw.line(screen, WALL_COLOR, (x+cell_size, y+cell_size),
                                 (x, y+cell_size), WALL_WIDTH)
            if cell.walls[LEFT]:
                pygame.draw.line(screen, WALL_COLOR, (x, y), (x, y+cell_size), WALL_WIDTH)


def draw_stars(screen, stars, cell_size, offset_x, offset_y):
    radius = max(1, int(cell_size*STAR_RADIUS_RATIO))
    for st in stars:
        if st.collected:
            continue
        sx, sy = st.center(cell_size)
        pygame.draw.circle(screen, STAR_COLOR,
                           (int(offset_x+sx), int(offset_y+sy)), radius)


def draw_door(screen, door, cell_size, offset_x, offset_y):
    color = DOOR_OPEN_COLOR if door.is_open else DOOR_CLOSED_COLOR
    dx, dy = door.center(cell_size)
    pygame.draw.circle(screen, color,
                       (int(offset_x+dx), int(offset_y+dy)),
                       max(1, int(cell_size*DOOR_RADIUS_RATIO)))


def draw_player(screen, player, offset_x, offset_y):
    pygame.draw.circle(screen, hue_color(player.color_hue),
                       (int(offset_x+player.x), int(offset_y+player.y)),
                       max(1, int(player.radius)))


def draw_hud(screen, session, font):
    """Star slots on the left, current message next to them."""
    size = HUD_HEIGHT//2
    x = size
    for st in session.stars:
        color = STAR_COLOR if st.collected else STAR_EMPTY_COLOR
        pygame.draw.circle(screen, color, (x, HUD_HEIGHT//2), size//2)
        x += size + 6
    if font is not None:
        lbl = font.render(session.message, True, TEXT_COLOR)
        lbl_rect = lbl.get_rect(midleft=(x + size, HUD_HEIGHT//2))
        screen.blit(lbl, lbl_rect)


def grid_offset(screen, session):
    """Top-left corner that centres the maze below the HUD."""
    width = session.cols*session.cell_size
    height = session.rows*session.cell_size
    offset_x = (screen.get_width() - width)//2
    offset_y = HUD_HEIGHT + (screen.get_height() - HUD_HEIGHT - height)//2
    return max(0, offset_x), max(HUD_HEIGHT, offset_y)


def draw_session(screen, session, font=None):
    offset_x, offset_y = grid_offset(screen, session)
    draw_maze(screen, session.grid, session.cell_size, offset_x, offset_y)
    draw_stars(screen, session.stars, session.cell_size, offset_x, offset_y)
    draw_door(screen, session.door, session.cell_size, offset_x, offset_y)
    draw_player(screen, session.player, offset_x, offset_y)
    draw_hud(screen, session, font)

# game_logic.py

import logging
import math
import random

from config import (
    PLAYER_SPEED, PLAYER_RADIUS_RATIO,
    STAR_COUNT, STAR_RADIUS_RATIO, DOOR_RADIUS_RATIO,
    RESTART_DELAY_MS,
    STATE_PLAYING, STATE_WON,
    EVENT_STAR_COLLECTED, EVENT_DOOR_OPENED, EVENT_WON,
    MSG_START, MSG_DOOR_OPEN, MSG_WON
)
from maze import create_grid, generate_maze, is_perfect_maze, TOP, RIGHT, BOTTOM, LEFT
from items import place_stars, place_door, PlacementError
from utils import random_dimensions, compute_cell_size

logger = logging.getLogger(__name__)

DIRECTIONS = ("up", "down", "left", "right")


# -------------------------------------------------------------------------
# INPUT
# -------------------------------------------------------------------------
class InputState:
    """Held directions. Key-down sets a flag, key-up clears it."""

    def __init__(self):
        self.up = False
        self.down = False
        self.left = False
        self.right = False

    def set(self, direction, pressed):
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction {direction!r}")
        setattr(self, direction, bool(pressed))

    def clear(self):
        for d in DIRECTIONS:
            setattr(self, d, False)

    def snapshot(self):
        return (self.up, self.down, self.left, self.right)


def direction_vector(snapshot):
    up, down, left, right = snapshot
    dx = 0
    dy = 0
    if up:
        dy -= 1
    if down:
        dy += 1
    if left:
        dx -= 1
    if right:
        dx += 1
    return dx, dy


# -------------------------------------------------------------------------
# PLAYER / MOVEMENT
# -------------------------------------------------------------------------
class Player:
    def __init__(self, x, y, radius, speed=PLAYER_SPEED):
        self.x = x
        self.y = y
        self.radius = radius
        self.speed = speed
        self.color_hue = 0

    def cell(self, cell_size):
        return int(self.y // cell_size), int(self.x // cell_size)


def is_colliding_with_walls(grid, cell_size, x, y, radius):
    col = math.floor(x / cell_size)
    row = math.floor(y / cell_size)
    if row < 0 or row >= len(grid) or col < 0 or col >= len(grid[0]):
        return True

    local_x = x - col*cell_size
    local_y = y - row*cell_size
    walls = grid[row][col].walls
    if walls[TOP] and local_y - radius < 0:
        return True
    if walls[RIGHT] and local_x + radius > cell_size:
        return True
    if walls[BOTTOM] and local_y + radius > cell_size:
        return True
    if walls[LEFT] and local_x - radius < 0:
        return True
    return False


def move_player(player, keys, grid, cell_size):
    """Advance the player one tick. Returns True if the position changed.

    X and Y are resolved separately so that a diagonal push into a wall
    still slides along it.
    """
    dx, dy = direction_vector(keys.snapshot())
    if dx == 0 and dy == 0:
        return False

    length = math.hypot(dx, dy)
    vel_x = dx/length*player.speed
    vel_y = dy/length*player.speed

    old_x, old_y = player.x, player.y

    # X movement
    new_x = player.x + vel_x
    if not is_colliding_with_walls(grid, cell_size, new_x, player.y, player.radius):
        player.x = new_x

    # Y movement
    new_y = player.y + vel_y
    if not is_colliding_with_walls(grid, cell_size, player.x, new_y, player.radius):
        player.y = new_y

    return (player.x, player.y) != (old_x, old_y)


# -------------------------------------------------------------------------
# STARS / DOOR
# -------------------------------------------------------------------------
def check_stars_collection(player, stars, cell_size):
    reach = player.radius + cell_size*STAR_RADIUS_RATIO
    newly = []
    for st in stars:
        if st.collected:
            continue
        sx, sy = st.center(cell_size)
        if math.hypot(player.x - sx, player.y - sy) < reach:
            st.collected = True
            newly.append(st)
    return newly


def check_door(player, stars, door, cell_size):
    """Open the door once every star is in, or report a win if it's open.

    The door opens on one call and can only be walked through on a later one.
    """
    if door.is_open:
        dx, dy = door.center(cell_size)
        if math.hypot(player.x - dx, player.y - dy) < player.radius + cell_size*DOOR_RADIUS_RATIO:
            return EVENT_WON
        return None

    if all(st.collected for st in stars):
        door.is_open = True
        return EVENT_DOOR_OPENED
    return None


# -------------------------------------------------------------------------
# SESSION
# -------------------------------------------------------------------------
class Session:
    def __init__(self, grid, cell_size, player, stars, door):
        self.grid = grid
        self.cell_size = cell_size
        self.player = player
        self.keys = InputState()
        self.stars = stars
        self.door = door
        self.state = STATE_PLAYING
        self.message = MSG_START

    @property
    def rows(self):
        return len(self.grid)

    @property
    def cols(self):
        return len(self.grid[0])

    @property
    def stars_collected(self):
        return sum(1 for st in self.stars if st.collected)

    def tick(self):
        if self.state != STATE_PLAYING:
            return []

        events = []
        move_player(self.player, self.keys, self.grid, self.cell_size)
        self.player.color_hue = (self.player.color_hue + 1) % 360

        for st in check_stars_collection(self.player, self.stars, self.cell_size):
            logger.debug("star collected at (%d,%d)", st.row, st.col)
            events.append(EVENT_STAR_COLLECTED)

        door_event = check_door(self.player, self.stars, self.door, self.cell_size)
        if door_event == EVENT_DOOR_OPENED:
            logger.info("all %d stars collected, door open", len(self.stars))
            self.message = MSG_DOOR_OPEN
            events.append(door_event)
        elif door_event == EVENT_WON:
            logger.info("player reached the door")
            self.state = STATE_WON
            self.message = MSG_WON
            self.keys.clear()
            events.append(door_event)
        return events


def create_session(rows, cols, cell_size, rng=None, star_count=STAR_COUNT):
    """Build grid, maze, player, stars and door for one round."""
    if rows*cols < star_count + 2:
        raise PlacementError(
            f"{rows}x{cols} grid cannot hold player, {star_count} stars and a door")
    rng = rng or random

    grid = create_grid(rows, cols)
    generate_maze(grid, 0, 0, rng=rng)
    if not is_perfect_maze(grid):
        # generator bug, not a user error
        raise RuntimeError("generated maze is not a spanning tree")

    player = Player(0.5*cell_size, 0.5*cell_size, cell_size*PLAYER_RADIUS_RATIO)
    start = player.cell(cell_size)
    stars = place_stars(rows, cols, {start}, star_count, rng=rng)
    door = place_door(rows, cols, {start} | {(s.row, s.col) for s in stars}, rng=rng)

    logger.info("new session %dx%d, cell size %d", rows, cols, cell_size)
    return Session(grid, cell_size, player, stars, door)


# -------------------------------------------------------------------------
# GAME (session lifecycle)
# -------------------------------------------------------------------------
class Game:
    """Owns the current session, ticks it and restarts it after a win."""

    def __init__(self, available_size, rng=None, restart_delay_ms=RESTART_DELAY_MS,
                 rows=None, cols=None):
        self.available_size = available_size
        self.rng = rng or random.Random()
        self.restart_delay_ms = restart_delay_ms
        self.fixed_rows = rows
        self.fixed_cols = cols
        self.session = None
        self.running = False
        self.won_at = None
        self.rounds = 0

    def new_session(self):
        rows, cols = random_dimensions(self.rng)
        if self.fixed_rows:
            rows = self.fixed_rows
        if self.fixed_cols:
            cols = self.fixed_cols
        cell_size = compute_cell_size(rows, cols, *self.available_size)
        self.session = create_session(rows, cols, cell_size, rng=self.rng)
        self.won_at = None
        self.running = True
        self.rounds += 1
        return self.session

    def start(self):
        if self.session is None or self.session.state == STATE_WON:
            self.new_session()
        self.running = True

    def stop(self):
        self.running = False
        self.won_at = None

    def update(self, now_ms):
        """One frame: tick while running, restart once the win delay is over."""
        if self.running:
            events = self.session.tick()
            if EVENT_WON in events:
                self.running = False
                self.won_at = now_ms
            return events

        if self.won_at is not None and now_ms - self.won_at >= self.restart_delay_ms:
            logger.info("restarting after win (round %d)", self.rounds)
            self.new_session()
        return []

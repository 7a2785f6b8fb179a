# config.py

# -------------------------------------------------------------------------
# GRID SIZE
# -------------------------------------------------------------------------
# rows and cols are each picked at random in this range, every session
MIN_SIZE = 10
MAX_SIZE = 20

# fraction of the window the maze is allowed to cover
SCREEN_USAGE = 0.9

BASE_CELL_SIZE = 40
MIN_CELL_SIZE = 10

# -------------------------------------------------------------------------
# PLAYER / ITEMS
# -------------------------------------------------------------------------
PLAYER_SPEED = 3.5          # pixels per tick
PLAYER_RADIUS_RATIO = 0.2   # of cell size

STAR_COUNT = 3
STAR_RADIUS_RATIO = 0.2
DOOR_RADIUS_RATIO = 0.25

MAX_PLACEMENT_TRIES = 5000

# -------------------------------------------------------------------------
# LOOP
# -------------------------------------------------------------------------
FPS = 60
RESTART_DELAY_MS = 2000

DEFAULT_WINDOW_SIZE = (1280, 720)
WINDOW_TITLE = "Neon Maze"

# -------------------------------------------------------------------------
# COLORS
# -------------------------------------------------------------------------
BG_COLOR = (10, 10, 20)
WALL_COLOR = (0, 255, 255)
WALL_WIDTH = 2
STAR_COLOR = (255, 215, 0)
STAR_EMPTY_COLOR = (70, 70, 70)
DOOR_CLOSED_COLOR = (255, 0, 0)
DOOR_OPEN_COLOR = (50, 205, 50)
TEXT_COLOR = (255, 255, 255)

HUD_HEIGHT = 40

# -------------------------------------------------------------------------
# STATES / EVENTS
# -------------------------------------------------------------------------
STATE_PLAYING = "playing"
STATE_WON = "won"

EVENT_STAR_COLLECTED = "star_collected"
EVENT_DOOR_OPENED = "door_opened"
EVENT_WON = "won"

MSG_START = "Collect every star to open the door."
MSG_DOOR_OPEN = "All stars collected! The door is open."
MSG_WON = "You escaped the maze! Restarting..."

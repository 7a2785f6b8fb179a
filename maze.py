# maze.py

import logging
import random
from collections import deque

logger = logging.getLogger(__name__)

# wall indices in Cell.walls
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3


class Cell:
    def __init__(self, row, col):
        self.row = row
        self.col = col
        self.walls = [True, True, True, True]
        self.visited = False

    def __repr__(self):
        return f"Cell({self.row}, {self.col}, walls={self.walls})"


def create_grid(rows, cols):
    """Allocate a rows x cols grid, every wall up, nothing visited."""
    return [[Cell(r, c) for c in range(cols)] for r in range(rows)]


def get_unvisited_neighbors(grid, row, col):
    rows = len(grid)
    cols = len(grid[0])
    neighbors = []
    # up, right, down, left
    if row > 0 and not grid[row-1][col].visited:
        neighbors.append(grid[row-1][col])
    if col < cols-1 and not grid[row][col+1].visited:
        neighbors.append(grid[row][col+1])
    if row < rows-1 and not grid[row+1][col].visited:
        neighbors.append(grid[row+1][col])
    if col > 0 and not grid[row][col-1].visited:
        neighbors.append(grid[row][col-1])
    return neighbors


def remove_walls(a, b):
    """Carve the wall pair between two orthogonally adjacent cells."""
    dx = a.col - b.col
    dy = a.row - b.row
    if abs(dx) + abs(dy) != 1:
        raise ValueError(f"cells are not adjacent: {a!r} {b!r}")

    if dx == 1:
        a.walls[LEFT] = False
        b.walls[RIGHT] = False
    elif dx == -1:
        a.walls[RIGHT] = False
        b.walls[LEFT] = False
    elif dy == 1:
        a.walls[TOP] = False
        b.walls[BOTTOM] = False
    else:
        a.walls[BOTTOM] = False
        b.walls[TOP] = False


def generate_maze(grid, start_row=0, start_col=0, rng=None):
    """Carve a perfect maze into grid using iterative DFS backtracking.

    The stack is peeked, not popped, while the top cell still has unvisited
    neighbours, so the current cell stays underneath the one just pushed.
    Pass a seeded random.Random as rng to get the same maze every time.
    """
    rng = rng or random
    start = grid[start_row][start_col]
    start.visited = True
    stack = [start]
    carved = 0
    while stack:
        current = stack[-1]
        neighbors = get_unvisited_neighbors(grid, current.row, current.col)
        if neighbors:
            nxt = rng.choice(neighbors)
            remove_walls(current, nxt)
            nxt.visited = True
            stack.append(nxt)
            carved += 1
        else:
            stack.pop()

    logger.debug("carved %dx%d maze from (%d,%d), %d passages",
                 len(grid), len(grid[0]), start_row, start_col, carved)
    return grid


# -------------------------------------------------------------------------
# VALIDATION
# -------------------------------------------------------------------------
def open_neighbors(grid, row, col):
    """Coordinates reachable from (row, col) through a removed wall."""
    rows = len(grid)
    cols = len(grid[0])
    walls = grid[row][col].walls
    result = []
    if row > 0 and not walls[TOP]:
        result.append((row-1, col))
    if col < cols-1 and not walls[RIGHT]:
        result.append((row, col+1))
    if row < rows-1 and not walls[BOTTOM]:
        result.append((row+1, col))
    if col > 0 and not walls[LEFT]:
        result.append((row, col-1))
    return result


def walls_symmetric(grid):
    rows = len(grid)
    cols = len(grid[0])
    for r in range(rows):
        for c in range(cols):
            cell = grid[r][c]
            if c < cols-1 and cell.walls[RIGHT] != grid[r][c+1].walls[LEFT]:
                return False
            if r < rows-1 and cell.walls[BOTTOM] != grid[r+1][c].walls[TOP]:
                return False
    return True


def count_passages(grid):
    """Number of carved wall pairs (right and bottom sides only)."""
    rows = len(grid)
    cols = len(grid[0])
    total = 0
    for r in range(rows):
        for c in range(cols):
            if c < cols-1 and not grid[r][c].walls[RIGHT]:
                total += 1
            if r < rows-1 and not grid[r][c].walls[BOTTOM]:
                total += 1
    return total


def is_perfect_maze(grid):
    """Symmetric walls, rows*cols-1 passages and every cell reachable."""
    rows = len(grid)
    cols = len(grid[0])
    if not walls_symmetric(grid):
        return False
    if count_passages(grid) != rows*cols - 1:
        return False

    visited = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        r, c = queue.popleft()
        for nb in open_neighbors(grid, r, c):
            if nb not in visited:
                visited.add(nb)
                queue.append(nb)
    return len(visited) == rows*cols

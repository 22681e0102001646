import math
from enum import Enum, IntEnum

import numpy as np

from pac_errors import InvalidDirectionError, MazeError


BASE_MAZE = [
    "############################",
    "#P...........##...........o#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#.####.#####.##.#####.####.#",
    "#..........GG..GG..........#",
    "#.####.##.########.##.####.#",
    "#o.....##....##....##.....o#",
    "######.#####.##.#####.######",
    "############################",
]

MAZE_SYMBOLS = {
    "#": "WALL",
    ".": "PELLET",
    "o": "POWER_UP",
    " ": "EMPTY",
    "P": "EMPTY",
    "G": "EMPTY",
}


class CellKind(IntEnum):
    EMPTY = 0
    WALL = 1
    PELLET = 2
    POWER_UP = 3


class Direction(Enum):
    """Grid movement vector (di, dj) plus the facing angle it maps to."""

    UP = (-1, 0, math.pi / 2)
    DOWN = (1, 0, 3 * math.pi / 2)
    LEFT = (0, -1, math.pi)
    RIGHT = (0, 1, 0.0)
    NONE = (0, 0, None)

    def __init__(self, di, dj, angle):
        self.di = di
        self.dj = dj
        self.angle = angle

    @property
    def vector(self):
        return (self.di, self.dj)

    def opposite(self):
        if self is Direction.NONE:
            raise ValueError("Direction.NONE has no opposite")
        return Direction.from_vector(-self.di, -self.dj)

    @classmethod
    def from_vector(cls, di, dj):
        for d in cls:
            if d.di == di and d.dj == dj:
                return d
        raise InvalidDirectionError(f"not a canonical direction vector: ({di}, {dj})")

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidDirectionError(f"unknown direction name: {value!r}") from None
        if isinstance(value, (tuple, list)) and len(value) == 2:
            di, dj = value
            if all(isinstance(v, int) and not isinstance(v, bool) for v in (di, dj)):
                return cls.from_vector(di, dj)
        raise InvalidDirectionError(f"not a direction: {value!r}")


AXIS_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
ALL_DIRECTIONS = AXIS_DIRECTIONS + (Direction.NONE,)

NEIGHBOUR_OFFSETS = {
    "above": (-1, 0),
    "below": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
    "above_left": (-1, -1),
    "above_right": (-1, 1),
    "below_left": (1, -1),
    "below_right": (1, 1),
}


class Board:
    """Fixed-size grid of cell kinds.

    Reads outside the grid answer WALL, so callers never bounds-check.
    Consumption is the only mutation.
    """

    def __init__(self, grid):
        self.grid = np.array(grid, dtype=np.int8)
        if self.grid.ndim != 2 or self.grid.size == 0:
            raise MazeError("board grid must be a non-empty 2D array")
        self.rows, self.cols = self.grid.shape

    def copy(self):
        return Board(self.grid)

    def in_bounds(self, row, col):
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row, col):
        row, col = int(row), int(col)
        if not self.in_bounds(row, col):
            return CellKind.WALL
        return CellKind(int(self.grid[row, col]))

    def is_wall(self, row, col):
        return self.cell_at(row, col) == CellKind.WALL

    def consume(self, row, col):
        """Empty a pellet or power-up cell and return what was there.

        Returns CellKind.EMPTY when nothing was consumed.
        """
        kind = self.cell_at(row, col)
        if kind in (CellKind.PELLET, CellKind.POWER_UP):
            self.grid[int(row), int(col)] = CellKind.EMPTY
            return kind
        return CellKind.EMPTY

    def cells_of(self, kind):
        rows, cols = np.nonzero(self.grid == kind)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def pellets(self):
        return self.cells_of(CellKind.PELLET)

    def power_ups(self):
        return self.cells_of(CellKind.POWER_UP)

    def remaining(self):
        return int(np.count_nonzero((self.grid == CellKind.PELLET) | (self.grid == CellKind.POWER_UP)))

    def center(self):
        return ((self.rows - 1) / 2.0, (self.cols - 1) / 2.0)

    def barriers(self):
        walls = np.pad(self.grid == CellKind.WALL, 1, mode="constant", constant_values=True)
        result = []
        for row, col in self.cells_of(CellKind.WALL):
            entry = {"row": row, "col": col}
            for name, (dr, dc) in NEIGHBOUR_OFFSETS.items():
                entry[name] = bool(walls[row + 1 + dr, col + 1 + dc])
            result.append(entry)
        return result


def parse_maze(lines):
    """Build a board from maze text.

    Returns (board, player_spawn, ghost_spawns) with spawns as (row, col).
    """
    if not lines:
        raise MazeError("maze is empty")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise MazeError("maze rows must all have the same length")

    grid = []
    player_spawn = None
    ghost_spawns = []
    for r, line in enumerate(lines):
        row = []
        for c, ch in enumerate(line):
            if ch not in MAZE_SYMBOLS:
                raise MazeError(f"unknown maze symbol {ch!r} at ({r}, {c})")
            if ch == "P":
                if player_spawn is not None:
                    raise MazeError("maze has more than one player spawn")
                player_spawn = (r, c)
            elif ch == "G":
                ghost_spawns.append((r, c))
            row.append(CellKind[MAZE_SYMBOLS[ch]])
        grid.append(row)

    if player_spawn is None:
        raise MazeError("maze has no player spawn")

    board = Board(grid)
    border = np.concatenate([board.grid[0], board.grid[-1], board.grid[:, 0], board.grid[:, -1]])
    if not np.all(border == CellKind.WALL):
        raise MazeError("maze must be enclosed by a wall border")
    return board, player_spawn, ghost_spawns

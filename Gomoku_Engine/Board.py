"""Board state container: cell storage, bounds checks, and line scanning."""

from enum import IntEnum
from typing import NamedTuple

try:
    from engine.errors import InvalidDimension, OutOfBounds
except ImportError:
    from Gomoku_Engine.engine.errors import InvalidDimension, OutOfBounds


MIN_BOARD_SIZE = 5


class Cell(IntEnum):
    # Same encoding as the stones on the board: -1 black, 0 empty, 1 white
    BLACK = -1
    EMPTY = 0
    WHITE = 1


class Position(NamedTuple):
    row: int
    col: int

    def step(self, direction, times=1):
        dr, dc = direction
        return Position(self.row + dr * times, self.col + dc * times)


# 8-neighbourhood used by the adjacency heuristic
NEIGHBORS_8 = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "X", Cell.WHITE: "O"}


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


class Board:
    def __init__(self, size=15):
        if not isinstance(size, int) or isinstance(size, bool) or size < MIN_BOARD_SIZE:
            raise InvalidDimension(f"board size must be an integer >= {MIN_BOARD_SIZE}, got {size!r}")
        self.size = size
        self.cells = [[Cell.EMPTY] * size for _ in range(size)]
        self.move_count = 0

    @classmethod
    def create(cls, size):
        return cls(size)

    def in_bounds(self, row, col):
        return _is_index(row) and _is_index(col) and 0 <= row < self.size and 0 <= col < self.size

    def _check(self, position):
        row, col = position
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"position {tuple(position)} is outside the {self.size}x{self.size} board")
        return row, col

    def get(self, position):
        row, col = self._check(position)
        return self.cells[row][col]

    def set(self, position, cell):
        """Overwrite a cell. Occupancy rules are the caller's business."""
        row, col = self._check(position)
        cell = Cell(cell)
        previous = self.cells[row][col]
        self.cells[row][col] = cell
        if previous == Cell.EMPTY and cell != Cell.EMPTY:
            self.move_count += 1
        elif previous != Cell.EMPTY and cell == Cell.EMPTY:
            self.move_count -= 1

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == Cell.EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def scan_line(self, origin, direction, max_steps):
        """
        Cells starting at origin + direction, stepping by direction up to max_steps
        times. Stops early at the first out-of-bounds position.
        """
        row, col = origin
        dr, dc = direction
        line = []
        for _ in range(max_steps):
            row += dr
            col += dc
            if not self.in_bounds(row, col):
                break
            line.append(self.cells[row][col])
        return line

    def empty_positions(self):
        """Empty cells in row-major order."""
        return [
            Position(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == Cell.EMPTY
        ]

    def occupied_positions(self):
        return [
            Position(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] != Cell.EMPTY
        ]

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        return new_board

    def snapshot(self):
        return tuple(tuple(row) for row in self.cells)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __str__(self):
        header = "   " + " ".join(f"{c % 10}" for c in range(self.size))
        rows = [header]
        for r, row in enumerate(self.cells):
            rows.append(f"{r:>2} " + " ".join(_SYMBOLS[v] for v in row))
        return "\n".join(rows)

"""Free-style five-in-a-row rules: point-local win detection and draw check."""

from contextlib import contextmanager

try:
    from Board import Board, Cell, Position
except ImportError:
    from Gomoku_Engine.Board import Board, Cell, Position


WIN_LENGTH = 5

# Undirected axes through a stone: horizontal, vertical, diagonal \, diagonal /
AXES = ((0, 1), (1, 0), (1, 1), (1, -1))


@contextmanager
def _simulate(board: Board, position: Position, cell: Cell):
    previous = board.get(position)
    board.set(position, cell)
    try:
        yield
    finally:
        board.set(position, previous)


def _run_length(board: Board, position: Position, direction, cell: Cell) -> int:
    """Consecutive cells equal to `cell` after position (exclusive), at most WIN_LENGTH - 1."""
    count = 0
    for value in board.scan_line(position, direction, WIN_LENGTH - 1):
        if value != cell:
            break
        count += 1
    return count


def line_length(board: Board, position: Position, direction, cell: Cell) -> int:
    """Length of the run through position along one axis, capped per side."""
    dr, dc = direction
    forward = _run_length(board, position, (dr, dc), cell)
    backward = _run_length(board, position, (-dr, -dc), cell)
    return 1 + forward + backward


def is_win_after_move(board: Board, position: Position, cell: Cell) -> bool:
    """Assumes the stone is already placed. Only the four lines through it are examined."""
    if cell == Cell.EMPTY:
        return False
    return any(line_length(board, position, axis, cell) >= WIN_LENGTH for axis in AXES)


def would_win(board: Board, position: Position, cell: Cell) -> bool:
    """Would placing `cell` on the empty `position` complete a line of five?"""
    if board.get(position) != Cell.EMPTY:
        return False
    with _simulate(board, position, cell):
        return is_win_after_move(board, position, cell)


def is_draw_after_move(board: Board, won: bool) -> bool:
    """A draw needs a full board and no win on the move that filled it."""
    return not won and board.is_full()

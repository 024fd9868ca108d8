"""
Automated move selection as an ordered chain of strategy tiers.

Each tier is a function (board, cell, rng, patterns) -> Position | None. The first
tier that returns a position decides the move; later tiers are not evaluated.
"""

import random

try:
    from Board import Cell, NEIGHBORS_8, Position
    from engine import rules
    from engine.state import Difficulty
    from ai import heuristic
except ImportError:
    from Gomoku_Engine.Board import Cell, NEIGHBORS_8, Position
    from Gomoku_Engine.engine import rules
    from Gomoku_Engine.engine.state import Difficulty
    from Gomoku_Engine.ai import heuristic


# (pattern, index of the candidate cell). E = empty, P = the player's stone.
OPEN_THREE_SHAPES = (
    ("EPPPE", 4),
    ("EPPPE", 0),
    ("PEPPE", 1),
    ("PPEPE", 2),
    ("PPPEE", 3),
)
MAKE_TWO_SHAPES = (
    ("EPE", 2),
    ("EPE", 0),
    ("PEE", 1),
    ("EEP", 0),
)
# Candidate already filled by the mover when checking for a newly created open three
CREATED_THREE_SHAPES = (
    ("EPPPE", 1),
    ("EPPPE", 2),
    ("EPPPE", 3),
)


def _opponent(cell):
    return Cell(-cell)


def _window_matches(board, start, direction, pattern, cell):
    expected = {"E": Cell.EMPTY, "P": cell}
    for i, token in enumerate(pattern):
        r, c = start.step(direction, i)
        if not board.in_bounds(r, c) or board.cells[r][c] != expected[token]:
            return False
    return True


def _fits_shape(board, position, cell, shapes):
    for direction in rules.AXES:
        for pattern, index in shapes:
            start = position.step(direction, -index)
            if _window_matches(board, start, direction, pattern, cell):
                return True
    return False


def adjacent_empty_positions(board):
    """Empty cells touching at least one stone in any of the 8 directions (row-major)."""
    found = set()
    for r, c in board.occupied_positions():
        for dr, dc in NEIGHBORS_8:
            nr, nc = r + dr, c + dc
            if board.is_empty(nr, nc):
                found.add(Position(nr, nc))
    return sorted(found)


# --- tiers ---------------------------------------------------------------

def immediate_win(board, cell, rng=None, patterns=None):
    for pos in board.empty_positions():
        if rules.would_win(board, pos, cell):
            return pos
    return None


def immediate_block(board, cell, rng=None, patterns=None):
    return immediate_win(board, _opponent(cell))


def block_open_three(board, cell, rng, patterns=None):
    opponent = _opponent(cell)
    moves = [pos for pos in board.empty_positions() if _fits_shape(board, pos, opponent, OPEN_THREE_SHAPES)]
    return rng.choice(moves) if moves else None


def create_open_three(board, cell, rng, patterns=None):
    moves = []
    for pos in board.empty_positions():
        with rules._simulate(board, pos, cell):
            if _fits_shape(board, pos, cell, CREATED_THREE_SHAPES):
                moves.append(pos)
    return rng.choice(moves) if moves else None


def make_two(board, cell, rng, patterns=None):
    moves = [pos for pos in board.empty_positions() if _fits_shape(board, pos, cell, MAKE_TWO_SHAPES)]
    return rng.choice(moves) if moves else None


def center_opening(board, cell, rng=None, patterns=None):
    if board.move_count:
        return None
    center = board.size // 2
    return Position(center, center)


def best_pattern_score(board, cell, rng, patterns=None):
    """Highest single-ply pattern delta among adjacent cells; ties broken at random."""
    candidates = adjacent_empty_positions(board)
    if not candidates:
        return None
    best, best_score = [], None
    for pos in candidates:
        score = heuristic.placement_delta(board, pos, cell, patterns)
        if best_score is None or score > best_score:
            best, best_score = [pos], score
        elif score == best_score:
            best.append(pos)
    return rng.choice(best)


def adjacent_random(board, cell, rng, patterns=None):
    candidates = adjacent_empty_positions(board)
    return rng.choice(candidates) if candidates else None


def any_random(board, cell, rng, patterns=None):
    empty = board.empty_positions()
    return rng.choice(empty) if empty else None


STRATEGY_CHAINS = {
    Difficulty.EASY: (immediate_win, immediate_block, adjacent_random, any_random),
    Difficulty.MEDIUM: (
        immediate_win,
        immediate_block,
        block_open_three,
        create_open_three,
        make_two,
        adjacent_random,
        any_random,
    ),
    Difficulty.HARD: (immediate_win, immediate_block, center_opening, best_pattern_score, any_random),
}


def choose_move(board, cell, difficulty=Difficulty.EASY, rng=None, patterns=None, chain=None):
    """Return (position, tier_name) chosen for `cell` by the first tier that decides."""
    rng = rng or random.Random()
    if board.is_full():
        raise ValueError("no empty cells left")
    for tier in chain or STRATEGY_CHAINS[difficulty]:
        move = tier(board, cell, rng, patterns)
        if move is not None:
            return move, tier.__name__
    raise ValueError("no strategy produced a move")

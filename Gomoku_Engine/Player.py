"""Player colors and controllers (human text input or automated heuristic)."""

import random
from enum import Enum

try:
    from Board import Cell, Position
    from ai import move_selector
    from engine.state import Difficulty
except ImportError:
    from Gomoku_Engine.Board import Cell, Position
    from Gomoku_Engine.ai import move_selector
    from Gomoku_Engine.engine.state import Difficulty


class Color(Enum):
    """The two sides. Black (player A) always moves first."""

    BLACK = Cell.BLACK
    WHITE = Cell.WHITE

    @property
    def cell(self):
        return self.value

    @property
    def opponent(self):
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def label(self):
        return self.name.capitalize()

    @classmethod
    def from_cell(cls, cell):
        return cls(Cell(cell))


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board):
        """Return Position(row, col) for the next move."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color, prompt=None, reader=None):
        super().__init__(color)
        self.prompt = prompt or f"{color.label} move as 'row col' (0-indexed): "
        self.reader = reader or input

    def next_move(self, board):
        return self.parse_move(self.reader(self.prompt))

    @staticmethod
    def parse_move(raw):
        try:
            row_str, col_str = raw.replace(",", " ").split()
            return Position(int(row_str), int(col_str))
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class AutomatedPlayer(Player):
    def __init__(self, color, difficulty=Difficulty.EASY, rng=None, patterns=None):
        super().__init__(color)
        self.difficulty = difficulty
        self.rng = rng or random.Random()
        self.patterns = patterns
        self.last_tier = None

    def next_move(self, board):
        move, tier = move_selector.choose_move(
            board,
            self.color.cell,
            difficulty=self.difficulty,
            rng=self.rng,
            patterns=self.patterns,
        )
        self.last_tier = tier
        return move

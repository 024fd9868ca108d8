"""Session-level enums: game mode, phase, difficulty, and the game outcome."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameMode(Enum):
    HUMAN_VS_HUMAN = "human-vs-human"
    HUMAN_VS_AUTOMATED = "human-vs-ai"


class Phase(Enum):
    AWAITING_MODE_SELECTION = "awaiting-mode-selection"
    IN_PROGRESS = "in-progress"
    CONCLUDED = "concluded"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Outcome:
    """NONE while the game runs; otherwise a win for `winner` or a draw."""

    kind: str
    winner: Optional[object] = None

    @classmethod
    def win(cls, color):
        return cls("win", color)

    @property
    def is_win(self):
        return self.kind == "win"

    @property
    def is_draw(self):
        return self.kind == "draw"

    def __str__(self):
        if self.is_win:
            return f"{self.winner.label} wins"
        if self.is_draw:
            return "Draw"
        return "No result"


Outcome.NONE = Outcome("none")
Outcome.DRAW = Outcome("draw")

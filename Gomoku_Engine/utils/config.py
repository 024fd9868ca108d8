"""Game settings: YAML file defaults merged with command-line overrides."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

try:
    from Board import MIN_BOARD_SIZE
    from Player import Color
    from engine.errors import InvalidDimension
    from engine.state import Difficulty, GameMode
except ImportError:
    from Gomoku_Engine.Board import MIN_BOARD_SIZE
    from Gomoku_Engine.Player import Color
    from Gomoku_Engine.engine.errors import InvalidDimension
    from Gomoku_Engine.engine.state import Difficulty, GameMode


PROJECT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_SETTINGS = "config/settings.yaml"


def resolve_project_path(path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Engine/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path=DEFAULT_SETTINGS) -> dict:
    path = resolve_project_path(path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@dataclass
class GameConfig:
    board_size: int = 15
    mode: Optional[GameMode] = None
    difficulty: Difficulty = Difficulty.EASY
    automated_player: Color = Color.WHITE
    ai_delay_seconds: float = 0.0
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.board_size, int) or self.board_size < MIN_BOARD_SIZE:
            raise InvalidDimension(f"board_size must be an integer >= {MIN_BOARD_SIZE}, got {self.board_size!r}")
        if self.mode is not None and not isinstance(self.mode, GameMode):
            self.mode = GameMode(self.mode)
        if not isinstance(self.difficulty, Difficulty):
            self.difficulty = Difficulty(self.difficulty)
        if not isinstance(self.automated_player, Color):
            self.automated_player = Color[str(self.automated_player).upper()]
        self.ai_delay_seconds = float(self.ai_delay_seconds)
        if self.ai_delay_seconds < 0:
            raise ValueError("ai_delay_seconds must not be negative")

    @classmethod
    def from_settings(cls, settings, **overrides):
        """Build from a settings dict; overrides that are None fall back to the settings."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in (settings or {}).items() if k in known and v is not None}
        values.update({k: v for k, v in overrides.items() if k in known and v is not None})
        return cls(**values)

"""Gomoku_Engine package exports."""

from .Board import Board, Cell, Position
from .Gomokugame import GameSession
from .Player import Color, Player, HumanPlayer, AutomatedPlayer
from .engine.errors import (
    GomokuError,
    IllegalPhase,
    InvalidDimension,
    NotYourTurn,
    OccupiedCell,
    OutOfBounds,
)
from .engine.state import Difficulty, GameMode, Outcome, Phase

# Subpackages for rules, automated play, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Cell",
    "Position",
    "GameSession",
    "Color",
    "Player",
    "HumanPlayer",
    "AutomatedPlayer",
    "GomokuError",
    "IllegalPhase",
    "InvalidDimension",
    "NotYourTurn",
    "OccupiedCell",
    "OutOfBounds",
    "Difficulty",
    "GameMode",
    "Outcome",
    "Phase",
    "ai",
    "engine",
    "utils",
]

"""
Logic module for console TicTacToe.
Handles game state, rules, and win detection.
"""

from .errors import (
    GameError,
    InvalidMoveError,
    OutOfBoundsError,
    OccupiedError,
    GameOverError,
)
from .game_state import GameState, Player, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker

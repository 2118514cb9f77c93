"""
Move validator for console TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, Tuple, List, Type, TYPE_CHECKING
from dataclasses import dataclass

from .errors import GameError, GameOverError, OutOfBoundsError, OccupiedError
from .board import BOARD_SIZE

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    error: Optional[Type[GameError]] = None

    def raise_for_error(self):
        """Raise the matching GameError if the move was rejected."""
        if not self.is_valid:
            raise self.error(self.error_message)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Row and column must be on the board (0-2)
    3. Can only place on empty cells
    """

    def validate_position(self, row: int, col: int) -> ValidationResult:
        """
        Check that a position is on the board.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}.",
                error=OutOfBoundsError
            )
        return ValidationResult(is_valid=True)

    def validate_move(
        self,
        game_state: "GameState",
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move for the current player.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error_message and error.
        """
        # Check if game is over
        if game_state.is_game_over():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!",
                error=GameOverError
            )

        # Check if row/col are in valid range
        position = self.validate_position(row, col)
        if not position.is_valid:
            return position

        # Check if cell is empty
        occupant = game_state.get_mark_at(row, col)
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant}",
                error=OccupiedError
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of (row, col) valid move positions.
        """
        if game_state.is_game_over():
            return []
        return game_state.get_empty_cells()

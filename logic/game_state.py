"""
Game state management for console TicTacToe.
Tracks the board, whose turn it is, the winner and the move history.
"""

import logging
from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import BOARD_SIZE, Board, empty_board, copy_board, render_board
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Player(Enum):
    """The two players in the game. The value is the display glyph."""
    X = "X"
    O = "O"

    @property
    def glyph(self) -> str:
        return self.value

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Move:
    """
    A move that was applied to the board.
    """
    player: Player          # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is, counting both players


class GameState:
    """
    A single game of TicTacToe on a 3x3 board.

    Tracks:
    - The 3x3 board (which mark is where)
    - Whose turn it is (X always starts)
    - The winner, fixed once a line of three appears
    - Move history

    The live board is never handed out; every accessor returns a copy.
    """

    def __init__(self):
        self._board: Board = empty_board()
        self._turn: Player = Player.X
        self._winner: Optional[Player] = None
        self._moves: List[Move] = []

        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    def move(self, row: int, col: int) -> Move:
        """
        Place the current player's mark at the given position.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            The Move that was applied.

        Raises:
            GameOverError: The game already has a winner or a full board.
            OutOfBoundsError: row or col is outside 0-2.
            OccupiedError: The cell already holds a mark.
        """
        self._validator.validate_move(self, row, col).raise_for_error()

        player = self._turn
        self._board[row][col] = player

        move = Move(player=player, row=row, col=col, move_number=len(self._moves))
        self._moves.append(move)
        logger.debug("%s placed at (%d, %d)", player, row, col)

        # Winner is set once and kept
        if self._winner is None:
            self._winner = self._win_checker.check_winner(self._board)
            if self._winner is not None:
                logger.debug("%s completed a line", self._winner)

        self._turn = player.opposite()
        return move

    def get_turn(self) -> Player:
        """Get the player who moves next. Not meaningful once the game is over."""
        return self._turn

    def is_game_over(self) -> bool:
        """True if someone has three in a row or every cell is filled."""
        return self._winner is not None or not self.get_empty_cells()

    def is_draw(self) -> bool:
        return self._win_checker.check_draw(self._board)

    def get_winner(self) -> Optional[Player]:
        """Get the winning player, or None while undecided or on a tie."""
        return self._winner

    def get_board(self) -> Board:
        """Get an independent copy of the board."""
        return copy_board(self._board)

    def get_mark_at(self, row: int, col: int) -> Optional[Player]:
        """
        Get the mark at a cell.

        Raises:
            OutOfBoundsError: row or col is outside 0-2.
        """
        self._validator.validate_position(row, col).raise_for_error()
        return self._board[row][col]

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self._board[row][col] is None:
                    empty.append((row, col))
        return empty

    def get_moves(self) -> List[Move]:
        """Get the moves played so far, oldest first."""
        return list(self._moves)

    def get_winning_line(self) -> Optional[List[Tuple[int, int]]]:
        return self._win_checker.get_winning_line(self._board)

    def render(self) -> str:
        return render_board(self._board)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"GameState(turn={self._turn}, winner={self._winner}, "
                f"moves={len(self._moves)})")


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    moves = [
        (1, 1),  # X center
        (0, 0),  # O top-left
        (0, 2),  # X top-right
        (2, 2),  # O bottom-right
        (2, 0),  # X bottom-left - anti-diagonal win
    ]

    for row, col in moves:
        print(f"\n{game.get_turn()} moves to ({row}, {col})")
        game.move(row, col)
        print(game)

    print(f"\nGame over: {game.is_game_over()}, winner: {game.get_winner()}")
    print("\nGame state test done!")

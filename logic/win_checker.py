"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board
    from .game_state import Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, scanned in this order
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: "Board") -> Optional["Player"]:
        """
        Check if there's a winner.

        Args:
            board: The 3x3 grid.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(
        self,
        board: "Board",
        line: List[Tuple[int, int]]
    ) -> Optional["Player"]:
        """Return the mark filling all 3 cells of the line, else None."""
        first, second, third = (board[row][col] for row, col in line)
        if first is not None and first == second == third:
            return first
        return None

    def check_draw(self, board: "Board") -> bool:
        """
        Check if the game is a draw: every cell filled and no winner.

        Args:
            board: The 3x3 grid.

        Returns:
            True if the game is a draw.
        """
        if self.check_winner(board) is not None:
            return False

        return all(cell is not None for row in board for cell in row)

    def get_winning_line(self, board: "Board") -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Args:
            board: The 3x3 grid.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return list(line)
        return None

"""
The 3x3 TicTacToe grid: its size, text form and copy helpers.
"""

from typing import Optional, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .game_state import Player


# Fixed 3x3 board and its text form
BOARD_SIZE = 3
EMPTY_CELL = " "
CELL_SEPARATOR = " | "
ROW_SEPARATOR = "-" * 11

Board = List[List[Optional["Player"]]]


def empty_board() -> Board:
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def copy_board(board: Board) -> Board:
    return [[cell for cell in row] for row in board]


def render_board(board: Board) -> str:
    """
    Render a board in its canonical text form.

    Each row is prefixed with a space, cells are joined by " | " and rows
    are separated by a line of dashes. No trailing newline.
    """
    rows = []
    for row in board:
        cells = [EMPTY_CELL if mark is None else mark.glyph for mark in row]
        rows.append(" " + CELL_SEPARATOR.join(cells))
    return f"\n{ROW_SEPARATOR}\n".join(rows)

"""
Console controller for TicTacToe.

Drives one game to completion: prints the board and a prompt, reads a row
and a column, applies the move to the model and reports errors and the
final outcome. Moves are entered 1-based; "q" quits at any point.
"""

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from logic.errors import InvalidMoveError
from logic.game_state import GameState, Player

from .config import ConsoleConfig
from .errors import NoInputError
from .streams import TokenReader, OutputSink

logger = logging.getLogger(__name__)


# Optional sign and decimal digits (any script), within a signed 32-bit int
_INTEGER_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -2 ** 31
_INT_MAX = 2 ** 31 - 1


class SessionState(Enum):
    """Where the session is in collecting a move."""
    PROMPTING = "prompting"
    AWAITING_ROW = "awaiting_row"
    AWAITING_COL = "awaiting_col"
    DONE = "done"


@dataclass
class SessionResult:
    """How a finished session ended."""
    quit: bool                  # True if the user typed the quit token
    winner: Optional[Player]    # None on a tie or a quit
    moves_played: int           # Moves applied during this session


class GameController(ABC):
    """
    Handles user moves by executing them on the model and conveys the
    outcome of each move to the user.
    """

    @abstractmethod
    def play_game(self, model: GameState) -> SessionResult:
        """Play a single game to completion on the given model."""


class ConsoleController(GameController):
    """
    Text controller reading tokens from one stream and writing the
    transcript to another.

    Session flow:
    1. Print the board and a prompt for the current player
    2. Read a row, then a column (1-based)
    3. Apply the move, or report why it was rejected
    4. Repeat until the game is over or the user quits
    """

    def __init__(
        self,
        in_stream: Iterable[str],
        out_stream,
        config: Optional[ConsoleConfig] = None
    ):
        """
        Initialize the controller.

        Args:
            in_stream: Readable text stream (or iterable of lines) to take moves from.
            out_stream: Writable text stream for the transcript.
            config: Messages and quit token. Defaults to ConsoleConfig().

        Raises:
            ValueError: If either stream is None.
        """
        if in_stream is None or out_stream is None:
            raise ValueError("Input or output stream cannot be None.")

        self.config = config or ConsoleConfig()
        self._tokens = TokenReader(in_stream)
        self._out = OutputSink(out_stream)
        self.state = SessionState.PROMPTING

    def play_game(self, model: GameState) -> SessionResult:
        """
        Play one game on the model.

        Args:
            model: A fresh game model.

        Returns:
            SessionResult describing how the session ended.

        Raises:
            ValueError: If model is None.
            NoInputError: Input ran out before the game was over.
            OutputError: Writing the transcript failed.
        """
        if model is None:
            raise ValueError("There is no model.")

        logger.info("Session started")
        self.state = SessionState.PROMPTING
        row = None
        quit_game = False
        moves_played = 0

        while not model.is_game_over():
            if self.state is SessionState.PROMPTING:
                self._out.append(f"{model}\n")
                self._out.append(self.config.PROMPT_TEMPLATE.format(player=model.get_turn()))
                self.state = SessionState.AWAITING_ROW

            token = self._next_token()
            if self.config.is_quit(token):
                quit_game = True
                break

            value = self._parse_int(token)
            if value is None:
                logger.debug("Rejected non-integer token %r", token)
                self._out.append(self.config.INVALID_NUMBER_TEMPLATE.format(token=token))
                continue

            if self.state is SessionState.AWAITING_ROW:
                row = value
                self.state = SessionState.AWAITING_COL
                continue

            col = value
            try:
                model.move(row - 1, col - 1)
            except InvalidMoveError as e:
                logger.debug("Rejected move %d, %d: %s", row, col, e)
                self._out.append(self.config.INVALID_MOVE_TEMPLATE.format(row=row, col=col))
                self.state = SessionState.AWAITING_ROW
            else:
                moves_played += 1
                self.state = SessionState.PROMPTING
            row = None

        if quit_game:
            self._out.append(self.config.QUIT_HEADER + f"{model}\n")
            winner = None
        else:
            winner = model.get_winner()
            self._report_game_over(model, winner)

        self.state = SessionState.DONE
        logger.info("Session ended (quit=%s, winner=%s, moves=%d)",
                    quit_game, winner, moves_played)
        return SessionResult(quit=quit_game, winner=winner, moves_played=moves_played)

    def _next_token(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            logger.error("Input exhausted in state %s", self.state.value)
            raise NoInputError("No input.") from None

    def _parse_int(self, token: str) -> Optional[int]:
        if not _INTEGER_RE.fullmatch(token):
            return None
        value = int(token)
        if not _INT_MIN <= value <= _INT_MAX:
            return None
        return value

    def _report_game_over(self, model: GameState, winner: Optional[Player]):
        self._out.append(str(model))
        self._out.append(self.config.GAME_OVER_PREFIX)
        if winner is None:
            self._out.append(self.config.TIE_MESSAGE)
        else:
            self._out.append(self.config.WIN_TEMPLATE.format(player=winner))

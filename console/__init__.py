"""
Console module for TicTacToe.
Reads moves from a text stream and writes the game transcript.
"""

from .config import ConsoleConfig
from .errors import SessionError, NoInputError, OutputError
from .streams import TokenReader, OutputSink
from .controller import GameController, ConsoleController, SessionState, SessionResult

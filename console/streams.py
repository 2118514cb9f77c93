"""
Input and output adapters for the console session.

TokenReader turns a text stream into whitespace-separated tokens, reading
one line at a time so an interactive console is never read ahead.
OutputSink appends text to anything with a write() method.
"""

import logging
from typing import Iterable, Iterator, List

from .errors import NoInputError, OutputError

logger = logging.getLogger(__name__)


class TokenReader:
    """
    Iterator over the whitespace-separated tokens of a text stream.

    Args:
        stream: A readable text stream, or any iterable of lines.
    """

    def __init__(self, stream: Iterable[str]):
        if stream is None:
            raise ValueError("Input stream cannot be None.")
        self._lines = iter(stream)
        self._pending: List[str] = []

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        while not self._pending:
            # StopIteration from the line iterator ends the tokens too
            try:
                line = next(self._lines)
            except UnicodeDecodeError as e:
                logger.error("Input is not valid text: %s", e)
                raise NoInputError("Input is not valid text.") from e
            self._pending = line.split()
            self._pending.reverse()
        return self._pending.pop()


class OutputSink:
    """
    Append-only text output.

    Args:
        stream: Any object with a write(str) method.
    """

    def __init__(self, stream):
        if stream is None:
            raise ValueError("Output stream cannot be None.")
        self._stream = stream

    def append(self, text: str):
        """
        Write text to the stream.

        Raises:
            OutputError: The underlying write failed.
        """
        # Closed streams raise ValueError rather than OSError
        try:
            self._stream.write(text)
        except (OSError, ValueError) as e:
            logger.error("Write to output failed: %s", e)
            raise OutputError("Append failed.") from e

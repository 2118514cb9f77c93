"""
Command-line entry point for console TicTacToe.

Two players take turns at the same keyboard. Each move is a row and a
column from 1 to 3, separated by whitespace. Type 'q' to quit.
"""

import logging
import sys

from logic.game_state import GameState
from console.controller import ConsoleController
from console.errors import SessionError

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--script",
        metavar="FILE",
        help="Read moves from FILE instead of standard input"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug information to standard error"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.script:
            try:
                moves = open(args.script, encoding="utf-8")
            except OSError as e:
                parser.error(f"cannot read {args.script}: {e.strerror}")
            with moves:
                result = play(moves, sys.stdout)
        else:
            result = play(sys.stdin, sys.stdout)
    except SessionError as e:
        logger.error("Game aborted: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 130

    # Only the game-over transcript ends without a newline
    if not result.quit:
        print()
    return 0


def play(in_stream, out_stream):
    """Play one game between the given streams."""
    controller = ConsoleController(in_stream, out_stream)
    return controller.play_game(GameState())


if __name__ == "__main__":
    sys.exit(main())

"""
Console configuration for TicTacToe.
The quit command and every message the session writes.
"""


class ConsoleConfig:
    """
    Configuration class for the console session.
    Templates are filled with str.format.
    """

    # ==================== INPUT ====================
    # Quits the session in place of a row or column, any case
    QUIT_TOKEN = "q"

    # ==================== PROMPTS ====================
    PROMPT_TEMPLATE = "Enter a move for {player}:\n"

    # ==================== ERRORS ====================
    INVALID_NUMBER_TEMPLATE = "Not a valid number: {token}\n"
    INVALID_MOVE_TEMPLATE = "Not a valid move: {row}, {col}\n"

    # ==================== OUTCOME ====================
    GAME_OVER_PREFIX = "\nGame is over! "
    TIE_MESSAGE = "Tie game."
    WIN_TEMPLATE = "{player} wins."
    QUIT_HEADER = "Game quit! Ending game state:\n"

    def is_quit(self, token: str) -> bool:
        return token.lower() == self.QUIT_TOKEN.lower()

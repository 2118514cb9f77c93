"""
Fatal errors raised out of a console session.
"""


class SessionError(RuntimeError):
    """The session could not run to completion."""


class NoInputError(SessionError):
    """Input ran out before the game was over."""


class OutputError(SessionError):
    """Writing to the output stream failed."""

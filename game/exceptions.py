"""
Exception definitions for the game core and the message boundary.

Every class carries the wire error `code` it is reported under.

Hierarchy:
- WumpusError (base for all game errors)
  - BoardError (board construction and cell updates)
  - OutOfBounds (engine click outside the grid)
  - ColorError (fader configuration)
  - ProtocolError (malformed or unroutable client messages)
"""


# =========================
# Base exception
# =========================

class WumpusError(Exception):
    """Base exception for all game errors."""
    code: str = "GAME_ERROR"


# =========================
# Board exceptions
# =========================

class BoardError(WumpusError):
    """Base exception for board state errors."""


class InvalidDimensions(BoardError):
    code = "INVALID_PARAMETERS"


class InvalidFadeSteps(BoardError):
    code = "INVALID_PARAMETERS"


class NegativeValue(BoardError):
    pass


class InvalidPosition(BoardError):
    code = "INVALID_COORDINATES"


# =========================
# Engine exceptions
# =========================

class OutOfBounds(WumpusError):
    code = "INVALID_COORDINATES"


class ColorError(WumpusError):
    pass


# =========================
# Protocol exceptions
# =========================

class ProtocolError(WumpusError):
    """Base exception for client message errors."""


class InvalidParameters(ProtocolError):
    code = "INVALID_PARAMETERS"


class InvalidCoordinates(ProtocolError):
    code = "INVALID_COORDINATES"


class NoActiveGame(ProtocolError):
    code = "INVALID_GAME_ID"


class InvalidMessage(ProtocolError):
    code = "INVALID_MESSAGE"

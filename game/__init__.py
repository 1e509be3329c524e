"""Game core: board state, fade colors and the Wumpus engine."""

from .wumpus_game import WumpusGame, create_grid, GRID_TYPES
from .board_state import BoardState, GridCell, MAX_GRID_SIZE, DEFAULT_FADE_STEPS
from .colors import COLORS, ColorFader, distance_color

from .exceptions import (
    WumpusError,
    BoardError,
    InvalidDimensions,
    InvalidFadeSteps,
    NegativeValue,
    InvalidPosition,
    OutOfBounds,
    ColorError,
    ProtocolError,
    InvalidParameters,
    InvalidCoordinates,
    NoActiveGame,
    InvalidMessage,
)

__all__ = [
    "WumpusGame",
    "create_grid",
    "GRID_TYPES",
    "BoardState",
    "GridCell",
    "MAX_GRID_SIZE",
    "DEFAULT_FADE_STEPS",
    "COLORS",
    "ColorFader",
    "distance_color",
    # Exceptions
    "WumpusError",
    "BoardError",
    "InvalidDimensions",
    "InvalidFadeSteps",
    "NegativeValue",
    "InvalidPosition",
    "OutOfBounds",
    "ColorError",
    "ProtocolError",
    "InvalidParameters",
    "InvalidCoordinates",
    "NoActiveGame",
    "InvalidMessage",
]

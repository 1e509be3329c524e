"""Grid geometry: spatial metrics for the game board.

Exports the `GridSystem` abstraction plus the two concrete metrics. Board
and game code should depend only on `GridSystem`.
"""

from .grid_system import GridSystem, Position
from .square_grid import SquareGrid
from .hex_grid import HexGrid, EVEN_Q_DELTAS, ODD_Q_DELTAS

__all__ = [
    "GridSystem",
    "Position",
    "SquareGrid",
    "HexGrid",
    "EVEN_Q_DELTAS",
    "ODD_Q_DELTAS",
]

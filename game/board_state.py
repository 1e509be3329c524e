"""
Per-cell reveal and fade state for every position on the board.

The board never does geometry itself: validity, enumeration and the
distance normalisation used for coloring all come from the `GridSystem`.
"""
from __future__ import annotations

import logging
from typing import Optional

from grid import GridSystem, Position
from .colors import COLORS, ColorFader, distance_color
from .exceptions import InvalidDimensions, InvalidFadeSteps, InvalidPosition, NegativeValue

logger = logging.getLogger(__name__)

MAX_GRID_SIZE = 24
DEFAULT_FADE_STEPS = 3


class GridCell:
    """State of a single board position.

    `value` is the distance revealed by the last click here, or None while the
    cell is not revealed. `fader` is None until the cell is clicked.
    """

    __slots__ = ("position", "value", "clicked", "fader")

    def __init__(self, position: Position):
        self.position = Position(*position)
        self.value: Optional[int] = None
        self.clicked = False
        self.fader: Optional[ColorFader] = None

    def clear(self) -> None:
        self.value = None
        self.clicked = False
        self.fader = None

    def color(self) -> str:
        if self.fader is None:
            return COLORS["unclicked"]
        return self.fader.color()

    def __repr__(self) -> str:
        return f"GridCell({self.position.x}, {self.position.y}, value={self.value}, clicked={self.clicked})"


class BoardState:
    """Owns one `GridCell` per valid position and applies clicks and fading."""

    def __init__(self, grid: GridSystem, fade_steps: int = DEFAULT_FADE_STEPS):
        width, height = grid.get_dimensions()
        if width <= 0 or height <= 0:
            raise InvalidDimensions(f"Grid dimensions must be positive integers, got {width}x{height}")
        if width > MAX_GRID_SIZE or height > MAX_GRID_SIZE:
            raise InvalidDimensions(f"Grid dimensions cannot exceed {MAX_GRID_SIZE}, got {width}x{height}")
        if isinstance(fade_steps, bool) or not isinstance(fade_steps, int) or fade_steps < 0:
            raise InvalidFadeSteps("Fade steps must be a non-negative integer")

        self.grid = grid
        self.fade_steps = fade_steps
        self.cells: dict[Position, GridCell] = {
            pos: GridCell(pos) for pos in grid.get_all_positions()
        }

    def get_cell(self, pos: Position) -> Optional[GridCell]:
        """Return the cell at `pos`, or None when `pos` is not on the board."""
        return self.cells.get(Position(*pos))

    def get_cells_as_2d_array(self) -> list[list[GridCell]]:
        """Live cells, row-major (y outer, x inner)."""
        width, height = self.grid.get_dimensions()
        return [
            [self.cells[Position(x, y)] for x in range(width)]
            for y in range(height)
        ]

    def set_cell_clicked(self, pos: Position, value: int) -> GridCell:
        """Reveal `pos` with `value` at full severity color. Touches no other cell."""
        if value < 0:
            raise NegativeValue("Cell value cannot be negative")
        if not self.grid.is_valid_position(pos):
            raise InvalidPosition(f"Invalid position: {pos[0]}, {pos[1]}")

        cell = self.cells[Position(*pos)]
        cell.value = value
        cell.clicked = True
        cell.fader = ColorFader(
            distance_color(value, self.grid.max_distance()),
            COLORS["unclicked"],
            self.fade_steps,
        )
        logger.debug("cell %s,%s revealed with value %s", pos[0], pos[1], value)
        return cell

    def fade_step(self) -> None:
        """Age every revealed cell by one step, clearing those that finish."""
        for cell in self.cells.values():
            if not cell.clicked or cell.fader is None:
                continue
            cell.fader.next()
            if cell.fader.finished:
                cell.clear()

    def reset(self) -> None:
        for cell in self.cells.values():
            cell.clear()

"""
Game engine: hidden target placement, click processing and target movement.

The engine only ever talks to a `GridSystem`, so the same rules run on
square and hex boards.
"""
from __future__ import annotations

import logging
import random
from typing import Optional

from grid import GridSystem, HexGrid, Position, SquareGrid
from models import ClickResult, GameCell, GameSnapshot, LastClick
from .board_state import DEFAULT_FADE_STEPS, BoardState, GridCell
from .exceptions import InvalidParameters, InvalidPosition, OutOfBounds

logger = logging.getLogger(__name__)

GRID_TYPES: dict[str, type[GridSystem]] = {
    "square": SquareGrid,
    "hex": HexGrid,
}


def create_grid(kind: str, width: int, height: int, rng: Optional[random.Random] = None) -> GridSystem:
    """Build the grid metric named by `kind` ("square" or "hex")."""
    try:
        grid_cls = GRID_TYPES[kind]
    except KeyError:
        raise InvalidParameters(f"Unknown grid type: {kind}")
    return grid_cls(width, height, rng=rng)


class WumpusGame:
    """
    One game of Hunt the Wumpus.

    Each click reveals the distance from the clicked cell to the Wumpus, then
    lets the Wumpus wander floor(d / 2) random steps, where d is the distance
    between this click and the previous one. The first click of a game and a
    winning click never move it.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fade_steps: int = DEFAULT_FADE_STEPS,
        grid_type: str = "hex",
        rng: Optional[random.Random] = None,
    ):
        self._init_state(create_grid(grid_type, width, height, rng=rng), fade_steps)

    @classmethod
    def from_grid(cls, grid: GridSystem, fade_steps: int = DEFAULT_FADE_STEPS) -> "WumpusGame":
        game = cls.__new__(cls)
        game._init_state(grid, fade_steps)
        return game

    def _init_state(self, grid: GridSystem, fade_steps: int) -> None:
        self.grid = grid
        self.board = BoardState(grid, fade_steps)
        self.wumpus: Position = grid.get_random_position()
        self.last_click: Optional[LastClick] = None
        self.click_count = 0
        self.found = False

    # -------------------------------------------------
    # Queries
    # -------------------------------------------------

    def get(self, x: int, y: int) -> GridCell:
        cell = self.board.get_cell(Position(x, y))
        if cell is None:
            raise InvalidPosition(f"Attempt to fetch invalid cell from {x}, {y}")
        return cell

    def get_cells_as_2d_array(self) -> list[list[GridCell]]:
        return self.board.get_cells_as_2d_array()

    def get_dimensions(self) -> tuple[int, int]:
        return self.grid.get_dimensions()

    def is_wumpus_at(self, pos: Position) -> bool:
        return Position(*pos) == self.wumpus

    # -------------------------------------------------
    # Actions
    # -------------------------------------------------

    def move_wumpus(self, dist: int) -> None:
        """Random-walk the Wumpus floor(dist / 2) steps. A step may stay put."""
        for step in range(dist // 2, 0, -1):
            movement = self.grid.get_random_movement(self.wumpus)
            logger.debug("-- %s: wumpus moving from %s,%s to %s,%s", step, *self.wumpus, *movement)
            self.wumpus = Position(*movement)

    def set_clicked(self, x: int, y: int) -> ClickResult:
        """Process a click at (x, y).

        Raises:
            OutOfBounds: if (x, y) is off the grid. No state is changed.
        """
        click = Position(x, y)
        if not self.grid.is_valid_position(click):
            width, height = self.grid.get_dimensions()
            raise OutOfBounds(f"Coordinates not in grid: {x}, {y} (grid is {width}x{height})")

        distance = self.grid.distance(self.wumpus, click)

        # Older reveals start fading before the new one lands at full intensity
        self.board.fade_step()
        self.board.set_cell_clicked(click, distance)

        found = distance == 0
        self.found = self.found or found
        self.click_count += 1

        if self.last_click is not None and not found:
            move_dist = self.grid.distance(
                Position(self.last_click["x"], self.last_click["y"]), click
            )
            self.last_click = {"x": x, "y": y, "dist": move_dist}
            self.move_wumpus(move_dist)
        else:
            self.last_click = {"x": x, "y": y, "dist": 0}

        return {"found": found, "distance": distance}

    def reset(self) -> None:
        self.board.reset()
        self.wumpus = self.grid.get_random_position()
        self.last_click = None
        self.click_count = 0
        self.found = False

    # -------------------------------------------------
    # Display
    # -------------------------------------------------

    def snapshot(self) -> GameSnapshot:
        """Copy of the display state; later board changes do not affect it."""
        rows = []
        for row in self.board.get_cells_as_2d_array():
            display_row = []
            for cell in row:
                show_wumpus = cell.clicked and self.is_wumpus_at(cell.position)
                if cell.clicked and not show_wumpus and cell.value is not None:
                    value = str(cell.value)
                else:
                    value = ""
                display_row.append(GameCell(value=value, color=cell.color(), showWumpus=show_wumpus))
            rows.append(display_row)

        return GameSnapshot(
            grid=rows,
            moves=self.click_count,
            found=self.found,
            distance=self.last_click["dist"] if self.last_click is not None else None,
        )

    def __repr__(self) -> str:
        width, height = self.get_dimensions()
        return f"WumpusGame({type(self.grid).__name__} {width}x{height}, moves={self.click_count}, found={self.found})"

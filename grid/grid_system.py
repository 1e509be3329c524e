from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import NamedTuple, Optional


class Position(NamedTuple):
    x: int
    y: int


# =========================
# GridSystem Interface
# =========================

class GridSystem(ABC):
    """
    Spatial metric for a bounded width x height grid.

    Invariants:
    - Stateless: every answer is a pure function of the dimensions and the
      positions passed in (the random helpers draw from `rng`)
    - distance() is non-negative, symmetric and zero only for equal positions
    - Never holds cell or game state
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.width = width
        self.height = height
        self._rng = rng or random
        self._max_distance: Optional[int] = None

    # -------------------------------------------------
    # Metric
    # -------------------------------------------------

    @abstractmethod
    def distance(self, pos1: Position, pos2: Position) -> int:
        """Distance between two positions under this grid's metric."""

    @abstractmethod
    def get_adjacent_positions(self, pos: Position) -> list[Position]:
        """Neighbours of `pos` that lie inside the grid. Empty for invalid positions."""

    def max_distance(self) -> int:
        """Diameter of the grid. Used to normalize severity colors."""
        if self._max_distance is None:
            self._max_distance = self._compute_max_distance()
        return self._max_distance

    @abstractmethod
    def _compute_max_distance(self) -> int:
        ...

    # -------------------------------------------------
    # Bounds
    # -------------------------------------------------

    def get_dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def is_valid_position(self, pos: Position) -> bool:
        return 0 <= pos[0] < self.width and 0 <= pos[1] < self.height

    def get_all_positions(self) -> list[Position]:
        """Every valid position, row-major (y outer, x inner)."""
        return [Position(x, y) for y in range(self.height) for x in range(self.width)]

    # -------------------------------------------------
    # Randomness
    # -------------------------------------------------

    def get_random_position(self) -> Position:
        idx = self._rng.randrange(self.width * self.height)
        return Position(idx % self.width, idx // self.width)

    def get_random_movement(self, pos: Position) -> Position:
        """Pick uniformly from the neighbours of `pos` plus `pos` itself.

        Staying put counts as a move, so the result may equal `pos`.
        """
        options = self.get_adjacent_positions(pos) + [Position(*pos)]
        return self._rng.choice(options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.width}, {self.height})"

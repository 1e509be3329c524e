import math

from .grid_system import GridSystem, Position


class SquareGrid(GridSystem):
    """Square cells with a floored Euclidean metric and Moore (8-way) adjacency."""

    DIRECTIONS: list[tuple[int, int]] = [
        (-1, -1), (0, -1), (1, -1),
        (-1, 0),           (1, 0),
        (-1, 1),  (0, 1),  (1, 1),
    ]

    def distance(self, pos1: Position, pos2: Position) -> int:
        dx = pos1[0] - pos2[0]
        dy = pos1[1] - pos2[1]
        return math.isqrt(dx * dx + dy * dy)

    def get_adjacent_positions(self, pos: Position) -> list[Position]:
        if not self.is_valid_position(pos):
            return []

        neighbors: list[Position] = []
        for dx, dy in self.DIRECTIONS:
            neighbor = Position(pos[0] + dx, pos[1] + dy)
            if self.is_valid_position(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def _compute_max_distance(self) -> int:
        if self.width <= 0 or self.height <= 0:
            return 0
        return math.isqrt((self.width - 1) ** 2 + (self.height - 1) ** 2)

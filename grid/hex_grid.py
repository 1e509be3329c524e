from .grid_system import GridSystem, Position


# Neighbour offsets for even columns (x % 2 == 0)
EVEN_Q_DELTAS: tuple[tuple[int, int], ...] = (
    (+1, 0), (+1, -1),
    (0, -1), (-1, -1),
    (-1, 0), (0, +1),
)

# Neighbour offsets for odd columns
ODD_Q_DELTAS: tuple[tuple[int, int], ...] = (
    (+1, +1), (+1, 0),
    (0, -1), (-1, 0),
    (-1, +1), (0, +1),
)


class HexGrid(GridSystem):
    """
    Hex grid using the "even-q" vertical offset layout (pointy-top):

    - Columns run straight up and down
    - Even columns sit half a cell higher than odd ones

    Cells are addressed as offset (x, y) positions and converted to axial
    coordinates internally:

        q = x
        r = y - floor(x / 2)
    """

    @staticmethod
    def offset_to_axial(pos: Position) -> tuple[int, int]:
        return pos[0], pos[1] - pos[0] // 2

    def distance(self, pos1: Position, pos2: Position) -> int:
        q1, r1 = self.offset_to_axial(pos1)
        q2, r2 = self.offset_to_axial(pos2)

        dq = q1 - q2
        dr = r1 - r2
        ds = -dq - dr
        return max(abs(dq), abs(dr), abs(ds))

    def get_adjacent_positions(self, pos: Position) -> list[Position]:
        if not self.is_valid_position(pos):
            return []

        deltas = EVEN_Q_DELTAS if pos[0] % 2 == 0 else ODD_Q_DELTAS
        neighbors: list[Position] = []
        for dx, dy in deltas:
            neighbor = Position(pos[0] + dx, pos[1] + dy)
            if self.is_valid_position(neighbor):
                neighbors.append(neighbor)
        return neighbors

    def _compute_max_distance(self) -> int:
        # Brute force over all pairs; at most 576 cells with the board cap.
        positions = self.get_all_positions()
        best = 0
        for i, a in enumerate(positions):
            for b in positions[i + 1:]:
                d = self.distance(a, b)
                if d > best:
                    best = d
        return best

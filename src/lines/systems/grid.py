from __future__ import annotations

from typing import List, Tuple

from lines.components.board import BoardOptions
from lines.components.coordinate import Coordinate, CoordinateOutOfBounds

Line = Tuple[Coordinate, ...]


class Grid:
    """Pure coordinate-space arithmetic for a square board. Holds no occupancy."""

    def __init__(self, options: BoardOptions | None = None):
        self.options = options or BoardOptions()
        self.size = self.options.size
        self._lines: List[Line] | None = None

    def in_bounds(self, coord: Coordinate) -> bool:
        return 0 <= coord.col < self.size and 0 <= coord.row < self.size

    def require(self, coord: Coordinate) -> Coordinate:
        if not self.in_bounds(coord):
            raise CoordinateOutOfBounds(f"{coord} is outside a {self.size}x{self.size} board")
        return coord

    def coordinates(self) -> List[Coordinate]:
        return [Coordinate(col, row) for col in range(self.size) for row in range(self.size)]

    def neighbors(self, coord: Coordinate) -> List[Coordinate]:
        """Axis-adjacent cells only; movement never goes diagonally."""
        col, row = coord.col, coord.row
        candidates = (
            Coordinate(col - 1, row),
            Coordinate(col + 1, row),
            Coordinate(col, row - 1),
            Coordinate(col, row + 1),
        )
        return [candidate for candidate in candidates if self.in_bounds(candidate)]

    def all_lines(self) -> List[Line]:
        """Every row, column and maximal diagonal long enough to hold a run."""
        if self._lines is None:
            self._lines = self._build_lines()
        return list(self._lines)

    def _build_lines(self) -> List[Line]:
        size = self.size
        threshold = self.options.min_run_length
        lines: List[Line] = []
        # Diagonal lines in both directions; offsets outside the board yield empty lines.
        for offset in range(-(size - 1), 2 * size - 1):
            diagonal: List[Coordinate] = []
            anti_diagonal: List[Coordinate] = []
            for row in range(size):
                cell = Coordinate(offset + row, row)
                if self.in_bounds(cell):
                    diagonal.append(cell)
                cell = Coordinate(offset - row, row)
                if self.in_bounds(cell):
                    anti_diagonal.append(cell)
            if diagonal and len(diagonal) >= threshold:
                lines.append(tuple(diagonal))
            if anti_diagonal and len(anti_diagonal) >= threshold:
                lines.append(tuple(anti_diagonal))
        # Columns
        for col in range(size):
            line = tuple(Coordinate(col, row) for row in range(size))
            if len(line) >= threshold:
                lines.append(line)
        # Rows
        for row in range(size):
            line = tuple(Coordinate(col, row) for col in range(size))
            if len(line) >= threshold:
                lines.append(line)
        return lines

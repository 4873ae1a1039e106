from dataclasses import dataclass


class CoordinateOutOfBounds(ValueError):
    """Raised when a coordinate falls outside the board.

    This always indicates a caller bug (bad screen-to-grid mapping), never a game condition.
    """


@dataclass(frozen=True, order=True, slots=True)
class Coordinate:
    """Logical grid cell. Ordered by column first, then row."""
    col: int
    row: int

    def __str__(self) -> str:
        return f"({self.col},{self.row})"

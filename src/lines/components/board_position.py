from dataclasses import dataclass

from lines.components.coordinate import Coordinate


@dataclass(slots=True)
class BoardPosition:
    """Logical cell of a ball entity. Updated in place when the ball slides."""
    col: int
    row: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.col, self.row)

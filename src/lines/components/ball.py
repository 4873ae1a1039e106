from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple


class BallColor(Enum):
    """Fixed seven-color palette. Values are display hex codes for the presentation layer."""
    RED = "ec1c24"
    BLUE = "0e1bd2"
    CYAN = "00a8f3"
    GREEN = "069a30"
    PURPLE = "d71fda"
    BROWN = "b97a56"
    YELLOW = "fff200"


PALETTE: Tuple[BallColor, ...] = tuple(BallColor)


@dataclass(frozen=True, slots=True)
class Ball:
    """A ball occupying one cell.

    handle: opaque reference owned by the presentation collaborator (an esper entity
    id when wired through BoardSystem). The board only threads it through.
    """
    color: BallColor
    handle: Any = None

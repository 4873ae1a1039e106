from __future__ import annotations

import random
from typing import Iterable, Sequence, Tuple

from lines.components.ball import BallColor
from lines.components.board import BoardOptions
from lines.components.coordinate import Coordinate
from lines.systems.board_engine import BoardEngine

R = BallColor.RED
B = BallColor.BLUE
G = BallColor.GREEN
Y = BallColor.YELLOW
C = BallColor.CYAN
P = BallColor.PURPLE
N = BallColor.BROWN


class ScriptedRandom:
    """Random source whose choice() returns queued picks when they are valid options.

    Anything not scripted (or not among the options) falls back to a seeded generator.
    """

    def __init__(self, picks: Iterable[object] = (), seed: int = 0):
        self.picks = list(picks)
        self._fallback = random.Random(seed)

    def choice(self, seq):
        if self.picks and self.picks[0] in seq:
            return self.picks.pop(0)
        return self._fallback.choice(seq)


def coords(*pairs: Tuple[int, int]) -> list[Coordinate]:
    return [Coordinate(col, row) for col, row in pairs]


def make_engine(
    balls: Iterable[Tuple[Tuple[int, int], BallColor]] = (),
    *,
    preview: Sequence[BallColor] | None = None,
    picks: Iterable[object] = (),
    options: BoardOptions | None = None,
) -> BoardEngine:
    """Engine with an empty board (no opening spawn) and hand-placed balls."""
    engine = BoardEngine(options, rng=ScriptedRandom(picks), initial_spawn=False)
    for (col, row), color in balls:
        engine.place(Coordinate(col, row), color)
    if preview is not None:
        engine.preview.set_colors(preview)
    return engine


def message_types(messages) -> list[str]:
    return [type(message).__name__ for message in messages]

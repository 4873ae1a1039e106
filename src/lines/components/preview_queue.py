from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from lines.components.ball import PALETTE, BallColor


class PreviewQueue:
    """Fixed-size lookahead of the colors the next forced spawn will place."""

    def __init__(self, size: int, rng: random.Random, colors: Sequence[BallColor] | None = None):
        self._size = size
        self._rng = rng
        self._colors: List[BallColor] = []
        if colors is not None:
            self.set_colors(colors)
        else:
            self.roll()

    @property
    def colors(self) -> Tuple[BallColor, ...]:
        return tuple(self._colors)

    def __len__(self) -> int:
        return self._size

    def roll(self) -> Tuple[BallColor, ...]:
        """Reroll every slot independently."""
        self._colors = [self._rng.choice(PALETTE) for _ in range(self._size)]
        return self.colors

    def set_colors(self, colors: Sequence[BallColor]) -> None:
        # Tests and scripted setups pin the upcoming colors this way.
        if len(colors) != self._size:
            raise ValueError(f"Preview holds exactly {self._size} colors, got {len(colors)}")
        self._colors = list(colors)

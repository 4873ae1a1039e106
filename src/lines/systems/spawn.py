from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Callable, List, Tuple

from lines.components.ball import Ball, BallColor
from lines.components.coordinate import Coordinate
from lines.components.preview_queue import PreviewQueue
from lines.components.tile_map import TileMap

HandleFactory = Callable[[Coordinate, BallColor], Any]
Placement = Tuple[Coordinate, Ball]


def no_handle(coord: Coordinate, color: BallColor) -> None:
    return None


@dataclass(slots=True)
class SpawnOutcome:
    """Result of one spawn batch.

    board_full: a preview color found no free cell. Balls placed before that stay placed.
    """
    placements: List[Placement] = field(default_factory=list)
    board_full: bool = False


def spawn_batch(
    tile_map: TileMap,
    preview: PreviewQueue,
    rng: random.Random,
    make_handle: HandleFactory = no_handle,
) -> SpawnOutcome:
    """Place every preview color on a random free cell, in queue order.

    The preview is rerolled only when the whole batch was placed.
    """
    outcome = SpawnOutcome()
    for color in preview.colors:
        coord = tile_map.random_free(rng)
        if coord is None:
            outcome.board_full = True
            return outcome
        ball = Ball(color=color, handle=make_handle(coord, color))
        tile_map.set(coord, ball)
        outcome.placements.append((coord, ball))
    preview.roll()
    return outcome

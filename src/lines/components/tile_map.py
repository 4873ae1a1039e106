from __future__ import annotations

import random
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from lines.components.ball import Ball
from lines.components.coordinate import Coordinate, CoordinateOutOfBounds


class TileMap:
    """Occupancy ground truth: one entry per board cell, value is a Ball or None.

    Keys are fixed at construction and never removed; only the values toggle.
    """

    def __init__(self, coordinates: Iterable[Coordinate]):
        self._tiles: Dict[Coordinate, Optional[Ball]] = {coord: None for coord in sorted(coordinates)}

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coord: object) -> bool:
        return coord in self._tiles

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._tiles)

    def get(self, coord: Coordinate) -> Optional[Ball]:
        try:
            return self._tiles[coord]
        except KeyError as exc:
            raise CoordinateOutOfBounds(f"{coord} is not on the board") from exc

    def set(self, coord: Coordinate, ball: Optional[Ball]) -> None:
        if coord not in self._tiles:
            raise CoordinateOutOfBounds(f"{coord} is not on the board")
        self._tiles[coord] = ball

    def is_empty(self, coord: Coordinate) -> bool:
        return self.get(coord) is None

    def free_coordinates(self) -> List[Coordinate]:
        return [coord for coord, ball in self._tiles.items() if ball is None]

    def occupied(self) -> List[Tuple[Coordinate, Ball]]:
        return [(coord, ball) for coord, ball in self._tiles.items() if ball is not None]

    def is_full(self) -> bool:
        return all(ball is not None for ball in self._tiles.values())

    def random_free(self, rng: random.Random) -> Optional[Coordinate]:
        """Uniform choice among free cells, None when the board is full."""
        free = self.free_coordinates()
        if not free:
            return None
        return rng.choice(free)

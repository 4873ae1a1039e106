"""Outbound messages produced by BoardEngine operations.

Each engine call returns the messages in the order the board changed, so a caller
(or a test) can see exactly what one input did. BoardSystem republishes them on
the event bus.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from lines.components.ball import BallColor
from lines.components.coordinate import Coordinate


@dataclass(frozen=True, slots=True)
class BallSelected:
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class BallDeselected:
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class BallPlaced:
    coordinate: Coordinate
    color: BallColor
    handle: Any


@dataclass(frozen=True, slots=True)
class BallMoved:
    handle: Any
    origin: Coordinate
    target: Coordinate
    path: Tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class RunsCleared:
    runs: Tuple[Tuple[Coordinate, ...], ...]
    points: int


@dataclass(frozen=True, slots=True)
class BallRemoved:
    handle: Any
    coordinate: Coordinate


@dataclass(frozen=True, slots=True)
class ScoreChanged:
    score: int


@dataclass(frozen=True, slots=True)
class PreviewChanged:
    colors: Tuple[BallColor, ...]


@dataclass(frozen=True, slots=True)
class GameOver:
    score: int


Message = (
    BallSelected | BallDeselected | BallPlaced | BallMoved | RunsCleared
    | BallRemoved | ScoreChanged | PreviewChanged | GameOver
)

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from lines.components.ball import BallColor
from lines.components.coordinate import Coordinate
from lines.components.tile_map import TileMap
from lines.constants import MIN_RUN_LENGTH, POINTS_PER_BALL

Run = List[Coordinate]


def find_runs(
    tile_map: TileMap,
    lines: Iterable[Sequence[Coordinate]],
    min_run_length: int = MIN_RUN_LENGTH,
) -> List[Run]:
    """Detect every maximal same-colored run of length >= min_run_length.

    A cell shared by a horizontal and a diagonal run shows up in both; each run is
    scored on its own, so the result is not merged or deduplicated.
    """
    runs: List[Run] = []
    for line in lines:
        runs.extend(_scan_line(tile_map, line, min_run_length))
    return runs


def _scan_line(tile_map: TileMap, line: Sequence[Coordinate], min_run_length: int) -> List[Run]:
    found: List[Run] = []
    run: Run = []
    run_color: Optional[BallColor] = None
    for coord in line:
        ball = tile_map.get(coord)
        if ball is None:
            # Empty cells always break a run.
            if len(run) >= min_run_length:
                found.append(run)
            run = []
            run_color = None
        elif ball.color != run_color:
            if len(run) >= min_run_length:
                found.append(run)
            run = [coord]
            run_color = ball.color
        else:
            run.append(coord)
    if len(run) >= min_run_length:
        found.append(run)
    return found


def score_for_runs(runs: Iterable[Sequence[Coordinate]], points_per_ball: int = POINTS_PER_BALL) -> int:
    return sum(points_per_ball * len(run) for run in runs)


def cells_in_runs(runs: Iterable[Sequence[Coordinate]]) -> List[Coordinate]:
    """Distinct cells covered by the runs, sorted for deterministic removal order."""
    return sorted({coord for run in runs for coord in run})

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from lines.components.ball import Ball, BallColor
from lines.components.board import BoardOptions
from lines.components.coordinate import Coordinate
from lines.components.game_state import GameMode
from lines.components.preview_queue import PreviewQueue
from lines.components.tile_map import TileMap
from lines.events.messages import (
    BallDeselected,
    BallMoved,
    BallPlaced,
    BallRemoved,
    BallSelected,
    GameOver,
    Message,
    PreviewChanged,
    RunsCleared,
    ScoreChanged,
)
from lines.systems.grid import Grid
from lines.systems.match import cells_in_runs, find_runs, score_for_runs
from lines.systems.path import find_path
from lines.systems.spawn import HandleFactory, no_handle, spawn_batch

logger = logging.getLogger(__name__)


class BoardEngine:
    """Turn cycle of the puzzle: select, slide, match, spawn, cascade.

    Every public operation runs to completion (cascade included) and returns the
    outbound messages it produced. Rejected input returns an empty list.
    """

    def __init__(
        self,
        options: BoardOptions | None = None,
        *,
        rng: random.Random | None = None,
        make_handle: HandleFactory = no_handle,
        initial_spawn: bool = True,
    ) -> None:
        self.options = options or BoardOptions()
        self.grid = Grid(self.options)
        self._rng = rng or random.Random()
        self._make_handle = make_handle
        self._initial_spawn = initial_spawn
        self.tile_map = TileMap(self.grid.coordinates())
        self.preview = PreviewQueue(self.options.preview_size, self._rng)
        self.selected: Optional[Coordinate] = None
        self.score = 0
        self.state = GameMode.PLAYING
        self.startup_messages: List[Message] = self._start_round() if initial_spawn else []

    @property
    def is_game_over(self) -> bool:
        return self.state is GameMode.GAME_OVER

    # ------------------------------------------------------------------
    # Inbound operations
    # ------------------------------------------------------------------
    def select(self, coord: Coordinate) -> List[Message]:
        self.grid.require(coord)
        if self.is_game_over or self.tile_map.is_empty(coord):
            return []
        self.selected = coord
        return [BallSelected(coord)]

    def deselect(self) -> List[Message]:
        if self.selected is None:
            return []
        previous = self.selected
        self.selected = None
        return [BallDeselected(previous)]

    def click(self, coord: Coordinate) -> List[Message]:
        """Single-input contract: a ball (re)selects, an empty cell attempts the move."""
        self.grid.require(coord)
        if self.is_game_over:
            return []
        if not self.tile_map.is_empty(coord):
            return self.select(coord)
        if self.selected is None:
            return []
        return self.attempt_move(coord)

    def attempt_move(self, coord: Coordinate) -> List[Message]:
        self.grid.require(coord)
        origin = self.selected
        if self.is_game_over or origin is None or coord == origin:
            return []
        path = find_path(self.grid, self.tile_map, origin, coord)
        if path is None:
            return []
        ball = self.tile_map.get(origin)
        if ball is None:
            # Selection always points at a ball; losing it means the board was edited externally.
            self.selected = None
            return []
        messages: List[Message] = []
        self.tile_map.set(origin, None)
        self.tile_map.set(coord, ball)
        self.selected = None
        messages.append(BallMoved(ball.handle, origin, coord, tuple(path)))

        matched = self._resolve_matches(messages)
        if not matched:
            self._forced_spawn(messages)
        return messages

    def reset(self) -> List[Message]:
        """Discard the round and start a fresh one."""
        messages: List[Message] = [BallRemoved(ball.handle, coord) for coord, ball in self.tile_map.occupied()]
        self.tile_map = TileMap(self.grid.coordinates())
        self.preview = PreviewQueue(self.options.preview_size, self._rng)
        self.selected = None
        self.score = 0
        self.state = GameMode.PLAYING
        self.startup_messages = []
        logger.info("Board reset")
        messages.append(ScoreChanged(self.score))
        if self._initial_spawn:
            messages.extend(self._start_round())
        else:
            messages.append(PreviewChanged(self.preview.colors))
        return messages

    # ------------------------------------------------------------------
    # Direct board setup, used by scripted scenarios and tests
    # ------------------------------------------------------------------
    def place(self, coord: Coordinate, color: BallColor) -> Ball:
        """Put a ball on an empty cell without running the turn cycle."""
        self.grid.require(coord)
        if not self.tile_map.is_empty(coord):
            raise ValueError(f"{coord} is already occupied")
        ball = Ball(color=color, handle=self._make_handle(coord, color))
        self.tile_map.set(coord, ball)
        return ball

    # ------------------------------------------------------------------
    # Turn cycle internals
    # ------------------------------------------------------------------
    def _start_round(self) -> List[Message]:
        messages: List[Message] = []
        self._forced_spawn(messages)
        return messages

    def _resolve_matches(self, messages: List[Message]) -> bool:
        runs = find_runs(self.tile_map, self.grid.all_lines(), self.options.min_run_length)
        if not runs:
            return False
        points = score_for_runs(runs, self.options.points_per_ball)
        self.score += points
        messages.append(RunsCleared(tuple(tuple(run) for run in runs), points))
        for coord in cells_in_runs(runs):
            ball = self.tile_map.get(coord)
            if ball is None:
                continue
            self.tile_map.set(coord, None)
            messages.append(BallRemoved(ball.handle, coord))
        messages.append(ScoreChanged(self.score))
        return True

    def _forced_spawn(self, messages: List[Message]) -> None:
        outcome = spawn_batch(self.tile_map, self.preview, self._rng, self._make_handle)
        for coord, ball in outcome.placements:
            messages.append(BallPlaced(coord, ball.color, ball.handle))
        if outcome.board_full:
            self._end_round(messages)
            return
        # Cascade: the freshly spawned balls may complete runs; these never trigger another spawn.
        self._resolve_matches(messages)
        messages.append(PreviewChanged(self.preview.colors))
        if self.tile_map.is_full():
            # No empty target is left for the next move.
            self._end_round(messages)

    def _end_round(self, messages: List[Message]) -> None:
        self.state = GameMode.GAME_OVER
        self.selected = None
        logger.info("No free cell left; game over with score %d", self.score)
        messages.append(GameOver(self.score))

    def snapshot(self) -> List[Tuple[Coordinate, BallColor]]:
        return [(coord, ball.color) for coord, ball in self.tile_map.occupied()]

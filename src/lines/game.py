"""Headless assembly of the Lines game: event bus, world and systems.

A presentation layer creates a LinesGame, subscribes to the ball/score/preview
events and feeds EVENT_TILE_CLICK with logical (col, row) cells.
"""
from __future__ import annotations

import random

from lines.components.board import BoardOptions
from lines.components.leader_board import LeaderBoard
from lines.events.bus import EventBus, EVENT_RESTART_REQUEST, EVENT_TILE_CLICK, EVENT_TILE_DESELECT
from lines.systems.board import BoardSystem
from lines.systems.game_flow_system import GameFlowSystem
from lines.systems.game_score_system import GameScoreSystem
from lines.systems.leader_board_system import LeaderBoardSystem
from lines.world import create_world


class LinesGame:
    def __init__(
        self,
        *,
        options: BoardOptions | None = None,
        rng: random.Random | None = None,
        leader_board: LeaderBoard | None = None,
        event_bus: EventBus | None = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.world = create_world(leader_board=leader_board, rng=rng)
        # Score and flow systems subscribe before the board publishes its opening spawn.
        self.game_score_system = GameScoreSystem(self.world, self.event_bus)
        self.leader_board_system = LeaderBoardSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus, options=options)

    @property
    def engine(self):
        return self.board_system.engine

    def click(self, col: int, row: int) -> None:
        self.event_bus.emit(EVENT_TILE_CLICK, col=col, row=row)

    def deselect(self) -> None:
        self.event_bus.emit(EVENT_TILE_DESELECT)

    def restart(self, reason: str | None = None) -> None:
        self.event_bus.emit(EVENT_RESTART_REQUEST, reason=reason)

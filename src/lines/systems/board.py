from __future__ import annotations

import random
from typing import Dict, Iterable, Optional

from esper import World

from lines.components.ball import BallColor
from lines.components.board import Board, BoardOptions
from lines.components.board_position import BoardPosition
from lines.components.coordinate import Coordinate
from lines.events.bus import (
    EventBus,
    EVENT_BALL_DESELECTED,
    EVENT_BALL_MOVED,
    EVENT_BALL_PLACED,
    EVENT_BALL_REMOVED,
    EVENT_BALL_SELECTED,
    EVENT_GAME_OVER,
    EVENT_GAME_RESET,
    EVENT_PREVIEW_CHANGED,
    EVENT_RESTART_REQUEST,
    EVENT_RUNS_CLEARED,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECT,
)
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
from lines.systems.board_engine import BoardEngine


class BoardSystem:
    """Connects the BoardEngine to the event bus and keeps one esper entity per ball.

    Ball handles are entity ids carrying BoardPosition and BallColor, so presentation
    systems can query the world instead of tracking the board themselves.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        options: BoardOptions | None = None,
        rng: random.Random | None = None,
        initial_spawn: bool = True,
    ):
        self.world = world
        self.event_bus = event_bus
        options = options or BoardOptions()
        # Create a single board entity with Board component
        self.board_entity = self.world.create_entity(Board(options=options))
        candidate_rng = rng or getattr(world, "random", None)
        self.engine = BoardEngine(
            options,
            rng=candidate_rng or random.Random(),
            make_handle=self._create_ball_entity,
            initial_spawn=initial_spawn,
        )
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_TILE_DESELECT, self.on_tile_deselect)
        self.event_bus.subscribe(EVENT_RESTART_REQUEST, self.on_restart_request)
        self.publish(self.engine.startup_messages)

    @property
    def selected(self) -> Optional[Coordinate]:
        return self.engine.selected

    def on_tile_click(self, sender, **kwargs):
        col = kwargs.get('col')
        row = kwargs.get('row')
        if col is None or row is None:
            return
        self.publish(self.engine.click(Coordinate(col, row)))

    def on_tile_deselect(self, sender, **kwargs):
        self.publish(self.engine.deselect())

    def on_restart_request(self, sender, **kwargs):
        reason = kwargs.get('reason')
        messages = self.engine.reset()
        self.event_bus.emit(EVENT_GAME_RESET, reason=reason)
        self.publish(messages)

    def publish(self, messages: Iterable[Message]) -> None:
        """Apply entity side effects of engine messages and re-emit them as bus events."""
        for message in messages:
            if isinstance(message, BallPlaced):
                self.event_bus.emit(EVENT_BALL_PLACED, coordinate=message.coordinate, color=message.color, handle=message.handle)
            elif isinstance(message, BallMoved):
                self._move_ball_entity(message.handle, message.target)
                self.event_bus.emit(
                    EVENT_BALL_MOVED,
                    handle=message.handle,
                    origin=message.origin,
                    target=message.target,
                    path=list(message.path),
                )
            elif isinstance(message, BallRemoved):
                self._delete_ball_entity(message.handle)
                self.event_bus.emit(EVENT_BALL_REMOVED, handle=message.handle, coordinate=message.coordinate)
            elif isinstance(message, BallSelected):
                self.event_bus.emit(EVENT_BALL_SELECTED, coordinate=message.coordinate)
            elif isinstance(message, BallDeselected):
                self.event_bus.emit(EVENT_BALL_DESELECTED, coordinate=message.coordinate)
            elif isinstance(message, RunsCleared):
                self.event_bus.emit(EVENT_RUNS_CLEARED, runs=[list(run) for run in message.runs], points=message.points)
            elif isinstance(message, ScoreChanged):
                self.event_bus.emit(EVENT_SCORE_CHANGED, score=message.score)
            elif isinstance(message, PreviewChanged):
                self.event_bus.emit(EVENT_PREVIEW_CHANGED, colors=message.colors)
            elif isinstance(message, GameOver):
                self.event_bus.emit(EVENT_GAME_OVER, score=message.score)

    def _create_ball_entity(self, coord: Coordinate, color: BallColor) -> int:
        return self.world.create_entity(BoardPosition(col=coord.col, row=coord.row), color)

    def _move_ball_entity(self, handle: int, target: Coordinate) -> None:
        position = self.world.component_for_entity(handle, BoardPosition)
        position.col = target.col
        position.row = target.row

    def _delete_ball_entity(self, handle: int) -> None:
        if self.world.entity_exists(handle):
            self.world.delete_entity(handle, immediate=True)


def ball_entities(world: World) -> Dict[Coordinate, int]:
    """Map of occupied cells to ball entity ids."""
    return {position.coordinate: entity for entity, position in world.get_component(BoardPosition)}


def ball_entity_at(world: World, col: int, row: int) -> int | None:
    for entity, position in world.get_component(BoardPosition):
        if position.col == col and position.row == row:
            return entity
    return None


def ball_colors(world: World) -> Dict[Coordinate, BallColor]:
    return {
        position.coordinate: color
        for entity, (position, color) in world.get_components(BoardPosition, BallColor)
    }


def get_board_options(world: World) -> BoardOptions:
    for _, board in world.get_component(Board):
        return board.options
    raise RuntimeError("Board component not found")

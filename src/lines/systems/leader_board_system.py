from esper import World

from lines.components.leader_board import LeaderBoard
from lines.events.bus import (
    EventBus,
    EVENT_GAME_OVER,
    EVENT_GAME_RESET,
    EVENT_LEADER_BOARD_QUALIFIED,
    EVENT_LEADER_BOARD_SHOW,
    EVENT_LEADER_NAME_SUBMITTED,
)


def get_leader_board(world: World) -> LeaderBoard:
    for _, leader_board in world.get_component(LeaderBoard):
        return leader_board
    raise RuntimeError("LeaderBoard component not found")


class LeaderBoardSystem:
    """Ranks finished rounds and asks for a name when a score makes the table."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)
        self.event_bus.subscribe(EVENT_LEADER_NAME_SUBMITTED, self._on_name_submitted)
        self.event_bus.subscribe(EVENT_GAME_RESET, self._on_game_reset)

    def _on_game_over(self, sender, **payload) -> None:
        score = payload.get('score')
        if score is None:
            return
        leader_board = get_leader_board(self.world)
        if leader_board.qualifies(score):
            rank = leader_board.add_player(score)
            self.event_bus.emit(EVENT_LEADER_BOARD_QUALIFIED, score=score, rank=rank)
            return
        self._show(leader_board)

    def _on_name_submitted(self, sender, **payload) -> None:
        leader_board = get_leader_board(self.world)
        if not leader_board.pending_entry():
            return
        name = (payload.get('name') or '').strip()
        leader_board.set_name(name)
        self._show(leader_board)

    def _on_game_reset(self, sender, **payload) -> None:
        get_leader_board(self.world).discard_pending()

    def _show(self, leader_board: LeaderBoard) -> None:
        self.event_bus.emit(EVENT_LEADER_BOARD_SHOW, players=list(leader_board.players))

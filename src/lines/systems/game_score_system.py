from esper import World

from lines.components.game_score import GameScore
from lines.components.leader_board import LeaderBoard
from lines.events.bus import EventBus, EVENT_BEST_SCORE_CHANGED, EVENT_SCORE_CHANGED


def get_game_score(world: World) -> GameScore:
    for _, score in world.get_component(GameScore):
        return score
    raise RuntimeError("GameScore component not found")


class GameScoreSystem:
    """Keeps the GameScore singleton in step with the board's score events."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        score = get_game_score(world)
        # The best score on display starts from the leader board's top entry.
        for _, leader_board in world.get_component(LeaderBoard):
            score.best = max(score.best, leader_board.best_score() or 0)
            break
        self.event_bus.subscribe(EVENT_SCORE_CHANGED, self._on_score_changed)

    def _on_score_changed(self, sender, **payload) -> None:
        value = payload.get('score')
        if value is None:
            return
        score = get_game_score(self.world)
        if score.update(int(value)):
            self.event_bus.emit(EVENT_BEST_SCORE_CHANGED, best=score.best)

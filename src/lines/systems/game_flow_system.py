from esper import World

from lines.components.game_state import GameMode
from lines.events.bus import EventBus, EVENT_GAME_OVER, EVENT_GAME_RESET
from lines.utils.game_state import set_game_mode


class GameFlowSystem:
    """Mirrors the round lifecycle into the GameState component."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)
        self.event_bus.subscribe(EVENT_GAME_RESET, self._on_game_reset)

    def _on_game_over(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)

    def _on_game_reset(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

import random

from esper import World

from lines.components.game_score import GameScore
from lines.components.game_state import GameMode, GameState
from lines.components.leader_board import LeaderBoard


def create_world(
    initial_mode: GameMode = GameMode.PLAYING,
    *,
    leader_board: LeaderBoard | None = None,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Singleton resources, one entity each.
    world.create_entity(GameState(mode=initial_mode))
    world.create_entity(GameScore())
    world.create_entity(leader_board or LeaderBoard())
    return world

import random

from esper import World
from .events.bus import EventBus
from jeopardy.components.game_state import GameState, GameMode


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.MENU,
    *,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Register the global game state resource.
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    return world

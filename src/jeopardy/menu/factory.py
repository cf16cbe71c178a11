"""Factory helpers for the start/restart button."""
from esper import World

from jeopardy.constants import START_BUTTON_HEIGHT, START_BUTTON_WIDTH, START_BUTTON_Y
from jeopardy.menu.components import MenuAction, MenuButton

START_LABEL = "Start Game"
LOADING_LABEL = "Loading..."
RESTART_LABEL = "Restart Game"


def spawn_start_button(world: World, width: int, height: int) -> int:
    """Create the button that starts (and later restarts) the game."""
    existing = get_start_button(world)
    if existing is not None:
        return existing[0]
    button_entity = world.create_entity()
    world.add_component(
        button_entity,
        MenuButton(
            label=START_LABEL,
            action=MenuAction.START_GAME,
            x=width / 2,
            y=START_BUTTON_Y,
            width=START_BUTTON_WIDTH,
            height=START_BUTTON_HEIGHT,
        ),
    )
    return button_entity


def get_start_button(world: World) -> tuple[int, MenuButton] | None:
    for ent, button in world.get_component(MenuButton):
        if button.action == MenuAction.START_GAME:
            return ent, button
    return None


def update_start_button(world: World, *, label: str, enabled: bool) -> None:
    entry = get_start_button(world)
    if entry is None:
        return
    _, button = entry
    button.label = label
    button.enabled = enabled


def center_start_button(world: World, width: int) -> None:
    entry = get_start_button(world)
    if entry is not None:
        entry[1].x = width / 2

"""Input handling for the start/restart button."""
from esper import World

from jeopardy.events.bus import (
    EVENT_GAME_START_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from jeopardy.menu.components import MenuAction, MenuButton

# arcade.key.ENTER / RETURN, without importing arcade here.
_ENTER_KEYS = (65293, 13)


class MenuInputSystem:
    """Turns presses on the start button into game start requests."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **payload) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        self.handle_mouse_press(float(x), float(y), int(button))

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        # Left button only.
        if button != 1:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._activate_action(menu_button.action, source="button")
                return

    def on_key_press(self, sender, **payload) -> None:
        symbol = payload.get("symbol")
        if symbol not in _ENTER_KEYS:
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if menu_button.action == MenuAction.START_GAME and menu_button.enabled:
                self._activate_action(MenuAction.START_GAME, source="keyboard")
                return

    def _activate_action(self, action: MenuAction, *, source: str) -> None:
        if action == MenuAction.START_GAME:
            self.event_bus.emit(EVENT_GAME_START_REQUEST, source=source)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )

import random
from types import SimpleNamespace

from jeopardy.components.game_state import GameMode, GameState
from jeopardy.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_GAME_START_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from jeopardy.menu.factory import get_start_button, spawn_start_button, update_start_button
from jeopardy.menu.components import MenuButton
from jeopardy.menu.input_system import MenuInputSystem
from jeopardy.systems.input import InputSystem
from jeopardy.ui.layout import compute_board_geometry
from jeopardy.world import create_world
from tests.helpers import make_board


class DummyWindow:
    def __init__(self, width=1280, height=800):
        self.width = width
        self.height = height


class ClickCapture:
    def __init__(self, bus: EventBus):
        self.received = []
        bus.subscribe(EVENT_CELL_CLICK, self.on_click)

    def on_click(self, sender, **payload):
        self.received.append((payload.get('category_index'), payload.get('clue_index')))


def _playing_world(bus):
    world = create_world(bus, initial_mode=GameMode.PLAYING, rng=random.Random(0))
    board = make_board([(f"C{c}", [(f"q{c}{n}", f"a{c}{n}") for n in range(5)]) for c in range(6)])
    world.create_entity(board)
    return world


def test_mouse_press_translates_to_cell_click():
    bus = EventBus()
    window = DummyWindow()
    world = _playing_world(bus)
    InputSystem(bus, window, world)
    cap = ClickCapture(bus)

    geometry = compute_board_geometry(window.width, window.height, 6, 5)
    left, bottom, width, height = geometry.cell_rect(3, 1)
    bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)

    assert cap.received == [(3, 1)]


def test_right_click_and_header_clicks_are_ignored():
    bus = EventBus()
    window = DummyWindow()
    world = _playing_world(bus)
    InputSystem(bus, window, world)
    cap = ClickCapture(bus)
    geometry = compute_board_geometry(window.width, window.height, 6, 5)

    left, bottom, width, height = geometry.cell_rect(0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=left + 5, y=bottom + 5, button=4)
    hl, hb, hw, hh = geometry.header_rect(0)
    bus.emit(EVENT_MOUSE_PRESS, x=hl + hw / 2, y=hb + hh / 2, button=1)

    assert cap.received == []


def test_cell_clicks_ignored_while_loading():
    bus = EventBus()
    window = DummyWindow()
    world = _playing_world(bus)
    next(comp for _, comp in world.get_component(GameState)).mode = GameMode.LOADING
    InputSystem(bus, window, world)
    cap = ClickCapture(bus)
    geometry = compute_board_geometry(window.width, window.height, 6, 5)
    left, bottom, width, height = geometry.cell_rect(1, 1)
    bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)
    assert cap.received == []


def test_start_button_click_requests_game():
    bus = EventBus()
    world = create_world(bus)
    spawn_start_button(world, 800, 600)
    MenuInputSystem(world, bus)
    requests = []
    bus.subscribe(EVENT_GAME_START_REQUEST, lambda sender, **payload: requests.append(payload))

    _, button = get_start_button(world)
    bus.emit(EVENT_MOUSE_PRESS, x=button.x, y=button.y, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=button.x + button.width, y=button.y, button=1)

    assert requests == [{"source": "button"}]


def test_disabled_start_button_ignores_clicks_and_enter():
    bus = EventBus()
    world = create_world(bus)
    spawn_start_button(world, 800, 600)
    update_start_button(world, label="Loading...", enabled=False)
    MenuInputSystem(world, bus)
    requests = []
    bus.subscribe(EVENT_GAME_START_REQUEST, lambda sender, **payload: requests.append(payload))

    _, button = get_start_button(world)
    bus.emit(EVENT_MOUSE_PRESS, x=button.x, y=button.y, button=1)
    bus.emit(EVENT_KEY_PRESS, symbol=65293, modifiers=0)
    assert requests == []

    update_start_button(world, label="Restart Game", enabled=True)
    bus.emit(EVENT_KEY_PRESS, symbol=65293, modifiers=0)
    assert requests == [{"source": "keyboard"}]


def test_spawn_start_button_is_idempotent():
    bus = EventBus()
    world = create_world(bus)
    first = spawn_start_button(world, 800, 600)
    second = spawn_start_button(world, 1024, 768)
    assert first == second
    assert len(list(world.get_component(MenuButton))) == 1
    assert [type(comp) for comp in world.components_for_entity(first)] == [MenuButton]


class StubRenderSystem:
    """Hit cache that reports a fixed cell wherever the click lands."""

    def __init__(self, cell):
        self.render_context = object()
        self.cell = cell
        self.queries = []

    def get_cell_at_point(self, x, y):
        self.queries.append((x, y))
        return self.cell


def test_mouse_press_uses_last_drawn_cells():
    bus = EventBus()
    window = DummyWindow()
    window.render_system = StubRenderSystem(SimpleNamespace(category_index=5, clue_index=4))
    world = _playing_world(bus)
    InputSystem(bus, window, world)
    cap = ClickCapture(bus)

    bus.emit(EVENT_MOUSE_PRESS, x=10, y=20, button=1)

    assert window.render_system.queries == [(10.0, 20.0)]
    assert cap.received == [(5, 4)]


def test_mouse_press_falls_back_to_layout_before_first_frame():
    bus = EventBus()
    window = DummyWindow()
    window.render_system = StubRenderSystem(None)
    window.render_system.render_context = None
    world = _playing_world(bus)
    InputSystem(bus, window, world)
    cap = ClickCapture(bus)

    geometry = compute_board_geometry(window.width, window.height, 6, 5)
    left, bottom, width, height = geometry.cell_rect(2, 3)
    bus.emit(EVENT_MOUSE_PRESS, x=left + width / 2, y=bottom + height / 2, button=1)

    assert window.render_system.queries == []
    assert cap.received == [(2, 3)]

from jeopardy.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_CELL_CLICK,
)
from jeopardy.ui.layout import cell_at_point, compute_board_geometry
from jeopardy.components.game_state import GameMode
from jeopardy.utils.board import get_board
from jeopardy.utils.game_state import current_mode

class InputSystem:
    def __init__(self, event_bus: EventBus, window, world):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button (1) reveals clues.
        if button != 1:
            return
        if current_mode(self.world) != GameMode.PLAYING:
            return
        board = get_board(self.world)
        if board is None or not board.categories:
            return
        cell = self._cell_from_last_frame(float(x), float(y))
        if cell is None:
            geometry = compute_board_geometry(
                self.window.width,
                self.window.height,
                board.category_count,
                board.clues_per_category,
            )
            cell = cell_at_point(geometry, float(x), float(y))
        if cell is None:
            return
        category_index, clue_index = cell
        self.event_bus.emit(EVENT_CELL_CLICK, category_index=category_index, clue_index=clue_index)

    def _cell_from_last_frame(self, x, y):
        # Prefer the cells actually drawn; fall back to layout math before the first frame.
        render_system = getattr(self.window, 'render_system', None)
        if render_system is None or render_system.render_context is None:
            return None
        view = render_system.get_cell_at_point(x, y)
        if view is None:
            return None
        return view.category_index, view.clue_index

from esper import World

from jeopardy.events.bus import EVENT_TICK, EventBus
from jeopardy.components.game_state import GameMode
from jeopardy.rendering.board_renderer import BoardRenderer
from jeopardy.rendering.context import RenderContext, build_render_context
from jeopardy.rendering.loading_renderer import LoadingRenderer
from jeopardy.ui.layout import cell_at_point
from jeopardy.utils.board import get_board
from jeopardy.utils.game_state import get_game_state


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self._time = 0.0
        self._render_ctx: RenderContext | None = None
        self._board_renderer = BoardRenderer()
        self._loading_renderer = LoadingRenderer()

    @property
    def render_context(self) -> RenderContext | None:
        return self._render_ctx

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        try:
            self._time += float(dt)
        except (TypeError, ValueError):
            self._time += 1/60

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # No active Arcade window (unit tests): build the layout cache but skip draw calls.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        state = get_game_state(self.world)
        mode = state.mode if state is not None else GameMode.MENU
        board = get_board(self.world)

        if mode == GameMode.PLAYING and board is not None:
            self._render_ctx = build_render_context(board, self.window.width, self.window.height)
            if not headless:
                self._board_renderer.render(arcade, self._render_ctx)
            return

        self._render_ctx = None
        if mode == GameMode.LOADING and not headless:
            error = state.last_error if state is not None else None
            self._loading_renderer.render(arcade, self.window.width, self.window.height, self._time, error)

    def get_cell_at_point(self, x: float, y: float):
        """Return the CellView drawn under the point in the last frame, if any."""
        ctx = self._render_ctx
        if ctx is None:
            return None
        pos = cell_at_point(ctx.geometry, x, y)
        if pos is None:
            return None
        return ctx.cells.get(pos)

"""Entry point for the Jeopardy board.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import argparse
import dataclasses
import logging
import random

from arcade import Window, run, set_background_color
from jeopardy.constants import BOARD_BACKGROUND, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from jeopardy.data.http_source import HttpTriviaSource
from jeopardy.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from jeopardy.menu.factory import center_start_button, spawn_start_button
from jeopardy.menu.input_system import MenuInputSystem
from jeopardy.menu.render_system import MenuRenderSystem
from jeopardy.settings import Settings, load_settings
from jeopardy.systems.board_builder import BoardBuilder
from jeopardy.systems.board_setup_system import BoardSetupSystem
from jeopardy.systems.clue_reveal_system import ClueRevealSystem
from jeopardy.systems.input import InputSystem
from jeopardy.systems.render import RenderSystem
from jeopardy.world import create_world

logger = logging.getLogger(__name__)


class JeopardyWindow(Window):
    def __init__(self, settings: Settings, *, rng: random.Random | None = None):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, rng=rng)
        self.source = HttpTriviaSource(settings.api_url, timeout=settings.request_timeout)
        builder = BoardBuilder(self.source, rng=getattr(self.world, "random", None))

        spawn_start_button(self.world, self.width, self.height)
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        self.board_setup_system = BoardSetupSystem(
            self.world,
            self.event_bus,
            builder,
            category_count=settings.num_categories,
            clues_per_category=settings.num_clues,
        )
        self.clue_reveal_system = ClueRevealSystem(self.world, self.event_bus)
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        set_background_color(BOARD_BACKGROUND)

    def on_resize(self, width: int, height: int):
        center_start_button(self.world, width)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()
        self.menu_render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)

    def on_close(self):
        self.board_setup_system.shutdown()
        self.source.close()
        super().on_close()


def parse_args(argv=None, settings: Settings | None = None) -> tuple[Settings, int | None]:
    settings = settings or load_settings()
    parser = argparse.ArgumentParser(description="Play a Jeopardy board fetched from a trivia API.")
    parser.add_argument("--api-url", default=settings.api_url)
    parser.add_argument("--categories", type=int, default=settings.num_categories)
    parser.add_argument("--clues", type=int, default=settings.num_clues)
    parser.add_argument("--log-level", default=settings.log_level, type=str.upper)
    parser.add_argument("--seed", type=int, default=None, help="Seed the board sampling RNG")
    args = parser.parse_args(argv)
    try:
        resolved = dataclasses.replace(
            settings,
            api_url=args.api_url,
            num_categories=args.categories,
            num_clues=args.clues,
            log_level=args.log_level,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return resolved, args.seed


def main(argv=None):
    settings, seed = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Using trivia API at %s", settings.api_url)
    rng = random.Random(seed) if seed is not None else None
    JeopardyWindow(settings, rng=rng)
    run()

if __name__ == "__main__":
    main()

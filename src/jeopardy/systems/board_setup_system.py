"""Start/restart coordinator: swaps the loading view for a freshly built board."""
from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait as wait_futures

from esper import World

from jeopardy.components.board import Board
from jeopardy.components.game_state import GameMode
from jeopardy.constants import NUM_CATEGORIES, NUM_CLUES_PER_CAT
from jeopardy.errors import SourceUnavailable
from jeopardy.events.bus import (
    EVENT_BOARD_BUILD_FAILED,
    EVENT_BOARD_LOADING,
    EVENT_BOARD_READY,
    EVENT_GAME_START_REQUEST,
    EVENT_TICK,
    EventBus,
)
from jeopardy.menu.factory import LOADING_LABEL, RESTART_LABEL, START_LABEL, update_start_button
from jeopardy.systems.board_builder import BoardBuilder
from jeopardy.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class BoardSetupSystem:
    """Runs the board builder once per start or restart request.

    The build runs on a single worker thread so the window keeps drawing the
    loading view. Ticks only poll the future; the finished board is attached
    to a brand new entity on the event-loop thread, so nothing outside the
    worker ever sees a partially built board.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        builder: BoardBuilder,
        *,
        category_count: int = NUM_CATEGORIES,
        clues_per_category: int = NUM_CLUES_PER_CAT,
        executor: ThreadPoolExecutor | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.builder = builder
        self.category_count = category_count
        self.clues_per_category = clues_per_category
        self.board_entity: int | None = None
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="board-builder")
        self._future: Future | None = None
        self.event_bus.subscribe(EVENT_GAME_START_REQUEST, self._on_start_request)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    @property
    def pending(self) -> bool:
        return self._future is not None

    def current_board(self) -> Board | None:
        if self.board_entity is None:
            return None
        try:
            return self.world.component_for_entity(self.board_entity, Board)
        except KeyError:
            return None

    def start_game(self) -> bool:
        """Show the loading view and submit a build. Returns False if one is already running."""
        if self._future is not None:
            logger.debug("Start ignored; a board is already loading")
            return False
        self._discard_board()
        state = get_game_state(self.world)
        if state is not None:
            state.last_error = None
        set_game_mode(self.world, self.event_bus, GameMode.LOADING)
        update_start_button(self.world, label=LOADING_LABEL, enabled=False)
        self._future = self._executor.submit(
            self.builder.build_board, self.category_count, self.clues_per_category
        )
        self.event_bus.emit(
            EVENT_BOARD_LOADING,
            category_count=self.category_count,
            clues_per_category=self.clues_per_category,
        )
        return True

    def wait_for_build(self, timeout: float | None = None) -> bool:
        """Block until the running build finishes. True when nothing is left running."""
        if self._future is None:
            return True
        done, _ = wait_futures([self._future], timeout=timeout)
        return bool(done)

    def process_pending(self, *, wait: bool = False) -> Board | None:
        """Attach the finished board, if any. ``wait=True`` blocks until the build ends."""
        future = self._future
        if future is None:
            return None
        if wait:
            self.wait_for_build()
        if not future.done():
            return None
        self._future = None
        try:
            board = future.result()
        except SourceUnavailable as exc:
            logger.error("Unable to build board: %s", exc, exc_info=exc)
            state = get_game_state(self.world)
            if state is not None:
                state.last_error = str(exc)
            # Mode stays LOADING with no board; the button allows another attempt.
            update_start_button(self.world, label=START_LABEL, enabled=True)
            self.event_bus.emit(EVENT_BOARD_BUILD_FAILED, reason=str(exc))
            return None
        self.board_entity = self.world.create_entity(board)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        update_start_button(self.world, label=RESTART_LABEL, enabled=True)
        self.event_bus.emit(EVENT_BOARD_READY, board_entity=self.board_entity, titles=board.titles)
        return board

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)

    def _on_start_request(self, sender, **payload) -> None:
        self.start_game()

    def _on_tick(self, sender, **payload) -> None:
        self.process_pending()

    def _discard_board(self) -> None:
        stale = [ent for ent, _ in self.world.get_component(Board)]
        for ent in stale:
            self.world.delete_entity(ent, immediate=True)
        self.board_entity = None

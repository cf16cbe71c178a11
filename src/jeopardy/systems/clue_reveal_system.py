from esper import World

from jeopardy.components.game_state import GameMode
from jeopardy.events.bus import EVENT_CELL_CLICK, EVENT_CLUE_REVEALED, EventBus
from jeopardy.systems.reveal_ops import DisplayResult, NO_UPDATE, on_clue_clicked
from jeopardy.utils.board import get_board
from jeopardy.utils.game_state import current_mode


class ClueRevealSystem:
    """Forwards cell clicks to the reveal state machine and announces changes."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **kwargs):
        category_index = kwargs.get('category_index')
        clue_index = kwargs.get('clue_index')
        if category_index is None or clue_index is None:
            return
        self.reveal(int(category_index), int(clue_index))

    def reveal(self, category_index: int, clue_index: int) -> DisplayResult:
        if current_mode(self.world) != GameMode.PLAYING:
            return NO_UPDATE
        board = get_board(self.world)
        if board is None:
            return NO_UPDATE
        # IndexOutOfRange propagates: the input layer should never produce it.
        result = on_clue_clicked(board, category_index, clue_index)
        if result.updated:
            self.event_bus.emit(
                EVENT_CLUE_REVEALED,
                category_index=category_index,
                clue_index=clue_index,
                state=result.state,
                text=result.text,
            )
        return result

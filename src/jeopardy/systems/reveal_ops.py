from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from jeopardy.components.board import Board
from jeopardy.components.clue import Clue, RevealState
from jeopardy.constants import HIDDEN_PLACEHOLDER
from jeopardy.errors import IndexOutOfRange


@dataclass(frozen=True, slots=True)
class DisplayResult:
    """What the presentation layer should render after a click."""
    state: RevealState
    text: Optional[str]
    updated: bool = True


# Returned when the clicked clue already shows its answer.
NO_UPDATE = DisplayResult(state=RevealState.ANSWER, text=None, updated=False)

_NEXT_STATE = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
}


def get_clue(board: Board, category_index: int, clue_index: int) -> Clue:
    """Look up a clue by coordinate without Python's negative-index wrap-around."""
    if not 0 <= category_index < board.category_count:
        raise IndexOutOfRange(category_index, clue_index)
    clues = board.categories[category_index].clues
    if not 0 <= clue_index < len(clues):
        raise IndexOutOfRange(category_index, clue_index)
    return clues[clue_index]


def on_clue_clicked(board: Board, category_index: int, clue_index: int) -> DisplayResult:
    """Advance one clue along HIDDEN -> QUESTION -> ANSWER.

    Returns the text to display, or ``NO_UPDATE`` once the answer is showing.
    """
    clue = get_clue(board, category_index, clue_index)
    next_state = _NEXT_STATE.get(clue.reveal_state)
    if next_state is None:
        return NO_UPDATE
    clue.reveal_state = next_state
    return DisplayResult(state=next_state, text=display_text(clue))


def display_text(clue: Clue) -> str:
    if clue.reveal_state == RevealState.QUESTION:
        return clue.question
    if clue.reveal_state == RevealState.ANSWER:
        return clue.answer
    return HIDDEN_PLACEHOLDER

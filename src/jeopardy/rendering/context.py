from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from jeopardy.components.board import Board
from jeopardy.components.clue import RevealState
from jeopardy.systems.reveal_ops import display_text
from jeopardy.ui.layout import BoardGeometry, compute_board_geometry

CellPos = Tuple[int, int]


@dataclass(slots=True)
class CellView:
    """Frame-scoped drawing data for one board cell."""

    category_index: int
    clue_index: int
    rect: Tuple[float, float, float, float]
    text: str
    state: RevealState


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    window_width: int
    window_height: int
    geometry: BoardGeometry
    titles: List[str] = field(default_factory=list)
    cells: Dict[CellPos, CellView] = field(default_factory=dict)


def build_render_context(board: Board, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    geometry = compute_board_geometry(
        window_width,
        window_height,
        board.category_count,
        board.clues_per_category,
    )
    cells: Dict[CellPos, CellView] = {}
    for category_index, category in enumerate(board.categories):
        for clue_index, clue in enumerate(category.clues):
            cells[(category_index, clue_index)] = CellView(
                category_index=category_index,
                clue_index=clue_index,
                rect=geometry.cell_rect(category_index, clue_index),
                text=display_text(clue),
                state=clue.reveal_state,
            )
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        geometry=geometry,
        titles=board.titles,
        cells=cells,
    )

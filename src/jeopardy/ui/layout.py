from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from jeopardy.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    HEADER_ROW_SCALE,
    MIN_CELL_SIZE,
)


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Screen placement of the grid. Arcade's origin is bottom-left."""

    cols: int
    rows: int
    cell_width: float
    cell_height: float
    header_height: float
    left: float
    bottom: float

    @property
    def width(self) -> float:
        return self.cols * self.cell_width

    @property
    def body_top(self) -> float:
        return self.bottom + self.rows * self.cell_height

    @property
    def top(self) -> float:
        return self.body_top + self.header_height

    def cell_rect(self, category_index: int, clue_index: int) -> Tuple[float, float, float, float]:
        """(left, bottom, width, height) of a body cell; clue 0 sits just below the header."""
        x = self.left + category_index * self.cell_width
        y = self.body_top - (clue_index + 1) * self.cell_height
        return x, y, self.cell_width, self.cell_height

    def header_rect(self, category_index: int) -> Tuple[float, float, float, float]:
        x = self.left + category_index * self.cell_width
        return x, self.body_top, self.cell_width, self.header_height


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int) -> BoardGeometry:
    """Size the grid so it fits the percentage caps and centre it horizontally.

    Shared by the renderer and the input system so clicks map to what is drawn.
    """
    cols = max(1, cols)
    rows = max(1, rows)
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_width = max(float(MIN_CELL_SIZE), max_board_w / cols)
    cell_height = max(float(MIN_CELL_SIZE), max_board_h / (rows + HEADER_ROW_SCALE))
    left = (window_width - cols * cell_width) / 2
    return BoardGeometry(
        cols=cols,
        rows=rows,
        cell_width=cell_width,
        cell_height=cell_height,
        header_height=cell_height * HEADER_ROW_SCALE,
        left=left,
        bottom=float(BOTTOM_MARGIN),
    )


def cell_at_point(geometry: BoardGeometry, x: float, y: float) -> Tuple[int, int] | None:
    """Map a point to ``(category_index, clue_index)``; header and outside points give None."""
    if x < geometry.left or x >= geometry.left + geometry.width:
        return None
    if y < geometry.bottom or y > geometry.body_top:
        return None
    category_index = int((x - geometry.left) // geometry.cell_width)
    clue_index = int((geometry.body_top - y) // geometry.cell_height)
    if 0 <= category_index < geometry.cols and 0 <= clue_index < geometry.rows:
        return category_index, clue_index
    return None

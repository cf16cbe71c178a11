from __future__ import annotations

from typing import TYPE_CHECKING

from jeopardy.components.clue import RevealState
from jeopardy.constants import (
    CELL_COLOR,
    CELL_DISABLED_COLOR,
    CELL_DISABLED_TEXT_COLOR,
    CELL_GAP,
    CELL_TEXT_COLOR,
    HEADER_COLOR,
    PLACEHOLDER_COLOR,
)

if TYPE_CHECKING:
    from jeopardy.rendering.context import RenderContext


class BoardRenderer:
    def __init__(self, gap: int = CELL_GAP):
        self._gap = gap

    def render(self, arcade, ctx: RenderContext) -> None:
        geometry = ctx.geometry
        gap = self._gap
        for category_index, title in enumerate(ctx.titles):
            left, bottom, width, height = geometry.header_rect(category_index)
            arcade.draw_lbwh_rectangle_filled(left + gap / 2, bottom + gap / 2, width - gap, height - gap, HEADER_COLOR)
            arcade.draw_text(
                title.upper(),
                left + width / 2,
                bottom + height / 2,
                CELL_TEXT_COLOR,
                self._font_size(height, 0.16),
                width=int(max(width - 2 * gap, 1)),
                align="center",
                anchor_x="center",
                anchor_y="center",
                multiline=True,
                bold=True,
            )

        for cell in ctx.cells.values():
            left, bottom, width, height = cell.rect
            answered = cell.state == RevealState.ANSWER
            fill = CELL_DISABLED_COLOR if answered else CELL_COLOR
            arcade.draw_lbwh_rectangle_filled(left + gap / 2, bottom + gap / 2, width - gap, height - gap, fill)
            if cell.state == RevealState.HIDDEN:
                color = PLACEHOLDER_COLOR
                size = self._font_size(height, 0.4)
            else:
                color = CELL_DISABLED_TEXT_COLOR if answered else CELL_TEXT_COLOR
                size = self._font_size(height, 0.12)
            arcade.draw_text(
                cell.text,
                left + width / 2,
                bottom + height / 2,
                color,
                size,
                width=int(max(width - 2 * gap, 1)),
                align="center",
                anchor_x="center",
                anchor_y="center",
                multiline=True,
                bold=cell.state == RevealState.HIDDEN,
            )

    @staticmethod
    def _font_size(height: float, scale: float) -> int:
        return max(8, int(height * scale))

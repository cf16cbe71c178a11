from __future__ import annotations

from jeopardy.constants import CELL_TEXT_COLOR


class LoadingRenderer:
    """Spinner and status line shown while a board is being fetched."""

    def render(self, arcade, width: int, height: int, elapsed: float, error: str | None = None) -> None:
        cx = width / 2
        cy = height / 2 + 40
        if error:
            arcade.draw_text(
                "Unable to load the board.",
                cx,
                cy + 20,
                CELL_TEXT_COLOR,
                22,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
            arcade.draw_text(
                error,
                cx,
                cy - 20,
                (230, 180, 180),
                14,
                width=int(width * 0.8),
                align="center",
                anchor_x="center",
                anchor_y="center",
                multiline=True,
            )
            return
        start = (elapsed * 360.0) % 360.0
        arcade.draw_arc_outline(cx, cy, 80, 80, CELL_TEXT_COLOR, start, start + 270.0, 8)
        arcade.draw_text(
            "Loading...",
            cx,
            cy - 80,
            CELL_TEXT_COLOR,
            20,
            anchor_x="center",
            anchor_y="center",
        )

from __future__ import annotations

from esper import World

from jeopardy.components.board import Board


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None

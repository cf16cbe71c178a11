"""Rendering system responsible for drawing the start/restart button."""
import arcade
from esper import World
from jeopardy.menu.components import MenuButton


class MenuRenderSystem:
    """Renders menu buttons in every mode."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        for _, button in self.world.get_component(MenuButton):
            left = button.x - button.width / 2
            bottom = button.y - button.height / 2
            fill_color = arcade.color.DARK_SLATE_BLUE if button.enabled else arcade.color.GRAY_BLUE
            outline_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            text_color = arcade.color.WHITE if button.enabled else arcade.color.SILVER
            arcade.draw_lbwh_rectangle_filled(
                left,
                bottom,
                button.width,
                button.height,
                fill_color,
            )
            arcade.draw_lbwh_rectangle_outline(
                left,
                bottom,
                button.width,
                button.height,
                outline_color,
                border_width=2,
            )
            arcade.draw_text(
                button.label,
                button.x,
                button.y,
                text_color,
                20,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

"""Draws a game session into an RGB frame buffer."""

import numpy as np
from numpy.typing import NDArray

from dalarun.core.state import ScreenState
from dalarun.game.session import GameSession
from dalarun.graphics.primitives import (
    Align, clear, create_buffer, draw_image_centered, draw_square, draw_text,
)

TEXT_FILL = (0, 0, 0)
TEXT_STROKE = (255, 255, 255)


class GameRenderer:
    """Per-screen draw dispatch.

    Draw order follows the screen: the title card is laid over the snow,
    the snow falls over the success card, and during play the snow and
    score sit above the scenery.
    """

    def __init__(self, session: GameSession):
        self.session = session
        settings = session.settings
        self.width = settings.canvas_width
        self.height = settings.canvas_height
        self.buffer = create_buffer(self.width, self.height)

    def render(self) -> NDArray[np.uint8]:
        """Draw the current screen and return the buffer."""
        state = self.session.state
        buffer = self.buffer
        clear(buffer)

        if state is ScreenState.START:
            self.draw_snow()
            self._draw_fullscreen(self.session.assets.start_card)
        elif state is ScreenState.WIN:
            self._draw_fullscreen(self.session.assets.win_card)
            self.draw_snow()
        else:
            self._draw_fullscreen(self.session.assets.backdrop)
            self.draw_sprites()
            self.draw_snow()
            self.draw_score()
            if state is ScreenState.GAME_OVER:
                self.draw_game_over()

        return buffer

    def _draw_fullscreen(self, image) -> None:
        draw_image_centered(
            self.buffer, image.pixels,
            self.width / 2, self.height / 2,
            self.width, self.height,
        )

    def draw_sprites(self) -> None:
        """Scenery back to front, then the horse, then live obstacles."""
        buffer = self.buffer
        for layer in self.session.layers:
            for sprite in layer.sprites:
                draw_image_centered(buffer, sprite.image.pixels, sprite.center_x, sprite.center_y)

        horse = self.session.horse.sprite
        draw_image_centered(buffer, horse.display_image.pixels, horse.center_x, horse.center_y)

        for obstacle in self.session.obstacles.visible():
            draw_image_centered(buffer, obstacle.image.pixels, obstacle.center_x, obstacle.center_y)

    def draw_snow(self) -> None:
        for flake in self.session.snow.flakes:
            draw_square(self.buffer, flake.pos_x, flake.pos_y, flake.size, flake.color)

    def draw_score(self) -> None:
        draw_text(
            self.buffer, str(self.session.score), self.width - 20, 20,
            TEXT_FILL, scale=4, align=Align.RIGHT,
            stroke=TEXT_STROKE, stroke_width=2,
        )

    def draw_game_over(self) -> None:
        draw_text(
            self.buffer, "GAME OVER", self.width // 2, self.height // 2,
            TEXT_FILL, scale=6, align=Align.CENTER, valign_center=True,
            stroke=TEXT_STROKE, stroke_width=2,
        )

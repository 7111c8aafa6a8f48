"""Horse movement: gravity, jumping and the running animation."""

import logging
from typing import List

from dalarun.game.sprites import HorseSprite
from dalarun.graphics.image import ImageAsset

logger = logging.getLogger(__name__)


class HorseController:
    """Owns the horse sprite and advances it one tick at a time.

    Args:
        frames: Running animation frames; frame 0 doubles as the jump pose
        center_x: Fixed horizontal position
        center_y: Starting vertical position (the horse drops to the floor)
        floor_y: Y coordinate the horse's bottom edge rests on
        canvas_height: Used to stop integrating once the horse leaves the screen
    """

    def __init__(
        self,
        frames: List[ImageAsset],
        center_x: float,
        center_y: float,
        floor_y: float,
        canvas_height: float,
        gravity: float = 0.45,
        jump_velocity: float = -10.0,
        frame_gap: int = 8,
    ):
        if not frames:
            raise ValueError("horse needs at least one animation frame")

        self.sprite = HorseSprite(center_x=center_x, center_y=center_y, frames=list(frames))
        self.floor_y = floor_y
        self.canvas_height = canvas_height
        self.gravity = gravity
        self.jump_velocity = jump_velocity
        self.frame_gap = frame_gap
        self._frame_counter = 0

    @property
    def is_airborne(self) -> bool:
        return self.sprite.bottom_y < self.floor_y

    def advance(self, allow_landing: bool = True) -> None:
        """Integrate one tick of vertical motion and animation.

        With ``allow_landing`` off (game over) the horse keeps falling
        through the floor until it is a full sprite height below the canvas.
        """
        horse = self.sprite
        on_screen = horse.center_y < self.canvas_height + horse.image.height

        if self.is_airborne or (horse.velocity_y != 0 and on_screen):
            horse.center_y += horse.velocity_y
            horse.velocity_y += self.gravity

            if horse.bottom_y >= self.floor_y and allow_landing:
                self.land()

        self._advance_animation()

    def land(self) -> None:
        """Snap the horse onto the floor and stop vertical motion."""
        horse = self.sprite
        horse.center_y = self.floor_y - horse.image.height / 2
        horse.velocity_y = 0.0
        horse.is_jumping = False

    def jump(self) -> bool:
        """Start a jump unless one is already in progress.

        Returns:
            True if the horse took off
        """
        if self.sprite.is_jumping:
            return False
        self.kick(self.jump_velocity)
        logger.debug("Horse jumped")
        return True

    def kick(self, velocity_y: float) -> None:
        """Apply an upward impulse, used for jumps and the crash flinch."""
        self.sprite.velocity_y = velocity_y
        self.sprite.is_jumping = True

    def _advance_animation(self) -> None:
        self._frame_counter += 1
        if self._frame_counter >= self.frame_gap:
            self._frame_counter = 0
            horse = self.sprite
            horse.current_frame = (horse.current_frame + 1) % len(horse.frames)

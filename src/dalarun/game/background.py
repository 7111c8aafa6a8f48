"""Parallax background layers."""

import logging
import random
from typing import List, Optional, Sequence

from dalarun.config.settings import BackgroundLayerConfig
from dalarun.game.sprites import BackgroundSprite
from dalarun.graphics.image import ImageAsset

logger = logging.getLogger(__name__)


class BackgroundLayer:
    """One strip of scenery that always spans the canvas width.

    New sprites are placed relative to the left edge of the current tail,
    so ``horizontal_spacing`` is the distance between consecutive left
    edges.
    """

    def __init__(
        self,
        config: BackgroundLayerConfig,
        images: Sequence[ImageAsset],
        canvas_width: float,
        canvas_height: float,
        rng: Optional[random.Random] = None,
    ):
        if not images:
            raise ValueError(f"layer {config.name!r} has no images")

        self.config = config
        self.images = list(images)
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.rng = rng or random.Random()
        self.sprites: List[BackgroundSprite] = []

    @property
    def name(self) -> str:
        return self.config.name

    def generate(self, previous_left_edge: Optional[float]) -> BackgroundSprite:
        """Create the sprite that follows a tail whose left edge is given.

        The very first sprite of a layer has no predecessor and is
        anchored at x=0.
        """
        image = self.rng.choice(self.images)
        low, high = self.config.horizontal_spacing

        if previous_left_edge is None:
            center_x = 0.0
        else:
            center_x = previous_left_edge + image.width / 2 + self.rng.uniform(low, high)

        baseline = self.config.y * self.canvas_height
        variance = self.config.vertical_variance
        center_y = self.rng.uniform(baseline - variance, baseline + variance)

        return BackgroundSprite(center_x=center_x, center_y=center_y, image=image)

    def fill(self) -> None:
        """Populate the layer from scratch until it covers the canvas."""
        self.sprites = []
        left_edge: Optional[float] = None
        while left_edge is None or left_edge < self.canvas_width:
            sprite = self.generate(left_edge)
            self.sprites.append(sprite)
            left_edge = sprite.left_edge
        logger.debug(f"Layer {self.name} filled with {len(self.sprites)} sprites")

    def update(self, speed: float) -> None:
        """Scroll left, recycle the head and extend the tail."""
        if not self.sprites:
            self.fill()
            return

        for sprite in self.sprites:
            sprite.center_x -= speed

        if self.sprites[0].right_edge < 0:
            self.sprites.pop(0)

        if not self.sprites:
            self.fill()
            return

        tail = self.sprites[-1]
        if tail.left_edge < self.canvas_width:
            self.sprites.append(self.generate(tail.left_edge))

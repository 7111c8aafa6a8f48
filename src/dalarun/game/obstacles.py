"""Obstacle spawning, scrolling and collision tests."""

import logging
import random
from typing import Dict, Iterator, List, Optional, Tuple

from dalarun.game.sprites import HorseSprite, ObstacleKind, ObstacleSprite
from dalarun.graphics.image import ImageAsset

logger = logging.getLogger(__name__)

# Uniform draw over [0, 11): below 5 is a meatball, below 10 a plant ball,
# the rest a sock. Gives the 5:5:1 mix.
KIND_DRAW_RANGE = 11.0
KIND_THRESHOLDS: Tuple[Tuple[float, ObstacleKind], ...] = (
    (5.0, ObstacleKind.MEATBALL),
    (10.0, ObstacleKind.PLANT_BALL),
)


def pick_obstacle_kind(rng: random.Random) -> ObstacleKind:
    """Draw the kind of the next obstacle."""
    roll = rng.uniform(0, KIND_DRAW_RANGE)
    for threshold, kind in KIND_THRESHOLDS:
        if roll < threshold:
            return kind
    return ObstacleKind.SOCK


def collides(horse: HorseSprite, obstacle: ObstacleSprite, margin: float = 10.0) -> bool:
    """Box overlap between horse and obstacle, shrunk by ``margin`` on each axis."""
    horse_image = horse.image
    distance_x = abs(horse.center_x - obstacle.center_x)
    distance_y = abs(horse.center_y - obstacle.center_y)
    limit_x = horse_image.width / 2 + obstacle.image.width / 2 - margin
    limit_y = horse_image.height / 2 + obstacle.image.height / 2 - margin
    return distance_x < limit_x and distance_y < limit_y


class ObstacleField:
    """The queue of obstacles rolling towards the horse.

    Obstacles are appended at the right and removed from the left, so the
    list stays sorted by ``center_x``.
    """

    def __init__(
        self,
        images: Dict[ObstacleKind, ImageAsset],
        canvas_width: float,
        distance_range: Tuple[float, float] = (120.0, 1000.0),
        collision_margin: float = 10.0,
        rng: Optional[random.Random] = None,
    ):
        missing = [kind.name for kind in ObstacleKind if kind not in images]
        if missing:
            raise ValueError(f"missing obstacle images: {', '.join(missing)}")

        self.images = images
        self.canvas_width = canvas_width
        self.distance_range = distance_range
        self.collision_margin = collision_margin
        self.rng = rng or random.Random()
        self.obstacles: List[ObstacleSprite] = []

    def __len__(self) -> int:
        return len(self.obstacles)

    def make(self, kind: ObstacleKind, center_x: float, center_y: float) -> ObstacleSprite:
        return ObstacleSprite(center_x=center_x, center_y=center_y, image=self.images[kind], kind=kind)

    def add(self, obstacle: ObstacleSprite) -> None:
        self.obstacles.append(obstacle)

    def scroll(self, speed: float) -> None:
        """Move every obstacle left by ``speed`` pixels."""
        for obstacle in self.obstacles:
            obstacle.center_x -= speed

    def colliding(self, horse: HorseSprite) -> List[ObstacleSprite]:
        """Unconsumed obstacles currently touching the horse, left to right."""
        return [
            obstacle for obstacle in self.obstacles
            if not obstacle.is_consumed and collides(horse, obstacle, self.collision_margin)
        ]

    def remove_offscreen(self) -> Optional[ObstacleSprite]:
        """Drop the head obstacle once it has fully left the canvas."""
        if self.obstacles and self.obstacles[0].right_edge < 0:
            removed = self.obstacles.pop(0)
            logger.debug(f"Obstacle removed: {removed.kind.name}")
            return removed
        return None

    def spawn_if_needed(self) -> Optional[ObstacleSprite]:
        """Queue the next obstacle once the last one has entered the canvas."""
        if not self.obstacles:
            return None

        last = self.obstacles[-1]
        if last.left_edge >= self.canvas_width:
            return None

        gap = self.rng.uniform(*self.distance_range)
        kind = pick_obstacle_kind(self.rng)
        obstacle = self.make(kind, last.center_x + gap, last.center_y)
        self.obstacles.append(obstacle)
        logger.debug(f"Obstacle spawned: {kind.name} at x={obstacle.center_x:.0f}")
        return obstacle

    def visible(self) -> Iterator[ObstacleSprite]:
        """Obstacles that should be drawn."""
        return (obstacle for obstacle in self.obstacles if not obstacle.is_consumed)

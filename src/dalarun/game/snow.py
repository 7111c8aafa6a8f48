"""Decorative snowfall drawn over every screen."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import math
import random

Color = Tuple[int, int, int]


@dataclass
class Snowflake:
    """A flake swaying on a sine path while it falls."""

    radius: float
    initial_angle: float  # degrees
    size: float
    color: Color
    pos_x: float = 0.0
    pos_y: float = 0.0

    def update(
        self,
        time_s: float,
        center_x: float,
        canvas_height: float,
        angular_speed: float = 15.0,
        wrap_y: float = -50.0,
    ) -> None:
        """Move to the position for ``time_s`` seconds and fall one tick."""
        angle = self.initial_angle + angular_speed * time_s
        self.pos_x = center_x + self.radius * math.sin(math.radians(angle))

        # Smaller flakes fall faster
        self.pos_y += 3 / self.size

        if self.pos_y > canvas_height:
            self.pos_y = wrap_y


class Snowfall:
    """Fixed pool of snowflakes sharing one clock."""

    def __init__(
        self,
        canvas_width: float,
        canvas_height: float,
        count: int = 300,
        angular_speed: float = 15.0,
        rng: Optional[random.Random] = None,
    ):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.angular_speed = angular_speed
        self.rng = rng or random.Random()
        self.flakes: List[Snowflake] = [self._create_flake() for _ in range(count)]

    def _create_flake(self) -> Snowflake:
        rng = self.rng
        # sqrt keeps flakes evenly spread instead of clumping in the middle
        radius = math.sqrt(rng.uniform(0, (self.canvas_width / 2) ** 2))
        return Snowflake(
            radius=radius,
            initial_angle=rng.uniform(0, 360),
            size=rng.uniform(2, 5),
            color=(rng.randint(200, 255), rng.randint(200, 255), rng.randint(200, 255)),
            pos_y=rng.uniform(0, self.canvas_height),
        )

    def update(self, time_s: float) -> None:
        center_x = self.canvas_width / 2
        for flake in self.flakes:
            flake.update(time_s, center_x, self.canvas_height, self.angular_speed)

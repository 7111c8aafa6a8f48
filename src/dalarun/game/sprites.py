"""Plain records for everything that moves on screen."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from dalarun.graphics.image import ImageAsset


class ObstacleKind(Enum):
    """What happens when the horse touches an obstacle.

    The value is the score awarded; hazards award nothing and end the run.
    """

    MEATBALL = 0     # hazard
    PLANT_BALL = 10  # minor reward
    SOCK = 50        # major reward

    @property
    def is_hazard(self) -> bool:
        return self is ObstacleKind.MEATBALL

    @property
    def score_value(self) -> int:
        return self.value


@dataclass
class BackgroundSprite:
    center_x: float
    center_y: float
    image: ImageAsset

    @property
    def left_edge(self) -> float:
        return self.center_x - self.image.width / 2

    @property
    def right_edge(self) -> float:
        return self.center_x + self.image.width / 2


@dataclass
class ObstacleSprite:
    center_x: float
    center_y: float
    image: ImageAsset
    kind: ObstacleKind
    is_consumed: bool = False

    @property
    def left_edge(self) -> float:
        return self.center_x - self.image.width / 2

    @property
    def right_edge(self) -> float:
        return self.center_x + self.image.width / 2


@dataclass
class HorseSprite:
    """The player's horse. Only the vertical axis moves."""

    center_x: float
    center_y: float
    frames: List[ImageAsset] = field(default_factory=list)
    velocity_y: float = 0.0
    is_jumping: bool = False
    current_frame: int = 0

    @property
    def image(self) -> ImageAsset:
        """Current running frame."""
        return self.frames[self.current_frame]

    @property
    def display_image(self) -> ImageAsset:
        """Frame to draw: airborne horses hold the first frame."""
        if self.is_jumping:
            return self.frames[0]
        return self.image

    @property
    def bottom_y(self) -> float:
        return self.center_y + self.image.height / 2

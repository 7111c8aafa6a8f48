"""Game simulation: horse, obstacles, scenery, snow and the session tying them together."""

from dalarun.game.sprites import BackgroundSprite, HorseSprite, ObstacleKind, ObstacleSprite
from dalarun.game.assets import GameAssets
from dalarun.game.speed import scroll_speed
from dalarun.game.player import HorseController
from dalarun.game.obstacles import ObstacleField, collides, pick_obstacle_kind
from dalarun.game.background import BackgroundLayer
from dalarun.game.snow import Snowfall, Snowflake
from dalarun.game.session import GameSession

__all__ = [
    "BackgroundSprite",
    "HorseSprite",
    "ObstacleKind",
    "ObstacleSprite",
    "GameAssets",
    "scroll_speed",
    "HorseController",
    "ObstacleField",
    "collides",
    "pick_obstacle_kind",
    "BackgroundLayer",
    "Snowfall",
    "Snowflake",
    "GameSession",
]

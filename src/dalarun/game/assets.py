"""The set of images a game session draws with."""

from dataclasses import dataclass, field
from typing import Dict, List

from dalarun.game.sprites import ObstacleKind
from dalarun.graphics.image import ImageAsset


@dataclass
class GameAssets:
    """Loaded images, grouped by what uses them."""

    horse_frames: List[ImageAsset]
    obstacles: Dict[ObstacleKind, ImageAsset]
    layers: List[List[ImageAsset]]  # Back to front, one list per background layer
    backdrop: ImageAsset
    start_card: ImageAsset
    win_card: ImageAsset
    sources: Dict[str, str] = field(default_factory=dict)  # asset key -> "file" or "builtin"

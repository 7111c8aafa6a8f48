"""Asset loading.

Looks for image files under the assets directory using the game's
file layout (``horse/horse1.png``, ``bg/layer1/mount1.png`` ...). Any
file that is not installed is replaced by built-in pixel art.
"""

from pathlib import Path
from typing import Callable, Dict, List
import logging

from dalarun.config.settings import GameSettings
from dalarun.game.assets import GameAssets
from dalarun.game.sprites import ObstacleKind
from dalarun.graphics import pixel_art
from dalarun.graphics.image import ImageAsset, load_image

logger = logging.getLogger(__name__)

HORSE_FILES = ["horse/horse1.png", "horse/horse2.png"]

OBSTACLE_FILES = {
    ObstacleKind.MEATBALL: "obstacles/obstacle1.png",
    ObstacleKind.PLANT_BALL: "obstacles/obstacle2.png",
    ObstacleKind.SOCK: "obstacles/obstacle3.png",
}

LAYER_FILES = [
    ["bg/layer1/mount1.png", "bg/layer1/mount2.png", "bg/layer1/mount3.png", "bg/layer1/mount4.png"],
    ["bg/layer2/tree1.png", "bg/layer2/tree2.png", "bg/layer2/tree3.png"],
    ["bg/layer3/flower1.png", "bg/layer3/flower2.png"],
    ["bg/layer4/floor.png"],
]

BACKDROP_FILE = "bg/bg.jpeg"
START_FILE = "Start.png"
SUCCESS_FILE = "Success.png"


class AssetLoader:
    """Resolves asset keys to images, falling back to pixel art."""

    def __init__(self, assets_path: Path | None = None):
        self.assets_path = assets_path
        self.sources: Dict[str, str] = {}

    def image(self, key: str, fallback: Callable[[], ImageAsset]) -> ImageAsset:
        """Load ``key`` from disk, or build it with ``fallback``."""
        if self.assets_path is not None:
            path = self.assets_path / key
            if path.is_file():
                self.sources[key] = "file"
                return load_image(path)

        self.sources[key] = "builtin"
        return fallback()

    def load(self, game: GameSettings) -> GameAssets:
        """Load every image a session needs."""
        width, height = game.canvas_width, game.canvas_height

        builtin_horse = pixel_art.horse_frames()
        horse_frames = [
            self.image(key, lambda i=i: builtin_horse[i])
            for i, key in enumerate(HORSE_FILES)
        ]

        builtin_obstacles = {
            ObstacleKind.MEATBALL: pixel_art.meatball,
            ObstacleKind.PLANT_BALL: pixel_art.plant_ball,
            ObstacleKind.SOCK: pixel_art.sock,
        }
        obstacles = {
            kind: self.image(key, builtin_obstacles[kind])
            for kind, key in OBSTACLE_FILES.items()
        }

        builtin_layers = pixel_art.default_layer_images()
        layers: List[List[ImageAsset]] = []
        for layer_index, keys in enumerate(LAYER_FILES):
            builtin = builtin_layers[layer_index]
            layers.append([
                self.image(key, lambda i=i, b=builtin: b[i % len(b)])
                for i, key in enumerate(keys)
            ])

        assets = GameAssets(
            horse_frames=horse_frames,
            obstacles=obstacles,
            layers=layers,
            backdrop=self.image(BACKDROP_FILE, lambda: pixel_art.backdrop(width, height, game.floor_y)),
            start_card=self.image(START_FILE, lambda: pixel_art.start_card(width, height)),
            win_card=self.image(SUCCESS_FILE, lambda: pixel_art.success_card(width, height)),
            sources=dict(self.sources),
        )

        from_disk = sum(1 for source in self.sources.values() if source == "file")
        if from_disk == 0:
            logger.warning(f"No image files found under {self.assets_path}, using built-in pixel art")
        else:
            logger.info(f"Loaded {from_disk}/{len(self.sources)} images from {self.assets_path}")

        return assets


def load_game_assets(game: GameSettings, assets_path: Path | None = None) -> GameAssets:
    """Convenience wrapper around AssetLoader."""
    return AssetLoader(assets_path).load(game)

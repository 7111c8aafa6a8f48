"""Image handles shared by the game core and the renderer."""

from dataclasses import dataclass
from pathlib import Path
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ImageAsset:
    """An RGBA pixel array with a name for logging.

    Compared by identity: two loads of the same file are different assets.
    """

    name: str
    pixels: NDArray[np.uint8]  # (height, width, 4)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @classmethod
    def blank(cls, width: int, height: int, name: str = "blank") -> "ImageAsset":
        """Fully transparent image of a given size."""
        return cls(name=name, pixels=np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_rgb(cls, rgb: NDArray[np.uint8], name: str, alpha: int = 255) -> "ImageAsset":
        """Wrap an RGB array, adding a constant alpha channel."""
        h, w = rgb.shape[:2]
        pixels = np.empty((h, w, 4), dtype=np.uint8)
        pixels[:, :, :3] = rgb
        pixels[:, :, 3] = alpha
        return cls(name=name, pixels=pixels)


def load_image(path: Path) -> ImageAsset:
    """Load a PNG/JPEG file as an RGBA image asset."""
    with Image.open(path) as img:
        pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
    logger.debug(f"Loaded image {path} ({pixels.shape[1]}x{pixels.shape[0]})")
    return ImageAsset(name=path.stem, pixels=pixels)

"""Graphics module: image handles and drawing primitives.

The loader and renderer modules import the game package, so they and
pixel_art are imported directly rather than re-exported here.
"""

from dalarun.graphics.image import ImageAsset, load_image
from dalarun.graphics.primitives import (
    Align,
    clear,
    create_buffer,
    draw_image,
    draw_image_centered,
    draw_rect,
    draw_square,
    draw_text,
    measure_text,
)

__all__ = [
    "ImageAsset",
    "load_image",
    "Align",
    "clear",
    "create_buffer",
    "draw_image",
    "draw_image_centered",
    "draw_rect",
    "draw_square",
    "draw_text",
    "measure_text",
]

"""Built-in pixel art used when no image files are installed.

Sprites are drawn from character grids (one character per pixel) and
simple numpy shapes, then scaled up with nearest-neighbour.
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np

from dalarun.graphics.image import ImageAsset
from dalarun.graphics.primitives import Align, create_buffer, draw_rect, draw_text

RGBA = Tuple[int, int, int, int]

# Dala horse palette
HORSE_RED = (200, 30, 40, 255)
HORSE_GOLD = (250, 200, 40, 255)
HORSE_GREEN = (40, 150, 70, 255)
HORSE_BLUE = (40, 80, 190, 255)
HORSE_WHITE = (255, 255, 255, 255)
HORSE_BLACK = (20, 20, 20, 255)

SOCK_RED = (210, 40, 50, 255)
SOCK_WHITE = (245, 245, 245, 255)

PALETTE: Dict[str, RGBA] = {
    "R": HORSE_RED,
    "Y": HORSE_GOLD,
    "G": HORSE_GREEN,
    "B": HORSE_BLUE,
    "W": HORSE_WHITE,
    "K": HORSE_BLACK,
    "S": SOCK_RED,
    "s": SOCK_WHITE,
}

HORSE_BODY = [
    "..........RR....",
    ".........RRRR...",
    "........RRKRRR..",
    "........RRRRRRR.",
    ".......RRRR..RR.",
    "RR....RRRR......",
    ".RRRRRRRRR......",
    ".RYGYBBYGR......",
    ".RRYWYYWYR......",
    ".RRRRRRRRR......",
]

HORSE_LEGS_APART = [
    ".RR.....RR......",
    "R.R.....R.R.....",
    "R..R...R...R....",
]

HORSE_LEGS_TOGETHER = [
    ".RR.....RR......",
    "..RR.....RR.....",
    "..RR.....RR.....",
]

SOCK = [
    "..ssss...",
    "..SSSS...",
    "..ssss...",
    "..SSSS...",
    "..ssss...",
    "..SSSS...",
    "..SSSSS..",
    ".SSSSSSS.",
    "SSSSSSSSS",
    ".SSSSSSS.",
]


def from_rows(rows: Sequence[str], name: str, scale: int = 4) -> ImageAsset:
    """Build an image from a character grid; '.' is transparent."""
    height = len(rows)
    width = max(len(row) for row in rows)
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char in PALETTE:
                pixels[y, x] = PALETTE[char]
    return ImageAsset(name=name, pixels=np.repeat(np.repeat(pixels, scale, axis=0), scale, axis=1))


def _ellipse(width: int, height: int, color: RGBA) -> np.ndarray:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    y, x = np.ogrid[:height, :width]
    cx, cy = (width - 1) / 2, (height - 1) / 2
    mask = ((x - cx) / (width / 2)) ** 2 + ((y - cy) / (height / 2)) ** 2 <= 1.0
    pixels[mask] = color
    return pixels


def _triangle(width: int, height: int, color: RGBA) -> np.ndarray:
    """Upward-pointing isosceles triangle filling the box."""
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    y, x = np.ogrid[:height, :width]
    half = (y + 1) / height * (width / 2)
    mask = np.abs(x - (width - 1) / 2) <= half
    pixels[mask] = color
    return pixels


def _spots(pixels: np.ndarray, spots: List[Tuple[int, int, int]], color: RGBA) -> None:
    """Paint round spots (x, y, radius) where the image is already opaque."""
    height, width = pixels.shape[:2]
    y, x = np.ogrid[:height, :width]
    for sx, sy, radius in spots:
        mask = ((x - sx) ** 2 + (y - sy) ** 2 <= radius ** 2) & (pixels[:, :, 3] > 0)
        pixels[mask] = color


def horse_frames() -> List[ImageAsset]:
    return [
        from_rows(HORSE_BODY + HORSE_LEGS_APART, "horse1"),
        from_rows(HORSE_BODY + HORSE_LEGS_TOGETHER, "horse2"),
    ]


def meatball() -> ImageAsset:
    pixels = _ellipse(40, 40, (130, 70, 40, 255))
    _spots(pixels, [(12, 12, 4), (27, 16, 3), (18, 28, 4), (30, 29, 2)], (95, 45, 25, 255))
    _spots(pixels, [(13, 10, 2)], (190, 130, 90, 255))
    return ImageAsset(name="obstacle1", pixels=pixels)


def plant_ball() -> ImageAsset:
    pixels = _ellipse(36, 36, (60, 160, 70, 255))
    _spots(pixels, [(10, 10, 4), (25, 12, 4), (12, 25, 4), (26, 26, 3)], (35, 110, 45, 255))
    _spots(pixels, [(18, 18, 3)], (240, 90, 120, 255))
    return ImageAsset(name="obstacle2", pixels=pixels)


def sock() -> ImageAsset:
    return from_rows(SOCK, "obstacle3")


def mountain(width: int, height: int, name: str) -> ImageAsset:
    pixels = _triangle(width, height, (95, 110, 150, 255))
    cap = _triangle(width * 3 // 10, height * 3 // 10, (240, 245, 255, 255))
    cap_h, cap_w = cap.shape[:2]
    offset = (width - cap_w) // 2
    region = pixels[:cap_h, offset:offset + cap_w]
    opaque = cap[:, :, 3] > 0
    region[opaque] = cap[opaque]
    return ImageAsset(name=name, pixels=pixels)


def tree(width: int, height: int, name: str) -> ImageAsset:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    trunk_h = height // 8
    crown = _triangle(width, height - trunk_h, (30, 100, 55, 255))
    pixels[:height - trunk_h] = crown
    trunk_w = max(2, width // 6)
    left = (width - trunk_w) // 2
    pixels[height - trunk_h:, left:left + trunk_w] = (100, 70, 40, 255)
    return ImageAsset(name=name, pixels=pixels)


def flower(width: int, height: int, petal: RGBA, name: str) -> ImageAsset:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    head = _ellipse(width, width, petal)
    _spots(head, [(width // 2, width // 2, max(1, width // 6))], (250, 220, 60, 255))
    pixels[:width] = head
    stem = max(1, width // 8)
    left = (width - stem) // 2
    pixels[width:, left:left + stem] = (50, 130, 60, 255)
    return ImageAsset(name=name, pixels=pixels)


def floor_tile(width: int = 33, height: int = 24) -> ImageAsset:
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :] = (120, 85, 60, 255)
    pixels[height // 2:, ::4] = (100, 70, 50, 255)
    pixels[: height // 4, :] = (245, 248, 255, 255)
    return ImageAsset(name="floor", pixels=pixels)


def backdrop(width: int, height: int, floor_y: float) -> ImageAsset:
    """Winter sky fading to the horizon, with earth below the floor line."""
    t = np.linspace(0.0, 1.0, height)[:, None]
    top = np.array([40, 60, 120])
    bottom = np.array([170, 190, 230])
    column = (top * (1 - t) + bottom * t).astype(np.uint8)
    rgb = np.repeat(column[:, None, :], width, axis=1).reshape(height, width, 3)
    rgb[int(floor_y):, :] = (110, 78, 55)
    return ImageAsset.from_rgb(rgb, "bg")


def start_card(width: int, height: int) -> ImageAsset:
    """Title panel; everything outside the panel is transparent so snow shows."""
    rgb = create_buffer(width, height)
    alpha = np.zeros((height, width), dtype=np.uint8)

    panel_w, panel_h = int(width * 0.7), int(height * 0.5)
    left, top = (width - panel_w) // 2, (height - panel_h) // 2
    draw_rect(rgb, left, top, panel_w, panel_h, (170, 25, 35))
    alpha[top:top + panel_h, left:left + panel_w] = 230

    title = from_rows(HORSE_BODY + HORSE_LEGS_APART, "title_horse", scale=3)
    title_rgb = title.pixels[:, :, :3]
    th, tw = title_rgb.shape[:2]
    tx, ty = (width - tw) // 2, top + 12
    opaque = title.pixels[:, :, 3] > 0
    region = rgb[ty:ty + th, tx:tx + tw]
    region[opaque] = (250, 200, 40)

    draw_text(rgb, "RUN, DALA RUN!", width // 2, top + panel_h // 2 + 10, (255, 255, 255),
              scale=5, align=Align.CENTER, stroke=(20, 20, 20), stroke_width=1)
    draw_text(rgb, "PRESS SPACE", width // 2, top + panel_h - 30, (250, 200, 40),
              scale=3, align=Align.CENTER)

    pixels = np.dstack([rgb, alpha])
    return ImageAsset(name="Start", pixels=pixels)


def success_card(width: int, height: int) -> ImageAsset:
    rgb = create_buffer(width, height)
    rgb[:, :] = (30, 90, 60)
    draw_rect(rgb, 20, 20, width - 40, height - 40, (170, 25, 35))
    draw_text(rgb, "YOU WIN!", width // 2, height // 2 - 30, (255, 255, 255),
              scale=8, align=Align.CENTER, valign_center=True, stroke=(20, 20, 20), stroke_width=2)
    draw_text(rgb, "GOD JUL OCH GOTT NYTT AR!", width // 2, height // 2 + 40, (250, 200, 40),
              scale=3, align=Align.CENTER, valign_center=True)
    return ImageAsset.from_rgb(rgb, "Success")


def default_layer_images() -> List[List[ImageAsset]]:
    """Mountains, trees, flowers and floor, matching the layer order."""
    return [
        [
            mountain(160, 110, "mount1"),
            mountain(200, 130, "mount2"),
            mountain(240, 150, "mount3"),
            mountain(180, 90, "mount4"),
        ],
        [
            tree(36, 80, "tree1"),
            tree(44, 96, "tree2"),
            tree(30, 64, "tree3"),
        ],
        [
            flower(16, 28, (230, 60, 90, 255), "flower1"),
            flower(20, 32, (250, 240, 250, 255), "flower2"),
        ],
        [floor_tile()],
    ]


__all__ = [
    "backdrop",
    "default_layer_images",
    "from_rows",
    "horse_frames",
    "meatball",
    "plant_ball",
    "sock",
    "start_card",
    "success_card",
]

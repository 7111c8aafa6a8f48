"""Basic drawing primitives for the game canvas."""

from enum import Enum
from typing import Tuple, Optional
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


class Align(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def create_buffer(width: int, height: int) -> Buffer:
    """Allocate an RGB frame buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def clear(buffer: Buffer, color: Color = (0, 0, 0)) -> None:
    """Clear buffer to a solid color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
) -> None:
    """Draw a filled rectangle, clamped to the buffer."""
    h, w = buffer.shape[:2]

    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    buffer[y1:y2, x1:x2] = color


def draw_square(buffer: Buffer, x: float, y: float, size: float, color: Color) -> None:
    """Draw a filled square with its top-left corner at (x, y)."""
    side = max(1, int(round(size)))
    draw_rect(buffer, int(x), int(y), side, side, color)


def scale_image(image: Buffer, width: int, height: int) -> Buffer:
    """Nearest-neighbour resize, which keeps pixel art crisp."""
    src_h, src_w = image.shape[:2]
    if (src_w, src_h) == (width, height):
        return image
    rows = (np.arange(height) * src_h // height).clip(0, src_h - 1)
    cols = (np.arange(width) * src_w // width).clip(0, src_w - 1)
    return image[rows[:, None], cols]


def draw_image(
    buffer: Buffer,
    image: Buffer,
    x: int,
    y: int,
    alpha: float = 1.0,
) -> None:
    """Draw an image onto the buffer with optional alpha blending.

    Args:
        buffer: Target numpy array (height, width, 3)
        image: Source image array (height, width, 3 or 4)
        x: Top-left x coordinate
        y: Top-left y coordinate
        alpha: Global alpha multiplier (0.0 to 1.0)
    """
    buf_h, buf_w = buffer.shape[:2]
    img_h, img_w = image.shape[:2]

    src_x1 = max(0, -x)
    src_y1 = max(0, -y)
    src_x2 = min(img_w, buf_w - x)
    src_y2 = min(img_h, buf_h - y)

    dst_x1 = max(0, x)
    dst_y1 = max(0, y)
    dst_x2 = dst_x1 + (src_x2 - src_x1)
    dst_y2 = dst_y1 + (src_y2 - src_y1)

    if src_x2 <= src_x1 or src_y2 <= src_y1:
        return

    src_region = image[src_y1:src_y2, src_x1:src_x2]

    if alpha >= 1.0 and image.shape[2] == 3:
        buffer[dst_y1:dst_y2, dst_x1:dst_x2] = src_region
        return

    dst_region = buffer[dst_y1:dst_y2, dst_x1:dst_x2]

    if image.shape[2] == 4:
        img_alpha = (src_region[:, :, 3:4] / 255.0) * alpha
        src_rgb = src_region[:, :, :3]
    else:
        img_alpha = alpha
        src_rgb = src_region

    blended = (src_rgb * img_alpha + dst_region * (1 - img_alpha)).astype(np.uint8)
    buffer[dst_y1:dst_y2, dst_x1:dst_x2] = blended


def draw_image_centered(
    buffer: Buffer,
    image: Buffer,
    center_x: float,
    center_y: float,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> None:
    """Draw an image centered on (center_x, center_y), optionally resized."""
    if width is not None and height is not None:
        image = scale_image(image, width, height)
    img_h, img_w = image.shape[:2]
    draw_image(
        buffer,
        image,
        int(round(center_x - img_w / 2)),
        int(round(center_y - img_h / 2)),
    )


def measure_text(text: str, scale: int = 1, font: Optional[dict] = None) -> Tuple[int, int]:
    """Width and height in pixels of text drawn with draw_text."""
    if font is None:
        font = _get_default_font()

    width = 0
    for char in text:
        char_data = font.get(char.upper())
        if char == ' ' or not char_data:
            width += 4 * scale
        else:
            width += (len(char_data[0]) + 1) * scale
    return max(0, width - scale), 5 * scale


def _blit_glyphs(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    font: dict,
    scale: int,
) -> None:
    h, w = buffer.shape[:2]
    cursor_x = x

    for char in text:
        char_data = font.get(char.upper(), font.get('?', []))
        if char == ' ' or not char_data:
            cursor_x += 4 * scale
            continue

        for row_idx, row in enumerate(char_data):
            for col_idx, pixel in enumerate(row):
                if not pixel:
                    continue
                px = cursor_x + col_idx * scale
                py = y + row_idx * scale
                x1, y1 = max(0, px), max(0, py)
                x2, y2 = min(w, px + scale), min(h, py + scale)
                if x2 > x1 and y2 > y1:
                    buffer[y1:y2, x1:x2] = color

        cursor_x += (len(char_data[0]) + 1) * scale


def draw_text(
    buffer: Buffer,
    text: str,
    x: int,
    y: int,
    color: Color,
    scale: int = 1,
    align: Align = Align.LEFT,
    valign_center: bool = False,
    stroke: Optional[Color] = None,
    stroke_width: int = 0,
    font: Optional[dict] = None,
) -> Tuple[int, int]:
    """Draw text using a bitmap font.

    Args:
        buffer: Target numpy array (height, width, 3)
        text: Text string to draw
        x: Anchor x coordinate (meaning depends on align)
        y: Top y coordinate, or vertical center when valign_center is set
        color: RGB fill color
        scale: Scale factor for font size
        align: Horizontal alignment relative to x
        stroke: Outline color, drawn behind the glyphs
        stroke_width: Outline thickness in pixels

    Returns:
        Tuple of (width, height) of rendered text in pixels
    """
    if font is None:
        font = _get_default_font()

    text_w, text_h = measure_text(text, scale, font)
    if align == Align.CENTER:
        x -= text_w // 2
    elif align == Align.RIGHT:
        x -= text_w
    if valign_center:
        y -= text_h // 2

    if stroke is not None and stroke_width > 0:
        for dy in range(-stroke_width, stroke_width + 1):
            for dx in range(-stroke_width, stroke_width + 1):
                if dx or dy:
                    _blit_glyphs(buffer, text, x + dx, y + dy, stroke, font, scale)

    _blit_glyphs(buffer, text, x, y, color, font, scale)
    return text_w, text_h


def _get_default_font() -> dict:
    """Return a simple 3x5 bitmap font for basic characters."""
    return _DEFAULT_FONT


_DEFAULT_FONT = {
    'A': [[0,1,0], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'B': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,1,0]],
    'C': [[0,1,1], [1,0,0], [1,0,0], [1,0,0], [0,1,1]],
    'D': [[1,1,0], [1,0,1], [1,0,1], [1,0,1], [1,1,0]],
    'E': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,1,1]],
    'F': [[1,1,1], [1,0,0], [1,1,0], [1,0,0], [1,0,0]],
    'G': [[0,1,1], [1,0,0], [1,0,1], [1,0,1], [0,1,1]],
    'H': [[1,0,1], [1,0,1], [1,1,1], [1,0,1], [1,0,1]],
    'I': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [1,1,1]],
    'J': [[0,0,1], [0,0,1], [0,0,1], [1,0,1], [0,1,0]],
    'K': [[1,0,1], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'L': [[1,0,0], [1,0,0], [1,0,0], [1,0,0], [1,1,1]],
    'M': [[1,0,1], [1,1,1], [1,0,1], [1,0,1], [1,0,1]],
    'N': [[1,0,1], [1,1,1], [1,1,1], [1,0,1], [1,0,1]],
    'O': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'P': [[1,1,0], [1,0,1], [1,1,0], [1,0,0], [1,0,0]],
    'Q': [[0,1,0], [1,0,1], [1,0,1], [1,1,1], [0,1,1]],
    'R': [[1,1,0], [1,0,1], [1,1,0], [1,0,1], [1,0,1]],
    'S': [[0,1,1], [1,0,0], [0,1,0], [0,0,1], [1,1,0]],
    'T': [[1,1,1], [0,1,0], [0,1,0], [0,1,0], [0,1,0]],
    'U': [[1,0,1], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    'V': [[1,0,1], [1,0,1], [1,0,1], [0,1,0], [0,1,0]],
    'W': [[1,0,1], [1,0,1], [1,0,1], [1,1,1], [1,0,1]],
    'X': [[1,0,1], [1,0,1], [0,1,0], [1,0,1], [1,0,1]],
    'Y': [[1,0,1], [1,0,1], [0,1,0], [0,1,0], [0,1,0]],
    'Z': [[1,1,1], [0,0,1], [0,1,0], [1,0,0], [1,1,1]],
    '0': [[0,1,0], [1,0,1], [1,0,1], [1,0,1], [0,1,0]],
    '1': [[0,1,0], [1,1,0], [0,1,0], [0,1,0], [1,1,1]],
    '2': [[0,1,0], [1,0,1], [0,0,1], [0,1,0], [1,1,1]],
    '3': [[1,1,0], [0,0,1], [0,1,0], [0,0,1], [1,1,0]],
    '4': [[1,0,1], [1,0,1], [1,1,1], [0,0,1], [0,0,1]],
    '5': [[1,1,1], [1,0,0], [1,1,0], [0,0,1], [1,1,0]],
    '6': [[0,1,1], [1,0,0], [1,1,0], [1,0,1], [0,1,0]],
    '7': [[1,1,1], [0,0,1], [0,1,0], [0,1,0], [0,1,0]],
    '8': [[0,1,0], [1,0,1], [0,1,0], [1,0,1], [0,1,0]],
    '9': [[0,1,0], [1,0,1], [0,1,1], [0,0,1], [1,1,0]],
    '?': [[0,1,0], [1,0,1], [0,0,1], [0,0,0], [0,1,0]],
    '!': [[0,1,0], [0,1,0], [0,1,0], [0,0,0], [0,1,0]],
    '.': [[0,0,0], [0,0,0], [0,0,0], [0,0,0], [0,1,0]],
    ',': [[0,0,0], [0,0,0], [0,0,0], [0,1,0], [1,0,0]],
    ':': [[0,0,0], [0,1,0], [0,0,0], [0,1,0], [0,0,0]],
    '-': [[0,0,0], [0,0,0], [1,1,1], [0,0,0], [0,0,0]],
    '+': [[0,0,0], [0,1,0], [1,1,1], [0,1,0], [0,0,0]],
}

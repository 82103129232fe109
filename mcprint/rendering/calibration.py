from __future__ import annotations

from typing import Dict, Sequence, Tuple

from PIL import Image, ImageDraw

from .pixels import PixelGrid

CALIBRATION_WIDTHS: Tuple[int, ...] = (192, 256, 288, 320, 384, 432, 480, 512, 546, 576)
ROW_HEIGHT = 30
DASH_HEIGHT = 4
DASH_LENGTH = 8
GAP_LENGTH = 4
GLYPH_SCALE = 2

# 3x5 digits, one 3-bit row per entry, leftmost column in the high bit.
DIGITS_3X5: Dict[str, Tuple[int, ...]] = {
    "0": (0b111, 0b101, 0b101, 0b101, 0b111),
    "1": (0b010, 0b110, 0b010, 0b010, 0b111),
    "2": (0b111, 0b001, 0b111, 0b100, 0b111),
    "3": (0b111, 0b001, 0b111, 0b001, 0b111),
    "4": (0b101, 0b101, 0b111, 0b001, 0b001),
    "5": (0b111, 0b100, 0b111, 0b001, 0b111),
    "6": (0b111, 0b100, 0b111, 0b101, 0b111),
    "7": (0b111, 0b001, 0b001, 0b001, 0b001),
    "8": (0b111, 0b101, 0b111, 0b101, 0b111),
    "9": (0b111, 0b101, 0b111, 0b001, 0b111),
}


def generate_calibration_grid(widths: Sequence[int] = CALIBRATION_WIDTHS) -> PixelGrid:
    """Draw one dashed line per candidate width, labelled with that width.

    The last line printed in full tells the user how many dots the head has.
    """
    max_width = max(widths)
    img = Image.new("RGB", (max_width, len(widths) * ROW_HEIGHT), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    for index, width in enumerate(widths):
        top = index * ROW_HEIGHT
        for x in range(0, width, DASH_LENGTH + GAP_LENGTH):
            right = min(x + DASH_LENGTH, width) - 1
            draw.rectangle((x, top, right, top + DASH_HEIGHT - 1), fill=(0, 0, 0))
        _draw_digits(draw, 2, top + DASH_HEIGHT + 2, str(width))
    return PixelGrid.from_image(img)


def _draw_digits(draw: ImageDraw.ImageDraw, x: int, y: int, text: str) -> None:
    advance = 3 * GLYPH_SCALE + 2
    for char in text:
        glyph = DIGITS_3X5.get(char)
        if glyph is None:
            x += advance
            continue
        for row, bits in enumerate(glyph):
            for col in range(3):
                if bits & (1 << (2 - col)):
                    left = x + col * GLYPH_SCALE
                    top = y + row * GLYPH_SCALE
                    draw.rectangle(
                        (left, top, left + GLYPH_SCALE - 1, top + GLYPH_SCALE - 1),
                        fill=(0, 0, 0),
                    )
        x += advance

from __future__ import annotations

import logging
from typing import List

from PIL import Image

from ..errors import ImageTooLarge, InvalidImage
from ..protocol import MAX_RASTER_FIELD, Raster, bytes_per_row, raster_from_bits
from .pixels import PixelGrid

logger = logging.getLogger(__name__)

WHITE = 255
BLACK = 0
THRESHOLD = 128


def scaled_height(width: int, height: int, target_width: int) -> int:
    """Height that keeps the aspect ratio at target_width, rounded half up."""
    return max(1, int(height * target_width / width + 0.5))


def scale_to_width(grid: PixelGrid, width: int) -> PixelGrid:
    """Bilinear resize to exactly `width` dots, deriving the height."""
    if grid.width <= 0 or grid.height <= 0:
        raise InvalidImage(f"Invalid image size {grid.width}x{grid.height}")
    if width <= 0:
        raise InvalidImage(f"Target width must be positive, got {width}")
    if grid.width == width:
        return grid
    height = scaled_height(grid.width, grid.height, width)
    logger.debug("Scaling %dx%d to %dx%d", grid.width, grid.height, width, height)
    img = grid.to_image().resize((width, height), Image.BILINEAR)
    return PixelGrid.from_image(img)


def to_grayscale(grid: PixelGrid) -> List[float]:
    """Return BT.601 luma for every pixel, row-major."""
    data = grid.data
    return [
        0.299 * data[i] + 0.587 * data[i + 1] + 0.114 * data[i + 2]
        for i in range(0, len(data), 3)
    ]


def dither_floyd_steinberg(buffer: List[float], width: int) -> List[float]:
    """Quantize `buffer` to 0/255 in place with Floyd-Steinberg error diffusion.

    Cells are visited strictly row by row, left to right; each decision depends
    on the error pushed from the cells above and to the left, so the order must
    not change.
    """
    height = len(buffer) // width
    for y in range(height):
        row = y * width
        below = row + width
        has_below = y + 1 < height
        for x in range(width):
            value = buffer[row + x]
            output = BLACK if value < THRESHOLD else WHITE
            error = value - output
            buffer[row + x] = output
            if not error:
                continue
            if x + 1 < width:
                buffer[row + x + 1] += error * 7 / 16
            if has_below:
                if x > 0:
                    buffer[below + x - 1] += error * 3 / 16
                buffer[below + x] += error * 5 / 16
                if x + 1 < width:
                    buffer[below + x + 1] += error * 1 / 16
    return buffer


def threshold(buffer: List[float]) -> List[float]:
    """Quantize `buffer` to 0/255 in place with a fixed cut and no diffusion."""
    for i, value in enumerate(buffer):
        buffer[i] = BLACK if value < THRESHOLD else WHITE
    return buffer


def buffer_to_bits(buffer: List[float]) -> List[int]:
    # black cells carry ink
    return [1 if value == BLACK else 0 for value in buffer]


def image_to_raster(grid: PixelGrid, width: int, dither: bool = True) -> Raster:
    """Run the full scale/grayscale/quantize/pack pipeline for one image."""
    scaled = scale_to_width(grid, width)
    if scaled.height > MAX_RASTER_FIELD or bytes_per_row(scaled.width) > MAX_RASTER_FIELD:
        raise ImageTooLarge(f"Scaled image {scaled.width}x{scaled.height} exceeds the raster size limit")
    buffer = to_grayscale(scaled)
    if dither:
        dither_floyd_steinberg(buffer, scaled.width)
    else:
        threshold(buffer)
    return raster_from_bits(buffer_to_bits(buffer), scaled.width)

from .calibration import CALIBRATION_WIDTHS, generate_calibration_grid
from .pixels import PixelGrid
from .renderer import (
    buffer_to_bits,
    dither_floyd_steinberg,
    image_to_raster,
    scale_to_width,
    scaled_height,
    threshold,
    to_grayscale,
)

__all__ = [
    "CALIBRATION_WIDTHS",
    "PixelGrid",
    "buffer_to_bits",
    "dither_floyd_steinberg",
    "generate_calibration_grid",
    "image_to_raster",
    "scale_to_width",
    "scaled_height",
    "threshold",
    "to_grayscale",
]

from __future__ import annotations

import struct
from typing import Tuple

from mcprint.rendering import PixelGrid

RASTER_TAG = bytes([0x1D, 0x76, 0x30, 0x00])


def solid(width: int, height: int, value: int) -> PixelGrid:
    return PixelGrid(width, height, bytes([value]) * (3 * max(0, width) * max(0, height)))


def pixel_at(grid: PixelGrid, x: int, y: int) -> Tuple[int, int, int]:
    offset = (y * grid.width + x) * 3
    r, g, b = grid.data[offset : offset + 3]
    return r, g, b


def split_raster(payload: bytes) -> Tuple[int, int, bytes]:
    """Return (bytes_per_row, rows, data) of the first raster command in payload."""
    start = payload.index(RASTER_TAG)
    width_bytes, rows = struct.unpack("<HH", payload[start + 4 : start + 8])
    data_start = start + 8
    return width_bytes, rows, payload[data_start : data_start + width_bytes * rows]

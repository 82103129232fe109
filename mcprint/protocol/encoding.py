from __future__ import annotations

from typing import List, Sequence

from .types import Raster, bytes_per_row


def pack_line(line: Sequence[int]) -> bytes:
    """Pack a 1-bit line into bytes, MSB first, zero-padding the last byte."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = line[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def pack_raster(bits: Sequence[int], width: int) -> bytes:
    """Pack row-major 0/1 pixels into byte-aligned raster rows."""
    if width <= 0:
        raise ValueError("Width must be greater than zero")
    if len(bits) % width != 0:
        raise ValueError("Pixels length must be a multiple of width")
    height = len(bits) // width
    out = bytearray()
    for row in range(height):
        out += pack_line(bits[row * width : (row + 1) * width])
    return bytes(out)


def raster_from_bits(bits: List[int], width: int) -> Raster:
    """Build a Raster frame from row-major 0/1 pixels."""
    data = pack_raster(bits, width)
    height = len(data) // bytes_per_row(width)
    return Raster(width=width, height=height, data=data)

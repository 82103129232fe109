from __future__ import annotations

from ..errors import ImageTooLarge
from .types import Raster

ESC = 0x1B
GS = 0x1D
LF = 0x0A

DEFAULT_FEED_LINES = 4
MAX_RASTER_FIELD = 0xFFFF


def init_cmd() -> bytes:
    """ESC @: reset the printer to its power-on state."""
    return bytes([ESC, 0x40])


def raster_cmd(raster: Raster) -> bytes:
    """Build GS v 0 with a little-endian width/height header and packed data."""
    raster.validate()
    width_bytes = raster.bytes_per_row
    if width_bytes > MAX_RASTER_FIELD:
        raise ImageTooLarge(f"Raster row of {width_bytes} bytes exceeds {MAX_RASTER_FIELD}")
    if raster.height > MAX_RASTER_FIELD:
        raise ImageTooLarge(f"Raster of {raster.height} rows exceeds {MAX_RASTER_FIELD}")
    header = bytes([GS, 0x76, 0x30, 0x00])
    header += width_bytes.to_bytes(2, "little", signed=False)
    header += raster.height.to_bytes(2, "little", signed=False)
    return header + raster.data


def feed_lines_cmd(lines: int = DEFAULT_FEED_LINES) -> bytes:
    """ESC d n: print the buffer and feed n lines."""
    return bytes([ESC, 0x64, lines & 0xFF])


def full_cut_cmd() -> bytes:
    """GS V 0: full paper cut."""
    return bytes([GS, 0x56, 0x00])


def text_cmd(data: bytes) -> bytes:
    """Literal text is sent verbatim, terminated by a single line feed."""
    return bytes(data) + bytes([LF])

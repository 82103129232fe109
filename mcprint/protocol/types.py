from __future__ import annotations

from dataclasses import dataclass


def bytes_per_row(width: int) -> int:
    """Return the byte-aligned row stride for a raster of the given width."""
    return (width + 7) // 8


@dataclass(frozen=True)
class Raster:
    """Packed 1-bit raster: one byte-aligned row of MSB-first bits per line."""

    width: int
    height: int
    data: bytes

    def validate(self) -> None:
        """Validate dimensions against the packed data length."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if self.height <= 0:
            raise ValueError("Height must be greater than zero")
        if len(self.data) != self.bytes_per_row * self.height:
            raise ValueError("Data length must equal bytes_per_row * height")

    @property
    def bytes_per_row(self) -> int:
        return bytes_per_row(self.width)

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class PixelGrid:
    """Immutable row-major RGB samples, three bytes per pixel."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width > 0 and self.height > 0 and len(self.data) != self.width * self.height * 3:
            raise ValueError("Data length must equal width * height * 3")

    @classmethod
    def from_image(cls, img: Image.Image) -> "PixelGrid":
        if img.mode != "RGB":
            img = img.convert("RGB")
        return cls(img.width, img.height, img.tobytes())

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGB", (self.width, self.height), self.data)

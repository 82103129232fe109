from __future__ import annotations

from ..pixels import PixelGrid
from .base import RasterConverter


class ImageConverter(RasterConverter):
    def load(self, path: str) -> PixelGrid:
        img = self._normalize_image(self._load_image(path))
        return PixelGrid.from_image(img)

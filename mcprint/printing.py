from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from .protocol import DEFAULT_FEED_LINES, Raster, build_job
from .rendering import PixelGrid, image_to_raster
from .rendering.converters import ImageConverter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageItem:
    path: str


@dataclass(frozen=True)
class TextItem:
    data: bytes


PrintItem = Union[ImageItem, TextItem]


@dataclass
class PrintSettings:
    dither: bool = True
    feed_lines: int = DEFAULT_FEED_LINES


class PrintJobBuilder:
    def __init__(self, width: int, settings: Optional[PrintSettings] = None) -> None:
        self.width = width
        self.settings = settings or PrintSettings()
        self._images = ImageConverter()

    def build(self, items: Sequence[PrintItem]) -> bytes:
        """Encode items in the order given into one job payload."""
        parts: List[Union[Raster, bytes]] = []
        for item in items:
            if isinstance(item, ImageItem):
                grid = self._images.load(item.path)
                logger.debug("Loaded %s (%dx%d)", item.path, grid.width, grid.height)
                parts.append(self.encode_image(grid))
            else:
                parts.append(item.data)
        return build_job(parts, feed_lines=self.settings.feed_lines)

    def build_from_grid(self, grid: PixelGrid) -> bytes:
        return build_job([self.encode_image(grid)], feed_lines=self.settings.feed_lines)

    def encode_image(self, grid: PixelGrid) -> Raster:
        return image_to_raster(grid, self.width, dither=self.settings.dither)

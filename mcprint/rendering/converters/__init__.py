from __future__ import annotations

import os
from typing import Set

from .base import ItemConverter, RasterConverter
from .image import ImageConverter
from .text import TextConverter

IMAGE_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".bmp"}


def is_image_file(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in IMAGE_EXTENSIONS


__all__ = [
    "IMAGE_EXTENSIONS",
    "ImageConverter",
    "ItemConverter",
    "RasterConverter",
    "TextConverter",
    "is_image_file",
]

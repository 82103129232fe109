from __future__ import annotations

from PIL import Image, ImageOps, UnidentifiedImageError

from ...errors import ImageTooLarge, UnsupportedFormat

# Modes Pillow uses for 16-bit grayscale PNGs; samples span 0-65535.
WIDE_GRAY_MODES = ("I", "I;16", "I;16B", "I;16L", "I;16N")


class ItemConverter:
    def load(self, path: str):
        raise NotImplementedError


class RasterConverter(ItemConverter):
    @staticmethod
    def _load_image(path: str) -> Image.Image:
        try:
            with Image.open(path) as img:
                img = ImageOps.exif_transpose(img)
                return img.copy()
        except Image.DecompressionBombError as exc:
            raise ImageTooLarge(f"Image {path} is too large to decode: {exc}") from exc
        except (UnidentifiedImageError, OSError) as exc:
            raise UnsupportedFormat(f"Cannot decode image {path}: {exc}") from exc

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode in WIDE_GRAY_MODES:
            img = img.convert("I").point(lambda v: v * (1 / 256)).convert("L")
        if img.mode != "RGB":
            return img.convert("RGB")
        return img

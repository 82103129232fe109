from __future__ import annotations

from .base import ItemConverter


class TextConverter(ItemConverter):
    def load(self, path: str) -> bytes:
        # Sent to the printer as-is; no decoding or re-encoding.
        with open(path, "rb") as handle:
            return handle.read()

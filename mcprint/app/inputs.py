from __future__ import annotations

import os
from typing import List, Optional, Sequence

from ..errors import NoInputError
from ..printing import ImageItem, PrintItem, TextItem
from ..rendering.converters import TextConverter, is_image_file


def resolve_args(args: Sequence[str]) -> List[PrintItem]:
    """Classify arguments as image files, text files or literal text.

    Images come first, then text, each in argument order. Image files are
    only recognised by extension here; decoding happens when the job is built.
    """
    if not args:
        raise NoInputError("No input provided; pass text, a file path, or pipe via stdin")
    images: List[PrintItem] = []
    texts: List[PrintItem] = []
    reader = TextConverter()
    for arg in args:
        if os.path.isfile(arg):
            if is_image_file(arg):
                images.append(ImageItem(arg))
            else:
                texts.append(TextItem(reader.load(arg)))
        else:
            texts.append(TextItem(arg.encode("utf-8")))
    return images + texts


def merge_items(resolved: Sequence[PrintItem], stdin_data: Optional[bytes]) -> List[PrintItem]:
    """Place piped stdin text after the images and before argument text."""
    images = [item for item in resolved if isinstance(item, ImageItem)]
    texts = [item for item in resolved if not isinstance(item, ImageItem)]
    piped: List[PrintItem] = [TextItem(stdin_data)] if stdin_data else []
    return images + piped + texts

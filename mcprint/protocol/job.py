from __future__ import annotations

import logging
from typing import Sequence, Union

from .commands import (
    DEFAULT_FEED_LINES,
    feed_lines_cmd,
    full_cut_cmd,
    init_cmd,
    raster_cmd,
    text_cmd,
)
from .types import Raster

logger = logging.getLogger(__name__)

JobItem = Union[Raster, bytes]


def build_job(items: Sequence[JobItem], feed_lines: int = DEFAULT_FEED_LINES) -> bytes:
    """Build a full job payload ready to send to the printer.

    Items are framed in the order given: a Raster becomes a GS v 0 command,
    bytes are emitted as a text line. The whole job shares one init/feed/cut
    envelope.
    """
    job = bytearray()
    job += init_cmd()
    for item in items:
        if isinstance(item, Raster):
            job += raster_cmd(item)
        elif isinstance(item, (bytes, bytearray)):
            job += text_cmd(item)
        else:
            raise TypeError(f"Unsupported job item: {type(item).__name__}")
    job += feed_lines_cmd(feed_lines)
    job += full_cut_cmd()
    logger.debug("Built job of %d items, %d bytes", len(items), len(job))
    return bytes(job)

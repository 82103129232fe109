from .commands import (
    DEFAULT_FEED_LINES,
    MAX_RASTER_FIELD,
    feed_lines_cmd,
    full_cut_cmd,
    init_cmd,
    raster_cmd,
    text_cmd,
)
from .encoding import pack_line, pack_raster, raster_from_bits
from .job import build_job
from .types import Raster, bytes_per_row

__all__ = [
    "DEFAULT_FEED_LINES",
    "MAX_RASTER_FIELD",
    "Raster",
    "build_job",
    "bytes_per_row",
    "feed_lines_cmd",
    "full_cut_cmd",
    "init_cmd",
    "pack_line",
    "pack_raster",
    "raster_cmd",
    "raster_from_bits",
    "text_cmd",
]

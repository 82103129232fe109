from .config import PrinterTarget, load_target
from .errors import (
    ConfigError,
    ImageTooLarge,
    InvalidImage,
    NoInputError,
    PrintError,
    PrinterUnreachable,
    PrinterWriteFailed,
    UnsupportedFormat,
)
from .printing import ImageItem, PrintJobBuilder, PrintSettings, TextItem

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ImageItem",
    "ImageTooLarge",
    "InvalidImage",
    "NoInputError",
    "PrintError",
    "PrintJobBuilder",
    "PrintSettings",
    "PrinterTarget",
    "PrinterUnreachable",
    "PrinterWriteFailed",
    "TextItem",
    "UnsupportedFormat",
    "load_target",
]

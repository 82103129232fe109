from __future__ import annotations


class PrintError(Exception):
    """Base class for every error raised while building or sending a job."""


class InvalidImage(PrintError, ValueError):
    pass


class ImageTooLarge(PrintError, ValueError):
    pass


class UnsupportedFormat(PrintError, ValueError):
    pass


class NoInputError(PrintError, ValueError):
    pass


class ConfigError(PrintError, RuntimeError):
    pass


class PrinterUnreachable(PrintError, ConnectionError):
    pass


class PrinterWriteFailed(PrintError, ConnectionError):
    pass

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .transport import DEFAULT_PORT

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 384
HOST_ENV_VAR = "PRINTER_HOST"
PORT_ENV_VAR = "PRINTER_PORT"
WIDTH_ENV_VAR = "PRINTER_WIDTH"


@dataclass(frozen=True)
class PrinterTarget:
    host: str
    port: int = DEFAULT_PORT
    width: int = DEFAULT_WIDTH


def load_env_files() -> None:
    """Load ./.env then ~/.env; variables already set are never overridden."""
    load_dotenv(Path.cwd() / ".env")
    load_dotenv(Path.home() / ".env")


def load_target(
    host: Optional[str] = None,
    port: Optional[int] = None,
    width: Optional[int] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> PrinterTarget:
    """Resolve the printer target; explicit arguments win over the environment."""
    if environ is None:
        load_env_files()
        environ = os.environ
    host = host or environ.get(HOST_ENV_VAR, "")
    if not host:
        raise ConfigError(f"No printer host configured; set {HOST_ENV_VAR} in .env or use --host")
    if port is None:
        port = _parse_port(environ.get(PORT_ENV_VAR, ""))
    if width is None:
        width = _parse_width(environ.get(WIDTH_ENV_VAR, ""))
    elif width <= 0:
        raise ConfigError(f"Printer width must be positive, got {width}")
    return PrinterTarget(host=host, port=port, width=width)


def _parse_port(value: str) -> int:
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid {PORT_ENV_VAR}: {value!r}") from exc


def _parse_width(value: str) -> int:
    if not value:
        return DEFAULT_WIDTH
    try:
        width = int(value)
    except ValueError:
        width = 0
    if width <= 0:
        logger.warning("Ignoring invalid %s=%r, using %d", WIDTH_ENV_VAR, value, DEFAULT_WIDTH)
        return DEFAULT_WIDTH
    return width

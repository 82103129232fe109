from __future__ import annotations

import logging
import socket

from ..errors import PrinterUnreachable, PrinterWriteFailed

logger = logging.getLogger(__name__)

DEFAULT_PORT = 9100
CONNECT_TIMEOUT = 5.0
WRITE_TIMEOUT = 30.0


class TcpTransport:
    """Raw TCP delivery: one connection, one write, then close."""

    def __init__(
        self,
        host: str,
        port: int = DEFAULT_PORT,
        connect_timeout: float = CONNECT_TIMEOUT,
        write_timeout: float = WRITE_TIMEOUT,
    ) -> None:
        self._host = host
        self._port = port
        self._connect_timeout = connect_timeout
        self._write_timeout = write_timeout

    @property
    def address(self) -> str:
        return f"{self._host}:{self._port}"

    def write(self, data: bytes) -> None:
        try:
            sock = socket.create_connection((self._host, self._port), timeout=self._connect_timeout)
        except OSError as exc:
            raise PrinterUnreachable(f"Cannot reach printer at {self.address}: {exc}") from exc
        with sock:
            # The timeout bounds the whole sendall, not each chunk.
            sock.settimeout(self._write_timeout)
            try:
                sock.sendall(data)
            except OSError as exc:
                raise PrinterWriteFailed(f"Failed writing to printer at {self.address}: {exc}") from exc
        logger.info("Sent %d bytes to %s", len(data), self.address)

from __future__ import annotations

import socket
import threading
from dataclasses import dataclass, field
from typing import Dict, Optional

import pytest


@dataclass
class FakePrinter:
    host: str
    port: int
    thread: threading.Thread
    received: Dict[str, bytes] = field(default_factory=dict)

    def wait(self, timeout: float = 5.0) -> Optional[bytes]:
        self.thread.join(timeout)
        return self.received.get("data")


@pytest.fixture
def fake_printer():
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5.0)
    host, port = server.getsockname()
    received: Dict[str, bytes] = {}

    def serve() -> None:
        try:
            conn, _ = server.accept()
        except OSError:
            return
        with conn:
            conn.settimeout(5.0)
            chunks = []
            while True:
                chunk = conn.recv(65536)
                if not chunk:
                    break
                chunks.append(chunk)
        received["data"] = b"".join(chunks)

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    yield FakePrinter(host, port, thread, received)
    server.close()


@pytest.fixture
def closed_port() -> int:
    """A local port with nothing listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port

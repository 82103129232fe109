from .tcp import CONNECT_TIMEOUT, DEFAULT_PORT, WRITE_TIMEOUT, TcpTransport

__all__ = ["CONNECT_TIMEOUT", "DEFAULT_PORT", "TcpTransport", "WRITE_TIMEOUT"]

"""Transport interfaces."""

from __future__ import annotations

from typing import Protocol

from yeectl.core.model import BulbConfig


class Stream(Protocol):
    """Connected duplex byte stream; a connected ``socket.socket`` satisfies it."""

    def sendall(self, data: bytes) -> None:
        """Write all of ``data`` or raise ``OSError``."""

    def recv(self, bufsize: int) -> bytes:
        """Read at most ``bufsize`` bytes in one call."""


class ClosableStream(Stream, Protocol):
    def close(self) -> None:
        """Release the connection."""


class Connector(Protocol):
    def connect(self, bulb: BulbConfig) -> ClosableStream:
        """Open a connection to ``bulb`` and return the connected stream."""

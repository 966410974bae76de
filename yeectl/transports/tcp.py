"""TCP connection factory using Python sockets."""

from __future__ import annotations

import logging
import socket

from yeectl.core.errors import TransportConnectError, TransportTimeoutError
from yeectl.core.model import BulbConfig

LOGGER = logging.getLogger(__name__)


class TCPConnector:
    def connect(self, bulb: BulbConfig) -> socket.socket:
        """Connect to ``bulb`` and apply its timeout as the stream deadline.

        The caller owns the returned socket and must close it.
        """
        LOGGER.debug("Connecting to %s (%s)", bulb.name, bulb.address)
        try:
            sock = socket.create_connection((bulb.host, bulb.port), timeout=bulb.timeout_s)
        except TimeoutError as exc:
            raise TransportTimeoutError(
                f"TCP connect to {bulb.address} timed out after {bulb.timeout_s}s"
            ) from exc
        except OSError as exc:
            raise TransportConnectError(f"TCP connect to {bulb.address} failed: {exc}") from exc
        sock.settimeout(bulb.timeout_s)
        return sock

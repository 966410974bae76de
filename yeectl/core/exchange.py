"""Single request/response exchange over a caller-owned stream.

The exchange borrows the stream for one write followed by one read. It never
opens, closes, or retries; the first failure aborts it with a
:class:`~yeectl.core.errors.ProtocolError`. Callers issuing several commands
on one connection must wait for each exchange to return before starting the
next, since the bulb answers once per line and replies are matched by id.
"""

from __future__ import annotations

import logging

from yeectl.core.errors import (
    TransportReceiveError,
    TransportSendError,
    TransportTimeoutError,
)
from yeectl.core.model import Command
from yeectl.core.wire import LINE_TERMINATOR, decode, encode, frame, serialize
from yeectl.transports.base import Stream

LOGGER = logging.getLogger(__name__)

RECV_BUFSIZE = 1024
MAX_LINE_BYTES = 65536

_TERMINATOR_BYTES = LINE_TERMINATOR.encode("ascii")


def _write_request(command: Command, stream: Stream) -> None:
    request = frame(serialize(command))
    payload = encode(request)
    LOGGER.debug("-> %r", payload)
    try:
        stream.sendall(payload)
    except OSError as exc:
        raise TransportSendError(f"Sending {command.method.value} failed: {exc}") from exc


def _recv_once(stream: Stream, bufsize: int) -> bytes:
    try:
        data = stream.recv(bufsize)
    except TimeoutError as exc:
        raise TransportTimeoutError("Timed out waiting for the bulb to reply") from exc
    except OSError as exc:
        raise TransportReceiveError(f"Receiving reply failed: {exc}") from exc
    LOGGER.debug("<- %r", data)
    return data


def send(command: Command, stream: Stream, *, bufsize: int = RECV_BUFSIZE) -> str:
    """Write ``command`` as one CR LF terminated line and return the reply text.

    The reply is whatever a single ``recv(bufsize)`` yields, decoded as ASCII
    and returned verbatim. A reply longer than ``bufsize`` or split across
    several segments comes back truncated; use :func:`send_line` when the
    whole line is needed. An empty read (peer closed) returns ``""``.
    """
    _write_request(command, stream)
    return decode(_recv_once(stream, bufsize))


def send_line(
    command: Command,
    stream: Stream,
    *,
    bufsize: int = RECV_BUFSIZE,
    max_bytes: int = MAX_LINE_BYTES,
) -> str:
    """Like :func:`send`, but read until the reply's own CR LF terminator.

    Reads repeat until the terminator arrives or the peer closes. Bytes after
    the first terminator are discarded. Each read is capped so that no more
    than ``max_bytes`` are ever buffered; a reply line (terminator included)
    longer than that raises :class:`~yeectl.core.errors.TransportReceiveError`.
    """
    _write_request(command, stream)
    buffer = bytearray()
    while True:
        end = buffer.find(_TERMINATOR_BYTES)
        if end != -1:
            return decode(bytes(buffer[: end + len(_TERMINATOR_BYTES)]))
        remaining = max_bytes - len(buffer)
        if remaining <= 0:
            raise TransportReceiveError(f"Reply exceeded {max_bytes} bytes without a line terminator")
        chunk = _recv_once(stream, min(bufsize, remaining))
        if not chunk:
            return decode(bytes(buffer))
        buffer.extend(chunk)

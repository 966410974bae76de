"""JSON line codec for the bulb's LAN protocol."""

from __future__ import annotations

import json

from yeectl.core.errors import EncodingError, SerializationError
from yeectl.core.model import Command

LINE_TERMINATOR = "\r\n"
WIRE_ENCODING = "ascii"


def serialize(command: Command) -> str:
    """Render ``command`` as a single-line JSON object.

    Keys are emitted as ``id``, ``method``, ``params`` with no whitespace.
    Non-ASCII text is left unescaped so that :func:`encode` rejects it.
    """
    try:
        message = {
            "id": command.id,
            "method": command.method.value,
            "params": [param.to_wire() for param in command.params],
        }
        return json.dumps(message, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, AttributeError) as exc:
        raise SerializationError(f"Could not serialize command {command!r}: {exc}") from exc


def frame(line: str) -> str:
    return line + LINE_TERMINATOR


def encode(text: str) -> bytes:
    try:
        return text.encode(WIRE_ENCODING)
    except UnicodeEncodeError as exc:
        raise EncodingError(
            f"Character {text[exc.start]!r} at position {exc.start} is outside the 7-bit wire character set",
            text=text,
            position=exc.start,
        ) from exc


def decode(data: bytes) -> str:
    try:
        return data.decode(WIRE_ENCODING)
    except UnicodeDecodeError as exc:
        raise EncodingError(
            f"Byte 0x{data[exc.start]:02x} at position {exc.start} is outside the 7-bit wire character set",
            text=data,
            position=exc.start,
        ) from exc

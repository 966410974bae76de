"""Stable public API for building tooling on top of yeectl.

This module is the supported integration surface for third-party callers.
Avoid importing from private/internal modules unless intentionally depending on
non-stable internals.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from yeectl.core.commands import (
    new_get_prop,
    new_set_brightness,
    new_set_color_temp,
    new_set_hsv,
    new_set_power,
    new_set_rgb,
    new_toggle,
)
from yeectl.core.errors import (
    BulbSelectionError,
    ConfigError,
    EncodingError,
    ProtocolError,
    SerializationError,
    TransportConnectError,
    TransportError,
    TransportReceiveError,
    TransportSendError,
    TransportTimeoutError,
    YeectlError,
)
from yeectl.core.exchange import send, send_line
from yeectl.core.model import (
    SUDDEN,
    BulbConfig,
    Command,
    ExchangeResult,
    IntParam,
    Method,
    Parameter,
    PowerOnMode,
    Property,
    Smooth,
    StrParam,
    Sudden,
    TransitionEffect,
)
from yeectl.core.service import BulbService
from yeectl.transports.base import Connector, Stream
from yeectl.transports.tcp import TCPConnector

__all__ = [
    "YeectlError",
    "ConfigError",
    "BulbSelectionError",
    "ProtocolError",
    "SerializationError",
    "EncodingError",
    "TransportError",
    "TransportConnectError",
    "TransportSendError",
    "TransportReceiveError",
    "TransportTimeoutError",
    "BulbConfig",
    "Command",
    "ExchangeResult",
    "IntParam",
    "StrParam",
    "Parameter",
    "Method",
    "PowerOnMode",
    "Property",
    "Sudden",
    "Smooth",
    "SUDDEN",
    "TransitionEffect",
    "new_toggle",
    "new_get_prop",
    "new_set_brightness",
    "new_set_color_temp",
    "new_set_hsv",
    "new_set_power",
    "new_set_rgb",
    "send",
    "send_line",
    "Connector",
    "Stream",
    "TCPConnector",
    "Client",
]


class Client:
    """Public client for controlling bulbs.

    A `Client` wraps config loading, target resolution and one-shot exchanges
    behind a stable API intended for third-party tools (scripts/services/UIs).
    Every call opens its own connection and issues exactly one command.
    """

    def __init__(
        self,
        *,
        connector: Connector | None = None,
        config_path: Path | None = None,
    ) -> None:
        self._service = BulbService(connector=connector, config_path=config_path)

    def list_bulbs(self) -> list[BulbConfig]:
        return self._service.list_bulbs()

    def resolve_bulb(
        self,
        name: str | None = None,
        *,
        host: str | None = None,
        port: int | None = None,
        timeout_s: float | None = None,
    ) -> BulbConfig:
        return self._service.resolve_bulb(name, host=host, port=port, timeout_s=timeout_s)

    def execute(self, bulb: BulbConfig, command: Command) -> ExchangeResult:
        return self._service.execute(bulb, command)

    def toggle(self, bulb: BulbConfig) -> ExchangeResult:
        return self._service.toggle(bulb)

    def set_power(
        self,
        bulb: BulbConfig,
        on: bool,
        *,
        mode: PowerOnMode | None = None,
        effect: TransitionEffect = SUDDEN,
    ) -> ExchangeResult:
        return self._service.set_power(bulb, on, mode, effect)

    def set_brightness(
        self, bulb: BulbConfig, brightness: int, *, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self._service.set_brightness(bulb, brightness, effect)

    def set_color_temp(
        self, bulb: BulbConfig, color_temp: int, *, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self._service.set_color_temp(bulb, color_temp, effect)

    def set_rgb(
        self, bulb: BulbConfig, r: int, g: int, b: int, *, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self._service.set_rgb(bulb, r, g, b, effect)

    def set_hsv(
        self, bulb: BulbConfig, hue: int, sat: int, *, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self._service.set_hsv(bulb, hue, sat, effect)

    def get_prop(self, bulb: BulbConfig, properties: Iterable[Property]) -> ExchangeResult:
        return self._service.get_prop(bulb, properties)

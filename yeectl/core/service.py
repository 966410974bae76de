"""Service layer used by CLI and API frontends."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable
from pathlib import Path

from yeectl.core import commands
from yeectl.core.config import LoadedConfig, load_config, resolve_bulb
from yeectl.core.exchange import send
from yeectl.core.model import (
    SUDDEN,
    BulbConfig,
    Command,
    ExchangeResult,
    PowerOnMode,
    Property,
    TransitionEffect,
)
from yeectl.core.wire import frame, serialize
from yeectl.transports.base import Connector
from yeectl.transports.tcp import TCPConnector

LOGGER = logging.getLogger(__name__)

_MAX_ID = 2**31 - 1


class BulbService:
    def __init__(
        self,
        *,
        connector: Connector | None = None,
        config: LoadedConfig | None = None,
        config_path: Path | None = None,
    ) -> None:
        self.config = config if config is not None else load_config(config_path)
        self.connector = connector or TCPConnector()
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        """Return the next correlation id, wrapping within signed 32-bit range."""
        return (next(self._ids) - 1) % _MAX_ID + 1

    def list_bulbs(self) -> list[BulbConfig]:
        return sorted(self.config.bulbs.values(), key=lambda b: b.name)

    def resolve_bulb(
        self,
        name: str | None = None,
        *,
        host: str | None = None,
        port: int | None = None,
        timeout_s: float | None = None,
    ) -> BulbConfig:
        return resolve_bulb(self.config, name, host=host, port=port, timeout_s=timeout_s)

    def execute(self, bulb: BulbConfig, command: Command) -> ExchangeResult:
        """Open a connection to ``bulb``, run one exchange, and close it again."""
        request = frame(serialize(command))
        stream = self.connector.connect(bulb)
        try:
            response = send(command, stream)
        finally:
            stream.close()
        LOGGER.info("%s on %s answered %r", command.method.value, bulb.address, response)
        return ExchangeResult(bulb=bulb, command=command, request=request, response=response)

    def toggle(self, bulb: BulbConfig) -> ExchangeResult:
        return self.execute(bulb, commands.new_toggle(self.next_id()))

    def set_power(
        self,
        bulb: BulbConfig,
        on: bool,
        mode: PowerOnMode | None = None,
        effect: TransitionEffect = SUDDEN,
    ) -> ExchangeResult:
        return self.execute(bulb, commands.new_set_power(self.next_id(), on, mode, effect))

    def set_brightness(
        self, bulb: BulbConfig, brightness: int, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self.execute(bulb, commands.new_set_brightness(self.next_id(), brightness, effect))

    def set_color_temp(
        self, bulb: BulbConfig, color_temp: int, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self.execute(bulb, commands.new_set_color_temp(self.next_id(), color_temp, effect))

    def set_rgb(
        self, bulb: BulbConfig, r: int, g: int, b: int, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self.execute(bulb, commands.new_set_rgb(self.next_id(), r, g, b, effect))

    def set_hsv(
        self, bulb: BulbConfig, hue: int, sat: int, effect: TransitionEffect = SUDDEN
    ) -> ExchangeResult:
        return self.execute(bulb, commands.new_set_hsv(self.next_id(), hue, sat, effect))

    def get_prop(self, bulb: BulbConfig, properties: Iterable[Property]) -> ExchangeResult:
        return self.execute(bulb, commands.new_get_prop(self.next_id(), properties))

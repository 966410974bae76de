"""Core data models used across the wire codec, service, and CLI."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum

DEFAULT_PORT = 55443


class Method(str, Enum):
    """Device method names accepted by the bulb."""

    TOGGLE = "toggle"
    GET_PROP = "get_prop"
    SET_CT_ABX = "set_ct_abx"
    SET_RGB = "set_rgb"
    SET_HSV = "set_hsv"
    SET_BRIGHT = "set_bright"
    SET_POWER = "set_power"


@dataclass(frozen=True)
class IntParam:
    value: int

    def to_wire(self) -> int:
        return self.value


@dataclass(frozen=True)
class StrParam:
    value: str

    def to_wire(self) -> str:
        return self.value


Parameter = IntParam | StrParam


@dataclass(frozen=True)
class Command:
    """One outbound request.

    ``params`` is positional: its order matches the argument list the device
    expects for ``method``. The correlation ``id`` is echoed back by the bulb.
    """

    id: int
    method: Method
    params: tuple[Parameter, ...] = ()

    def with_id(self, id: int) -> Command:
        return replace(self, id=id)


@dataclass(frozen=True)
class Sudden:
    """Apply the change immediately."""

    def expand(self) -> tuple[Parameter, Parameter]:
        return StrParam("sudden"), IntParam(0)


@dataclass(frozen=True)
class Smooth:
    """Animate the change over ``duration`` milliseconds."""

    duration: int

    def expand(self) -> tuple[Parameter, Parameter]:
        return StrParam("smooth"), IntParam(self.duration)


TransitionEffect = Sudden | Smooth

SUDDEN = Sudden()


class PowerOnMode(IntEnum):
    NORMAL = 0
    CT = 1
    RGB = 2
    HSV = 3
    FLOW = 4
    NIGHT = 5


def power_on_mode_param(mode: PowerOnMode | None) -> IntParam:
    """Encode the trailing ``set_power`` mode argument.

    No mode selected means ``PowerOnMode.NORMAL``; both are sent as 0. The
    field is never omitted from the request.
    """
    if mode is None:
        mode = PowerOnMode.NORMAL
    return IntParam(int(mode))


class Property(str, Enum):
    """Property identifiers understood by ``get_prop``."""

    POWER = "power"
    BRIGHTNESS = "bright"
    TEMPERATURE = "ct"
    RGB = "rgb"
    HUE = "hue"
    SAT = "sat"
    COLOR_MODE = "color_mode"
    FLOWING = "flowing"
    DELAY_OFF = "delayoff"
    FLOW_PARAMS = "flow_params"
    MUSIC_ON = "music_on"
    NAME = "name"


@dataclass(frozen=True)
class BulbConfig:
    name: str
    host: str
    port: int = DEFAULT_PORT
    timeout_s: float = 5.0

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ExchangeResult:
    bulb: BulbConfig
    command: Command
    request: str
    response: str

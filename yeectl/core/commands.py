"""Command builders, one per supported device method.

Builders are pure and do not range-check their arguments; the bulb decides
whether a value is acceptable and says so in its reply.
"""

from __future__ import annotations

from collections.abc import Iterable

from yeectl.core.model import (
    SUDDEN,
    Command,
    IntParam,
    Method,
    PowerOnMode,
    Property,
    StrParam,
    TransitionEffect,
    power_on_mode_param,
)


def _channel(value: int) -> int:
    # Channels may arrive in signed 8-bit form (-128..127); pack the unsigned byte.
    return value & 0xFF


def pack_rgb(r: int, g: int, b: int) -> int:
    return (_channel(r) << 16) | (_channel(g) << 8) | _channel(b)


def new_toggle(id: int) -> Command:
    return Command(id=id, method=Method.TOGGLE)


def new_get_prop(id: int, properties: Iterable[Property]) -> Command:
    params = tuple(StrParam(Property(prop).value) for prop in properties)
    return Command(id=id, method=Method.GET_PROP, params=params)


def new_set_color_temp(id: int, color_temp: int, effect: TransitionEffect = SUDDEN) -> Command:
    return Command(
        id=id,
        method=Method.SET_CT_ABX,
        params=(IntParam(color_temp), *effect.expand()),
    )


def new_set_rgb(id: int, r: int, g: int, b: int, effect: TransitionEffect = SUDDEN) -> Command:
    return Command(
        id=id,
        method=Method.SET_RGB,
        params=(IntParam(pack_rgb(r, g, b)), *effect.expand()),
    )


def new_set_hsv(id: int, h: int, s: int, effect: TransitionEffect = SUDDEN) -> Command:
    return Command(
        id=id,
        method=Method.SET_HSV,
        params=(IntParam(h), IntParam(s), *effect.expand()),
    )


def new_set_brightness(id: int, b: int, effect: TransitionEffect = SUDDEN) -> Command:
    return Command(
        id=id,
        method=Method.SET_BRIGHT,
        params=(IntParam(b), *effect.expand()),
    )


def new_set_power(
    id: int,
    on: bool,
    mode: PowerOnMode | None = None,
    effect: TransitionEffect = SUDDEN,
) -> Command:
    return Command(
        id=id,
        method=Method.SET_POWER,
        params=(
            StrParam("on" if on else "off"),
            *effect.expand(),
            power_on_mode_param(mode),
        ),
    )

from __future__ import annotations

import pytest

from yeectl.core.commands import (
    new_get_prop,
    new_set_brightness,
    new_set_color_temp,
    new_set_hsv,
    new_set_power,
    new_set_rgb,
    new_toggle,
    pack_rgb,
)
from yeectl.core.model import (
    SUDDEN,
    IntParam,
    Method,
    PowerOnMode,
    Property,
    Smooth,
    StrParam,
    power_on_mode_param,
)


def _wire(command):
    return [p.to_wire() for p in command.params]


def test_toggle_has_no_params() -> None:
    cmd = new_toggle(5)
    assert cmd.id == 5
    assert cmd.method is Method.TOGGLE
    assert cmd.params == ()


@pytest.mark.parametrize(
    ("r", "g", "b", "expected"),
    [
        (50, 20, 10, 3281930),
        (0, 0, 0, 0),
        (255, 255, 255, 0xFFFFFF),
        (255, 0, 0, 0xFF0000),
        (0, 128, 1, 0x008001),
    ],
)
def test_rgb_packs_channels(r: int, g: int, b: int, expected: int) -> None:
    assert pack_rgb(r, g, b) == expected
    assert new_set_rgb(7, r, g, b).params[0] == IntParam(expected)


def test_rgb_every_channel_value_lands_in_its_byte() -> None:
    for value in range(256):
        assert new_set_rgb(1, value, 17, 200).params[0] == IntParam(value * 65536 + 17 * 256 + 200)
        assert new_set_rgb(1, 17, value, 200).params[0] == IntParam(17 * 65536 + value * 256 + 200)
        assert new_set_rgb(1, 17, 200, value).params[0] == IntParam(17 * 65536 + 200 * 256 + value)


def test_rgb_signed_channels_pack_as_unsigned_bytes() -> None:
    # -1, -128 and -56 are the signed 8-bit forms of 255, 128 and 200.
    assert pack_rgb(-1, -128, -56) == (255 << 16) | (128 << 8) | 200
    assert pack_rgb(-1, 0, 0) == 0xFF0000


def test_rgb_full_params() -> None:
    assert _wire(new_set_rgb(7, 50, 20, 10, SUDDEN)) == [3281930, "sudden", 0]


def test_effect_expansion_is_appended_after_values() -> None:
    effect = Smooth(500)
    assert _wire(new_set_color_temp(1, 4000, effect)) == [4000, "smooth", 500]
    assert _wire(new_set_brightness(1, 80, effect)) == [80, "smooth", 500]
    assert _wire(new_set_hsv(1, 255, 45, effect)) == [255, 45, "smooth", 500]
    assert _wire(new_set_color_temp(1, 4000, SUDDEN)) == [4000, "sudden", 0]


def test_effect_expansion_values() -> None:
    assert SUDDEN.expand() == (StrParam("sudden"), IntParam(0))
    assert Smooth(30).expand() == (StrParam("smooth"), IntParam(30))


def test_methods_match_device_names() -> None:
    assert new_set_color_temp(1, 4000).method.value == "set_ct_abx"
    assert new_set_rgb(1, 0, 0, 0).method.value == "set_rgb"
    assert new_set_hsv(1, 0, 0).method.value == "set_hsv"
    assert new_set_brightness(1, 1).method.value == "set_bright"
    assert new_set_power(1, True).method.value == "set_power"
    assert new_get_prop(1, []).method.value == "get_prop"


def test_set_power_on_without_mode_defaults_to_zero() -> None:
    assert _wire(new_set_power(1, True, None, SUDDEN)) == ["on", "sudden", 0, 0]


def test_set_power_off_with_mode_and_smooth() -> None:
    cmd = new_set_power(1, False, PowerOnMode.NIGHT, Smooth(300))
    assert _wire(cmd) == ["off", "smooth", 300, 5]


def test_no_mode_and_normal_mode_encode_the_same() -> None:
    assert power_on_mode_param(None) == power_on_mode_param(PowerOnMode.NORMAL) == IntParam(0)
    assert [int(m) for m in PowerOnMode] == [0, 1, 2, 3, 4, 5]


def test_get_prop_keeps_order() -> None:
    cmd = new_get_prop(3, [Property.BRIGHTNESS, Property.TEMPERATURE, Property.RGB, Property.POWER])
    assert _wire(cmd) == ["bright", "ct", "rgb", "power"]


def test_property_table_is_exhaustive() -> None:
    assert [p.value for p in Property] == [
        "power",
        "bright",
        "ct",
        "rgb",
        "hue",
        "sat",
        "color_mode",
        "flowing",
        "delayoff",
        "flow_params",
        "music_on",
        "name",
    ]


def test_out_of_range_values_pass_through() -> None:
    assert _wire(new_set_brightness(1, 250)) == [250, "sudden", 0]
    assert _wire(new_set_color_temp(1, 100)) == [100, "sudden", 0]


def test_with_id_keeps_method_and_params() -> None:
    cmd = new_set_brightness(1, 50)
    reused = cmd.with_id(42)
    assert reused.id == 42
    assert reused.method == cmd.method
    assert reused.params == cmd.params
    assert cmd.id == 1

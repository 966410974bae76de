from __future__ import annotations

import pytest

from yeectl.core.config import LoadedConfig
from yeectl.core.errors import TransportConnectError, TransportSendError
from yeectl.core.model import BulbConfig, PowerOnMode, Property, Smooth
from yeectl.core.service import BulbService


class FakeStream:
    def __init__(self, reply: bytes, fail_write: bool = False) -> None:
        self.reply = reply
        self.fail_write = fail_write
        self.written: list[bytes] = []
        self.closed = False

    def sendall(self, data: bytes) -> None:
        if self.fail_write:
            raise ConnectionResetError("reset by peer")
        self.written.append(data)

    def recv(self, bufsize: int) -> bytes:
        return self.reply

    def close(self) -> None:
        self.closed = True


class FakeConnector:
    def __init__(self, reply: bytes = b'{"id":1,"result":["ok"]}\r\n', fail_write: bool = False) -> None:
        self.reply = reply
        self.fail_write = fail_write
        self.calls: list[BulbConfig] = []
        self.streams: list[FakeStream] = []

    def connect(self, bulb: BulbConfig) -> FakeStream:
        self.calls.append(bulb)
        stream = FakeStream(self.reply, fail_write=self.fail_write)
        self.streams.append(stream)
        return stream


DESK = BulbConfig(name="desk", host="192.168.1.83")


def _service(connector: FakeConnector) -> BulbService:
    return BulbService(
        connector=connector,
        config=LoadedConfig(bulbs={"desk": DESK}, default="desk"),
    )


def test_toggle_happy_path() -> None:
    connector = FakeConnector()
    service = _service(connector)

    result = service.toggle(DESK)
    assert result.request == '{"id":1,"method":"toggle","params":[]}\r\n'
    assert result.response == '{"id":1,"result":["ok"]}\r\n'
    assert connector.calls == [DESK]
    assert connector.streams[0].written == [result.request.encode("ascii")]
    assert connector.streams[0].closed


def test_ids_increase_per_command() -> None:
    connector = FakeConnector()
    service = _service(connector)

    first = service.set_brightness(DESK, 50)
    second = service.set_power(DESK, True, PowerOnMode.CT, Smooth(500))
    assert first.command.id == 1
    assert second.command.id == 2
    assert second.request == '{"id":2,"method":"set_power","params":["on","smooth",500,1]}\r\n'


def test_next_id_wraps_in_signed_32_bit_range() -> None:
    service = _service(FakeConnector())
    service._ids = iter([2**31 - 1, 2**31])
    assert service.next_id() == 2**31 - 1
    assert service.next_id() == 1


def test_stream_closed_on_failure() -> None:
    connector = FakeConnector(fail_write=True)
    service = _service(connector)

    with pytest.raises(TransportSendError):
        service.set_rgb(DESK, 255, 0, 0)
    assert connector.streams[0].closed


def test_connect_failure_propagates() -> None:
    class RefusingConnector:
        def connect(self, bulb: BulbConfig):
            raise TransportConnectError(f"TCP connect to {bulb.address} failed")

    service = BulbService(connector=RefusingConnector(), config=LoadedConfig())
    with pytest.raises(TransportConnectError):
        service.toggle(DESK)


def test_get_prop_and_color_commands() -> None:
    service = _service(FakeConnector())

    assert service.get_prop(DESK, [Property.POWER, Property.BRIGHTNESS]).request == (
        '{"id":1,"method":"get_prop","params":["power","bright"]}\r\n'
    )
    assert service.set_hsv(DESK, 120, 80).request == (
        '{"id":2,"method":"set_hsv","params":[120,80,"sudden",0]}\r\n'
    )
    assert service.set_color_temp(DESK, 2700, Smooth(200)).request == (
        '{"id":3,"method":"set_ct_abx","params":[2700,"smooth",200]}\r\n'
    )


def test_resolve_bulb_uses_config_default() -> None:
    service = _service(FakeConnector())
    assert service.resolve_bulb() == DESK
    assert service.list_bulbs() == [DESK]

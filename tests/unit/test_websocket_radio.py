"""Unit tests for WebSocketRadio with a fake hub connection."""

import json
import threading

import pytest

from orchestra import websocket_radio
from orchestra.exceptions import RadioError
from orchestra.sync_channel import SyncChannel
from orchestra.websocket_radio import WebSocketRadio


class FakeConnection:
    """Stands in for a websockets sync ClientConnection."""

    def __init__(self, inbound):
        self.inbound = inbound
        self.sent = []
        self.release = threading.Event()
        self.closed = False

    def __iter__(self):
        # Hold inbound frames until the test has registered its callbacks
        self.release.wait(timeout=2.0)
        yield from self.inbound

    def send(self, message):
        self.sent.append(message)

    def close(self):
        self.closed = True
        self.release.set()


@pytest.fixture
def fake_hub(monkeypatch):
    created = {}

    def fake_connect(uri, open_timeout=None):
        created["uri"] = uri
        return created["connection"]

    def install(inbound):
        created["connection"] = FakeConnection(inbound)
        monkeypatch.setattr(websocket_radio, "connect", fake_connect)
        return created

    return install


def _frame(value, group=0):
    return json.dumps({"type": "number", "value": value, "group": group})


def test_connects_with_group(fake_hub):
    hub = fake_hub([])
    radio = WebSocketRadio("ws://hub:8765/ws/radio", group=4)
    assert hub["uri"] == "ws://hub:8765/ws/radio?group=4"
    radio.close()
    assert hub["connection"].closed


def test_send_number_frame(fake_hub):
    hub = fake_hub([])
    radio = WebSocketRadio("ws://hub/ws/radio", group=2)
    radio.send_number(7)
    assert json.loads(hub["connection"].sent[0]) == {
        "type": "number",
        "value": 7,
        "group": 2,
    }
    radio.close()


def test_inbound_frames_dispatched_on_receive_thread(fake_hub):
    inbound = [
        _frame(1),
        "not json",
        json.dumps({"type": "number", "value": "2"}),
        _frame(2, group=9),
        _frame(2),
        _frame(2),
    ]
    hub = fake_hub(inbound)
    radio = WebSocketRadio("ws://hub/ws/radio")
    fired = {1: 0, 2: 0}
    threads = set()

    sync = SyncChannel(radio)
    sync.on_signal_received(1, lambda: fired.__setitem__(1, fired[1] + 1))

    def on_two():
        threads.add(threading.current_thread().name)
        fired[2] += 1

    sync.on_signal_received(2, on_two)

    hub["connection"].release.set()
    radio._thread.join(timeout=2.0)

    assert fired == {1: 1, 2: 2}
    assert radio.received == 3
    assert threads == {"radio-receive"}
    radio.close()


def test_unreachable_hub_raises_radio_error(monkeypatch):
    def refuse(uri, open_timeout=None):
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr(websocket_radio, "connect", refuse)
    with pytest.raises(RadioError):
        WebSocketRadio("ws://127.0.0.1:1/ws/radio")

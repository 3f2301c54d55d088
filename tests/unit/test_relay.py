"""
Unit tests for the in-process alert relay.
"""

import logging

import pytest
from pydantic import ValidationError

from basefee_sentinel.relay import AlertEvent, Relay


def test_broadcast_emits_exactly_one_event_per_call():
    relay = Relay()
    received = []
    relay.subscribe(received.append)

    relay.broadcast(b"spike")
    relay.broadcast(b"spike")

    assert received == [AlertEvent(data=b"spike"), AlertEvent(data=b"spike")]


def test_payload_is_forwarded_unmodified():
    relay = Relay()
    received = []
    relay.subscribe(received.append)
    payload = bytes(range(256))

    relay.broadcast(payload)

    assert received[0].data == payload


def test_empty_payload_is_accepted():
    relay = Relay()
    received = []
    relay.subscribe(received.append)

    relay.broadcast(b"")

    assert len(received) == 1
    assert received[0].data == b""


def test_broadcast_without_subscribers_logs_event(caplog):
    relay = Relay()
    with caplog.at_level(logging.WARNING, logger="basefee_sentinel.relay.relay"):
        relay.broadcast(b"Basefee volatility detected")

    assert "BasefeeAlert emitted" in caplog.text


def test_failing_subscriber_does_not_block_others():
    relay = Relay()
    received = []

    def broken(event):
        raise RuntimeError("subscriber down")

    relay.subscribe(broken)
    relay.subscribe(received.append)

    relay.broadcast(b"x")

    assert len(received) == 1


def test_unsubscribe():
    relay = Relay()
    received = []
    unsubscribe = relay.subscribe(received.append)

    relay.broadcast(b"a")
    unsubscribe()
    relay.broadcast(b"b")

    assert [e.data for e in received] == [b"a"]


def test_event_wire_format():
    event = AlertEvent(data=b"\x01\x02")
    assert AlertEvent.NAME == "BasefeeAlert"
    assert event.to_wire() == {"event": "BasefeeAlert", "data": "0x0102"}


@pytest.mark.parametrize("payload", [5, "text", bytearray(b"ab"), None])
def test_non_bytes_payload_fails_validation(payload):
    relay = Relay()
    received = []
    relay.subscribe(received.append)

    with pytest.raises(ValidationError):
        relay.broadcast(payload)
    assert received == []

"""
Unit tests for sample collection and ambient sources.
"""

import pytest
import requests

from basefee_sentinel.core.config import CollectorConfig
from basefee_sentinel.core.exceptions import (
    CollectionError,
    ConfigurationError,
    DataValidationError,
    SourceExhaustedError,
)
from basefee_sentinel.data import sources
from basefee_sentinel.data.codec import decode_uint256, encode_uint256
from basefee_sentinel.data.collector import Collector
from basefee_sentinel.data.sources import (
    JsonRpcBaseFeeSource,
    ReplayBaseFeeSource,
    StaticBaseFeeSource,
)


class _FakeResponse:
    def __init__(self, data, status_code: int = 200):
        self._data = data
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        return self._data


def test_collect_encodes_current_value():
    collector = Collector(StaticBaseFeeSource(25_000_000_000))
    assert collector.collect() == encode_uint256(25_000_000_000)


def test_collect_is_deterministic_for_same_state():
    collector = Collector(StaticBaseFeeSource(7))
    assert collector.collect() == collector.collect()


def test_static_source_rejects_negative():
    with pytest.raises(DataValidationError):
        StaticBaseFeeSource(-1)


def test_replay_source_only_moves_on_advance():
    source = ReplayBaseFeeSource([100, 103])
    collector = Collector(source)

    assert decode_uint256(collector.collect()) == 100
    assert decode_uint256(collector.collect()) == 100

    source.advance()
    assert decode_uint256(collector.collect()) == 103
    assert source.remaining == 1

    source.advance()
    with pytest.raises(SourceExhaustedError):
        collector.collect()


def test_exhausted_is_a_collection_error():
    assert issubclass(SourceExhaustedError, CollectionError)


def test_rpc_source_reads_base_fee(monkeypatch):
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append((url, json, timeout))
        return _FakeResponse({"jsonrpc": "2.0", "id": 1, "result": {"baseFeePerGas": "0x5d21dba00"}})

    monkeypatch.setattr(sources.requests, "post", fake_post)
    source = JsonRpcBaseFeeSource(rpc_url="http://node.local", timeout=3.0)

    assert source.read() == 25_000_000_000
    url, payload, timeout = calls[0]
    assert url == "http://node.local"
    assert payload["method"] == "eth_getBlockByNumber"
    assert payload["params"] == ["latest", False]
    assert timeout == 3.0


@pytest.mark.parametrize(
    "response",
    [
        {"error": {"code": -32000, "message": "boom"}},
        {"result": None},
        {"result": {"number": "0x1"}},
        {"result": {"baseFeePerGas": "0xnothex"}},
    ],
)
def test_rpc_source_bad_responses(monkeypatch, response):
    monkeypatch.setattr(sources.requests, "post", lambda *a, **k: _FakeResponse(response))
    source = JsonRpcBaseFeeSource(rpc_url="http://node.local")

    with pytest.raises(CollectionError):
        source.read()


def test_rpc_source_transport_failure(monkeypatch):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(sources.requests, "post", fake_post)
    with pytest.raises(CollectionError):
        JsonRpcBaseFeeSource(rpc_url="http://node.local").read()


def test_rpc_source_http_error(monkeypatch):
    monkeypatch.setattr(sources.requests, "post", lambda *a, **k: _FakeResponse({}, status_code=502))
    with pytest.raises(CollectionError):
        JsonRpcBaseFeeSource(rpc_url="http://node.local").read()


def test_rpc_source_requires_url():
    with pytest.raises(ConfigurationError):
        JsonRpcBaseFeeSource(settings=CollectorConfig(rpc_url=None))

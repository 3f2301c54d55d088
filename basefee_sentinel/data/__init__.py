"""
Data module: sample encoding, ambient sources, collection, and host history.

    Ambient source (RPC node / static value / recorded series)
        ↓
    Collector.collect() → 32-byte uint256 payload
        ↓
    SampleHistory (host-owned, newest first)
        ↓
    Decision engine (basefee_sentinel.anomaly)
"""

from basefee_sentinel.data.codec import decode_uint256, encode_uint256, from_hex, to_hex
from basefee_sentinel.data.collector import Collector
from basefee_sentinel.data.history import SampleHistory
from basefee_sentinel.data.ingestion import load_basefee_series, read_series_frame
from basefee_sentinel.data.sources import (
    BaseFeeSource,
    JsonRpcBaseFeeSource,
    ReplayBaseFeeSource,
    StaticBaseFeeSource,
)

__all__ = [
    # Codec
    "encode_uint256",
    "decode_uint256",
    "to_hex",
    "from_hex",

    # Collection
    "Collector",
    "BaseFeeSource",
    "StaticBaseFeeSource",
    "ReplayBaseFeeSource",
    "JsonRpcBaseFeeSource",

    # History
    "SampleHistory",

    # Ingestion
    "load_basefee_series",
    "read_series_frame",
]

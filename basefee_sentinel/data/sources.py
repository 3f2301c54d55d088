"""
Ambient base fee sources.

A source answers "what is the base fee right now". Reading must not change
what the next read returns; only the host moves time forward by calling
``advance()`` once a step is finished.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

import requests

from basefee_sentinel.core.config import CollectorConfig, config
from basefee_sentinel.core.exceptions import (
    CollectionError,
    ConfigurationError,
    DataValidationError,
    SourceExhaustedError,
)

logger = logging.getLogger(__name__)


class BaseFeeSource(ABC):
    """
    Abstract base class for base fee sources.
    """

    @abstractmethod
    def read(self) -> int:
        """
        Return the current base fee (wei).

        Raises:
            CollectionError: If the value cannot be obtained
        """
        pass

    def advance(self) -> None:
        """Move to the next time step. Live sources have nothing to do."""
        return None


class StaticBaseFeeSource(BaseFeeSource):
    """
    Fixed value source. The host may update it between steps via ``set``.
    """

    def __init__(self, value: int = 0):
        self.set(value)

    def set(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise DataValidationError(f"Base fee must be a non-negative int, got {value!r}")
        self._value = value

    def read(self) -> int:
        return self._value


class ReplayBaseFeeSource(BaseFeeSource):
    """
    Replays a recorded base fee series, one value per step.

    Example:
        source = ReplayBaseFeeSource([100, 103, 97])
        source.read()     # 100
        source.advance()
        source.read()     # 103
    """

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = [int(v) for v in values]
        if any(v < 0 for v in self._values):
            raise DataValidationError("Replay series contains negative base fees")
        self._cursor = 0

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return max(len(self._values) - self._cursor, 0)

    def read(self) -> int:
        if self._cursor >= len(self._values):
            raise SourceExhaustedError(
                f"Replay series exhausted after {len(self._values)} samples"
            )
        return self._values[self._cursor]

    def advance(self) -> None:
        if self._cursor < len(self._values):
            self._cursor += 1


class JsonRpcBaseFeeSource(BaseFeeSource):
    """
    Reads ``baseFeePerGas`` from an Ethereum JSON-RPC node.

    Uses eth_getBlockByNumber(block_tag, false). Pre-London blocks have no base
    fee and are reported as a collection failure.
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        block_tag: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[CollectorConfig] = None,
    ):
        settings = settings or config.collector
        self.rpc_url = rpc_url or settings.rpc_url
        self.block_tag = block_tag or settings.block_tag
        self.timeout = timeout or settings.request_timeout

        if not self.rpc_url:
            raise ConfigurationError("RPC URL not set (BASEFEE_COLLECTOR__RPC_URL)")

    def _payload(self) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": "basefee-sentinel",
            "method": "eth_getBlockByNumber",
            "params": [self.block_tag, False],
        }

    def read(self) -> int:
        try:
            resp = requests.post(self.rpc_url, json=self._payload(), timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("RPC request to %s failed: %s", self.rpc_url, e)
            raise CollectionError(f"RPC request failed: {e}") from e

        err = data.get("error")
        if err:
            raise CollectionError(f"RPC error: {err}")

        block = data.get("result")
        if not isinstance(block, dict):
            raise CollectionError(f"No block returned for tag {self.block_tag!r}")

        raw = block.get("baseFeePerGas")
        if raw is None:
            raise CollectionError("Block has no baseFeePerGas (pre-London chain?)")

        try:
            return int(raw, 16) if isinstance(raw, str) else int(raw)
        except ValueError as e:
            raise CollectionError(f"Malformed baseFeePerGas: {raw!r}") from e

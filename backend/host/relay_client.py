"""
HTTP transport to a remote relay service.

Implements the same broadcast(payload) call as the in-process Relay, so the
scheduler does not care where alerts go.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from basefee_sentinel.core.config import RelayConfig, config
from basefee_sentinel.core.exceptions import RelayError
from basefee_sentinel.data.codec import to_hex

logger = logging.getLogger(__name__)


class HttpRelayClient:
    """
    Posts alert payloads to a relay's /broadcast endpoint as {"data": "0x..."}.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        settings: Optional[RelayConfig] = None,
    ) -> None:
        settings = settings or config.relay
        self.url = url or settings.url
        self.timeout = timeout or settings.request_timeout

    def broadcast(self, payload: bytes) -> None:
        try:
            resp = requests.post(self.url, json={"data": to_hex(payload)}, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise RelayError(f"Relay call to {self.url} failed: {e}") from e
        logger.info("Alert relayed to %s (%d bytes)", self.url, len(payload))

"""
Sample collector.

``collect()`` reads the current base fee from its source and returns it as an
ABI-encoded uint256 payload, the format the decision engine decodes.
"""

from __future__ import annotations

from dataclasses import dataclass

from .codec import encode_uint256
from .sources import BaseFeeSource


@dataclass
class Collector:
    """
    Stateless collector bound to an ambient source.

    Two calls against the same source state return identical bytes.
    """

    source: BaseFeeSource

    def collect(self) -> bytes:
        return encode_uint256(self.source.read())

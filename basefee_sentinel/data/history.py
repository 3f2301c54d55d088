"""
Host-owned sample history.

The decision engine is stateless; the orchestrating host keeps the most recent
payloads in a small fixed-capacity buffer and hands a newest-first snapshot to
each decision call.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional


@dataclass
class SampleHistory:
    """
    Bounded newest-first buffer of collected payloads.

    Only the two newest entries matter to the engine, so capacity defaults to 2.
    """

    capacity: int = 2
    _items: Deque[bytes] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 2:
            raise ValueError(f"History capacity must be at least 2, got {self.capacity}")
        self._items = deque(maxlen=self.capacity)

    def push(self, payload: bytes) -> None:
        # appendleft keeps index 0 as the newest sample; maxlen evicts the oldest
        self._items.appendleft(bytes(payload))

    def newest_first(self) -> List[bytes]:
        return list(self._items)

    def clear(self) -> None:
        self._items.clear()

    @property
    def latest(self) -> Optional[bytes]:
        return self._items[0] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

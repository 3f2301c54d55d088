"""
Schema definitions for the threshold decision engine.

A Decision is the immutable result of one engine call. PercentChange carries
the arithmetic behind it so callers and tests can see why a decision was made.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from basefee_sentinel.core.config import Comparator

INSUFFICIENT_DATA = b"Insufficient data"
PREVIOUS_ZERO = b"Previous value is zero"


class PercentChange(BaseModel):
    """
    Relative change between two consecutive samples.

    Fields:
    - current: newest sample
    - previous: sample before it (always > 0 here)
    - delta: |current - previous|
    - percent: floor(delta * 100 / previous)
    """

    model_config = ConfigDict(frozen=True)

    current: int = Field(ge=0)
    previous: int = Field(gt=0)
    delta: int = Field(ge=0)
    percent: int = Field(ge=0)

    @property
    def direction(self) -> str:
        return "up" if self.current >= self.previous else "down"


class Decision(BaseModel):
    """
    Outcome of a single should_respond call.

    Fields:
    - triggered: True when the host should forward reason to the relay
    - reason: UTF-8 reason payload, forwarded verbatim as the alert data
    """

    model_config = ConfigDict(frozen=True)

    triggered: bool
    reason: bytes

    @property
    def message(self) -> str:
        return self.reason.decode("utf-8", errors="replace")

    def as_tuple(self) -> tuple[bool, bytes]:
        return self.triggered, self.reason


__all__ = ["Comparator", "Decision", "PercentChange", "INSUFFICIENT_DATA", "PREVIOUS_ZERO"]

"""
Threshold decision engine.

Consumes the newest-first sample history supplied by the host, decodes the two
most recent samples, and decides whether the base fee moved enough to alert.
Configuration is bound at construction; should_respond itself reads no ambient
state and has no side effects, so independent observers always agree.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from basefee_sentinel.core.config import Comparator, TrapConfig, config
from basefee_sentinel.core.exceptions import PayloadDecodeError
from basefee_sentinel.data.codec import decode_uint256

from .detectors import PercentChangeDetector, percent_change
from .schema import INSUFFICIENT_DATA, PREVIOUS_ZERO, Decision, PercentChange

logger = logging.getLogger(__name__)


@dataclass
class DecisionEngine:
    """
    Deterministic base fee volatility decision engine.

    Notes:
    - Only history[0] (current) and history[1] (previous) are inspected.
    - Fewer than two samples and a zero previous value are non-triggering
      results, not errors.
    - Malformed payloads raise PayloadDecodeError naming the bad index.
    """

    settings: TrapConfig = field(default_factory=lambda: config.trap.model_copy())

    def __post_init__(self) -> None:
        self._detector = PercentChangeDetector(
            threshold_percent=self.settings.threshold_percent,
            comparator=self.settings.comparator,
            truncate_percent=self.settings.truncate_percent,
        )

    @property
    def threshold_percent(self) -> int:
        return self.settings.threshold_percent

    def should_respond(self, history: Sequence[bytes]) -> Decision:
        if len(history) < 2:
            return Decision(triggered=False, reason=INSUFFICIENT_DATA)

        current = self._decode(history, 0)
        previous = self._decode(history, 1)

        if previous == 0:
            return Decision(triggered=False, reason=PREVIOUS_ZERO)

        change = percent_change(current, previous)
        triggered = self._detector.exceeds(change)

        logger.debug(
            "previous=%s current=%s percent=%s threshold=%s triggered=%s",
            previous,
            current,
            change.percent,
            self.threshold_percent,
            triggered,
        )
        return Decision(triggered=triggered, reason=self._reason(change, triggered))

    def _decode(self, history: Sequence[bytes], index: int) -> int:
        try:
            return decode_uint256(history[index])
        except PayloadDecodeError as e:
            raise PayloadDecodeError(f"history[{index}]: {e}", index=index) from e

    def _reason(self, change: PercentChange, triggered: bool) -> bytes:
        op = ">" if self.settings.comparator == Comparator.GT else ">="
        detail = (
            f"{change.percent}% change ({change.previous} -> {change.current}), "
            f"threshold {op} {self.threshold_percent}%"
        )
        if triggered:
            return f"Basefee volatility detected: {detail}".encode("utf-8")
        return f"Basefee stable: {detail}".encode("utf-8")


def should_respond(
    history: Sequence[bytes],
    threshold_percent: int = 3,
    comparator: Union[Comparator, str] = Comparator.GTE,
    truncate_percent: bool = False,
    settings: Optional[TrapConfig] = None,
) -> Decision:
    """
    One-shot decision without holding an engine.

    Example:
        decision = should_respond([encode_uint256(103), encode_uint256(100)])
        decision.triggered  # True at the default 3% inclusive threshold
    """
    if settings is None:
        settings = TrapConfig(
            threshold_percent=threshold_percent,
            comparator=Comparator(comparator),
            truncate_percent=truncate_percent,
        )
    return DecisionEngine(settings=settings).should_respond(history)

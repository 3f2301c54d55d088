"""
Percentage change detection.

Integer-only arithmetic. The exact trigger test cross-multiplies
(delta * 100 against threshold * previous) and loses nothing to truncation.
"""

from __future__ import annotations

from dataclasses import dataclass

from basefee_sentinel.core.config import Comparator

from .schema import PercentChange


def percent_change(current: int, previous: int) -> PercentChange:
    """
    Compute the relative change of current against previous.

    Raises:
        ValueError: If previous is zero (callers must check first)
    """
    if previous == 0:
        raise ValueError("previous must be non-zero")
    delta = abs(current - previous)
    return PercentChange(
        current=current,
        previous=previous,
        delta=delta,
        percent=(delta * 100) // previous,
    )


@dataclass(frozen=True)
class PercentChangeDetector:
    """
    Threshold detector for consecutive samples.

    truncate_percent reproduces traps that compared the truncated integer
    percentage; for ">=" both modes agree, for ">" they differ.
    """

    threshold_percent: int
    comparator: Comparator = Comparator.GTE
    truncate_percent: bool = False

    def exceeds(self, change: PercentChange) -> bool:
        if self.truncate_percent:
            lhs, rhs = change.percent, self.threshold_percent
        else:
            lhs, rhs = change.delta * 100, self.threshold_percent * change.previous

        if self.comparator == Comparator.GT:
            return lhs > rhs
        return lhs >= rhs

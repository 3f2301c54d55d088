"""
Schema for host step results.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from basefee_sentinel.anomaly.schema import Decision


class StepResult(BaseModel):
    """
    What happened during one scheduled step.

    Fields:
    - step: 1-based step counter
    - sample: collected base fee, None if collection failed
    - decision: engine decision, None if the step was skipped
    - relayed: True if the reason payload reached the relay
    """

    step: int = Field(ge=1)
    sample: Optional[int] = None
    decision: Optional[Decision] = None
    relayed: bool = False

    @property
    def skipped(self) -> bool:
        return self.decision is None

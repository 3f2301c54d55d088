"""
Configuration for the host scheduler.

The host, not the core, owns timing and the sample history buffer.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class HostConfig(BaseModel):
    """
    Step scheduling configuration.

    Notes:
    - interval_seconds: pause between steps (one step per block is ~12s on mainnet).
    - max_steps: stop after this many steps; None runs until the source is exhausted.
    - history_capacity: size of the newest-first sample buffer (>= 2).
    """

    interval_seconds: float = Field(12.0, ge=0.0)
    max_steps: Optional[int] = Field(None, ge=1)
    history_capacity: int = Field(2, ge=2)

"""
Alert event emitted by the relay.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict

from pydantic import BaseModel, ConfigDict, Field

from basefee_sentinel.data.codec import to_hex


class AlertEvent(BaseModel):
    """
    Observable record of one broadcast call.

    Fields:
    - data: the payload exactly as the caller handed it to the relay

    No id or sequence number: two broadcasts of the same payload produce
    equal events.
    """

    model_config = ConfigDict(frozen=True)

    NAME: ClassVar[str] = "BasefeeAlert"

    data: bytes = Field(strict=True)

    def to_wire(self) -> Dict[str, Any]:
        return {"event": self.NAME, "data": to_hex(self.data)}

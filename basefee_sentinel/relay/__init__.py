"""
Relay module: re-broadcasts alert payloads as observable events.
"""

from .relay import Relay, Subscriber
from .schema import AlertEvent

__all__ = ["AlertEvent", "Relay", "Subscriber"]

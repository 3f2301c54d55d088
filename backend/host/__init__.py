"""
Host scheduler exports.
"""

from .config import HostConfig
from .relay_client import HttpRelayClient
from .scheduler import RelayTarget, StepScheduler
from .schema import StepResult

__all__ = [
    "HostConfig",
    "HttpRelayClient",
    "RelayTarget",
    "StepScheduler",
    "StepResult",
]

"""
Anomaly module: threshold decision engine for base fee volatility.

Compares the two most recent samples and returns a trigger flag plus a reason
payload for the relay.
"""

from .detectors import PercentChangeDetector, percent_change
from .engine import DecisionEngine, should_respond
from .schema import INSUFFICIENT_DATA, PREVIOUS_ZERO, Comparator, Decision, PercentChange

__all__ = [
	"DecisionEngine",
	"should_respond",
	"Decision",
	"PercentChange",
	"Comparator",
	"PercentChangeDetector",
	"percent_change",
	"INSUFFICIENT_DATA",
	"PREVIOUS_ZERO",
]

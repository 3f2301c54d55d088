"""
Alert relay: a pure notification sink.

broadcast() turns any payload into an AlertEvent and hands it to every
subscriber. Filtering belongs to the decision engine; the relay accepts all
callers and all payloads.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List

from .schema import AlertEvent

logger = logging.getLogger(__name__)

Subscriber = Callable[[AlertEvent], None]


class Relay:
    """
    In-process alert relay.

    Every broadcast logs the event and delivers it to each subscriber in
    registration order. A subscriber that raises is logged and skipped; the
    remaining subscribers still receive the event.
    """

    def __init__(self) -> None:
        self._subscribers: List[Subscriber] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a subscriber.

        Returns:
            A function that removes the subscriber again
        """
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def broadcast(self, payload: bytes) -> None:
        event = AlertEvent(data=payload)
        logger.warning("%s emitted: %s", AlertEvent.NAME, event.data.decode("utf-8", errors="replace"))

        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(event)
            except Exception:
                logger.exception("Alert subscriber %r failed", callback)

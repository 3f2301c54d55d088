"""
Host step scheduler.

Drives the collect -> decide -> relay cycle once per time step and owns the
sample history. The core components stay stateless; everything that survives
between steps lives here.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Protocol

from basefee_sentinel.anomaly.engine import DecisionEngine
from basefee_sentinel.core.exceptions import CollectionError, RelayError, SourceExhaustedError
from basefee_sentinel.data.codec import decode_uint256
from basefee_sentinel.data.collector import Collector
from basefee_sentinel.data.history import SampleHistory

from .config import HostConfig
from .schema import StepResult

logger = logging.getLogger(__name__)


class RelayTarget(Protocol):
    def broadcast(self, payload: bytes) -> None: ...


class StepScheduler:
    """
    Sequential scheduler for a single trap.

    Step order:
    1. collect a sample (a CollectionError skips the step, history untouched)
    2. push it into the newest-first history
    3. evaluate the decision engine on the history snapshot
    4. broadcast the reason if triggered (a RelayError is logged, not raised)
    5. advance the ambient source to the next time step
    """

    def __init__(
        self,
        collector: Collector,
        engine: DecisionEngine,
        relay: RelayTarget,
        history: Optional[SampleHistory] = None,
        config: Optional[HostConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.config = config or HostConfig()
        self.collector = collector
        self.engine = engine
        self.relay = relay
        if history is None:
            history = SampleHistory(capacity=self.config.history_capacity)
        self.history = history
        self._sleep = sleep
        self._step = 0

    @property
    def steps_run(self) -> int:
        return self._step

    def run_step(self) -> StepResult:
        step = self._step + 1

        try:
            payload = self.collector.collect()
        except SourceExhaustedError:
            raise
        except CollectionError as e:
            self._step = step
            logger.error("Step %d: collection failed, skipping: %s", step, e)
            return StepResult(step=step)

        self._step = step
        self.history.push(payload)
        decision = self.engine.should_respond(self.history.newest_first())
        sample = decode_uint256(payload)

        relayed = False
        if decision.triggered:
            try:
                self.relay.broadcast(decision.reason)
                relayed = True
            except RelayError:
                logger.exception("Step %d: relay failed", step)
        else:
            logger.debug("Step %d: %s", step, decision.message)

        logger.info(
            "Step %d: basefee=%d triggered=%s relayed=%s",
            step,
            sample,
            decision.triggered,
            relayed,
        )

        self.collector.source.advance()
        return StepResult(step=step, sample=sample, decision=decision, relayed=relayed)

    def run(self, max_steps: Optional[int] = None) -> List[StepResult]:
        """
        Run steps until max_steps (argument, then config) or source exhaustion.

        Returns:
            Results of every completed step, in order
        """
        limit = max_steps if max_steps is not None else self.config.max_steps
        results: List[StepResult] = []

        while limit is None or len(results) < limit:
            if results:
                self._sleep(self.config.interval_seconds)
            try:
                results.append(self.run_step())
            except SourceExhaustedError as e:
                logger.info("Stopping: %s", e)
                break

        return results

"""
Host runner: schedules the base fee trap step by step.

Examples:
    python -m backend.runner --source rpc --interval 12
    python -m backend.runner --source replay --series fees.csv --interval 0
    python -m backend.runner --source static --value 100 --steps 3 --relay-url http://127.0.0.1:8000/broadcast
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import load_dotenv

from basefee_sentinel.anomaly import Comparator, DecisionEngine
from basefee_sentinel.core.config import config
from basefee_sentinel.core.exceptions import ConfigurationError, DataValidationError
from basefee_sentinel.core.logging_config import setup_logging
from basefee_sentinel.data import (
    BaseFeeSource,
    Collector,
    JsonRpcBaseFeeSource,
    ReplayBaseFeeSource,
    StaticBaseFeeSource,
    load_basefee_series,
)
from basefee_sentinel.relay import Relay

from backend.host import HostConfig, HttpRelayClient, StepScheduler

logger = logging.getLogger("backend.runner")


def _build_source(args: argparse.Namespace) -> BaseFeeSource:
    if args.source == "static":
        return StaticBaseFeeSource(args.value)
    if args.source == "replay":
        if not args.series:
            raise ConfigurationError("--series is required for the replay source")
        return ReplayBaseFeeSource(load_basefee_series(args.series))
    return JsonRpcBaseFeeSource(rpc_url=args.rpc_url)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Base fee volatility trap host")
    parser.add_argument("--source", choices=["rpc", "static", "replay"], default="rpc")
    parser.add_argument("--rpc-url", default=None, help="JSON-RPC endpoint (rpc source)")
    parser.add_argument("--value", type=int, default=0, help="Base fee (static source)")
    parser.add_argument("--series", default=None, help="CSV/JSON series file (replay source)")
    parser.add_argument("--steps", type=int, default=None, help="Stop after N steps")
    parser.add_argument("--interval", type=float, default=12.0, help="Seconds between steps")
    parser.add_argument("--threshold", type=int, default=config.trap.threshold_percent)
    parser.add_argument(
        "--comparator",
        choices=[c.value for c in Comparator],
        default=config.trap.comparator.value,
    )
    parser.add_argument(
        "--relay-url",
        default=None,
        help="Remote relay /broadcast endpoint; omitted means an in-process relay",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    setup_logging("basefee_sentinel")
    setup_logging("backend")

    try:
        source = _build_source(args)
    except (ConfigurationError, DataValidationError) as e:
        logger.error("Cannot start: %s", e)
        return 2

    settings = config.trap.model_copy(
        update={"threshold_percent": args.threshold, "comparator": Comparator(args.comparator)}
    )
    relay = HttpRelayClient(url=args.relay_url) if args.relay_url else Relay()
    scheduler = StepScheduler(
        collector=Collector(source),
        engine=DecisionEngine(settings=settings),
        relay=relay,
        config=HostConfig(interval_seconds=args.interval, max_steps=args.steps),
    )

    logger.info(
        "Running trap: source=%s threshold=%s%% comparator=%s relay=%s",
        args.source,
        args.threshold,
        args.comparator,
        args.relay_url or "in-process",
    )
    try:
        results = scheduler.run()
    except KeyboardInterrupt:
        logger.info("Interrupted after %d steps", scheduler.steps_run)
        return 130

    alerts = sum(1 for r in results if r.decision is not None and r.decision.triggered)
    logger.info("Finished %d steps, %d alerts", len(results), alerts)
    return 0


if __name__ == "__main__":
    sys.exit(main())

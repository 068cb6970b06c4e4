from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import List, Optional

import numpy as np
from pydantic import ValidationError

from .config import DEFAULT_HORIZON, SimulationSettings
from .dispatch import DispatchSummary, calculate
from .order import Order
from .participants import AlwaysOn, Consumer, Dispatchable
from .profiles import random_profile


@dataclass(frozen=True)
class BenchmarkResult:
    iterations: int
    horizon: int
    dispatchables: int
    total_sec: float
    mean_sec: float
    best_sec: float
    shortage_frames: int


def build_benchmark_order(
    n_dispatchables: int = 40,
    horizon: int = DEFAULT_HORIZON,
    seed: Optional[int] = 0,
) -> Order:
    """
    Build a randomised order for timing the dispatch engine.

    One always-on producer and one consumer with random profiles, and
    ``n_dispatchables`` identical dispatchables of 3 x 0.5 capacity.
    """
    if n_dispatchables < 0:
        raise ValueError("n_dispatchables must be non-negative")

    rng = np.random.default_rng(seed)
    always = random_profile(horizon, seed=int(rng.integers(2**32)))
    demand = random_profile(horizon, seed=int(rng.integers(2**32)))

    order = Order(horizon=horizon)
    order.add_always_on(AlwaysOn("ao", always, 3.0))
    order.add_consumer(Consumer("co", demand, 1.5 * n_dispatchables))

    for _ in range(n_dispatchables):
        order.add_dispatchable(Dispatchable("disp", 0.0, 0.5, 3.0, horizon=horizon))

    return order


def run_benchmark(
    order: Order,
    iterations: int = 10,
    settings: Optional[SimulationSettings] = None,
) -> BenchmarkResult:
    """Time repeated calculations of ``order``, resetting it between runs."""
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    timings: List[float] = []
    for _ in range(iterations):
        order.reset()
        started = time.perf_counter()
        calculate(order, settings)
        timings.append(time.perf_counter() - started)

    summary = DispatchSummary.from_order(order)
    total = float(sum(timings))
    return BenchmarkResult(
        iterations=iterations,
        horizon=order.horizon,
        dispatchables=len(order.dispatchables),
        total_sec=total,
        mean_sec=total / iterations,
        best_sec=float(min(timings)),
        shortage_frames=summary.shortage_count,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Time the merit-order dispatch engine on a randomised order."
    )
    parser.add_argument(
        "--dispatchables",
        "-n",
        type=int,
        default=40,
        help="Number of dispatchable participants.",
    )
    parser.add_argument(
        "--horizon",
        type=int,
        default=DEFAULT_HORIZON,
        help="Number of frames to calculate.",
    )
    parser.add_argument(
        "--iterations",
        "-i",
        type=int,
        default=10,
        help="Number of timed calculations.",
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed for the profiles.")
    parser.add_argument(
        "--no-sort",
        action="store_true",
        help="Dispatch in registration order instead of sorting by cost.",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = SimulationSettings(horizon=args.horizon, sort_dispatchables=not args.no_sort)
        order = build_benchmark_order(args.dispatchables, settings.horizon, args.seed)
        result = run_benchmark(order, args.iterations, settings)
    except ValidationError as e:
        print("Settings validation error:", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Input error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(asdict(result), indent=2))
        return 0

    print(f"Frames: {result.horizon}, dispatchables: {result.dispatchables}")
    print(f"Iterations: {result.iterations}")
    print(f"Mean: {result.mean_sec * 1000:.2f} ms, best: {result.best_sec * 1000:.2f} ms")
    print(f"Shortage frames: {result.shortage_frames}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

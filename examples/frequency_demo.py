#!/usr/bin/env python3
"""Compare expected and observed selection frequencies.

Inserts A (weight 50), B (weight 25) and C (weight 10), draws many times
and prints each item's theoretical share next to the share it actually
received. Optionally times both selection strategies on the same workload.

Usage:
    # 100,000 draws with the default block-index strategy:
    python frequency_demo.py

    # Reproducible run with the linear-scan strategy:
    python frequency_demo.py --strategy linear_scan --seed 42

    # Time both strategies on a larger collection:
    python frequency_demo.py --benchmark --entries 10000

Environment variables (WS_*) are honoured as defaults, e.g.:
    export WS_RANDOM_SOURCE_TYPE=system
"""

from __future__ import annotations

import argparse
import logging
import sys
import time

from weighted_selector import SelectorConfig, build_selector

logger = logging.getLogger("frequency_demo")

_DEMO_WEIGHTS = {"A": 50, "B": 25, "C": 10}


def run_frequencies(config: SelectorConfig, draws: int) -> None:
    """Draw *draws* times and print expected vs observed percentages."""
    selector = build_selector(config, {"ws_diagnostic_mode": True})
    selector.insert_all(_DEMO_WEIGHTS)

    for _ in range(draws):
        selector.select()

    stats = selector.selection_logger.get_summary_stats()
    total = selector.get_total_probability()
    print(f"Strategy: {type(selector).__name__}  source: {selector.random_source.name}")
    print("   Prob     |  Actual")
    print("-----------------------")
    for item, weight in _DEMO_WEIGHTS.items():
        expected = weight / total * 100
        observed = stats["frequencies"].get(repr(item), 0.0) * 100
        print(f"{item}: {expected:.3f}%  |  {observed:.3f}%")


def run_benchmark(config: SelectorConfig, entries: int, draws: int) -> None:
    """Time inserts, draws and a removal for each strategy."""
    for strategy in ("block_index", "linear_scan"):
        selector = build_selector(config, {"ws_strategy": strategy})

        start = time.perf_counter()
        selector.insert_all((i, i % 100 + 1) for i in range(entries))
        insert_s = time.perf_counter() - start

        start = time.perf_counter()
        for _ in range(draws):
            selector.select()
        select_s = time.perf_counter() - start

        start = time.perf_counter()
        selector.remove(entries // 2)
        remove_s = time.perf_counter() - start

        print(
            f"{strategy:12s} insert={insert_s * 1000:9.2f}ms "
            f"select={select_s / draws * 1e6:8.2f}us/draw "
            f"remove={remove_s * 1000:8.2f}ms"
        )


def main() -> None:
    """Parse arguments and run the demo."""
    parser = argparse.ArgumentParser(description="Weighted selection frequency demo")
    parser.add_argument(
        "--draws", type=int, default=100_000, help="Number of draws (default: 100000)"
    )
    parser.add_argument(
        "--strategy",
        choices=["block_index", "linear_scan"],
        default=None,
        help="Selection strategy (default: WS_STRATEGY or block_index)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible draws")
    parser.add_argument("--benchmark", action="store_true", help="Time both strategies")
    parser.add_argument(
        "--entries",
        type=int,
        default=1_000,
        help="Collection size for --benchmark (default: 1000)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every draw")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.draws <= 0:
        logger.error("--draws must be positive")
        sys.exit(1)

    overrides: dict[str, object] = {}
    if args.strategy is not None:
        overrides["strategy"] = args.strategy
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.verbose:
        overrides["log_level"] = "summary"
    config = SelectorConfig(**overrides)

    if args.benchmark:
        run_benchmark(config, args.entries, args.draws)
    else:
        run_frequencies(config, args.draws)


if __name__ == "__main__":
    main()

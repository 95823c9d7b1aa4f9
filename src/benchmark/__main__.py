"""Command line entry point: python -m src.benchmark --count 10000"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from src.benchmark.harness import BenchmarkConfig, run_benchmark
from src.core.math.special_values import InvalidArgument

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Compare linear and closed-form special-value selection."
    )
    ap.add_argument("--count", type=int, default=10_000, help="series length and number of targets")
    ap.add_argument("--x", type=float, default=BenchmarkConfig.x)
    ap.add_argument("--y", type=float, default=BenchmarkConfig.y)
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        run_benchmark(args.count, BenchmarkConfig(x=args.x, y=args.y), stream=sys.stdout)
    except InvalidArgument as exc:
        logger.error("Benchmark aborted: %s", exc)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

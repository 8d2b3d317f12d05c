"""Collision benchmark CLI."""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from microhash.benchmark.collisions import run_benchmarks
from microhash.benchmark.report import format_report, write_metrics_json
from microhash.config import BenchmarkConfig, load_config
from microhash.hashing.catalogue import INTEGER_HASHES
from microhash.utils.log import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Count collisions and measure uniformity of integer hash functions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML benchmark configuration"
    )
    parser.add_argument(
        "--hash", dest="hashes", action="append", choices=INTEGER_HASHES,
        help="Hash function to benchmark (repeatable, default: all)"
    )
    parser.add_argument(
        "--iterations", type=int, default=None,
        help="Number of random keys per hash function"
    )
    parser.add_argument(
        "--precision", type=int, default=None,
        help="Uniformity buckets = 2^precision"
    )
    parser.add_argument(
        "--device", choices=["cpu", "cuda"], default=None,
        help="Device for vectorized hashing"
    )
    parser.add_argument(
        "--workers", type=int, default=os.cpu_count() or 1,
        help="Parallel benchmark processes"
    )
    parser.add_argument(
        "--out", type=Path, default=None,
        help="Write metrics JSON here"
    )
    parser.add_argument(
        "--plot", type=Path, default=None,
        help="Write a PDF of per-bucket counts here"
    )
    parser.add_argument(
        "--log_file", type=Path, default=None,
        help="Also write logs to this file"
    )
    return parser


def resolve_config(args: argparse.Namespace) -> BenchmarkConfig:
    """Merge the YAML config (if any) with command-line overrides."""
    config = load_config(args.config) if args.config is not None else {}
    for key in ("iterations", "precision", "device"):
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    return BenchmarkConfig.from_dict(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint.

    Returns:
        0 if every benchmark completed, 1 otherwise
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = get_logger("bench", log_file=args.log_file)

    try:
        config = resolve_config(args)
    except (FileNotFoundError, ValueError) as e:
        parser.error(str(e))

    names = args.hashes or list(INTEGER_HASHES)

    try:
        results = run_benchmarks(names, config, workers=args.workers)
    except Exception:
        logger.exception("Benchmark run failed")
        return 1

    print(format_report(results, config.iterations, config.precision))

    if args.out is not None:
        write_metrics_json(args.out, config.to_dict(), results)
        logger.info(f"Metrics: {args.out}")
    if args.plot is not None:
        from microhash.benchmark.plotting import plot_bucket_counts

        plot_bucket_counts(results, args.plot)
        logger.info(f"Figure: {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

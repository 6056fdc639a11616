"""Command line entry point for the percolation package."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import RunConfig, StatsConfig
from .runner import run_file, save_dataframe
from .stats import PercolationStats


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate site percolation on an n-by-n grid.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Open the sites listed in a file")
    run_parser.add_argument("input", type=Path, help="File holding n followed by row/column pairs")
    run_parser.add_argument("output", type=Path, nargs="?", help="Optional CSV or Excel path for the step trace")
    run_parser.add_argument(
        "--stop-on-percolation",
        action="store_true",
        help="Stop opening sites as soon as the system percolates",
    )
    run_parser.add_argument("--disable-tqdm", action="store_true", help="Disable progress bars")
    run_parser.add_argument("--quiet", action="store_true", help="Only print errors")

    stats_parser = subparsers.add_parser("stats", help="Estimate the percolation threshold")
    stats_parser.add_argument("n", type=int, help="Grid side length")
    stats_parser.add_argument("trials", type=int, help="Number of independent trials")
    stats_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: PERCOLATION_SEED or unseeded)",
    )
    stats_parser.add_argument("--output", type=Path, help="Optional CSV or Excel path for per-trial thresholds")
    stats_parser.add_argument("--disable-tqdm", action="store_true", help="Disable progress bars")
    stats_parser.add_argument("--quiet", action="store_true", help="Only print the summary")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    if args.command == "run":
        run_config = RunConfig(
            verbose=not args.quiet,
            use_tqdm=False if args.disable_tqdm else None,
            stop_on_percolation=args.stop_on_percolation,
        )
        result = run_file(args.input, args.output, run_config)
        return 0 if result is not None else 1

    try:
        stats_config = StatsConfig(
            seed=args.seed,
            use_tqdm=False if args.disable_tqdm else None,
            verbose=not args.quiet,
        )
        stats = PercolationStats(args.n, args.trials, stats_config)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 1
    print(stats.summary())
    if args.output is not None:
        try:
            save_dataframe(stats.to_frame(), args.output)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

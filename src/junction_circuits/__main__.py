"""Command line entry point for the Junction Circuits library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import CircuitPlannerConfig
from .runner import solve_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Join junction boxes into circuits, shortest connections first.")
    parser.add_argument("input", type=Path, help="Path to a file with one x,y,z junction box per line")
    parser.add_argument(
        "--connections",
        type=int,
        default=int(os.getenv("CIRCUITS_CONNECTIONS", "1000")),
        help="Number of shortest connections made before measuring circuits (default: 1000)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=3,
        help="How many of the largest circuits to multiply together (default: 3)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print the two answers")
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    try:
        config = CircuitPlannerConfig(
            connections=args.connections,
            top_count=args.top,
            use_tqdm=False if args.disable_tqdm else None,
            verbose=not args.quiet,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 2

    report = solve_file(args.input, config)
    if report is None:
        return 1

    print(f"problem 1: {report.top_product}")
    print(f"problem 2: {report.closing_product}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

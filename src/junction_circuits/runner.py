"""Convenience helpers for running Junction Circuits end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .parsing import PointFormatError, load_points
from .pipeline import CircuitPlanner, CircuitPlannerConfig, CircuitReport
from .queries import ConnectivityError


def solve_file(
    input_path: str | Path,
    config: Optional[CircuitPlannerConfig] = None,
) -> CircuitReport | None:
    """Load junction boxes from `input_path` and answer both circuit queries."""

    input_path = Path(input_path)

    try:
        points = load_points(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except PointFormatError as exc:
        print(f"ERROR: Malformed junction box data in '{input_path}': {exc}")
        return None

    planner = CircuitPlanner(config or CircuitPlannerConfig())
    try:
        return planner.run(points)
    except ConnectivityError as exc:
        print(f"ERROR: {exc}")
        return None

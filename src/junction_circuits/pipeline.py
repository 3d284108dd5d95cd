"""Core pipeline for the Junction Circuits library."""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence

from tqdm import tqdm

from .distances import DistanceIndex
from .queries import ClosingConnection, TopCircuits, closing_connection, top_circuits_product
from .structures import Edge, Point


@dataclass
class CircuitStats:
    """Summary metrics for a planner run."""

    total_points: int
    candidate_edges: int
    tied_edges: int
    top_connections_used: int
    closing_connections_used: int
    circuit_count: int
    runtime_seconds: float


@dataclass
class CircuitReport:
    """Result bundle returned by :class:CircuitPlanner."""

    top_product: int
    top_sizes: List[int]
    closing: ClosingConnection
    stats: CircuitStats

    @property
    def closing_product(self) -> int:
        return self.closing.product


@dataclass
class CircuitPlannerConfig:
    """Configuration parameters for :class:CircuitPlanner."""

    connections: int = 1000
    top_count: int = 3
    use_tqdm: bool | None = None
    verbose: bool = True
    progress_min_edges: int = field(default=10_000, repr=False)

    def __post_init__(self) -> None:
        if self.connections < 0:
            raise ValueError("connections must be non-negative")
        if self.top_count < 1:
            raise ValueError("top_count must be at least 1")


class CircuitPlanner:
    """Wire junction boxes together, shortest connections first."""

    def __init__(self, config: CircuitPlannerConfig | None = None) -> None:
        self.config = config or CircuitPlannerConfig()

    def run(self, points: Sequence[Point]) -> CircuitReport:
        """Build the distance index and answer both circuit queries."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- Junction Circuits Process Started ---")
            print(f"\n1. Ranking connections between {len(points)} junction boxes...")

        t0 = time.time()
        index = DistanceIndex.from_points(points)
        tied_edges = sum(len(group) for group in index.ties())
        if verbose:
            print(f"   Ranked {len(index)} candidate connections ({tied_edges} share a distance).")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print(f"2. Connecting the {self.config.connections} shortest pairs...")
        with self._progress(index.head(self.config.connections), "   Connecting") as edges:
            top = top_circuits_product(
                edges,
                len(points),
                connections=self.config.connections,
                top=self.config.top_count,
            )
        if verbose:
            print(f"   Largest circuits: {top.sizes} -> product {top.product}")
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print("3. Connecting until every junction box shares one circuit...")
        with self._progress(index, "   Closing") as edges:
            closing = closing_connection(points, edges)
        if verbose:
            left, right = points[closing.edge.left], points[closing.edge.right]
            print(
                f"   Closing connection #{closing.connections_used}: "
                f"{left.coordinates()} <-> {right.coordinates()} -> product {closing.product}"
            )
            print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = self._build_stats(points, index, tied_edges, top, closing, elapsed)
        if verbose:
            print(f"\n--- Junction Circuits Process Finished in {elapsed:.2f} seconds ---")

        return CircuitReport(top_product=top.product, top_sizes=top.sizes, closing=closing, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm
        return self.config.verbose

    @contextlib.contextmanager
    def _progress(self, edges: Sequence[Edge], description: str) -> Iterator[Iterable[Edge]]:
        if self._use_tqdm and len(edges) >= self.config.progress_min_edges:
            with tqdm(edges, desc=description, unit="edge") as bar:
                yield bar
        else:
            yield edges

    @staticmethod
    def _build_stats(
        points: Sequence[Point],
        index: DistanceIndex,
        tied_edges: int,
        top: TopCircuits,
        closing: ClosingConnection,
        elapsed: float,
    ) -> CircuitStats:
        return CircuitStats(
            total_points=len(points),
            candidate_edges=len(index),
            tied_edges=tied_edges,
            top_connections_used=top.connections_used,
            closing_connections_used=closing.connections_used,
            circuit_count=len(top.forest),
            runtime_seconds=elapsed,
        )


__all__ = [
    "CircuitPlanner",
    "CircuitPlannerConfig",
    "CircuitReport",
    "CircuitStats",
]

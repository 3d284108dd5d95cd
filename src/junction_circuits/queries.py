"""Queries answered by replaying edges through a :class:`ClusterForest`."""

from __future__ import annotations

import itertools
from typing import Iterable, List, NamedTuple, Sequence

from .structures import ClusterForest, Edge, Point


class ConnectivityError(RuntimeError):
    """Raised when the edges run out before every point shares one circuit."""


class TopCircuits(NamedTuple):
    product: int
    sizes: List[int]
    forest: ClusterForest
    connections_used: int


class ClosingConnection(NamedTuple):
    edge: Edge
    product: int
    connections_used: int


def top_circuits_product(
    edges: Iterable[Edge],
    size: int,
    connections: int = 1000,
    top: int = 3,
) -> TopCircuits:
    """Connect the ``connections`` shortest edges and multiply the largest circuit sizes.

    Circuits are ranked by size with a stable sort, so equal sizes keep slot
    order. Fewer than ``top`` circuits simply contribute fewer factors.
    """

    if connections < 0:
        raise ValueError("connections must be non-negative")
    if top < 1:
        raise ValueError("top must be at least 1")

    forest = ClusterForest(size)
    used = 0
    for edge in itertools.islice(edges, connections):
        forest.connect(edge.left, edge.right)
        used += 1

    ranked = sorted(forest.sizes(), reverse=True)
    largest = ranked[:top]
    product = 1
    for circuit_size in largest:
        product *= circuit_size
    return TopCircuits(product=product, sizes=largest, forest=forest, connections_used=used)


def closing_connection(points: Sequence[Point], edges: Iterable[Edge]) -> ClosingConnection:
    """Return the edge that first joins every point into a single circuit.

    The result's ``product`` multiplies the x coordinates of its two points.
    """

    forest = ClusterForest(len(points))
    for used, edge in enumerate(edges, start=1):
        outcome = forest.connect(edge.left, edge.right)
        if outcome.size == len(points):
            product = points[edge.left].x * points[edge.right].x
            return ClosingConnection(edge=edge, product=product, connections_used=used)

    raise ConnectivityError(
        f"edges exhausted before all {len(points)} points joined one circuit "
        f"({len(forest)} circuits, {forest.member_count} points connected)"
    )

"""Pairwise distance ordering for junction points."""

from __future__ import annotations

import itertools
from collections.abc import Sequence
from typing import Iterator, List, Tuple, overload

import numpy as np

from .structures import Edge, Point

# Largest coordinate whose three squared axis differences still fit in int64.
INT64_SAFE_COORDINATE = 1_000_000_000


def squared_distance(first: Point, second: Point) -> int:
    """Return the squared Euclidean distance between two points."""

    return sum(abs(a - b) ** 2 for a, b in zip(first.coordinates(), second.coordinates()))


class DistanceIndex(Sequence):
    """Every pair of points, ascending by squared distance.

    Pairs sharing a distance are all kept and appear in ``(left, right)``
    order. Coordinates up to ``INT64_SAFE_COORDINATE`` are computed with
    int64 arrays; larger ones switch to object arrays of Python ints, which
    are slower but exact.
    """

    def __init__(self, edges: Sequence[Edge] = ()) -> None:
        self._edges: Tuple[Edge, ...] = tuple(edges)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "DistanceIndex":
        count = len(points)
        if count < 2:
            return cls()

        values = [point.coordinates() for point in points]
        lowest = min(min(coordinates) for coordinates in values)
        highest = max(max(coordinates) for coordinates in values)
        if lowest < 0:
            raise ValueError("coordinates must be non-negative")
        dtype = np.int64 if highest <= INT64_SAFE_COORDINATE else object
        coords = np.array(values, dtype=dtype)

        # triu_indices is row-major, so a stable sort keeps tied pairs in pair order.
        left, right = np.triu_indices(count, k=1)
        deltas = np.abs(coords[left] - coords[right])
        distances = (deltas * deltas).sum(axis=1)
        order = np.argsort(distances, kind="stable")
        edges = [Edge(int(distances[k]), int(left[k]), int(right[k])) for k in order]
        return cls(edges)

    @overload
    def __getitem__(self, index: int) -> Edge: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Edge, ...]: ...

    def __getitem__(self, index):
        return self._edges[index]

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def head(self, count: int) -> Tuple[Edge, ...]:
        """Return the ``count`` shortest edges."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return self._edges[:count]

    def distances(self) -> np.ndarray:
        values = [edge.distance for edge in self._edges]
        fits = not values or values[-1] <= np.iinfo(np.int64).max
        return np.array(values, dtype=np.int64 if fits else object)

    def ties(self) -> List[Tuple[Edge, ...]]:
        """Groups of two or more edges sharing a distance value."""

        groups = (tuple(group) for _, group in itertools.groupby(self._edges, key=lambda edge: edge.distance))
        return [group for group in groups if len(group) > 1]

import numpy as np
import pytest

from junction_circuits.distances import DistanceIndex, squared_distance
from junction_circuits.structures import Edge, Point


def test_squared_distance_is_symmetric_and_non_negative():
    a = Point(5, 0, 9)
    b = Point(2, 4, 9)
    assert squared_distance(a, b) == 25
    assert squared_distance(b, a) == 25
    assert squared_distance(a, a) == 0


def test_index_orders_edges_by_distance():
    points = [Point(0, 0, 0), Point(0, 0, 1), Point(0, 0, 3), Point(10, 10, 10)]
    index = DistanceIndex.from_points(points)
    assert list(index) == [
        Edge(1, 0, 1),
        Edge(4, 1, 2),
        Edge(9, 0, 2),
        Edge(249, 2, 3),
        Edge(281, 1, 3),
        Edge(300, 0, 3),
    ]
    assert np.array_equal(index.distances(), np.array([1, 4, 9, 249, 281, 300]))


def test_index_keeps_every_tied_pair_in_pair_order():
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0)]
    index = DistanceIndex.from_points(points)
    assert list(index) == [Edge(1, 0, 1), Edge(1, 0, 2), Edge(2, 1, 2)]
    assert index.ties() == [(Edge(1, 0, 1), Edge(1, 0, 2))]


def test_index_covers_every_pair_once():
    points = [Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(1, 1, 0)]
    index = DistanceIndex.from_points(points)
    assert len(index) == 6
    assert sorted(edge.pair for edge in index) == [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
    assert [edge.pair for edge in index[:4]] == [(0, 1), (0, 2), (1, 3), (2, 3)]
    assert all(squared_distance(points[e.left], points[e.right]) == e.distance for e in index)


@pytest.mark.parametrize("points", [[], [Point(1, 2, 3)]])
def test_index_of_fewer_than_two_points_is_empty(points):
    index = DistanceIndex.from_points(points)
    assert len(index) == 0
    assert index.ties() == []


def test_index_rejects_negative_coordinates():
    with pytest.raises(ValueError):
        DistanceIndex.from_points([Point(-1, 0, 0), Point(0, 0, 0)])


def test_head_returns_shortest_edges():
    points = [Point(0, 0, 0), Point(0, 0, 1), Point(0, 0, 3)]
    index = DistanceIndex.from_points(points)
    assert index.head(2) == (Edge(1, 0, 1), Edge(4, 1, 2))
    assert index.head(10) == tuple(index)
    with pytest.raises(ValueError):
        index.head(-1)


def test_index_is_exact_beyond_int64_safe_coordinates():
    points = [Point(0, 0, 0), Point(10**10, 0, 0), Point(0, 10**10, 7), Point(1, 0, 0)]
    index = DistanceIndex.from_points(points)
    assert index[0] == Edge(1, 0, 3)
    assert index[-1] == Edge(2 * 10**20 + 49, 1, 2)
    assert all(squared_distance(points[e.left], points[e.right]) == e.distance for e in index)
    assert list(index.distances()) == [edge.distance for edge in index]

"""Junction Circuits library initialization."""

from .distances import DistanceIndex, squared_distance
from .parsing import PointFormatError, load_points, parse_points
from .pipeline import CircuitPlanner, CircuitPlannerConfig, CircuitReport, CircuitStats
from .queries import ConnectivityError, closing_connection, top_circuits_product
from .runner import solve_file
from .structures import ClusterForest, ConnectKind, Connection, Edge, Point

__all__ = [
    "CircuitPlanner",
    "CircuitPlannerConfig",
    "CircuitReport",
    "CircuitStats",
    "ClusterForest",
    "ConnectKind",
    "Connection",
    "ConnectivityError",
    "DistanceIndex",
    "Edge",
    "Point",
    "PointFormatError",
    "closing_connection",
    "load_points",
    "parse_points",
    "solve_file",
    "squared_distance",
    "top_circuits_product",
]

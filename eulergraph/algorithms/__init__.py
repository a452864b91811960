"""Graph algorithms: degree parity, Eulerian walks and all-pairs shortest paths."""

from eulergraph.algorithms.degree import find_odd_vertices, reset_usage
from eulergraph.algorithms.euler import (
    build_walk,
    eulerian_walk,
    select_start_vertex,
    splice_walk,
)
from eulergraph.algorithms.floyd_warshall import (
    INF,
    DistanceMatrix,
    DistancePathEntry,
    floyd_warshall,
    sat_add,
)

__all__ = [
    "find_odd_vertices",
    "reset_usage",
    "select_start_vertex",
    "build_walk",
    "splice_walk",
    "eulerian_walk",
    "floyd_warshall",
    "DistanceMatrix",
    "DistancePathEntry",
    "INF",
    "sat_add",
]

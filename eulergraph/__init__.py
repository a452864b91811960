"""eulergraph: Eulerian walks and all-pairs shortest paths on undirected multigraphs.

eulergraph provides the algorithmic core of route-inspection ("Chinese
postman") solvers: odd-degree vertex detection, Eulerian circuit/path
construction via Hierholzer's algorithm, and Floyd-Warshall with next-hop path
reconstruction.

Primary API:
    ArcGraph - Indexed undirected multigraph with per-arc usage counters
    eulerian_walk() - Feasibility check plus walk construction
    floyd_warshall() - All-pairs distance/next-hop matrix
    from_networkx() - Convert a NetworkX graph to ArcGraph
    to_networkx() - Convert ArcGraph back to NetworkX

Example:
    from eulergraph import ArcGraph, SolveError, eulerian_walk

    g = ArcGraph()
    for v in range(3):
        g.add_vertex(v)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)

    error = SolveError()
    walk = eulerian_walk(g, error)
    # walk == [0, 1, 1, 1, 2]
"""

from __future__ import annotations

from eulergraph import logging
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
)
from eulergraph.config import SOLVER_CONFIG, SolverConfig
from eulergraph.graph.arc_graph import Arc, ArcGraph
from eulergraph.graph.convert import NodeMap, from_networkx, to_networkx
from eulergraph.types import (
    DisconnectedGraphError,
    EmptyGraphError,
    ErrorKind,
    EulerianGraphError,
    SolveError,
    UnsolvableGraphError,
    Walk,
    WalkInvariantError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "Arc",
    "ArcGraph",
    # Eulerian walks
    "find_odd_vertices",
    "reset_usage",
    "select_start_vertex",
    "build_walk",
    "splice_walk",
    "eulerian_walk",
    "Walk",
    # Shortest paths
    "floyd_warshall",
    "DistanceMatrix",
    "DistancePathEntry",
    "INF",
    # Errors
    "ErrorKind",
    "SolveError",
    "EulerianGraphError",
    "UnsolvableGraphError",
    "EmptyGraphError",
    "DisconnectedGraphError",
    "WalkInvariantError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]

"""All-pairs shortest paths with next-hop path reconstruction.

Floyd-Warshall over `ArcGraph` slots. Distances live in an ``N x N`` float
array where ``inf`` marks "no path"; next hops live in an integer array where
``-1`` marks "none". Both arrays are frozen (non-writeable) once returned.

The relaxation loop is vectorised per intermediate vertex ``k``. Row and
column ``k`` cannot change during iteration ``k`` (``dist[k][k]`` is 0 or
``inf``), so updating all ``(i, j)`` pairs at once matches the scalar triple
loop.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from eulergraph.graph.arc_graph import ArcGraph
from eulergraph.logging import get_logger
from eulergraph.types import VertexID

logger = get_logger(__name__)

#: Saturating "no path" distance.
INF = math.inf

#: Next-hop value meaning "no successor".
NO_HOP = -1


def sat_add(a: float, b: float) -> float:
    """Add two distances, returning ``INF`` if either operand is infinite."""
    if a == INF or b == INF:
        return INF
    return a + b


@dataclass(frozen=True)
class DistancePathEntry:
    """Shortest distance and first hop from one vertex to another.

    Attributes:
        distance: Shortest-path length, ``INF`` when unreachable.
        next_hop: Vertex following the source on a shortest path, or None.
    """

    distance: float
    next_hop: Optional[VertexID]

    @property
    def reachable(self) -> bool:
        return self.next_hop is not None


class DistanceMatrix:
    """Read-only result of `floyd_warshall`.

    Attributes:
        dist: ``(N, N)`` float64 array of shortest distances.
        next: ``(N, N)`` int64 array of next hops (``NO_HOP`` for none).
    """

    def __init__(self, dist: np.ndarray, next_hops: np.ndarray) -> None:
        dist.setflags(write=False)
        next_hops.setflags(write=False)
        self.dist = dist
        self.next = next_hops

    @property
    def size(self) -> int:
        return self.dist.shape[0]

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, key) -> DistancePathEntry:
        i, j = key
        return self.entry(i, j)

    def __repr__(self) -> str:
        return f"DistanceMatrix(size={self.size})"

    def distance(self, i: VertexID, j: VertexID) -> float:
        return float(self.dist[i, j])

    def next_hop(self, i: VertexID, j: VertexID) -> Optional[VertexID]:
        hop = int(self.next[i, j])
        return None if hop == NO_HOP else hop

    def entry(self, i: VertexID, j: VertexID) -> DistancePathEntry:
        return DistancePathEntry(self.distance(i, j), self.next_hop(i, j))

    def distance_via(self, i: VertexID, k: VertexID, j: VertexID) -> float:
        """Length of the shortest ``i -> j`` route forced through ``k``."""
        return sat_add(self.distance(i, k), self.distance(k, j))

    def path(self, i: VertexID, j: VertexID) -> List[VertexID]:
        """Reconstruct a shortest path by following next hops from ``i`` to ``j``.

        Args:
            i: Source vertex.
            j: Destination vertex.

        Returns:
            List[VertexID]: ``[i, ..., j]``, or an empty list if ``j`` is
            unreachable from ``i``.
        """
        if self.next[i, j] == NO_HOP:
            return []
        path = [i]
        current = i
        # A simple path visits at most size vertices
        for _ in range(self.size):
            if current == j:
                return path
            current = int(self.next[current, j])
            path.append(current)
        raise RuntimeError(f"Next-hop chain from {i} to {j} does not terminate.")

    def to_dict(self) -> Dict[VertexID, Dict[VertexID, float]]:
        """Return finite distances as ``{i: {j: distance}}``."""
        out: Dict[VertexID, Dict[VertexID, float]] = {}
        rows, cols = np.nonzero(np.isfinite(self.dist))
        for i, j in zip(rows.tolist(), cols.tolist()):
            out.setdefault(i, {})[j] = float(self.dist[i, j])
        return out


def floyd_warshall(graph: ArcGraph) -> DistanceMatrix:
    """Compute shortest distances and next hops between every pair of slots.

    Parallel edges contribute their minimum weight. Every occupied vertex has
    distance 0 to itself; unoccupied slots stay unreachable from and to
    everything. O(V^3) time, O(V^2) space with ``V = graph.max_vertices``.

    Args:
        graph: Graph to analyse. Not modified.

    Returns:
        DistanceMatrix: Frozen distance and next-hop arrays.

    Raises:
        ValueError: If an edge has a negative weight.
    """
    n = graph.max_vertices
    dist = np.full((n, n), INF, dtype=np.float64)
    next_hops = np.full((n, n), NO_HOP, dtype=np.int64)

    for i in graph.vertices():
        for arc in graph.arcs(i):
            if arc.weight < 0:
                raise ValueError(
                    f"Negative weight {arc.weight} on edge {i}-{arc.target}."
                )
            if arc.weight < dist[i, arc.target]:
                dist[i, arc.target] = arc.weight
                next_hops[i, arc.target] = arc.target
        dist[i, i] = 0.0
        next_hops[i, i] = i

    for k in range(n):
        # inf + x stays inf and never compares below dist, so only pairs with
        # both legs finite can be relaxed
        via = dist[:, k, np.newaxis] + dist[np.newaxis, k, :]
        better = via < dist
        if not better.any():
            continue
        dist[better] = via[better]
        next_hops[better] = np.broadcast_to(next_hops[:, k, np.newaxis], (n, n))[
            better
        ]

    logger.debug("Computed all-pairs shortest paths for %d vertex slots", n)
    return DistanceMatrix(dist, next_hops)

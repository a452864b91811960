"""Degree parity queries and arc usage bookkeeping."""

from __future__ import annotations

from typing import List

from eulergraph.graph.arc_graph import ArcGraph
from eulergraph.types import VertexID


def find_odd_vertices(graph: ArcGraph) -> List[VertexID]:
    """Return occupied vertices whose arc count is odd, in ascending order.

    A self-loop contributes two arcs and therefore never changes parity. The
    result has even length for any consistent undirected graph (handshake
    lemma). Pure query, O(V + E).

    Args:
        graph: Graph to scan.

    Returns:
        List[VertexID]: Odd-degree vertices, lowest index first.
    """
    return [v for v in graph.vertices() if len(graph.arcs(v)) & 1]


def reset_usage(graph: ArcGraph) -> None:
    """Zero the usage counter of every arc in the graph."""
    for v in graph.vertices():
        for arc in graph.arcs(v):
            arc.used = 0

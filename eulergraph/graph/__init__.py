"""Graph primitives and helpers.

This package provides the indexed undirected multigraph `ArcGraph` and the
NetworkX conversion helpers in `convert`.
"""

from eulergraph.graph.arc_graph import Arc, ArcGraph

__all__ = ["Arc", "ArcGraph"]

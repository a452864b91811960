"""NetworkX graph conversion utilities.

Convert between undirected NetworkX graphs and `ArcGraph`, which addresses
vertices by integer slot.

Example:
    >>> import networkx as nx
    >>> from eulergraph.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=3)
    >>> G.add_edge("B", "C", weight=4)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> graph.number_of_edges()
    2
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from eulergraph.graph.arc_graph import ArcGraph
from eulergraph.types import Weight

NxUndirectedGraph = Union[nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex slots.

    Attributes:
        to_index: Maps original node names to slot indices
        to_name: Maps slot indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def names(self, indices: List[int]) -> List[Hashable]:
        """Translate a list of slot indices back to node names."""
        return [self.to_name.get(i, i) for i in indices]


def from_networkx(
    G: NxUndirectedGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Weight = 1,
) -> Tuple[ArcGraph, NodeMap]:
    """Convert an undirected NetworkX graph to an `ArcGraph`.

    Node names are sorted by their string form and assigned consecutive slots,
    so conversion is deterministic. Each NetworkX edge (each key, for a
    MultiGraph) becomes one undirected `ArcGraph` edge.

    Args:
        G: ``nx.Graph`` or ``nx.MultiGraph``.
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not an undirected NetworkX graph.
    """
    if not isinstance(G, nx.Graph) or G.is_directed():
        raise TypeError(
            f"Expected undirected NetworkX graph (Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    graph = ArcGraph(len(node_names))
    for idx in range(len(node_names)):
        graph.add_vertex(idx)

    for u, v, data in G.edges(data=True):
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            data.get(weight_attr, default_weight),
        )

    return graph, node_map


def to_networkx(
    graph: ArcGraph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiGraph:
    """Convert an `ArcGraph` back to a NetworkX MultiGraph.

    Unoccupied slots are omitted. Each undirected edge appears once.

    Args:
        graph: Graph to convert.
        node_map: Optional NodeMap restoring original node names. If None,
            nodes are labeled with their slot index.
        weight_attr: Edge attribute name for the weight (default: "weight").

    Returns:
        nx.MultiGraph with one edge per undirected edge of ``graph``.
    """

    def name(idx: int) -> Hashable:
        return node_map.to_name.get(idx, idx) if node_map is not None else idx

    G = nx.MultiGraph()
    for v in graph.vertices():
        G.add_node(name(v))

    for v in graph.vertices():
        loops = 0
        for arc in graph.arcs(v):
            if arc.target > v:
                G.add_edge(name(v), name(arc.target), **{weight_attr: arc.weight})
            elif arc.target == v:
                # Both arcs of a self-loop live in this list; emit every second one
                loops += 1
                if loops % 2 == 0:
                    G.add_edge(name(v), name(v), **{weight_attr: arc.weight})

    return G

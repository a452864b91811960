"""Undirected weighted multigraph over indexed vertex slots.

`ArcGraph` stores vertices in slots ``0..max_vertices-1``; a slot may be
unoccupied. Each occupied vertex owns a list of `Arc` records. An undirected
edge ``u - v`` is stored as two arcs, ``u -> v`` in ``u``'s list and
``v -> u`` in ``v``'s list; a self-loop stores both arcs in the same list.
Every arc carries a mutable usage counter used by walk construction.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Iterator, List, Optional

from eulergraph.types import VertexID, Weight


@dataclass
class Arc:
    """One directed half of an undirected edge.

    Attributes:
        target: Vertex the arc leads to.
        weight: Edge weight, shared by both arcs of the edge.
        used: Number of times the arc was traversed by the current walk.
    """

    target: VertexID
    weight: Weight
    used: int = 0


class ArcGraph:
    """An undirected multigraph with strict vertex and edge management.

    This class enforces:
      - No automatic creation of missing vertices when adding an edge.
      - No duplicate vertices (raises ValueError on an occupied slot).
      - Removing non-existent vertices or edges raises ValueError.
      - Both arcs of an edge are added and removed together.
    """

    def __init__(self, max_vertices: int = 0) -> None:
        """Initialize an ArcGraph with ``max_vertices`` empty slots.

        Args:
            max_vertices: Initial number of vertex slots, all unoccupied.

        Raises:
            ValueError: If ``max_vertices`` is negative.
        """
        if max_vertices < 0:
            raise ValueError(f"max_vertices must be non-negative, got {max_vertices}.")
        # None marks an unoccupied slot
        self._slots: List[Optional[List[Arc]]] = [None] * max_vertices

    @property
    def max_vertices(self) -> int:
        """Number of vertex slots, occupied or not."""
        return len(self._slots)

    def __len__(self) -> int:
        return sum(1 for arcs in self._slots if arcs is not None)

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and self.vertex_exists(v)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"edges={self.number_of_edges()}, slots={self.max_vertices})"
        )

    #
    # Vertex management
    #
    def vertex_exists(self, v: VertexID) -> bool:
        """Return True if slot ``v`` holds a vertex."""
        return 0 <= v < len(self._slots) and self._slots[v] is not None

    def vertices(self) -> Iterator[VertexID]:
        """Iterate occupied vertex ids in ascending order."""
        return (v for v, arcs in enumerate(self._slots) if arcs is not None)

    def add_vertex(self, v: Optional[VertexID] = None) -> VertexID:
        """Occupy a vertex slot.

        Slots beyond ``max_vertices`` are created on demand.

        Args:
            v: Slot to occupy. If None, the first free slot is used.

        Returns:
            VertexID: The occupied slot.

        Raises:
            ValueError: If ``v`` is negative or already occupied.
        """
        if v is None:
            v = next(
                (i for i, arcs in enumerate(self._slots) if arcs is None),
                len(self._slots),
            )
        if v < 0:
            raise ValueError(f"Vertex id must be non-negative, got {v}.")
        if self.vertex_exists(v):
            raise ValueError(f"Vertex {v} already exists in this graph.")
        if v >= len(self._slots):
            self._slots.extend([None] * (v + 1 - len(self._slots)))
        self._slots[v] = []
        return v

    def remove_vertex(self, v: VertexID) -> None:
        """Free a vertex slot and drop every edge incident to it.

        Args:
            v: The vertex to remove.

        Raises:
            ValueError: If the vertex does not exist.
        """
        if not self.vertex_exists(v):
            raise ValueError(f"Vertex {v} does not exist.")
        self._slots[v] = None
        for arcs in self._slots:
            if arcs:
                arcs[:] = [arc for arc in arcs if arc.target != v]

    #
    # Edge management
    #
    def add_edge(self, u: VertexID, v: VertexID, weight: Weight = 1) -> None:
        """Add an undirected edge between ``u`` and ``v``.

        Parallel edges and self-loops are allowed.

        Args:
            u: First endpoint. Must exist in the graph.
            v: Second endpoint. Must exist in the graph.
            weight: Edge weight stored on both arcs.

        Raises:
            ValueError: If either endpoint does not exist.
        """
        if not self.vertex_exists(u):
            raise ValueError(f"Source vertex {u} does not exist.")
        if not self.vertex_exists(v):
            raise ValueError(f"Target vertex {v} does not exist.")
        self._slots[u].append(Arc(v, weight))
        self._slots[v].append(Arc(u, weight))

    def remove_edge(
        self, u: VertexID, v: VertexID, weight: Optional[Weight] = None
    ) -> None:
        """Remove one undirected edge between ``u`` and ``v``.

        Args:
            u: First endpoint.
            v: Second endpoint.
            weight: If provided, remove an edge with this weight. Otherwise,
                remove the first edge found between the endpoints.

        Raises:
            ValueError: If an endpoint does not exist or no matching edge is found.
        """
        if not self.vertex_exists(u):
            raise ValueError(f"Source vertex {u} does not exist.")
        if not self.vertex_exists(v):
            raise ValueError(f"Target vertex {v} does not exist.")

        forward = self._find_arc(u, v, weight)
        if forward is None:
            raise ValueError(f"No edge between {u} and {v} to remove.")
        removed = self._slots[u].pop(forward)

        # For a self-loop the twin arc sits in the same list
        backward = self._find_arc(v, u, removed.weight)
        if backward is None:
            raise ValueError(f"Edge {u}-{v} is missing its reverse arc.")
        del self._slots[v][backward]

    def _find_arc(
        self, u: VertexID, v: VertexID, weight: Optional[Weight]
    ) -> Optional[int]:
        for idx, arc in enumerate(self._slots[u]):
            if arc.target == v and (weight is None or arc.weight == weight):
                return idx
        return None

    def has_edge(self, u: VertexID, v: VertexID) -> bool:
        """Return True if at least one edge joins ``u`` and ``v``."""
        if not (self.vertex_exists(u) and self.vertex_exists(v)):
            return False
        return any(arc.target == v for arc in self._slots[u])

    def arcs(self, v: VertexID) -> List[Arc]:
        """Return the arc list of vertex ``v`` in insertion order.

        Args:
            v: An existing vertex.

        Returns:
            List[Arc]: The live arc records; callers may update ``used``.

        Raises:
            KeyError: If the vertex does not exist.
        """
        if not self.vertex_exists(v):
            raise KeyError(f"Vertex {v} is not in the graph.")
        return self._slots[v]

    def degree(self, v: VertexID) -> int:
        """Number of arcs leaving ``v`` (a self-loop counts twice)."""
        return len(self.arcs(v))

    def number_of_edges(self) -> int:
        """Number of undirected edges."""
        return sum(len(arcs) for arcs in self._slots if arcs is not None) // 2

    def copy(self) -> ArcGraph:
        """Return a deep copy, usage counters included."""
        return deepcopy(self)

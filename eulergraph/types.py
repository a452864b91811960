"""Shared types, result containers and error taxonomy.

A ``Walk`` stores its items in the alternating layout
``[vertex, weight, vertex, weight, ..., vertex]``: index 0 is the start vertex
and every following ``(weight, vertex)`` pair records one traversed arc.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Iterator, List, Optional, Union

#: Numeric edge weight (distance, length, cost, ...).
Weight = Union[int, float]

#: Vertex identifier: index of an occupied slot in an ``ArcGraph``.
VertexID = int


class ErrorKind(IntEnum):
    """Recoverable failure categories reported by the Eulerian solver."""

    #: Odd-degree vertex count is 1 or greater than 2.
    UNSOLVABLE_GRAPH = 1
    #: No occupied vertex to start from.
    EMPTY_GRAPH = 2
    #: Edges span more than one connected component (opt-in check).
    DISCONNECTED_GRAPH = 3


@dataclass
class SolveError:
    """Out-parameter filled by ``eulerian_walk`` when no walk can be built.

    Attributes:
        kind: Failure category, None while no failure has been recorded.
        location: Qualified name of the function that detected the failure.
        message: Human-readable description.
    """

    kind: Optional[ErrorKind] = None
    location: str = ""
    message: str = ""

    def __bool__(self) -> bool:
        return self.kind is not None

    def fill(self, kind: ErrorKind, location: str, message: str) -> None:
        self.kind = kind
        self.location = location
        self.message = message

    def __str__(self) -> str:
        if self.kind is None:
            return "no error"
        return f"{self.kind.name} at {self.location}: {self.message}"


class EulerianGraphError(ValueError):
    """Base class for graphs that admit no Eulerian walk."""

    kind: ErrorKind


class UnsolvableGraphError(EulerianGraphError):
    """Raised when the odd-degree vertex count is 1 or exceeds 2."""

    kind = ErrorKind.UNSOLVABLE_GRAPH


class EmptyGraphError(EulerianGraphError):
    """Raised when the graph has no occupied vertex."""

    kind = ErrorKind.EMPTY_GRAPH


class DisconnectedGraphError(EulerianGraphError):
    """Raised when edges are spread over several connected components."""

    kind = ErrorKind.DISCONNECTED_GRAPH


class WalkInvariantError(RuntimeError):
    """Internal consistency failure while building or splicing a walk."""


@dataclass(eq=False)
class Walk:
    """An Eulerian walk in alternating ``vertex, weight, vertex`` layout.

    Attributes:
        items: Raw alternating sequence. Empty when no walk exists.
    """

    items: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, idx: int) -> Any:
        return self.items[idx]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Walk):
            return self.items == other.items
        if isinstance(other, (list, tuple)):
            return self.items == list(other)
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def vertices(self) -> List[VertexID]:
        """Visited vertices in walk order (even positions)."""
        return self.items[0::2]

    @property
    def weights(self) -> List[Weight]:
        """Weights of traversed arcs in walk order (odd positions)."""
        return self.items[1::2]

    @property
    def edge_count(self) -> int:
        """Number of arcs traversed; ``len(walk) == 2 * edge_count + 1``."""
        return len(self.items) // 2

    @property
    def total_weight(self) -> Weight:
        return sum(self.weights)

    @property
    def start(self) -> Optional[VertexID]:
        return self.items[0] if self.items else None

    @property
    def end(self) -> Optional[VertexID]:
        return self.items[-1] if self.items else None

    @property
    def is_closed(self) -> bool:
        """True when the walk is a circuit (starts and ends at one vertex)."""
        return bool(self.items) and self.items[0] == self.items[-1]

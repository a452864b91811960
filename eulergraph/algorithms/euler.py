"""Eulerian walk construction.

Implements Hierholzer's algorithm over `ArcGraph`: a greedy walk consumes
unused arcs until it gets stuck, vertices left behind with unused arcs are
deferred, and each deferred vertex later yields a closed sub-walk that is
spliced into its parent walk at the vertex's last occurrence.

Sub-walks are resolved with an explicit stack of frames instead of recursion.
A frame's own deferred vertices are completed before the frame is spliced
into its parent, which reproduces the recursive formulation exactly.

Notes:
    Each arc's ``used`` counter is incremented together with one unused
    reverse arc in the target's list, matched by ``(target, weight)``. With
    parallel edges of equal weight the first unused match in list order is
    taken; any match yields a correct walk.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from eulergraph.algorithms.degree import find_odd_vertices, reset_usage
from eulergraph.config import SOLVER_CONFIG, SolverConfig
from eulergraph.graph.arc_graph import Arc, ArcGraph
from eulergraph.logging import get_logger
from eulergraph.types import (
    DisconnectedGraphError,
    EmptyGraphError,
    EulerianGraphError,
    SolveError,
    UnsolvableGraphError,
    VertexID,
    Walk,
    WalkInvariantError,
)

logger = get_logger(__name__)


def select_start_vertex(
    graph: ArcGraph,
    odd: Optional[Sequence[VertexID]] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> VertexID:
    """Check Eulerian feasibility and pick the walk's start vertex.

    Args:
        graph: Graph to inspect. It is not modified.
        odd: Precomputed result of ``find_odd_vertices(graph)``.
        config: Solver configuration, defaults to ``SOLVER_CONFIG``.

    Returns:
        VertexID: The first odd vertex when there are two (open path),
        otherwise the lowest occupied vertex with arcs (circuit), or the
        lowest occupied vertex if the graph has no edges.

    Raises:
        UnsolvableGraphError: If the odd-degree vertex count is 1 or above 2.
        EmptyGraphError: If the graph has no occupied vertex.
        DisconnectedGraphError: If ``config.require_connected`` is set and the
            edges span several components.
    """
    config = SOLVER_CONFIG.resolve(config)
    if odd is None:
        odd = find_odd_vertices(graph)

    if len(odd) == 1 or len(odd) > 2:
        raise UnsolvableGraphError(
            f"Graph has {len(odd)} odd-degree vertices; an Eulerian walk needs 0 or 2."
        )

    if odd:
        start = odd[0]
    else:
        # Prefer a vertex with arcs so an isolated low slot does not yield an
        # empty walk over a graph that has edges
        start = next((v for v in graph.vertices() if graph.arcs(v)), None)
        if start is None:
            start = next(graph.vertices(), None)
        if start is None:
            raise EmptyGraphError("Graph has no vertex to start from.")

    if config.require_connected and not _edges_connected(graph, start):
        raise DisconnectedGraphError(
            "Graph edges span more than one connected component."
        )
    return start


def _edges_connected(graph: ArcGraph, start: VertexID) -> bool:
    """Return True if every vertex with arcs is reachable from ``start``."""
    if not graph.arcs(start):
        # start is only arc-less when the graph has no edges at all
        return True

    visited = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for arc in graph.arcs(node):
            if arc.target not in visited:
                visited.add(arc.target)
                queue.append(arc.target)
    return all(v in visited for v in graph.vertices() if graph.arcs(v))


class _ArcCursor:
    """Per-vertex position of the first arc that may still be unused.

    Usage counters only grow during a build, so arcs before the cursor stay
    used and never need rescanning.
    """

    def __init__(self, graph: ArcGraph) -> None:
        self._graph = graph
        self._pos: Dict[VertexID, int] = {}

    def first_unused(self, v: VertexID) -> Optional[Arc]:
        arcs = self._graph.arcs(v)
        i = self._pos.get(v, 0)
        while i < len(arcs) and arcs[i].used:
            i += 1
        self._pos[v] = i
        return arcs[i] if i < len(arcs) else None

    def reverse_of(self, source: VertexID, arc: Arc) -> Optional[Arc]:
        """Find an unused arc in ``arc.target``'s list pointing back to ``source``."""
        arcs = self._graph.arcs(arc.target)
        for i in range(self._pos.get(arc.target, 0), len(arcs)):
            cand = arcs[i]
            if not cand.used and cand.target == source and cand.weight == arc.weight:
                return cand
        return None


def _greedy_walk(
    cursor: _ArcCursor, start: VertexID
) -> Tuple[List, List[VertexID]]:
    """Walk from ``start`` along unused arcs until stuck.

    Returns:
        Tuple of (walk items, deferred vertices). A vertex is deferred each
        time the walk leaves it while it still has unused arcs.
    """
    walk: List = [start]
    pending: List[VertexID] = []
    current = start
    while True:
        arc = cursor.first_unused(current)
        if arc is None:
            return walk, pending

        walk.append(arc.weight)
        walk.append(arc.target)

        # Mark the outgoing arc first so a self-loop's lookup finds its twin
        arc.used += 1
        reverse = cursor.reverse_of(current, arc)
        if reverse is None:
            raise WalkInvariantError(
                f"Arc {current}->{arc.target} (weight {arc.weight}) has no unused "
                f"reverse arc."
            )
        reverse.used += 1

        if cursor.first_unused(current) is not None:
            pending.append(current)
        current = arc.target


def splice_walk(
    main: List, sub: Sequence, *, config: Optional[SolverConfig] = None
) -> bool:
    """Insert the closed sub-walk ``sub`` into ``main`` in place.

    The anchor ``sub[0]`` is searched at vertex positions (even indices) of
    ``main`` from the end backwards. The anchor occurrence is replaced by the
    whole of ``sub``, which starts and ends at the anchor, so ``main`` stays a
    valid alternating walk.

    Args:
        main: Walk items to extend.
        sub: Closed sub-walk items. Empty or single-vertex sub-walks are ignored.
        config: Solver configuration, defaults to ``SOLVER_CONFIG``.

    Returns:
        bool: True if ``sub`` was inserted.

    Raises:
        WalkInvariantError: If the anchor is missing and ``config.strict_splice``
            is set.
    """
    if not sub or len(sub) <= 1:
        return False

    anchor = sub[0]
    last_vertex = len(main) - 1 if len(main) % 2 else len(main) - 2
    for idx in range(last_vertex, -1, -2):
        if main[idx] == anchor:
            main[idx : idx + 1] = sub
            return True

    config = SOLVER_CONFIG.resolve(config)
    if config.strict_splice:
        raise WalkInvariantError(f"Sub-walk anchor {anchor} not found in walk.")
    logger.warning(
        "Dropping sub-walk of %d arcs: anchor %s not found in walk",
        len(sub) // 2,
        anchor,
    )
    return False


def build_walk(
    graph: ArcGraph, start: VertexID, *, config: Optional[SolverConfig] = None
) -> Walk:
    """Build an Eulerian walk from ``start``, consuming every reachable arc.

    Precondition: every arc's ``used`` counter is 0. Call ``reset_usage``
    first when the graph was walked before (``eulerian_walk`` does this).

    On return each traversed edge has ``used == 1`` on both of its arcs.

    Args:
        graph: Graph to walk. Arc usage counters are updated in place.
        start: Start vertex; must be one of the two odd-degree vertices when
            the graph has any.
        config: Solver configuration, defaults to ``SOLVER_CONFIG``.

    Returns:
        Walk: ``[start, w1, v1, w2, v2, ...]``.

    Raises:
        KeyError: If ``start`` is not a vertex of the graph.
        WalkInvariantError: If the graph's arcs are inconsistent.
    """
    cursor = _ArcCursor(graph)
    root = _greedy_walk(cursor, start)
    frames = [root]
    splices = 0
    while frames:
        walk, pending = frames[-1]
        if pending:
            frames.append(_greedy_walk(cursor, pending.pop()))
            continue
        frames.pop()
        if frames and splice_walk(frames[-1][0], walk, config=config):
            splices += 1

    result = Walk(root[0])
    logger.debug(
        "Built walk from %s: %d arcs, %d sub-walks spliced",
        start,
        result.edge_count,
        splices,
    )
    return result


def eulerian_walk(
    graph: ArcGraph,
    error: Optional[SolveError] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> Walk:
    """Compute an Eulerian circuit or path of ``graph``.

    Checks feasibility, resets arc usage and builds the walk. Graphs without
    a walk do not raise: the optional ``error`` out-parameter is filled and an
    empty Walk is returned.

    Args:
        graph: Graph to solve. Arc usage counters are reset and updated.
        error: Optional out-parameter receiving the failure description.
        config: Solver configuration, defaults to ``SOLVER_CONFIG``.

    Returns:
        Walk: The walk, or an empty Walk when none exists.

    Raises:
        WalkInvariantError: On internal consistency failures.
    """
    odd = find_odd_vertices(graph)
    try:
        start = select_start_vertex(graph, odd, config=config)
    except EulerianGraphError as exc:
        logger.warning("No Eulerian walk: %s", exc)
        if error is not None:
            error.fill(
                exc.kind,
                f"{__name__}.{select_start_vertex.__qualname__}",
                str(exc),
            )
        return Walk()

    logger.debug(
        "Solving Eulerian %s from vertex %s (%d odd vertices)",
        "path" if odd else "circuit",
        start,
        len(odd),
    )
    reset_usage(graph)
    return build_walk(graph, start, config=config)

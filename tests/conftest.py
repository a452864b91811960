"""Shared sample graphs for the test suite.

Edge insertion order is part of each fixture: it fixes arc order and therefore
the exact walk produced.
"""

from __future__ import annotations

import pytest

from eulergraph.graph.arc_graph import ArcGraph


def make_graph(n, edges) -> ArcGraph:
    g = ArcGraph(n)
    for v in range(n):
        g.add_vertex(v)
    for edge in edges:
        g.add_edge(*edge)
    return g


@pytest.fixture
def graph_factory():
    """Build an ArcGraph with vertices ``0..n-1`` and ``(u, v, weight)`` edges."""
    return make_graph


@pytest.fixture
def empty_graph():
    # Five slots, none occupied
    return ArcGraph(5)


@pytest.fixture
def cycle4():
    #     [1]
    #  0───────1
    #  │       │
    #  │[1]    │[1]
    #  │       │
    #  3───────2
    #     [1]
    return make_graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 1)])


@pytest.fixture
def star():
    #      0
    #      │
    #  2───1───3
    return make_graph(4, [(1, 0, 1), (1, 2, 1), (1, 3, 1)])


@pytest.fixture
def path3():
    #    [1]   [1]
    #  0─────1─────2
    return make_graph(3, [(0, 1, 1), (1, 2, 1)])


@pytest.fixture
def bowtie():
    # Two triangles sharing vertex 1; the greedy walk from 0 closes the left
    # triangle first and the right one has to be spliced in.
    #
    #   0           3
    #   │ ╲[1]  [4]╱ │
    #   │  ╲      ╱  │
    # [3] │   1    │ [5]
    #   │  ╱      ╲  │
    #   │ ╱[2]  [6]╲ │
    #   2           4
    return make_graph(
        5,
        [(0, 1, 1), (1, 2, 2), (2, 0, 3), (1, 3, 4), (3, 4, 5), (4, 1, 6)],
    )


@pytest.fixture
def loops_and_parallels():
    # Self-loop on 0 plus two parallel edges 0-1
    #
    #  ┌─┐[7]
    #  └─0══════1
    #     [2],[3]
    return make_graph(2, [(0, 0, 7), (0, 1, 2), (0, 1, 3)])


@pytest.fixture
def sparse_slots():
    # Slots 0 and 3 are unoccupied
    #
    #     [2]     [5]
    #  1──────2──────4
    g = ArcGraph(5)
    for v in (1, 2, 4):
        g.add_vertex(v)
    g.add_edge(1, 2, 2)
    g.add_edge(2, 4, 5)
    return g


@pytest.fixture
def weighted_square():
    # Diagonal 0-2 is longer than going around through 1
    #
    #     [1]
    #  0───────1
    #  │ ╲[5]  │
    #  │[4] ╲  │[2]
    #  │      ╲│
    #  3───────2
    #     [1]
    return make_graph(4, [(0, 1, 1), (1, 2, 2), (2, 3, 1), (3, 0, 4), (0, 2, 5)])

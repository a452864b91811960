from eulergraph.algorithms.degree import find_odd_vertices, reset_usage
from eulergraph.graph.arc_graph import ArcGraph


class TestFindOddVertices:
    def test_cycle_has_none(self, cycle4):
        assert find_odd_vertices(cycle4) == []

    def test_star_all_odd(self, star):
        # Center has degree 3, each leaf degree 1
        assert find_odd_vertices(star) == [0, 1, 2, 3]

    def test_path_endpoints(self, path3):
        assert find_odd_vertices(path3) == [0, 2]

    def test_self_loop_keeps_parity(self, loops_and_parallels):
        assert find_odd_vertices(loops_and_parallels) == []

    def test_unoccupied_slots_skipped(self, sparse_slots):
        assert find_odd_vertices(sparse_slots) == [1, 4]

    def test_empty_graph(self, empty_graph):
        assert find_odd_vertices(empty_graph) == []
        assert find_odd_vertices(ArcGraph()) == []

    def test_isolated_vertex_is_even(self):
        g = ArcGraph(1)
        g.add_vertex(0)
        assert find_odd_vertices(g) == []

    def test_repeatable(self, star):
        assert find_odd_vertices(star) == find_odd_vertices(star)

    def test_does_not_touch_usage(self, path3):
        path3.arcs(1)[0].used = 3
        find_odd_vertices(path3)
        assert path3.arcs(1)[0].used == 3


class TestResetUsage:
    def test_all_counters_zeroed(self, bowtie):
        for v in bowtie.vertices():
            for i, arc in enumerate(bowtie.arcs(v)):
                arc.used = i + 1

        reset_usage(bowtie)

        assert all(arc.used == 0 for v in bowtie.vertices() for arc in bowtie.arcs(v))

    def test_sparse_and_empty_graphs(self, sparse_slots, empty_graph):
        sparse_slots.arcs(2)[1].used = 1
        reset_usage(sparse_slots)
        reset_usage(empty_graph)
        assert sparse_slots.arcs(2)[1].used == 0

    def test_structure_unchanged(self, loops_and_parallels):
        before = [
            [(a.target, a.weight) for a in loops_and_parallels.arcs(v)]
            for v in loops_and_parallels.vertices()
        ]
        reset_usage(loops_and_parallels)
        after = [
            [(a.target, a.weight) for a in loops_and_parallels.arcs(v)]
            for v in loops_and_parallels.vertices()
        ]
        assert before == after

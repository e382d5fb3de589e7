"""Edge removal: splicing, isolation and stale handles."""

import pytest

from geomgraph import GeometricGraph, StaleHandleError, build_square_graph, validate
from geomgraph.diagnostics import next_cycle_lengths, wheel_degrees


def _edge_between(graph, a, b):
    for edge in graph.iter_edges():
        if {edge.origin, edge.target} == {a, b}:
            return edge
    raise AssertionError("no such edge")


class TestRemoveFromSquare:
    @pytest.fixture
    def removed(self):
        graph, ids = build_square_graph()
        edge = _edge_between(graph, ids["A"], ids["B"])
        graph.remove_edge(edge.id)
        return graph, ids, edge

    def test_counts(self, removed):
        graph, ids, _ = removed
        assert graph.vertex_count == 4
        assert graph.edge_count == 3
        assert graph.half_edge_count == 6
        assert validate(graph) == []

    def test_endpoints_keep_one_edge(self, removed):
        graph, ids, _ = removed
        for name in "AB":
            vertex = graph.vertex(ids[name])
            assert len(vertex.edges) == 1
            assert len(vertex.incoming_edges) == 1
            (out,) = vertex.edges
            assert graph.rotate(out) == out
            assert graph.rotate_back(out) == out
            assert list(graph.iter_wheel(ids[name])) == [out]

    def test_other_vertices_unaffected(self, removed):
        graph, ids, _ = removed
        for name in "CD":
            vertex = graph.vertex(ids[name])
            assert len(vertex.edges) == 2
            assert len(vertex.incoming_edges) == 2
        assert wheel_degrees(graph) == {1: 2, 2: 2}

    def test_path_walk(self, removed):
        graph, _, _ = removed
        assert next_cycle_lengths(graph) == [6]

    def test_removed_ids_are_stale(self, removed):
        graph, _, edge = removed
        with pytest.raises(StaleHandleError):
            graph.edge(edge.id)
        with pytest.raises(StaleHandleError):
            graph.half_edge(edge.half_edge)
        with pytest.raises(StaleHandleError):
            graph.half_edge(edge.twin_half_edge)
        with pytest.raises(StaleHandleError):
            graph.remove_edge(edge.id)

    def test_slot_reuse_does_not_revive_old_ids(self, removed):
        graph, ids, edge = removed
        new_id = graph.add_edge(ids["A"], ids["B"])
        assert new_id != edge.id
        with pytest.raises(StaleHandleError):
            graph.edge(edge.id)
        assert validate(graph) == []


def test_remove_isolated_edge():
    graph = GeometricGraph()
    a = graph.add_vertex((0, 0))
    b = graph.add_vertex((3, 4))
    graph.remove_edge(graph.add_edge(a, b))
    assert graph.edge_count == 0
    assert graph.half_edge_count == 0
    assert graph.vertex(a).is_isolated()
    assert graph.vertex(b).is_isolated()
    assert list(graph.iter_wheel(a)) == []


def test_remove_every_edge_in_any_order():
    for order in ([0, 1, 2, 3], [3, 1, 0, 2], [2, 0, 3, 1]):
        graph, ids = build_square_graph()
        edges = [e.id for e in graph.iter_edges()]
        for i in order:
            graph.remove_edge(edges[i])
            assert validate(graph) == []
        assert graph.half_edge_count == 0
        assert all(v.is_isolated() for v in graph.iter_vertices())


def test_remove_restores_previous_links():
    graph, ids = build_square_graph()
    before = {he.id: (he.next, he.prev) for he in graph.iter_half_edges()}
    diagonal = graph.add_edge(ids["B"], ids["D"])
    graph.remove_edge(diagonal)
    after = {he.id: (he.next, he.prev) for he in graph.iter_half_edges()}
    assert after == before


def test_remove_one_of_parallel_edges():
    graph = GeometricGraph()
    a = graph.add_vertex((0, 0))
    b = graph.add_vertex((5, 0))
    first = graph.add_edge(a, b)
    second = graph.add_edge(a, b)
    assert graph.vertex(a).edges == (
        graph.edge(first).half_edge,
        graph.edge(second).half_edge,
    )
    graph.remove_edge(first)
    assert validate(graph) == []
    half = graph.edge(second).half_edge
    assert graph.vertex(a).edges == (half,)
    assert graph.rotate(half) == half

"""Tests for the visualize module (rendering to PNG)."""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

from geomgraph import GeometricGraph, build_square_graph, random_session
from geomgraph.visualize import half_edge_segment, render_png


def test_half_edge_arrows_sit_on_opposite_sides():
    graph, _ = build_square_graph()
    edge = next(graph.iter_edges())
    (s1, e1) = half_edge_segment(graph, graph.half_edge(edge.half_edge))
    (s2, e2) = half_edge_segment(graph, graph.half_edge(edge.twin_half_edge))
    # A(-50,-50) -> B(50,-50): the forward arrow is shifted below the edge.
    assert s1[1] == pytest.approx(-53.0)
    assert s2[1] == pytest.approx(-47.0)
    assert s1[0] < e1[0]
    assert s2[0] > e2[0]


class TestRenderPng:
    def test_renders_square(self, tmp_path):
        graph, _ = build_square_graph()
        out = render_png(graph, tmp_path / "square.png", title="square")
        assert out.exists()
        assert out.stat().st_size > 0

    def test_renders_with_highlight(self, tmp_path):
        graph = random_session(30, seed=2)
        he = next(graph.iter_half_edges())
        out = render_png(graph, tmp_path / "nested" / "session.png", highlight=he.id)
        assert out.exists()

    def test_renders_empty_graph(self, tmp_path):
        out = render_png(GeometricGraph(), tmp_path / "empty.png")
        assert out.exists()

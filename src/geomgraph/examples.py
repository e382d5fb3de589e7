"""Ready-made graphs for demos, tests and the CLI."""

from __future__ import annotations

import random
from typing import Any, Callable, Dict, Optional

from .config import GraphConfig
from .graph import GeometricGraph
from .logging_utils import get_logger
from .models import Point, VertexId

log = get_logger(__name__)

SQUARE_CORNERS: Dict[str, Point] = {
    "A": (-50.0, -50.0),
    "B": (50.0, -50.0),
    "C": (50.0, 50.0),
    "D": (-50.0, 50.0),
}


def build_square_graph(
    data_factory: Optional[Callable[[Point], Any]] = None,
    config: Optional[GraphConfig] = None,
) -> tuple[GeometricGraph, Dict[str, VertexId]]:
    """The 4-cycle A-B-C-D, edges inserted in that order.

    Returns the graph and a ``name -> VertexId`` map.  *data_factory*
    builds each vertex payload from its position.
    """
    graph = GeometricGraph(config)
    ids: Dict[str, VertexId] = {}
    for name, pos in SQUARE_CORNERS.items():
        data = data_factory(pos) if data_factory else name
        ids[name] = graph.add_vertex(pos, data)

    for a, b in (("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")):
        graph.add_edge(ids[a], ids[b])
    return graph, ids


def random_session(
    steps: int,
    seed: int = 0,
    remove_every: int = 7,
    chord_probability: float = 0.3,
    extent: float = 200.0,
    config: Optional[GraphConfig] = None,
) -> GeometricGraph:
    """Replay an interactive editing session without a window.

    Starting from :func:`build_square_graph`, every step adds a vertex at
    a random position and connects the most recently added vertex to it.
    With probability *chord_probability* a second edge joins two random
    existing vertices.  Every *remove_every* steps the first live edge is
    removed.
    """
    if steps < 0:
        raise ValueError("steps must be >= 0")
    rng = random.Random(seed)
    graph, ids = build_square_graph(config=config)
    last = ids["D"]

    for step in range(1, steps + 1):
        pos = (rng.uniform(-extent, extent), rng.uniform(-extent, extent))
        vertex_id = graph.add_vertex(pos, step)
        graph.add_edge(last, vertex_id)
        last = vertex_id

        if rng.random() < chord_probability:
            candidates = [v.id for v in graph.iter_vertices()]
            a, b = rng.sample(candidates, 2)
            graph.add_edge(a, b)

        if remove_every and step % remove_every == 0 and graph.edge_count:
            first = next(graph.iter_edges())
            graph.remove_edge(first.id)

    log.info(
        "random session: %d steps, %d vertices, %d edges",
        steps, graph.vertex_count, graph.edge_count,
    )
    return graph

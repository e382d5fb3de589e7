"""Read-only structural checks and summary statistics for a graph.

Each ``check_*`` function returns a list of human-readable error
strings; an empty list means the check passed.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, List

from .geometry import is_finite_point, vertex_angle
from .graph import GeometricGraph
from .rotation import incoming_angles, outgoing_angles


def check_twins(graph: GeometricGraph) -> list[str]:
    errors: list[str] = []
    for he in graph.iter_half_edges():
        if not graph.contains(he.twin):
            errors.append(f"HalfEdge {he.id!r} has dead twin {he.twin!r}")
            continue
        twin = graph.half_edge(he.twin)
        if twin.id == he.id:
            errors.append(f"HalfEdge {he.id!r} is its own twin")
        if twin.twin != he.id:
            errors.append(f"HalfEdge {he.id!r}: twin(twin) is {twin.twin!r}")
        if (twin.origin, twin.target) != (he.target, he.origin):
            errors.append(f"HalfEdge {he.id!r} and twin {twin.id!r} are not opposite")

    for edge in graph.iter_edges():
        dead = [h for h in edge.half_edges() if not graph.contains(h)]
        if dead:
            errors.append(f"Edge {edge.id!r} references dead half-edge(s) {dead!r}")
            continue
        first = graph.half_edge(edge.half_edge)
        if first.twin != edge.twin_half_edge:
            errors.append(f"Edge {edge.id!r} half-edges are not twins")
        if (first.origin, first.target) != (edge.origin, edge.target):
            errors.append(f"Edge {edge.id!r} cached endpoints are out of date")
    return errors


def check_cycles(graph: GeometricGraph) -> list[str]:
    errors: list[str] = []
    for he in graph.iter_half_edges():
        if not (graph.contains(he.next) and graph.contains(he.prev)):
            errors.append(f"HalfEdge {he.id!r} links to a dead half-edge")
            continue
        nxt = graph.half_edge(he.next)
        prv = graph.half_edge(he.prev)
        if nxt.prev != he.id:
            errors.append(f"HalfEdge {he.id!r}: prev(next) is {nxt.prev!r}")
        if prv.next != he.id:
            errors.append(f"HalfEdge {he.id!r}: next(prev) is {prv.next!r}")
        if nxt.origin != he.target:
            errors.append(f"HalfEdge {he.id!r}: next starts at {nxt.origin!r}, not its target")
        if prv.target != he.origin:
            errors.append(f"HalfEdge {he.id!r}: prev ends at {prv.target!r}, not its origin")
    return errors


def check_adjacency(graph: GeometricGraph) -> list[str]:
    errors: list[str] = []
    outgoing: Counter = Counter()
    incoming: Counter = Counter()
    for vertex in graph.iter_vertices():
        if len(vertex.edges) != len(vertex.incoming_edges):
            errors.append(
                f"Vertex {vertex.id!r} has {len(vertex.edges)} outgoing but "
                f"{len(vertex.incoming_edges)} incoming half-edges"
            )
            continue
        for out_id, in_id in zip(vertex.edges, vertex.incoming_edges):
            outgoing[out_id] += 1
            incoming[in_id] += 1
            if not (graph.contains(out_id) and graph.contains(in_id)):
                errors.append(f"Vertex {vertex.id!r} lists a dead half-edge")
                continue
            if graph.half_edge(out_id).origin != vertex.id:
                errors.append(f"Vertex {vertex.id!r} lists {out_id!r} as outgoing")
            if graph.half_edge(in_id).target != vertex.id:
                errors.append(f"Vertex {vertex.id!r} lists {in_id!r} as incoming")
            if graph.half_edge(out_id).twin != in_id:
                errors.append(
                    f"Vertex {vertex.id!r}: incoming {in_id!r} is not the twin of {out_id!r}"
                )

    for he in graph.iter_half_edges():
        if outgoing[he.id] != 1:
            errors.append(f"HalfEdge {he.id!r} appears {outgoing[he.id]} times in outgoing lists")
        if incoming[he.id] != 1:
            errors.append(f"HalfEdge {he.id!r} appears {incoming[he.id]} times in incoming lists")
    return errors


def check_angular_order(graph: GeometricGraph) -> list[str]:
    """Angles must be non-decreasing in both lists of every vertex.

    Moving a vertex after its edges exist can break this without breaking
    anything else, so :func:`validate` makes it optional.
    """
    errors: list[str] = []
    for vertex in graph.iter_vertices():
        lists = (
            ("outgoing", outgoing_angles(vertex, graph._vertices, graph._half_edges)),
            ("incoming", incoming_angles(vertex, graph._vertices, graph._half_edges)),
        )
        for label, angles in lists:
            if any(a > b for a, b in zip(angles, angles[1:])):
                errors.append(f"Vertex {vertex.id!r} {label} list is not sorted by angle")
    return errors


def validate(graph: GeometricGraph, check_order: bool = True) -> list[str]:
    errors = check_twins(graph)
    errors.extend(check_cycles(graph))
    errors.extend(check_adjacency(graph))
    if check_order:
        errors.extend(check_angular_order(graph))
    return errors


# ═══════════════════════════════════════════════════════════════════
# Statistics
# ═══════════════════════════════════════════════════════════════════

def wheel_degrees(graph: GeometricGraph) -> Dict[int, int]:
    """Histogram: wheel length -> number of vertices."""
    histogram: Counter = Counter()
    for vertex in graph.iter_vertices():
        histogram[sum(1 for _ in graph.iter_wheel(vertex.id))] += 1
    return dict(sorted(histogram.items()))


def next_cycle_lengths(graph: GeometricGraph) -> List[int]:
    """Length of every distinct ``next`` cycle, sorted."""
    seen = set()
    lengths: List[int] = []
    for he in graph.iter_half_edges():
        if he.id in seen:
            continue
        cycle = list(graph.iter_next_cycle(he.id))
        seen.update(cycle)
        lengths.append(len(cycle))
    return sorted(lengths)


def rotation_angles(graph: GeometricGraph, vertex_id) -> List[float]:
    """Angles (radians) of a vertex's wheel, in walk order."""
    vertex = graph.vertex(vertex_id)
    return [
        vertex_angle(vertex, graph.vertex(graph.half_edge(he).target))
        for he in graph.iter_wheel(vertex_id)
    ]


def diagnostics_report(graph: GeometricGraph) -> dict:
    errors = validate(graph, check_order=False)
    order_errors = check_angular_order(graph) if not errors else []
    return {
        "vertices": graph.vertex_count,
        "edges": graph.edge_count,
        "half_edges": graph.half_edge_count,
        "isolated_vertices": sum(1 for v in graph.iter_vertices() if v.is_isolated()),
        "non_finite_vertices": sum(
            1 for v in graph.iter_vertices() if not is_finite_point(v.position)
        ),
        "wheel_degrees": (
            {str(k): v for k, v in wheel_degrees(graph).items()} if not errors else {}
        ),
        "next_cycle_lengths": next_cycle_lengths(graph) if not errors else [],
        "structure_ok": not errors,
        "angular_order_ok": not order_errors,
        "errors": errors + order_errors,
    }

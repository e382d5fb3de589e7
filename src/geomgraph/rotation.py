"""Per-vertex angular adjacency lists.

Every vertex owns two lists of half-edge ids:

- ``edges``: outgoing half-edges, keyed by the angle from the vertex to
  each half-edge's target;
- ``incoming_edges``: incoming half-edges, keyed by the angle from the
  vertex to each half-edge's origin.

Both are kept in ascending angle order by inserting at a binary-search
position.  Because an outgoing half-edge and its twin produce the same
key at the same vertex, ``incoming_edges[i]`` is always the twin of
``edges[i]``.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import List

from .arena import Arena
from .geometry import vertex_angle
from .models import HalfEdge, HalfEdgeId, Vertex, VertexId


def outgoing_angles(
    vertex: Vertex,
    vertices: Arena[VertexId, Vertex],
    half_edges: Arena[HalfEdgeId, HalfEdge],
) -> List[float]:
    """Angles of *vertex*'s outgoing list, in list order."""
    return [
        vertex_angle(vertex, vertices.get(half_edges.get(he).target))
        for he in vertex._edges
    ]


def incoming_angles(
    vertex: Vertex,
    vertices: Arena[VertexId, Vertex],
    half_edges: Arena[HalfEdgeId, HalfEdge],
) -> List[float]:
    """Angles of *vertex*'s incoming list, in list order."""
    return [
        vertex_angle(vertex, vertices.get(half_edges.get(he).origin))
        for he in vertex._incoming_edges
    ]


def insertion_index(angles: List[float], angle: float) -> int:
    """Position for a new entry with *angle*.

    Equal angles are placed after the existing ones, so coincident
    directions keep their creation order.
    """
    return bisect_right(angles, angle)


def insert_half_edge(entries: List[HalfEdgeId], index: int, he: HalfEdgeId) -> None:
    entries.insert(index, he)


def discard_half_edges(entries: List[HalfEdgeId], *removed: HalfEdgeId) -> None:
    """Drop *removed* from *entries* in place, keeping the others' order."""
    entries[:] = [he for he in entries if he not in removed]


def successor(entries: List[HalfEdgeId], index: int) -> HalfEdgeId:
    return entries[(index + 1) % len(entries)]


def predecessor(entries: List[HalfEdgeId], index: int) -> HalfEdgeId:
    return entries[(index - 1) % len(entries)]

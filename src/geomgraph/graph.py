from __future__ import annotations

from typing import Any, Iterator, List, Optional

from .arena import Arena
from .config import DEFAULT_CONFIG, GraphConfig
from .errors import DegenerateEdgeError, InvariantError
from .geometry import vertex_angle
from .logging_utils import get_logger
from .models import (
    Edge,
    EdgeId,
    Face,
    FaceId,
    HalfEdge,
    HalfEdgeId,
    Point,
    Vertex,
    VertexId,
)
from .rotation import (
    discard_half_edges,
    incoming_angles,
    insert_half_edge,
    insertion_index,
    outgoing_angles,
    predecessor,
    successor,
)

log = get_logger(__name__)


class GeometricGraph:
    """Planar graph embedding with incrementally maintained half-edges.

    Every vertex keeps its outgoing and incoming half-edges sorted by
    angle.  Each half-edge ``h`` carries ``next`` / ``prev`` links derived
    from those rotations:

    - ``next(h)`` is the outgoing half-edge at ``target(h)`` that follows
      ``twin(h)`` counter-clockwise;
    - ``prev(h)`` is the incoming half-edge at ``origin(h)`` that precedes
      ``twin(h)`` counter-clockwise.

    ``rotate(h) == next(twin(h))`` therefore steps around ``origin(h)``,
    which is how :meth:`iter_wheel` walks a vertex in O(1) per step.

    All lookups an operation needs happen before its first write, so an
    operation that raises leaves the graph untouched.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._vertices: Arena[VertexId, Vertex] = Arena(VertexId)
        self._half_edges: Arena[HalfEdgeId, HalfEdge] = Arena(HalfEdgeId)
        self._edges: Arena[EdgeId, Edge] = Arena(EdgeId)
        self._faces: Arena[FaceId, Face] = Arena(FaceId)

    def __repr__(self) -> str:
        return (
            f"GeometricGraph(vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )

    # ── Mutation ────────────────────────────────────────────────────

    def add_vertex(self, position: Point, data: Any = None) -> VertexId:
        x, y = position
        vertex_id = self._vertices.insert_with_key(
            lambda key: Vertex(key, float(x), float(y), data)
        )
        log.debug("add_vertex %r at (%g, %g)", vertex_id, x, y)
        return vertex_id

    def add_edge(self, origin: VertexId, target: VertexId) -> EdgeId:
        """Connect *origin* to *target* and return the new edge's id.

        Parallel edges are accepted.  Self-loops raise
        :class:`DegenerateEdgeError`, as do coincident endpoints under the
        ``"reject"`` policy.
        """
        origin_vertex = self._vertices.get(origin)
        target_vertex = self._vertices.get(target)
        if origin == target:
            raise DegenerateEdgeError(f"self-loop at {origin!r}")

        policy = self.config.degenerate
        forward = vertex_angle(origin_vertex, target_vertex, policy)
        backward = vertex_angle(target_vertex, origin_vertex, policy)

        out_origin = insertion_index(
            outgoing_angles(origin_vertex, self._vertices, self._half_edges), forward
        )
        in_target = insertion_index(
            incoming_angles(target_vertex, self._vertices, self._half_edges), backward
        )
        out_target = insertion_index(
            outgoing_angles(target_vertex, self._vertices, self._half_edges), backward
        )
        in_origin = insertion_index(
            incoming_angles(origin_vertex, self._vertices, self._half_edges), forward
        )

        half_id = self._half_edges.insert_with_key(
            lambda key: HalfEdge.unlinked(key, origin, target)
        )
        twin_id = self._half_edges.insert_with_key(
            lambda key: HalfEdge.unlinked(key, target, origin)
        )
        edge_id = self._edges.insert_with_key(
            lambda key: Edge(key, half_id, twin_id, origin, target)
        )
        half = self._half_edges.get(half_id)
        twin = self._half_edges.get(twin_id)
        half.twin = twin_id
        twin.twin = half_id

        insert_half_edge(origin_vertex._edges, out_origin, half_id)
        insert_half_edge(target_vertex._edges, out_target, twin_id)
        insert_half_edge(target_vertex._incoming_edges, in_target, half_id)
        insert_half_edge(origin_vertex._incoming_edges, in_origin, twin_id)

        self._link(half, twin, origin_vertex, target_vertex,
                   out_origin, in_target, out_target, in_origin)

        log.debug(
            "add_edge %r: %r -> %r (out@origin=%d in@target=%d out@target=%d in@origin=%d)",
            edge_id, origin, target, out_origin, in_target, out_target, in_origin,
        )
        self._after_mutation()
        return edge_id

    def remove_edge(self, edge_id: EdgeId) -> None:
        """Delete an edge and both of its half-edges.

        The endpoints stay in the graph even if they end up isolated.
        """
        edge = self._edges.get(edge_id)
        half = self._half_edges.get(edge.half_edge)
        twin = self._half_edges.get(edge.twin_half_edge)
        origin_vertex = self._vertices.get(half.origin)
        target_vertex = self._vertices.get(half.target)

        # (before, after) pairs to join once the pair is cut out.  An
        # endpoint of degree one has nothing left to join.
        splices: List[tuple[HalfEdge, HalfEdge]] = []
        if origin_vertex.degree() > 1:
            splices.append((self._half_edges.get(half.prev), self._half_edges.get(twin.next)))
        if target_vertex.degree() > 1:
            splices.append((self._half_edges.get(twin.prev), self._half_edges.get(half.next)))

        for before, after in splices:
            before.next = after.id
            after.prev = before.id

        discard_half_edges(origin_vertex._edges, half.id)
        discard_half_edges(origin_vertex._incoming_edges, twin.id)
        discard_half_edges(target_vertex._edges, twin.id)
        discard_half_edges(target_vertex._incoming_edges, half.id)

        self._half_edges.remove(half.id)
        self._half_edges.remove(twin.id)
        self._edges.remove(edge_id)

        log.debug(
            "remove_edge %r: %r -> %r, %d splice(s)",
            edge_id, edge.origin, edge.target, len(splices),
        )
        self._after_mutation()

    def move_vertex(self, vertex_id: VertexId, position: Point) -> None:
        """Update a vertex position in place.

        Rotations are fixed when edges are inserted: moving a vertex leaves
        every adjacency list and every link as it was.
        """
        vertex = self._vertices.get(vertex_id)
        vertex.position = (float(position[0]), float(position[1]))

    # ── Linking ─────────────────────────────────────────────────────

    def _link(
        self,
        half: HalfEdge,
        twin: HalfEdge,
        origin_vertex: Vertex,
        target_vertex: Vertex,
        out_origin: int,
        in_target: int,
        out_target: int,
        in_origin: int,
    ) -> None:
        """Splice a freshly inserted twin pair into the next/prev cycles.

        The index arguments are the positions the pair was just inserted
        at in the four adjacency lists.
        """
        next_id = successor(target_vertex._edges, out_target)
        twin_next_id = successor(origin_vertex._edges, out_origin)
        prev_id = predecessor(origin_vertex._incoming_edges, in_origin)
        twin_prev_id = predecessor(target_vertex._incoming_edges, in_target)

        self._half_edges.get(prev_id).next = half.id
        self._half_edges.get(twin_prev_id).next = twin.id
        self._half_edges.get(next_id).prev = half.id
        self._half_edges.get(twin_next_id).prev = twin.id

        half.next = next_id
        half.prev = prev_id
        twin.next = twin_next_id
        twin.prev = twin_prev_id

    def _after_mutation(self) -> None:
        if not self.config.check_invariants:
            return
        from .diagnostics import validate

        errors = validate(self, check_order=False)
        if errors:
            raise InvariantError(errors)

    # ── Lookup ──────────────────────────────────────────────────────

    def vertex(self, vertex_id: VertexId) -> Vertex:
        return self._vertices.get(vertex_id)

    def half_edge(self, half_edge_id: HalfEdgeId) -> HalfEdge:
        return self._half_edges.get(half_edge_id)

    def edge(self, edge_id: EdgeId) -> Edge:
        return self._edges.get(edge_id)

    def face(self, face_id: FaceId) -> Face:
        return self._faces.get(face_id)

    def origin(self, edge: Edge) -> Vertex:
        return self._vertices.get(edge.origin)

    def target(self, edge: Edge) -> Vertex:
        return self._vertices.get(edge.target)

    def contains(self, key: object) -> bool:
        """True when *key* is a live id of any kind."""
        return any(
            key in arena
            for arena in (self._vertices, self._half_edges, self._edges, self._faces)
        )

    def twin(self, half_edge_id: HalfEdgeId) -> HalfEdgeId:
        return self._half_edges.get(half_edge_id).twin

    def next(self, half_edge_id: HalfEdgeId) -> HalfEdgeId:
        return self._half_edges.get(half_edge_id).next

    def prev(self, half_edge_id: HalfEdgeId) -> HalfEdgeId:
        return self._half_edges.get(half_edge_id).prev

    def rotate(self, half_edge_id: HalfEdgeId) -> HalfEdgeId:
        """Next outgoing half-edge counter-clockwise around the origin."""
        return self.next(self.twin(half_edge_id))

    def rotate_back(self, half_edge_id: HalfEdgeId) -> HalfEdgeId:
        """Next outgoing half-edge clockwise around the origin."""
        return self.twin(self.prev(half_edge_id))

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def half_edge_count(self) -> int:
        return len(self._half_edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    # ── Iteration ───────────────────────────────────────────────────

    def iter_vertices(self) -> Iterator[Vertex]:
        return self._vertices.values()

    def iter_half_edges(self) -> Iterator[HalfEdge]:
        return self._half_edges.values()

    def iter_edges(self) -> Iterator[Edge]:
        return self._edges.values()

    def iter_wheel(self, vertex_id: VertexId) -> Iterator[HalfEdgeId]:
        """Outgoing half-edges of a vertex, walked with :meth:`rotate`."""
        vertex = self._vertices.get(vertex_id)
        if not vertex._edges:
            return iter(())
        return self._walk(vertex._edges[0], self.rotate)

    def iter_next_cycle(self, half_edge_id: HalfEdgeId) -> Iterator[HalfEdgeId]:
        """Half-edges reached by following ``next`` from *half_edge_id*."""
        self._half_edges.get(half_edge_id)
        return self._walk(half_edge_id, self.next)

    def neighbors(self, vertex_id: VertexId) -> List[VertexId]:
        """Adjacent vertex ids in counter-clockwise rotation order."""
        return [self._half_edges.get(he).target for he in self.iter_wheel(vertex_id)]

    def _walk(self, start: HalfEdgeId, step) -> Iterator[HalfEdgeId]:
        limit = len(self._half_edges)
        current = start
        for _ in range(limit):
            yield current
            current = step(current)
            if current == start:
                return
        raise InvariantError([f"walk from {start!r} did not close after {limit} steps"])

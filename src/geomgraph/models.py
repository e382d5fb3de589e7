from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Tuple


# ═══════════════════════════════════════════════════════════════════
# Handles
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Handle:
    """Opaque ``(slot index, generation)`` pair naming an arena entry.

    Handles of different kinds never compare equal, even when their
    index and generation match.
    """

    index: int
    generation: int

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.index}v{self.generation})"


class VertexId(Handle):
    pass


class HalfEdgeId(Handle):
    pass


class EdgeId(Handle):
    pass


class FaceId(Handle):
    pass


Point = Tuple[float, float]


# ═══════════════════════════════════════════════════════════════════
# Entities
# ═══════════════════════════════════════════════════════════════════

@dataclass
class Vertex:
    """A positioned vertex with its two angularly sorted half-edge lists.

    *x* / *y* may be reassigned freely; the adjacency lists are owned by
    :class:`~geomgraph.graph.GeometricGraph` and exposed read-only.
    """

    id: VertexId
    x: float
    y: float
    data: Any = None
    _edges: List[HalfEdgeId] = field(default_factory=list, repr=False)
    _incoming_edges: List[HalfEdgeId] = field(default_factory=list, repr=False)

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Point) -> None:
        self.x, self.y = value

    @property
    def edges(self) -> tuple[HalfEdgeId, ...]:
        """Outgoing half-edges, sorted by angle towards their targets."""
        return tuple(self._edges)

    @property
    def incoming_edges(self) -> tuple[HalfEdgeId, ...]:
        """Incoming half-edges, sorted by angle towards their origins."""
        return tuple(self._incoming_edges)

    def degree(self) -> int:
        return len(self._edges)

    def is_isolated(self) -> bool:
        return not self._edges


@dataclass
class HalfEdge:
    id: HalfEdgeId
    origin: VertexId
    target: VertexId
    twin: HalfEdgeId
    next: HalfEdgeId
    prev: HalfEdgeId

    @classmethod
    def unlinked(cls, id: HalfEdgeId, origin: VertexId, target: VertexId) -> "HalfEdge":
        """A half-edge that is its own twin, next and prev."""
        return cls(id, origin, target, twin=id, next=id, prev=id)


@dataclass(frozen=True)
class Edge:
    """Undirected edge owning a pair of twin half-edges.

    *origin* / *target* are cached from *half_edge*.
    """

    id: EdgeId
    half_edge: HalfEdgeId
    twin_half_edge: HalfEdgeId
    origin: VertexId
    target: VertexId

    def half_edges(self) -> tuple[HalfEdgeId, HalfEdgeId]:
        return (self.half_edge, self.twin_half_edge)


@dataclass(frozen=True)
class Face:
    """Reserved for face tracing; no operation creates faces yet."""

    id: FaceId

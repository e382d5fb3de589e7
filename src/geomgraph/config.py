"""Configuration for :class:`~geomgraph.graph.GeometricGraph`."""
from __future__ import annotations

from dataclasses import dataclass

from .geometry import DEGENERATE_POLICIES


@dataclass(frozen=True)
class GraphConfig:
    """Behaviour switches for a graph.

    Attributes
    ----------
    degenerate:
        How ``add_edge`` treats endpoints at the same position.
        ``"zero"`` orders the edge as if it pointed along +x (angle 0);
        ``"reject"`` raises :class:`~geomgraph.errors.DegenerateEdgeError`.
        Self-loops are rejected under both policies.
    check_invariants:
        Validate the whole structure after every mutation and raise
        :class:`~geomgraph.errors.InvariantError` on the first failure.
        O(V + E) per call; meant for tests and debugging.
    """

    degenerate: str = "zero"
    check_invariants: bool = False

    def __post_init__(self) -> None:
        if self.degenerate not in DEGENERATE_POLICIES:
            raise ValueError(
                f"degenerate must be one of {DEGENERATE_POLICIES}, got {self.degenerate!r}"
            )


DEFAULT_CONFIG = GraphConfig()

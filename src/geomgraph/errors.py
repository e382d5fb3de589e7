"""Exception hierarchy for :mod:`geomgraph`."""

from __future__ import annotations


class GraphError(Exception):
    """Base class for every error raised by the package."""


class StaleHandleError(GraphError, LookupError):
    """A handle was dereferenced that does not name a live entity.

    Raised for removed entities, reused slots (generation mismatch) and
    handles of the wrong kind.  Always a caller bug: the failing operation
    has not mutated anything.
    """

    def __init__(self, key: object, kind: str) -> None:
        super().__init__(f"{kind} handle {key!r} is not live")
        self.key = key
        self.kind = kind


class DegenerateEdgeError(GraphError, ValueError):
    """An edge has no well-defined direction (self-loop or coincident ends)."""


class InvariantError(GraphError, AssertionError):
    """A structural check failed after a mutation."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors

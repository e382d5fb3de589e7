"""Geometry helper functions used across the package."""

from __future__ import annotations

import math
from typing import Optional

from .errors import DegenerateEdgeError
from .models import Point, Vertex


DEGENERATE_POLICIES = ("zero", "reject")


def canonical_angle(dx: float, dy: float) -> float:
    """Angle of ``(dx, dy)`` in ``(-pi, pi]``.

    ``atan2`` yields ``-pi`` for a negative-zero *dy*; that is folded onto
    ``pi`` so both zeros order identically.
    """
    angle = math.atan2(dy, dx)
    if angle <= -math.pi:
        return math.pi
    return angle


def direction_angle(start: Point, end: Point, degenerate: str = "zero") -> float:
    """Canonical angle of the direction from *start* to *end*.

    A zero-length direction has angle ``0.0`` under the ``"zero"`` policy
    and raises :class:`DegenerateEdgeError` under ``"reject"``.
    """
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if dx == 0.0 and dy == 0.0:
        if degenerate == "reject":
            raise DegenerateEdgeError(f"zero-length direction at {start!r}")
        return 0.0
    return canonical_angle(dx, dy)


def vertex_angle(a: Vertex, b: Vertex, degenerate: str = "zero") -> float:
    """Angle of the direction from vertex *a* to vertex *b*."""
    return direction_angle(a.position, b.position, degenerate)


def is_finite_point(p: Point) -> bool:
    return math.isfinite(p[0]) and math.isfinite(p[1])


def segment_midpoint(a: Point, b: Point) -> Point:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)


def left_normal(a: Point, b: Point) -> Optional[Point]:
    """Unit normal pointing left of ``a -> b``, or ``None`` when degenerate."""
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return None
    return (-dy / length, dx / length)

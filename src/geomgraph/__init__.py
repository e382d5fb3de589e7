"""geomgraph — planar graph embedding with incremental half-edges.

Public API is organised into layers:

- **Core** — handles, entities, arena, the graph container
- **Diagnostics** — structural checks and reports
- **Rendering** — half-edge debug drawing (requires matplotlib)
"""

import logging

# ── Core ────────────────────────────────────────────────────────────
from .models import (
    Handle,
    VertexId,
    HalfEdgeId,
    EdgeId,
    FaceId,
    Vertex,
    HalfEdge,
    Edge,
    Face,
)
from .arena import Arena
from .config import GraphConfig
from .errors import GraphError, StaleHandleError, DegenerateEdgeError, InvariantError
from .graph import GeometricGraph
from .geometry import canonical_angle, direction_angle
from .examples import build_square_graph, random_session
from .logging_utils import configure_logging, get_logger

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    check_twins,
    check_cycles,
    check_adjacency,
    check_angular_order,
    validate,
    wheel_degrees,
    next_cycle_lengths,
    rotation_angles,
    diagnostics_report,
)

# ── Rendering (requires matplotlib at call time) ────────────────────
from .visualize import draw_graph, render_png

logging.getLogger("geomgraph").addHandler(logging.NullHandler())

__all__ = [
    # Core
    "Handle",
    "VertexId",
    "HalfEdgeId",
    "EdgeId",
    "FaceId",
    "Vertex",
    "HalfEdge",
    "Edge",
    "Face",
    "Arena",
    "GraphConfig",
    "GraphError",
    "StaleHandleError",
    "DegenerateEdgeError",
    "InvariantError",
    "GeometricGraph",
    "canonical_angle",
    "direction_angle",
    "build_square_graph",
    "random_session",
    "configure_logging",
    "get_logger",
    # Diagnostics
    "check_twins",
    "check_cycles",
    "check_adjacency",
    "check_angular_order",
    "validate",
    "wheel_degrees",
    "next_cycle_lengths",
    "rotation_angles",
    "diagnostics_report",
    # Rendering
    "draw_graph",
    "render_png",
]

"""Half-edge debug rendering.

Each half-edge is drawn as a short arrow running alongside its edge,
shifted a little to its right, so that the two halves of an edge point
in opposite directions on opposite sides.  One half-edge may be
highlighted, which makes stepping through ``next`` / ``twin`` easy to
follow.

All functions accept an optional *ax* so they can be composed into
multi-panel figures externally, but also work standalone.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

from .geometry import left_normal
from .graph import GeometricGraph
from .models import HalfEdge, HalfEdgeId

_EDGE_COLOR = "#2b2b2b"
_HALF_EDGE_COLOR = "#4363d8"
_HIGHLIGHT_COLOR = "#e6194b"
_VERTEX_COLOR = "#2b2b2b"

# Fraction of the edge an arrow spans, and its sideways shift in data units.
HALF_EDGE_LENGTH = 0.9
HALF_EDGE_OFFSET = 3.0


def _ensure_mpl():
    """Lazy-import matplotlib; raise helpful error if missing."""
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import FancyArrowPatch
        return plt, FancyArrowPatch
    except ImportError as exc:
        raise RuntimeError(
            "matplotlib is required for visualisation. "
            "Install with `pip install matplotlib`."
        ) from exc


def half_edge_segment(
    graph: GeometricGraph,
    he: HalfEdge,
    length: float = HALF_EDGE_LENGTH,
    offset: float = HALF_EDGE_OFFSET,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    """Start and end point of the arrow drawn for *he*."""
    a = graph.vertex(he.origin).position
    b = graph.vertex(he.target).position
    normal = left_normal(a, b) or (0.0, 0.0)
    sx = (1.0 - length) * b[0] + length * a[0] - normal[0] * offset
    sy = (1.0 - length) * b[1] + length * a[1] - normal[1] * offset
    ex = length * b[0] + (1.0 - length) * a[0] - normal[0] * offset
    ey = length * b[1] + (1.0 - length) * a[1] - normal[1] * offset
    return (sx, sy), (ex, ey)


def draw_graph(
    ax,
    graph: GeometricGraph,
    highlight: Optional[HalfEdgeId] = None,
    show_edges: bool = True,
    show_half_edges: bool = True,
    vertex_size: float = 6.0,
    offset: float = HALF_EDGE_OFFSET,
) -> None:
    """Draw vertices, edges and half-edge arrows of *graph* onto *ax*."""
    _, FancyArrowPatch = _ensure_mpl()

    if show_edges:
        for edge in graph.iter_edges():
            a = graph.origin(edge).position
            b = graph.target(edge).position
            ax.plot([a[0], b[0]], [a[1], b[1]], "-", color=_EDGE_COLOR,
                    linewidth=0.8, alpha=0.4, zorder=1)

    if show_half_edges:
        for he in graph.iter_half_edges():
            start, end = half_edge_segment(graph, he, offset=offset)
            color = _HIGHLIGHT_COLOR if he.id == highlight else _HALF_EDGE_COLOR
            arrow = FancyArrowPatch(start, end, arrowstyle="-|>", mutation_scale=8,
                                    color=color, linewidth=1.2, zorder=2)
            ax.add_patch(arrow)

    for v in graph.iter_vertices():
        ax.plot(v.x, v.y, "o", ms=vertex_size, color=_VERTEX_COLOR, zorder=3)


def render_png(
    graph: GeometricGraph,
    output_path: Union[str, Path],
    highlight: Optional[HalfEdgeId] = None,
    title: Optional[str] = None,
    dpi: int = 150,
    figsize: Tuple[float, float] = (6, 6),
) -> Path:
    """Render *graph* to a PNG file and return its path."""
    plt, _ = _ensure_mpl()
    fig, ax = plt.subplots(figsize=figsize)
    draw_graph(ax, graph, highlight=highlight)
    ax.set_aspect("equal")
    ax.autoscale_view()
    ax.margins(0.1)
    ax.axis("off")
    if title:
        ax.set_title(title)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return output

"""Step a highlighted half-edge around the example graph and save frames.

Alternates ``next`` and ``twin`` steps the way the interactive viewer
did, removing the oldest edge every few frames.
"""
import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from geomgraph import build_square_graph, configure_logging, validate
from geomgraph.visualize import render_png


def main(frames: int = 12, out_dir: str = "exports/walk") -> None:
    configure_logging("DEBUG")
    graph, ids = build_square_graph()
    graph.add_edge(ids["A"], ids["C"])
    current = next(graph.iter_edges()).half_edge
    was_twin = False

    for i in range(frames):
        render_png(graph, Path(out_dir) / f"frame_{i:03d}.png", highlight=current,
                   title=f"frame {i}")
        if was_twin or i % 3:
            current = graph.next(current)
        else:
            current = graph.twin(current)
        was_twin = not was_twin

        if i % 5 == 4 and graph.edge_count > 1:
            oldest = next(graph.iter_edges())
            if current in oldest.half_edges():
                current = graph.rotate(current)
            if current not in oldest.half_edges():
                graph.remove_edge(oldest.id)

    errors = validate(graph)
    if errors:
        raise SystemExit("\n".join(errors))
    print(f"Saved {frames} frames to {out_dir}")


if __name__ == "__main__":
    main()

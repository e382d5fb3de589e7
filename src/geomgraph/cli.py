"""geomgraph command-line interface."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from .config import GraphConfig
from .logging_utils import configure_logging

if TYPE_CHECKING:
    from .graph import GeometricGraph


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="geomgraph CLI")
    parser.add_argument("--log-level", default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Build the example square and print its wheels")
    demo.add_argument("--render-out", dest="render_path")
    demo.add_argument("--diagnose-json", dest="diagnose_json")

    stress = sub.add_parser("stress", help="Replay a random editing session and validate it")
    stress.add_argument("--steps", type=int, default=500)
    stress.add_argument("--seed", type=int, default=0)
    stress.add_argument("--remove-every", type=int, default=7)
    stress.add_argument("--chord-probability", type=float, default=0.3)
    stress.add_argument("--check-each-step", action="store_true",
                        help="Validate after every mutation, not only at the end")
    stress.add_argument("--render-out", dest="render_path")
    stress.add_argument("--diagnose-json", dest="diagnose_json")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "demo":
        _cmd_demo(args)

    elif args.command == "stress":
        _cmd_stress(args)


def _cmd_demo(args) -> None:
    from .examples import build_square_graph

    graph, ids = build_square_graph()
    names = {vid: name for name, vid in ids.items()}
    for name, vid in ids.items():
        ring = " ".join(names[n] for n in graph.neighbors(vid))
        print(f"{name}: {ring}")
    _write_outputs(graph, args)


def _cmd_stress(args) -> None:
    from .diagnostics import validate
    from .errors import InvariantError
    from .examples import random_session

    config = GraphConfig(check_invariants=args.check_each_step)
    try:
        graph = random_session(
            args.steps,
            seed=args.seed,
            remove_every=args.remove_every,
            chord_probability=args.chord_probability,
            config=config,
        )
    except InvariantError as exc:
        for error in exc.errors:
            print(error)
        raise SystemExit(1)

    errors = validate(graph)
    _write_outputs(graph, args)
    if errors:
        for error in errors:
            print(error)
        raise SystemExit(1)
    print(f"OK ({graph.vertex_count} vertices, {graph.edge_count} edges)")


def _write_outputs(graph: "GeometricGraph", args) -> None:
    if args.render_path:
        from .visualize import render_png
        render_png(graph, args.render_path)
        print(f"Saved {args.render_path}")
    if args.diagnose_json:
        from .diagnostics import diagnostics_report
        report = diagnostics_report(graph)
        Path(args.diagnose_json).write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved {args.diagnose_json}")


if __name__ == "__main__":
    main()

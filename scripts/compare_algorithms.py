#!/usr/bin/env python3
"""
Compare algorithms side by side on the same graph and endpoints.

Usage:
    python scripts/compare_algorithms.py --start A --end F
    python scripts/compare_algorithms.py --start A --end I --graph grid --seed 3
    python scripts/compare_algorithms.py --start A --algorithms bfs dfs
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathlab.algorithms import ALGORITHMS  # noqa: E402
from pathlab.errors import PathlabError  # noqa: E402
from pathlab.graph import create_grid_graph, create_sample_graph  # noqa: E402
from pathlab.playback import compare_algorithms  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare graph algorithms")
    parser.add_argument("--start", type=str, default="A", help="Start node label (default: A)")
    parser.add_argument("--end", type=str, default=None, help="End node label")
    parser.add_argument("--graph", choices=["sample", "grid"], default="sample")
    parser.add_argument("--rows", type=int, default=3)
    parser.add_argument("--cols", type=int, default=3)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--directed", action="store_true")
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=list(ALGORITHMS),
        default=list(ALGORITHMS),
        help="Algorithms to compare (default: all)",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()

    if args.graph == "grid":
        graph = create_grid_graph(args.rows, args.cols, seed=args.seed)
    else:
        graph = create_sample_graph()
    graph = graph.with_direction(args.directed)

    start = graph.find_node_by_label(args.start)
    end = graph.find_node_by_label(args.end) if args.end else None
    if start is None or (args.end and end is None):
        print("Error: unknown node label", file=sys.stderr)
        return 1

    try:
        summaries = compare_algorithms(
            graph,
            start.id,
            end.id if end else None,
            names=args.algorithms,
        )
    except PathlabError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 78)
    print(f"{'Algorithm':<14}{'Steps':>7}{'Visited':>9}{'Edges':>7}{'Weight':>8}  Path")
    print("-" * 78)
    for summary in summaries:
        if not summary.succeeded:
            print(f"{summary.algorithm:<14}  skipped: {summary.error}")
            continue
        path = " -> ".join(graph.label_of(n) for n in summary.path) if summary.path else "-"
        edges = summary.path_length if summary.path_length is not None else "-"
        weight = summary.path_weight if summary.path_weight is not None else "-"
        print(f"{summary.algorithm:<14}{summary.total_steps:>7}{summary.nodes_visited:>9}"
              f"{edges:>7}{weight:>8}  {path}")
    print("=" * 78)

    return 0


if __name__ == "__main__":
    sys.exit(main())

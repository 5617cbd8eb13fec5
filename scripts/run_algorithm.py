#!/usr/bin/env python3
"""
Pathlab CLI - Run one algorithm and print its step log.

Usage:
    python scripts/run_algorithm.py --algorithm bfs --start A
    python scripts/run_algorithm.py --algorithm dijkstra --start A --end F
    python scripts/run_algorithm.py --algorithm astar --start A --end L --graph grid --rows 3 --cols 4 --seed 7
    python scripts/run_algorithm.py --algorithm dfs --start A --directed

Algorithms:
    bfs          - Breadth-first search (fewest edges)
    dfs          - Depth-first search with cycle detection
    dijkstra     - Weighted shortest paths, non-negative weights
    bellman-ford - Weighted shortest paths, negative cycle detection
    astar        - Heuristic search (requires --end)

Nodes may be given by label (A, B, ...) or by id.
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

from pathlab.algorithms import ALGORITHMS, get_algorithm, run_algorithm  # noqa: E402
from pathlab.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL  # noqa: E402
from pathlab.errors import PathlabError  # noqa: E402
from pathlab.graph import Graph, create_grid_graph, create_sample_graph  # noqa: E402
from pathlab.heuristics import EuclideanHeuristic  # noqa: E402


def build_graph(args: argparse.Namespace) -> Graph:
    """Build the graph selected on the command line."""
    if args.graph == "grid":
        graph = create_grid_graph(args.rows, args.cols, seed=args.seed)
    else:
        graph = create_sample_graph()
    return graph.with_direction(args.directed)


def resolve_node(graph: Graph, ref: str | None) -> str | None:
    """Map a label or id to a node id (unknown refs are passed through)."""
    if ref is None:
        return None
    if graph.has_node(ref):
        return ref
    node = graph.find_node_by_label(ref)
    return node.id if node else ref


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a graph algorithm and print every step",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        "-a",
        type=str,
        default="bfs",
        choices=list(ALGORITHMS),
        help="Algorithm to run (default: bfs)",
    )
    parser.add_argument(
        "--start",
        type=str,
        default="A",
        help="Start node label or id (default: A)",
    )
    parser.add_argument(
        "--end",
        type=str,
        default=None,
        help="End node label or id (required for astar)",
    )
    parser.add_argument(
        "--graph",
        type=str,
        default="sample",
        choices=["sample", "grid"],
        help="Graph to run on (default: sample)",
    )
    parser.add_argument("--rows", type=int, default=3, help="Grid rows (default: 3)")
    parser.add_argument("--cols", type=int, default=3, help="Grid columns (default: 3)")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for grid weights",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Treat edges as directed (source -> target)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=None,
        help="A* heuristic scale (default: PATHLAB_ASTAR_SCALE or 50)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    try:
        graph = build_graph(args)
        start_id = resolve_node(graph, args.start)
        end_id = resolve_node(graph, args.end)

        kwargs = {}
        if args.algorithm == "astar" and args.scale is not None:
            kwargs["heuristic"] = EuclideanHeuristic(scale=args.scale)

        algorithm = get_algorithm(args.algorithm, **kwargs)
        result = run_algorithm(args.algorithm, graph, start_id, end_id, **kwargs)
    except PathlabError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print(f"{algorithm.info.display_name} - {algorithm.description}")
    print("=" * 60)
    print(f"  Graph: {len(graph.nodes)} nodes, {len(graph.edges)} edges, "
          f"{'directed' if graph.is_directed else 'undirected'}")
    print(f"  Start: {graph.label_of(start_id)}")
    if end_id is not None:
        print(f"  End:   {graph.label_of(end_id)}")
    print("=" * 60 + "\n")

    for i, step in enumerate(result.steps, 1):
        print(f"  {i:3d}. [{step.type.value:<14}] {step.message}")

    print()
    if result.shortest_path:
        labels = " -> ".join(graph.label_of(node_id) for node_id in result.shortest_path)
        print(f"Path ({result.path_length} edges, weight {graph.path_weight(result.shortest_path)}): {labels}")
    if result.has_cycle:
        print("Cycle detected")
    if result.has_negative_cycle:
        print("Negative cycle detected")
    if result.distances and not result.has_negative_cycle:
        print("\nDistances:")
        for node_id, dist in result.distances.items():
            print(f"  {graph.label_of(node_id)}: {dist}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

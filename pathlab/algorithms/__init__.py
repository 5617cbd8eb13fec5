"""
Algorithms module.

Provides step-recording graph algorithms:
- BreadthFirstSearch: Fewest-edge paths, level-order traversal
- DepthFirstSearch: Deep traversal with cycle detection
- Dijkstra: Weighted shortest paths (non-negative weights)
- BellmanFord: Weighted shortest paths with negative cycle detection
- AStar: Heuristic-guided shortest path to a single target
"""

from __future__ import annotations

import logging

from pathlab.algorithms.astar import AStar
from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.bellman_ford import BellmanFord
from pathlab.algorithms.bfs import BreadthFirstSearch
from pathlab.algorithms.dfs import DepthFirstSearch
from pathlab.algorithms.dijkstra import Dijkstra
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, AlgorithmStep, StepType
from pathlab.errors import UnknownAlgorithmError
from pathlab.graph.model import Graph

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmInfo",
    "AlgorithmResult",
    "AlgorithmStep",
    "StepType",
    "StepRecorder",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "Dijkstra",
    "BellmanFord",
    "AStar",
    "get_algorithm",
    "list_algorithms",
    "reconstruct_path",
    "run_algorithm",
]

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, type[Algorithm]] = {
    "bfs": BreadthFirstSearch,
    "dfs": DepthFirstSearch,
    "dijkstra": Dijkstra,
    "bellman-ford": BellmanFord,
    "astar": AStar,
}

ALGORITHMS = tuple(_REGISTRY)


def get_algorithm(name: str, **kwargs) -> Algorithm:
    """
    Get an algorithm by name.

    Args:
        name: Algorithm identifier (bfs, dfs, dijkstra, bellman-ford, astar)
        **kwargs: Passed to the algorithm constructor (e.g. heuristic, snapshots)

    Returns:
        Instantiated algorithm

    Raises:
        UnknownAlgorithmError: If algorithm name is unknown
    """
    if name not in _REGISTRY:
        available = ", ".join(_REGISTRY)
        raise UnknownAlgorithmError(f"Unknown algorithm '{name}'. Available: {available}")
    return _REGISTRY[name](**kwargs)


def list_algorithms() -> list[AlgorithmInfo]:
    """Reference cards for every registered algorithm, in registry order."""
    return [cls.INFO for cls in _REGISTRY.values()]


def run_algorithm(
    name: str,
    graph: Graph,
    start_id: str,
    end_id: str | None = None,
    **kwargs,
) -> AlgorithmResult:
    """
    Run one algorithm to completion.

    Args:
        name: Algorithm identifier
        graph: Graph to traverse (never modified)
        start_id: Id of the start node
        end_id: Optional id of the target node (required for astar)
        **kwargs: Passed to the algorithm constructor

    Returns:
        AlgorithmResult with the full step trace

    Raises:
        UnknownAlgorithmError: If algorithm name is unknown
        InvalidInvocationError: If start/end are invalid for this algorithm
    """
    algorithm = get_algorithm(name, **kwargs)

    target = f" to '{graph.label_of(end_id)}'" if end_id is not None else ""
    logger.info(f"Running {name} from '{graph.label_of(start_id)}'{target}")

    result = algorithm.run(graph, start_id, end_id)

    if result.found_path:
        logger.info(
            f"{name} finished in {len(result.steps)} steps, path: "
            f"{' -> '.join(graph.label_of(node_id) for node_id in result.shortest_path)}"
        )
    else:
        logger.info(f"{name} finished in {len(result.steps)} steps")
    return result

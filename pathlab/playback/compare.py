"""
Run several algorithms on the same input and summarise each run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from pathlab.algorithms import ALGORITHMS, run_algorithm
from pathlab.algorithms.state import AlgorithmResult, StepType
from pathlab.errors import InvalidInvocationError
from pathlab.graph.model import Graph

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """
    Headline numbers for one algorithm run.

    Attributes:
        algorithm: Registry name
        total_steps: Length of the step trace
        nodes_visited: Distinct nodes that received a visit step
        path: Reported path (node ids), if any
        path_length: Edges on the path, if any
        path_weight: Summed weight of the path, if any
        has_cycle: DFS cycle flag
        has_negative_cycle: Bellman-Ford negative cycle flag
        error: Why the algorithm could not run on this input
    """

    algorithm: str
    total_steps: int = 0
    nodes_visited: int = 0
    path: list[str] | None = None
    path_length: int | None = None
    path_weight: float | None = None
    has_cycle: bool | None = None
    has_negative_cycle: bool | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


def summarize(result: AlgorithmResult, graph: Graph) -> RunSummary:
    """Reduce a finished run to a RunSummary."""
    visited = {
        step.node_id
        for step in result.steps
        if step.type == StepType.VISIT and step.node_id is not None
    }
    path = result.shortest_path
    return RunSummary(
        algorithm=result.algorithm,
        total_steps=len(result.steps),
        nodes_visited=len(visited),
        path=list(path) if path is not None else None,
        path_length=result.path_length,
        path_weight=graph.path_weight(path) if path is not None else None,
        has_cycle=result.has_cycle,
        has_negative_cycle=result.has_negative_cycle,
    )


def compare_algorithms(
    graph: Graph,
    start_id: str,
    end_id: str | None = None,
    names: Iterable[str] = ALGORITHMS,
) -> list[RunSummary]:
    """
    Run each named algorithm and summarise it.

    An algorithm that rejects the input (e.g. astar without an end node) is
    reported with its error message instead of aborting the comparison.
    Unknown names still raise.

    Returns:
        One RunSummary per name, in the order given
    """
    summaries = []
    for name in names:
        try:
            result = run_algorithm(name, graph, start_id, end_id)
        except InvalidInvocationError as e:
            if name not in ALGORITHMS:
                raise
            logger.warning(f"Skipping {name}: {e}")
            summaries.append(RunSummary(algorithm=name, error=str(e)))
            continue
        summaries.append(summarize(result, graph))
    return summaries

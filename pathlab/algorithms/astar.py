"""
A* search guided by a position-based heuristic.
"""

from __future__ import annotations

import logging
import math

from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, StepType
from pathlab.config import RECORD_SNAPSHOTS
from pathlab.graph.model import Graph
from pathlab.heuristics import EuclideanHeuristic, Heuristic

logger = logging.getLogger(__name__)


class AStar(Algorithm):
    """
    A* with an open list re-sorted by f = g + h before every pop.

    Python's sort is stable, so nodes with equal f leave the open list in
    the order they entered it. The result is only guaranteed optimal when
    the heuristic never overestimates the remaining cost.
    """

    INFO = AlgorithmInfo(
        display_name="A*",
        description=(
            "A* extends Dijkstra with a heuristic estimate of the remaining "
            "distance, expanding the most promising node first. Optimal when "
            "the heuristic never overestimates."
        ),
        time_best="O(E)",
        time_average="O(E log V)",
        time_worst="O(V^2)",
        space="O(V)",
        use_cases=(
            "Game pathfinding",
            "GPS navigation",
            "Puzzle solving",
        ),
        supports_weighted=True,
        supports_negative=False,
        finds_shortest_path=True,
    )

    def __init__(
        self,
        heuristic: Heuristic | None = None,
        snapshots: bool = RECORD_SNAPSHOTS,
    ) -> None:
        """
        Initialize A*.

        Args:
            heuristic: Remaining-cost estimate (default: EuclideanHeuristic
                with the configured scale)
            snapshots: Copy working state into each step
        """
        super().__init__(snapshots=snapshots)
        self._heuristic = heuristic or EuclideanHeuristic()

    @property
    def name(self) -> str:
        return "astar"

    @property
    def info(self) -> AlgorithmInfo:
        return self.INFO

    @property
    def requires_end(self) -> bool:
        return True

    @property
    def heuristic(self) -> Heuristic:
        return self._heuristic

    def _execute(
        self,
        graph: Graph,
        start_id: str,
        end_id: str | None,
        recorder: StepRecorder,
    ) -> AlgorithmResult:
        start_node = graph.get_node(start_id)
        end_node = graph.get_node(end_id)

        if len({(node.x, node.y) for node in graph.nodes}) == 1 and len(graph.nodes) > 1:
            logger.warning("All nodes share one position; the A* heuristic carries no information")

        def h(node_id: str) -> float:
            return self._heuristic(graph.get_node(node_id), end_node)

        g_score = {node.id: (0 if node.id == start_id else math.inf) for node in graph.nodes}
        f_score = {node.id: (h(start_id) if node.id == start_id else math.inf) for node in graph.nodes}
        parents: dict[str, str | None] = {start_id: None}
        open_list = [start_id]
        closed: set[str] = set()

        recorder.record(
            StepType.VISIT,
            f"Starting A* from {start_node.label} to {end_node.label}",
            node_id=start_id,
            distances=g_score,
        )

        while open_list:
            open_list.sort(key=f_score.__getitem__)
            current_id = open_list.pop(0)
            if current_id in closed:
                continue
            closed.add(current_id)

            recorder.record(
                StepType.VISIT,
                f"Processing {graph.label_of(current_id)} "
                f"(g={g_score[current_id]:.1f}, f={f_score[current_id]:.1f})",
                node_id=current_id,
                distances=g_score,
                visited=closed,
            )

            if current_id == end_id:
                path = reconstruct_path(parents, end_id)
                recorder.record(
                    StepType.COMPLETE,
                    f"Path found! Distance: {g_score[end_id]:.1f}",
                    distances=g_score,
                    current_path=path,
                )
                return AlgorithmResult(
                    algorithm=self.name,
                    shortest_path=path,
                    distances=dict(g_score),
                )

            for neighbor in graph.get_neighbors(current_id):
                neighbor_id = neighbor.node.id
                if neighbor_id in closed:
                    continue

                tentative_g = g_score[current_id] + neighbor.weight
                recorder.record(
                    StepType.EXPLORE,
                    f"Exploring {neighbor.node.label}: g={tentative_g:.1f}, "
                    f"h={h(neighbor_id):.1f}",
                    node_id=neighbor_id,
                    edge_id=neighbor.edge.id,
                    distances=g_score,
                )

                if tentative_g < g_score[neighbor_id]:
                    parents[neighbor_id] = current_id
                    g_score[neighbor_id] = tentative_g
                    f_score[neighbor_id] = tentative_g + h(neighbor_id)
                    if neighbor_id not in open_list:
                        open_list.append(neighbor_id)

                    recorder.record(
                        StepType.RELAX,
                        f"Updated {neighbor.node.label}: g={tentative_g:.1f}, "
                        f"f={f_score[neighbor_id]:.1f}",
                        node_id=neighbor_id,
                        edge_id=neighbor.edge.id,
                        distances=g_score,
                    )

        recorder.record(
            StepType.COMPLETE,
            "No path exists between start and end nodes",
            distances=g_score,
        )
        return AlgorithmResult(algorithm=self.name)

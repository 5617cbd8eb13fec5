"""
Dijkstra's single-source shortest paths for non-negative weights.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math

from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, StepType, format_distance
from pathlab.graph.model import Graph

logger = logging.getLogger(__name__)


class Dijkstra(Algorithm):
    """
    Dijkstra's algorithm with a lazy-deletion binary heap.

    Heap entries are (distance, insertion sequence, node id): the minimum
    distance is always popped first and equal distances come out in the
    order they were pushed. Entries for nodes that have since been settled
    are skipped when popped.
    """

    INFO = AlgorithmInfo(
        display_name="Dijkstra",
        description=(
            "Dijkstra's algorithm repeatedly settles the closest unsettled node "
            "and relaxes its outgoing edges. Finds shortest paths when all edge "
            "weights are non-negative."
        ),
        time_best="O((V + E) log V)",
        time_average="O((V + E) log V)",
        time_worst="O((V + E) log V)",
        space="O(V)",
        use_cases=(
            "Road navigation",
            "Network routing",
            "Weighted shortest paths",
        ),
        supports_weighted=True,
        supports_negative=False,
        finds_shortest_path=True,
    )

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def info(self) -> AlgorithmInfo:
        return self.INFO

    def _execute(
        self,
        graph: Graph,
        start_id: str,
        end_id: str | None,
        recorder: StepRecorder,
    ) -> AlgorithmResult:
        if graph.has_negative_weights:
            logger.warning("Dijkstra on a graph with negative weights; distances may be wrong")

        distances = {node.id: (0 if node.id == start_id else math.inf) for node in graph.nodes}
        parents: dict[str, str | None] = {start_id: None}
        visited: set[str] = set()
        sequence = itertools.count()
        heap = [(0, next(sequence), start_id)]

        recorder.record(
            StepType.VISIT,
            f"Starting Dijkstra from {graph.label_of(start_id)}",
            node_id=start_id,
            distances=distances,
            visited=visited,
        )

        while heap:
            current_dist, _, current_id = heapq.heappop(heap)

            if current_id in visited:
                continue
            if math.isinf(current_dist):
                break

            visited.add(current_id)
            recorder.record(
                StepType.VISIT,
                f"Processing {graph.label_of(current_id)} with distance "
                f"{format_distance(current_dist)}",
                node_id=current_id,
                distances=distances,
                visited=visited,
            )

            if end_id is not None and current_id == end_id:
                path = reconstruct_path(parents, end_id)
                recorder.record(
                    StepType.COMPLETE,
                    f"Shortest path found! Distance: {format_distance(distances[end_id])}",
                    distances=distances,
                    current_path=path,
                )
                return AlgorithmResult(
                    algorithm=self.name,
                    shortest_path=path,
                    distances=dict(distances),
                )

            for neighbor in graph.get_neighbors(current_id):
                neighbor_id = neighbor.node.id
                if neighbor_id in visited:
                    continue

                new_dist = current_dist + neighbor.weight
                old_dist = distances[neighbor_id]

                recorder.record(
                    StepType.EXPLORE,
                    f"Checking {neighbor.node.label}: current={format_distance(old_dist)}, "
                    f"new={format_distance(new_dist)}",
                    node_id=neighbor_id,
                    edge_id=neighbor.edge.id,
                    distances=distances,
                )

                if new_dist < old_dist:
                    distances[neighbor_id] = new_dist
                    parents[neighbor_id] = current_id
                    heapq.heappush(heap, (new_dist, next(sequence), neighbor_id))
                    recorder.record(
                        StepType.RELAX,
                        f"Updated distance to {neighbor.node.label}: {format_distance(new_dist)}",
                        node_id=neighbor_id,
                        edge_id=neighbor.edge.id,
                        distances=distances,
                    )

        if end_id is not None:
            # The end node was never settled, so it is unreachable
            recorder.record(StepType.COMPLETE, "No path exists", distances=distances)
            return AlgorithmResult(algorithm=self.name, distances=dict(distances))

        recorder.record(
            StepType.COMPLETE,
            "Dijkstra complete - All shortest paths computed",
            distances=distances,
        )
        return AlgorithmResult(algorithm=self.name, distances=dict(distances))

"""
Bellman-Ford shortest paths with negative cycle detection.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator

from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, StepType, format_distance
from pathlab.graph.model import Edge, Graph

logger = logging.getLogger(__name__)


def _directed_pairs(graph: Graph) -> Iterator[tuple[Edge, str, str]]:
    """(edge, from, to) for every edge; both directions when undirected."""
    for edge in graph.edges:
        yield edge, edge.source, edge.target
        if not graph.is_directed:
            yield edge, edge.target, edge.source


class BellmanFord(Algorithm):
    """
    Relaxes every edge up to n-1 times, then checks once more.

    If the extra pass can still shorten a distance, a negative cycle is
    reachable from the start and no path is reported. In an undirected
    graph any negative edge forms such a cycle (walk it back and forth).
    """

    INFO = AlgorithmInfo(
        display_name="Bellman-Ford",
        description=(
            "Bellman-Ford relaxes all edges V-1 times. Slower than Dijkstra but "
            "handles negative edge weights and detects negative cycles."
        ),
        time_best="O(E)",
        time_average="O(V * E)",
        time_worst="O(V * E)",
        space="O(V)",
        use_cases=(
            "Graphs with negative weights",
            "Negative cycle detection",
            "Distance-vector routing",
        ),
        supports_weighted=True,
        supports_negative=True,
        finds_shortest_path=True,
    )

    @property
    def name(self) -> str:
        return "bellman-ford"

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
        distances = {node.id: (0 if node.id == start_id else math.inf) for node in graph.nodes}
        parents: dict[str, str | None] = {start_id: None}
        passes = len(graph.nodes) - 1

        recorder.record(
            StepType.VISIT,
            f"Starting Bellman-Ford from {graph.label_of(start_id)}",
            node_id=start_id,
            distances=distances,
        )

        for iteration in range(1, passes + 1):
            updated = False
            recorder.record(
                StepType.VISIT,
                f"Iteration {iteration} of {passes}",
                distances=distances,
            )

            for edge, from_id, to_id in _directed_pairs(graph):
                from_dist = distances[from_id]
                if math.isinf(from_dist):
                    continue
                new_dist = from_dist + edge.weight
                if new_dist < distances[to_id]:
                    distances[to_id] = new_dist
                    parents[to_id] = from_id
                    updated = True
                    recorder.record(
                        StepType.RELAX,
                        f"Relaxed edge: distance to {graph.label_of(to_id)} = "
                        f"{format_distance(new_dist)}",
                        node_id=to_id,
                        edge_id=edge.id,
                        distances=distances,
                    )

            if not updated:
                recorder.record(
                    StepType.VISIT,
                    f"No updates in iteration {iteration}, terminating early",
                    distances=distances,
                )
                break

        for edge, from_id, to_id in _directed_pairs(graph):
            from_dist = distances[from_id]
            if not math.isinf(from_dist) and from_dist + edge.weight < distances[to_id]:
                logger.info(f"Negative cycle detected through edge '{edge.id}'")
                recorder.record(
                    StepType.CYCLE_DETECTED,
                    "Negative cycle detected!",
                    node_id=to_id,
                    edge_id=edge.id,
                    distances=distances,
                )
                recorder.record(
                    StepType.COMPLETE,
                    "Algorithm complete - Negative cycle exists!",
                    distances=distances,
                )
                return AlgorithmResult(
                    algorithm=self.name,
                    distances=dict(distances),
                    has_negative_cycle=True,
                )

        if end_id is not None:
            end_dist = distances[end_id]
            if math.isinf(end_dist):
                recorder.record(StepType.COMPLETE, "No path exists", distances=distances)
                return AlgorithmResult(
                    algorithm=self.name,
                    distances=dict(distances),
                    has_negative_cycle=False,
                )

            path = reconstruct_path(parents, end_id)
            recorder.record(
                StepType.COMPLETE,
                f"Shortest path: {format_distance(end_dist)}",
                distances=distances,
                current_path=path,
            )
            return AlgorithmResult(
                algorithm=self.name,
                shortest_path=path,
                distances=dict(distances),
                has_negative_cycle=False,
            )

        recorder.record(StepType.COMPLETE, "Bellman-Ford complete", distances=distances)
        return AlgorithmResult(
            algorithm=self.name,
            distances=dict(distances),
            has_negative_cycle=False,
        )

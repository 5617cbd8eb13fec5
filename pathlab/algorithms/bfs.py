"""
Breadth-first search.

Visits nodes in order of hop count from the start; the first time the end
node is dequeued, the parent chain gives a path with the fewest edges.
"""

from __future__ import annotations

import logging
from collections import deque

from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, StepType
from pathlab.graph.model import Graph

logger = logging.getLogger(__name__)


class BreadthFirstSearch(Algorithm):
    """
    FIFO traversal with parent tracking.

    A node is enqueued only the first time it is discovered, and marked
    visited when it is dequeued. Every node therefore gets exactly one
    visit step; the start node's visit step announces the run.
    """

    INFO = AlgorithmInfo(
        display_name="BFS",
        description=(
            "Breadth-First Search explores all neighbours at the current depth "
            "before moving deeper. Finds the path with the fewest edges in an "
            "unweighted graph."
        ),
        time_best="O(V + E)",
        time_average="O(V + E)",
        time_worst="O(V + E)",
        space="O(V)",
        use_cases=(
            "Shortest path in unweighted graphs",
            "Level-order traversal",
            "Connected components",
        ),
        supports_weighted=False,
        supports_negative=False,
        finds_shortest_path=True,
    )

    @property
    def name(self) -> str:
        return "bfs"

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
        visited: set[str] = set()
        parents: dict[str, str | None] = {start_id: None}
        queue = deque([start_id])

        while queue:
            current_id = queue.popleft()
            if current_id in visited:
                continue
            visited.add(current_id)

            label = graph.label_of(current_id)
            if current_id == start_id:
                message = f"Starting BFS from node {label}"
            else:
                message = f"Visiting node {label}"
            recorder.record(
                StepType.VISIT,
                message,
                node_id=current_id,
                visited=visited,
                queue=queue,
            )

            if end_id is not None and current_id == end_id:
                path = reconstruct_path(parents, end_id)
                recorder.record(
                    StepType.COMPLETE,
                    f"Found target node {label}! Path length: {len(path) - 1}",
                    visited=visited,
                    current_path=path,
                )
                return AlgorithmResult(algorithm=self.name, shortest_path=path)

            for neighbor in graph.get_neighbors(current_id):
                neighbor_id = neighbor.node.id
                if neighbor_id in visited:
                    continue

                if neighbor_id not in parents:
                    parents[neighbor_id] = current_id
                    queue.append(neighbor_id)

                recorder.record(
                    StepType.EXPLORE,
                    f"Exploring edge to {neighbor.node.label}",
                    node_id=neighbor_id,
                    edge_id=neighbor.edge.id,
                    visited=visited,
                    queue=queue,
                )

        if end_id is not None:
            message = "Target node not reachable from start"
        else:
            message = "BFS traversal complete"
        recorder.record(StepType.COMPLETE, message, visited=visited)
        return AlgorithmResult(algorithm=self.name)

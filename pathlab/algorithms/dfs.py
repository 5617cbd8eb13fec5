"""
Depth-first search with back-edge cycle detection.

Uses an explicit stack of neighbour iterators instead of recursion, so deep
graphs cannot hit the interpreter's recursion limit. The order of recorded
steps is the same as the recursive formulation.
"""

from __future__ import annotations

import logging
from typing import Iterator

from pathlab.algorithms.base import Algorithm, AlgorithmInfo, reconstruct_path
from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult, StepType
from pathlab.config import RECORD_SNAPSHOTS
from pathlab.graph.model import Graph, Neighbor

logger = logging.getLogger(__name__)


class DepthFirstSearch(Algorithm):
    """
    Depth-first traversal that reports cycles.

    A cycle is an explored edge whose target is still on the recursion
    stack. In undirected graphs the edge back to the immediate parent is
    ignored, since every undirected edge would otherwise look like a cycle.
    """

    INFO = AlgorithmInfo(
        display_name="DFS",
        description=(
            "Depth-First Search follows each branch as deep as possible before "
            "backtracking. Detects cycles through back edges to nodes on the "
            "current recursion path."
        ),
        time_best="O(V + E)",
        time_average="O(V + E)",
        time_worst="O(V + E)",
        space="O(V)",
        use_cases=(
            "Cycle detection",
            "Topological sorting",
            "Maze solving",
        ),
        supports_weighted=False,
        supports_negative=False,
        finds_shortest_path=False,
    )

    def __init__(self, detect_cycles: bool = True, snapshots: bool = RECORD_SNAPSHOTS) -> None:
        """
        Initialize DFS.

        Args:
            detect_cycles: Record cycle-detected steps for back edges
            snapshots: Copy working state into each step
        """
        super().__init__(snapshots=snapshots)
        self._detect_cycles = detect_cycles

    @property
    def name(self) -> str:
        return "dfs"

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
        parents: dict[str, str | None] = {}
        # Recursion stack in entry order; dict keys double as an ordered set
        on_stack: dict[str, None] = {}
        frames: list[tuple[str, str | None, Iterator[Neighbor]]] = []
        has_cycle = False

        def enter(node_id: str, parent_id: str | None) -> bool:
            """Visit a node; True if it is the end node."""
            visited.add(node_id)
            on_stack[node_id] = None
            parents[node_id] = parent_id
            label = graph.label_of(node_id)

            recorder.record(
                StepType.VISIT,
                f"Visiting node {label}",
                node_id=node_id,
                visited=visited,
                stack=on_stack,
            )

            if end_id is not None and node_id == end_id:
                path = reconstruct_path(parents, end_id)
                recorder.record(
                    StepType.COMPLETE,
                    f"Found target node {label}! Path length: {len(path) - 1}",
                    visited=visited,
                    current_path=path,
                )
                return True

            frames.append((node_id, parent_id, iter(graph.get_neighbors(node_id))))
            return False

        found_end = enter(start_id, None)

        while frames and not found_end:
            node_id, parent_id, pending = frames[-1]
            neighbor = next(pending, None)

            if neighbor is None:
                # All edges of node_id explored: backtrack
                frames.pop()
                del on_stack[node_id]
                continue

            neighbor_id = neighbor.node.id
            recorder.record(
                StepType.EXPLORE,
                f"Exploring edge to {neighbor.node.label}",
                node_id=neighbor_id,
                edge_id=neighbor.edge.id,
                visited=visited,
                stack=on_stack,
            )

            if neighbor_id not in visited:
                found_end = enter(neighbor_id, node_id)
            elif self._detect_cycles and neighbor_id in on_stack:
                if graph.is_directed or neighbor_id != parent_id:
                    has_cycle = True
                    recorder.record(
                        StepType.CYCLE_DETECTED,
                        f"Cycle detected! Back edge to {neighbor.node.label}",
                        node_id=neighbor_id,
                        edge_id=neighbor.edge.id,
                        visited=visited,
                    )

        if found_end:
            return AlgorithmResult(
                algorithm=self.name,
                shortest_path=reconstruct_path(parents, end_id),
                has_cycle=has_cycle,
            )

        if has_cycle:
            message = "DFS complete - Cycle detected!"
        elif end_id is not None:
            message = "DFS complete - Target node not reachable"
        else:
            message = "DFS traversal complete - No cycle found"
        recorder.record(StepType.COMPLETE, message, visited=visited)

        logger.debug(f"DFS visited {len(visited)} nodes, cycle={has_cycle}")
        return AlgorithmResult(algorithm=self.name, has_cycle=has_cycle)

"""
Step-by-step playback of a finished run.

Turns the step log into the highlight state a renderer draws: the node and
edge the current step is about, everything visited so far, and the final
path once it is known. Scheduling (timers, pause/resume) stays with the
caller; this is only a cursor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from pathlab.algorithms.state import AlgorithmResult, AlgorithmStep, StepType
from pathlab.graph.model import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackFrame:
    """
    Highlight state after applying steps[0..index].

    Attributes:
        index: 0-indexed position of the current step
        step: The current step
        highlighted_nodes: Node the current step is about (0 or 1 ids)
        highlighted_edges: Edge the current step is about (0 or 1 ids)
        visited_nodes: Union of every visited snapshot so far
        path_nodes: Nodes on the final path (empty until it is reported)
        path_edges: Edges on the final path
    """

    index: int
    step: AlgorithmStep
    highlighted_nodes: frozenset[str]
    highlighted_edges: frozenset[str]
    visited_nodes: frozenset[str]
    path_nodes: frozenset[str]
    path_edges: frozenset[str]


class Playback:
    """
    Cursor over an AlgorithmResult's steps.

    The cursor starts on the first step. Moving past either end is a no-op,
    so the last frame stays on screen once playback finishes.
    """

    def __init__(self, result: AlgorithmResult, graph: Graph) -> None:
        """
        Args:
            result: Finished run to replay
            graph: The graph the run was made on (used to map paths to edges)
        """
        self._steps = list(result.steps)
        self._graph = graph
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def is_finished(self) -> bool:
        """Whether the cursor is on the last step."""
        return self._index >= len(self._steps) - 1

    @property
    def frame(self) -> PlaybackFrame | None:
        """Highlight state at the cursor, or None for an empty trace."""
        if not self._steps:
            return None
        return self._build_frame(self._index)

    def step_forward(self) -> PlaybackFrame | None:
        if self._index < len(self._steps) - 1:
            self._index += 1
        return self.frame

    def step_backward(self) -> PlaybackFrame | None:
        if self._index > 0:
            self._index -= 1
        return self.frame

    def seek(self, index: int) -> PlaybackFrame | None:
        """
        Jump to a step.

        Raises:
            IndexError: If index is outside the trace
        """
        if not 0 <= index < len(self._steps):
            raise IndexError(f"Step {index} out of range [0, {len(self._steps)})")
        self._index = index
        return self.frame

    def reset(self) -> PlaybackFrame | None:
        self._index = 0
        return self.frame

    def frames(self) -> Iterator[PlaybackFrame]:
        """Every frame from the first step to the last (cursor unaffected)."""
        visited: set[str] = set()
        path: tuple[str, ...] = ()
        path_edges: frozenset[str] = frozenset()
        for index, step in enumerate(self._steps):
            if step.visited is not None:
                visited.update(step.visited)
            if step.type == StepType.COMPLETE and step.current_path:
                path = step.current_path
                path_edges = frozenset(self._graph.path_edge_ids(path))
            yield self._make_frame(index, visited, path, path_edges)

    def _build_frame(self, index: int) -> PlaybackFrame:
        visited: set[str] = set()
        path: tuple[str, ...] = ()
        for past in self._steps[: index + 1]:
            if past.visited is not None:
                visited.update(past.visited)
            if past.type == StepType.COMPLETE and past.current_path:
                path = past.current_path

        path_edges = frozenset(self._graph.path_edge_ids(path)) if path else frozenset()
        return self._make_frame(index, visited, path, path_edges)

    def _make_frame(
        self,
        index: int,
        visited: set[str],
        path: tuple[str, ...],
        path_edges: frozenset[str],
    ) -> PlaybackFrame:
        step = self._steps[index]
        return PlaybackFrame(
            index=index,
            step=step,
            highlighted_nodes=frozenset([step.node_id] if step.node_id else []),
            highlighted_edges=frozenset([step.edge_id] if step.edge_id else []),
            visited_nodes=frozenset(visited),
            path_nodes=frozenset(path),
            path_edges=path_edges,
        )

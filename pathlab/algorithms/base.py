"""
Algorithm base class.

Subclasses implement _execute(); the public run() validates the invocation
first so no step is ever recorded for a call that cannot succeed.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Mapping

from pathlab.algorithms.recorder import StepRecorder
from pathlab.algorithms.state import AlgorithmResult
from pathlab.config import RECORD_SNAPSHOTS
from pathlab.errors import InvalidInvocationError
from pathlab.graph.model import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Reference card for an algorithm.

    Attributes:
        display_name: Name shown to users (e.g. "A*")
        description: One-paragraph summary
        time_best / time_average / time_worst: Big-O time complexity
        space: Big-O space complexity
        use_cases: Typical applications
        supports_weighted: Uses edge weights
        supports_negative: Correct with negative edge weights
        finds_shortest_path: Guarantees a shortest path when one exists
    """

    display_name: str
    description: str
    time_best: str
    time_average: str
    time_worst: str
    space: str
    use_cases: tuple[str, ...]
    supports_weighted: bool
    supports_negative: bool
    finds_shortest_path: bool


class Algorithm(ABC):
    """
    Abstract base class for step-recording graph algorithms.

    Instances hold configuration only; every run() gets fresh working state,
    so one instance can be reused safely.
    """

    def __init__(self, snapshots: bool = RECORD_SNAPSHOTS) -> None:
        self._snapshots = snapshots

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry identifier (e.g. 'bfs', 'bellman-ford')."""
        ...

    @property
    @abstractmethod
    def info(self) -> AlgorithmInfo:
        ...

    @property
    def description(self) -> str:
        return self.info.description

    @property
    def requires_end(self) -> bool:
        """Whether run() needs an end node."""
        return False

    def validate(self, graph: Graph, start_id: str, end_id: str | None = None) -> None:
        """
        Check that this algorithm can run on the given input.

        Raises:
            InvalidInvocationError: If start/end are missing from the graph,
                or an end node is required but not given
        """
        if not graph.nodes:
            raise InvalidInvocationError(
                f"Cannot run {self.info.display_name}: the graph has no nodes"
            )
        if not graph.has_node(start_id):
            raise InvalidInvocationError(f"Start node '{start_id}' is not in the graph")
        if end_id is None:
            if self.requires_end:
                raise InvalidInvocationError(f"{self.info.display_name} requires an end node")
        elif not graph.has_node(end_id):
            raise InvalidInvocationError(f"End node '{end_id}' is not in the graph")

    def run(self, graph: Graph, start_id: str, end_id: str | None = None) -> AlgorithmResult:
        """
        Run to completion and return the full trace.

        Args:
            graph: Graph to traverse (never modified)
            start_id: Id of the start node
            end_id: Optional id of the target node

        Returns:
            AlgorithmResult whose last step is always a terminal step

        Raises:
            InvalidInvocationError: If validate() rejects the input
        """
        self.validate(graph, start_id, end_id)
        recorder = StepRecorder(snapshots=self._snapshots)
        result = self._execute(graph, start_id, end_id, recorder)
        result.steps = recorder.steps
        return result

    @abstractmethod
    def _execute(
        self,
        graph: Graph,
        start_id: str,
        end_id: str | None,
        recorder: StepRecorder,
    ) -> AlgorithmResult:
        """Algorithm body. Steps go to recorder; run() attaches them to the result."""
        ...

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def reconstruct_path(parents: Mapping[str, str | None], end_id: str) -> list[str]:
    """
    Follow parent links back from end_id.

    Returns:
        Node ids from the root of the parent chain to end_id
    """
    path = []
    current: str | None = end_id
    while current is not None:
        path.append(current)
        current = parents.get(current)
    path.reverse()
    return path

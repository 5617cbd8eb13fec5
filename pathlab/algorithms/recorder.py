"""
Step recorder shared by every algorithm.

Each state change an algorithm makes is paired with one record() call, in
the order the change happened. The recorder copies whatever containers it
is handed, so the trace is a history rather than a live view.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from pathlab.algorithms.state import AlgorithmStep, StepType, freeze_distances
from pathlab.config import RECORD_SNAPSHOTS

logger = logging.getLogger(__name__)


class StepRecorder:
    """
    Append-only log of AlgorithmSteps for one run.

    Args:
        snapshots: Copy distances/visited/frontier into each step. When
            False those fields are left empty to keep memory flat on big
            graphs; ids, messages and the final path are always kept.
    """

    def __init__(self, snapshots: bool = RECORD_SNAPSHOTS) -> None:
        self._snapshots = snapshots
        self._steps: list[AlgorithmStep] = []

    @property
    def steps(self) -> list[AlgorithmStep]:
        """Copy of the steps recorded so far."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def record(
        self,
        step_type: StepType,
        message: str,
        *,
        node_id: str | None = None,
        edge_id: str | None = None,
        distances: Mapping[str, float] | None = None,
        visited: Iterable[str] | None = None,
        queue: Iterable[str] | None = None,
        stack: Iterable[str] | None = None,
        current_path: Iterable[str] | None = None,
    ) -> AlgorithmStep:
        """Append a step, snapshotting every container argument."""
        if self._snapshots:
            step = AlgorithmStep(
                type=step_type,
                message=message,
                node_id=node_id,
                edge_id=edge_id,
                distances=freeze_distances(distances) if distances is not None else None,
                visited=frozenset(visited) if visited is not None else None,
                queue=tuple(queue) if queue is not None else None,
                stack=tuple(stack) if stack is not None else None,
                current_path=tuple(current_path) if current_path is not None else None,
            )
        else:
            step = AlgorithmStep(
                type=step_type,
                message=message,
                node_id=node_id,
                edge_id=edge_id,
                current_path=tuple(current_path) if current_path is not None else None,
            )

        self._steps.append(step)
        logger.debug(f"Step {len(self._steps)} [{step_type.value}]: {message}")
        return step

"""
Step and result records produced by algorithm runs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class StepType(str, Enum):
    """Kinds of observable events in an execution trace."""

    VISIT = "visit"
    EXPLORE = "explore"
    RELAX = "relax"
    PATH = "path"
    COMPLETE = "complete"
    CYCLE_DETECTED = "cycle-detected"


@dataclass(frozen=True)
class AlgorithmStep:
    """
    A single recorded event.

    Container attributes are snapshots taken when the step was recorded;
    later changes to the algorithm's working state never show up here.

    Attributes:
        type: What happened
        message: Human-readable description for a step log
        node_id: Node the event concerns, if any
        edge_id: Edge the event concerns, if any
        distances: Best-known distance per node (math.inf if unknown)
        visited: Cumulative set of visited/settled nodes
        queue: BFS frontier, front first
        stack: DFS recursion stack, bottom first
        current_path: Final path (complete steps only)
    """

    type: StepType
    message: str
    node_id: str | None = None
    edge_id: str | None = None
    distances: Mapping[str, float] | None = None
    visited: frozenset[str] | None = None
    queue: tuple[str, ...] | None = None
    stack: tuple[str, ...] | None = None
    current_path: tuple[str, ...] | None = None


@dataclass
class AlgorithmResult:
    """
    Complete record of a finished run.

    Attributes:
        algorithm: Registry name of the algorithm that produced it
        steps: Ordered execution trace
        shortest_path: Node ids from start to end, if a path was found
        distances: Final distance map (shortest-path algorithms)
        has_cycle: Whether DFS found a back edge
        has_negative_cycle: Whether Bellman-Ford found a negative cycle
    """

    algorithm: str
    steps: list[AlgorithmStep] = field(default_factory=list)
    shortest_path: list[str] | None = None
    distances: dict[str, float] | None = None
    has_cycle: bool | None = None
    has_negative_cycle: bool | None = None

    @property
    def found_path(self) -> bool:
        return self.shortest_path is not None

    @property
    def path_length(self) -> int | None:
        """Number of edges in the path, or None if no path was found."""
        if self.shortest_path is None:
            return None
        return len(self.shortest_path) - 1

    @property
    def final_step(self) -> AlgorithmStep | None:
        return self.steps[-1] if self.steps else None

    def steps_of(self, step_type: StepType) -> list[AlgorithmStep]:
        """All steps of one type, in order."""
        return [step for step in self.steps if step.type == step_type]


def freeze_distances(distances: Mapping[str, float]) -> Mapping[str, float]:
    """Read-only copy of a distance map."""
    return MappingProxyType(dict(distances))


def format_distance(value: float) -> str:
    """Render a distance for step messages: 7, 2.5, or ∞."""
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"

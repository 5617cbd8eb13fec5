"""
Position-based heuristics for A*.

Node coordinates are presentation metadata, so any heuristic built on them
is only admissible if edge weights are consistent with on-screen distance.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from pathlab.config import ASTAR_HEURISTIC_SCALE
from pathlab.graph.model import Node


class Heuristic(ABC):
    """Estimate of the remaining cost from a node to the goal."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def estimate(self, node: Node, goal: Node) -> float:
        """Estimated cost of reaching goal from node."""
        ...

    def __call__(self, node: Node, goal: Node) -> float:
        return self.estimate(node, goal)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


class EuclideanHeuristic(Heuristic):
    """
    Straight-line distance between positions divided by a scale.

    The default scale of 50 assumes roughly one unit of weight per 50 units
    of on-screen distance.
    """

    def __init__(self, scale: float = ASTAR_HEURISTIC_SCALE) -> None:
        if scale <= 0:
            raise ValueError(f"Heuristic scale must be positive, got {scale}")
        self._scale = scale

    @property
    def name(self) -> str:
        return "euclidean"

    @property
    def scale(self) -> float:
        return self._scale

    def estimate(self, node: Node, goal: Node) -> float:
        return math.hypot(node.x - goal.x, node.y - goal.y) / self._scale


class ZeroHeuristic(Heuristic):
    """Admissible for any non-negative weights; makes A* behave like Dijkstra."""

    @property
    def name(self) -> str:
        return "zero"

    def estimate(self, node: Node, goal: Node) -> float:
        return 0.0

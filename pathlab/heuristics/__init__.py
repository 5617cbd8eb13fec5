"""
Heuristics module.

Provides heuristic functions for guiding A* search:
- EuclideanHeuristic: Straight-line distance between node positions, scaled
- ZeroHeuristic: Always 0 (A* degenerates to Dijkstra)
"""

from pathlab.heuristics.spatial import EuclideanHeuristic, Heuristic, ZeroHeuristic

__all__ = ["Heuristic", "EuclideanHeuristic", "ZeroHeuristic"]

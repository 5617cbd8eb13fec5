"""
Pathlab: step-by-step graph algorithm engine.

Builds small in-memory graphs and runs BFS, DFS, Dijkstra, Bellman-Ford
and A* over them, recording every state change as a replayable step log.
"""

__version__ = "0.1.0"

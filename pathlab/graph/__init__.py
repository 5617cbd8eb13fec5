"""
Graph model module.

Provides the immutable in-memory graph and pure queries over it:
- Graph, Node, Edge, Neighbor: the data model
- get_adjacency_matrix / get_distance_matrix: matrix views
- create_sample_graph / create_grid_graph: demo graphs
"""

from pathlab.graph.matrix import MatrixView, get_adjacency_matrix, get_distance_matrix
from pathlab.graph.model import Edge, Graph, Neighbor, Node, create_empty_graph
from pathlab.graph.samples import create_grid_graph, create_sample_graph

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "Neighbor",
    "MatrixView",
    "create_empty_graph",
    "get_adjacency_matrix",
    "get_distance_matrix",
    "create_sample_graph",
    "create_grid_graph",
]

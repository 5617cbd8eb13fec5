"""
Adjacency and all-pairs distance matrices.

Rows and columns follow the order of graph.nodes. Missing entries are
None in the returned matrices; numpy.inf is only used internally.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pathlab.graph.model import Graph


@dataclass(frozen=True)
class MatrixView:
    """
    A square matrix labelled by node.

    Attributes:
        matrix: Row-major values, None where there is no connection
        labels: Node label for each row/column
        node_ids: Node id for each row/column
    """

    matrix: list[list[float | None]]
    labels: list[str]
    node_ids: list[str]

    def value(self, source_id: str, target_id: str) -> float | None:
        """Entry for a (source, target) pair of node ids."""
        return self.matrix[self.node_ids.index(source_id)][self.node_ids.index(target_id)]

    def to_array(self) -> np.ndarray:
        """Float array with numpy.inf in place of None."""
        return np.array(
            [[np.inf if v is None else v for v in row] for row in self.matrix],
            dtype=float,
        ).reshape(len(self.node_ids), len(self.node_ids))


def get_adjacency_matrix(graph: Graph) -> MatrixView:
    """
    Edge weights between every pair of nodes.

    The diagonal is 0; undirected graphs produce a symmetric matrix.
    """
    n = len(graph.nodes)
    index = {node.id: i for i, node in enumerate(graph.nodes)}

    matrix: list[list[float | None]] = [[None] * n for _ in range(n)]
    for i in range(n):
        matrix[i][i] = 0

    for edge in graph.edges:
        source = index.get(edge.source)
        target = index.get(edge.target)
        if source is None or target is None:
            continue
        matrix[source][target] = edge.weight
        if not graph.is_directed:
            matrix[target][source] = edge.weight

    return MatrixView(
        matrix=matrix,
        labels=[node.label for node in graph.nodes],
        node_ids=[node.id for node in graph.nodes],
    )


def get_distance_matrix(graph: Graph) -> MatrixView:
    """
    All-pairs shortest path lengths (Floyd-Warshall, O(n^3)).

    Unreachable pairs are None. With a negative cycle the affected entries,
    including the diagonal, come out negative.
    """
    adjacency = get_adjacency_matrix(graph)
    dist = adjacency.to_array()

    # One relaxation sweep per intermediate node k
    for k in range(len(dist)):
        dist = np.minimum(dist, dist[:, k, np.newaxis] + dist[np.newaxis, k, :])

    matrix = [
        [None if np.isinf(value) else _as_number(value) for value in row]
        for row in dist
    ]
    return MatrixView(matrix=matrix, labels=adjacency.labels, node_ids=adjacency.node_ids)


def _as_number(value: np.floating) -> float | int:
    """Convert a numpy scalar back to a plain int when it is integral."""
    value = float(value)
    return int(value) if value.is_integer() else value

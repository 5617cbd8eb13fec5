"""
Ready-made graphs for demos, scripts and tests.
"""

from __future__ import annotations

import random

from pathlab.config import GRID_OFFSET, GRID_SPACING, GRID_WEIGHT_MAX, GRID_WEIGHT_MIN
from pathlab.graph.model import Edge, Graph, Node, default_label


def create_sample_graph() -> Graph:
    """
    Six-node undirected weighted graph.

        A --4-- B --3-- C
        |       |       |
        2       1       5
        |       |       |
        D --3-- E --2-- F

    Shortest A -> F distance is 7 (A-D-E-F and A-B-E-F tie).
    """
    nodes = [
        Node(id="n1", x=150, y=100, label="A"),
        Node(id="n2", x=350, y=100, label="B"),
        Node(id="n3", x=550, y=100, label="C"),
        Node(id="n4", x=150, y=300, label="D"),
        Node(id="n5", x=350, y=300, label="E"),
        Node(id="n6", x=550, y=300, label="F"),
    ]
    edges = [
        Edge(id="e1", source="n1", target="n2", weight=4),
        Edge(id="e2", source="n1", target="n4", weight=2),
        Edge(id="e3", source="n2", target="n3", weight=3),
        Edge(id="e4", source="n2", target="n5", weight=1),
        Edge(id="e5", source="n3", target="n6", weight=5),
        Edge(id="e6", source="n4", target="n5", weight=3),
        Edge(id="e7", source="n5", target="n6", weight=2),
    ]
    return Graph(nodes=tuple(nodes), edges=tuple(edges), is_directed=False, is_weighted=True)


def create_grid_graph(
    rows: int,
    cols: int,
    spacing: float = GRID_SPACING,
    seed: int | None = None,
) -> Graph:
    """
    Undirected rows x cols lattice with random integer weights.

    Node ids are "grid_<row>_<col>"; each node links to its right and lower
    neighbours.

    Args:
        rows: Number of rows
        cols: Number of columns
        spacing: Distance between neighbouring nodes
        seed: Random seed for reproducible weights
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid size must be non-negative, got {rows}x{cols}")

    rng = random.Random(seed)
    nodes = []
    edges = []

    for r in range(rows):
        for c in range(cols):
            nodes.append(
                Node(
                    id=f"grid_{r}_{c}",
                    x=GRID_OFFSET + c * spacing,
                    y=GRID_OFFSET + r * spacing,
                    label=default_label(len(nodes)),
                )
            )

    for r in range(rows):
        for c in range(cols):
            current = f"grid_{r}_{c}"
            if c < cols - 1:
                edges.append(
                    Edge(
                        id=f"grid_edge_{len(edges)}",
                        source=current,
                        target=f"grid_{r}_{c + 1}",
                        weight=rng.randint(GRID_WEIGHT_MIN, GRID_WEIGHT_MAX),
                    )
                )
            if r < rows - 1:
                edges.append(
                    Edge(
                        id=f"grid_edge_{len(edges)}",
                        source=current,
                        target=f"grid_{r + 1}_{c}",
                        weight=rng.randint(GRID_WEIGHT_MIN, GRID_WEIGHT_MAX),
                    )
                )

    return Graph(nodes=tuple(nodes), edges=tuple(edges), is_directed=False, is_weighted=True)

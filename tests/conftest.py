"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import random
from typing import Callable

import pytest

from pathlab.graph import Edge, Graph, Node, create_sample_graph


@pytest.fixture
def sample_graph() -> Graph:
    """Six-node undirected weighted graph A-F (ids n1..n6)."""
    return create_sample_graph()


@pytest.fixture
def ids(sample_graph: Graph) -> dict[str, str]:
    """Map sample graph labels to node ids."""
    return {node.label: node.id for node in sample_graph.nodes}


@pytest.fixture
def single_node_graph() -> Graph:
    """One node, no edges."""
    return Graph(nodes=(Node(id="solo", x=0, y=0, label="A"),))


def build_graph(
    edges: list[tuple[str, str, float]],
    directed: bool = False,
    extra_nodes: tuple[str, ...] = (),
) -> Graph:
    """Graph whose node ids and labels are the names used in edges."""
    names: list[str] = []
    for source, target, _ in edges:
        for name in (source, target):
            if name not in names:
                names.append(name)
    names.extend(name for name in extra_nodes if name not in names)

    nodes = tuple(Node(id=name, x=i * 100, y=0, label=name) for i, name in enumerate(names))
    edge_objs = tuple(
        Edge(id=f"{source}{target}", source=source, target=target, weight=weight)
        for source, target, weight in edges
    )
    return Graph(nodes=nodes, edges=edge_objs, is_directed=directed)


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Factory: make_graph([("A", "B", 1), ...], directed=False)."""
    return build_graph


@pytest.fixture
def random_graph() -> Callable[..., Graph]:
    """
    Factory for seeded random graphs.

    random_graph(seed, directed=False, n=7, density=0.35, weights=(1, 9))
    """

    def _make(
        seed: int,
        directed: bool = False,
        n: int = 7,
        density: float = 0.35,
        weights: tuple[int, int] = (1, 9),
    ) -> Graph:
        rng = random.Random(seed)
        names = [f"v{i}" for i in range(n)]
        edges = []
        for i, source in enumerate(names):
            for j, target in enumerate(names):
                if i == j or (not directed and j < i):
                    continue
                if rng.random() < density:
                    edges.append((source, target, rng.randint(*weights)))
        graph = build_graph(edges, directed=directed, extra_nodes=tuple(names))
        # Spread nodes out so spatial heuristics are not degenerate
        for node in graph.nodes:
            graph = graph.update_node(node.id, x=rng.randint(0, 500), y=rng.randint(0, 500))
        return graph

    return _make

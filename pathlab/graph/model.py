"""
Immutable graph model.

Every mutator returns a new Graph and leaves the original untouched, so a
graph handed to an algorithm can never change underneath it.
"""

from __future__ import annotations

import logging
import math
import uuid
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Iterable

from pathlab.config import DEFAULT_EDGE_WEIGHT, DEFAULT_IS_DIRECTED, DEFAULT_IS_WEIGHTED
from pathlab.errors import GraphError

logger = logging.getLogger(__name__)


def generate_node_id() -> str:
    return f"node_{uuid.uuid4().hex[:12]}"


def generate_edge_id() -> str:
    return f"edge_{uuid.uuid4().hex[:12]}"


def default_label(index: int) -> str:
    """Spreadsheet-style label for the index-th node: A..Z, AA, AB, ..."""
    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(65 + remainder) + label
    return label


def is_finite_number(value: object) -> bool:
    """Whether value is a real, finite, non-boolean number."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


@dataclass(frozen=True)
class Node:
    """
    A graph vertex.

    Attributes:
        id: Unique, stable identifier
        x: Horizontal position (only used by spatial heuristics)
        y: Vertical position
        label: Display name
    """

    id: str
    x: float
    y: float
    label: str


@dataclass(frozen=True)
class Edge:
    """
    A connection between two nodes.

    Direction is a property of the graph, not the edge: in an undirected
    graph source and target are interchangeable.
    """

    id: str
    source: str
    target: str
    weight: float = DEFAULT_EDGE_WEIGHT

    def connects(self, a: str, b: str, directed: bool) -> bool:
        """Whether this edge joins a to b (in either order when undirected)."""
        if self.source == a and self.target == b:
            return True
        return not directed and self.source == b and self.target == a


@dataclass(frozen=True)
class Neighbor:
    """A node reachable from another through a single edge."""

    node: Node
    edge: Edge
    weight: float


@dataclass(frozen=True)
class Graph:
    """
    Nodes, edges and the graph-level direction/weighting flags.

    is_weighted only describes how weights are presented; algorithms always
    use the stored edge weight regardless of this flag.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    is_directed: bool = DEFAULT_IS_DIRECTED
    is_weighted: bool = DEFAULT_IS_WEIGHTED
    _index: dict[str, Node] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        object.__setattr__(self, "_index", {node.id: node for node in self.nodes})
        self._validate()

    def _validate(self) -> None:
        if len(self._index) != len(self.nodes):
            raise GraphError("Duplicate node id in graph")

        for node in self.nodes:
            if not (is_finite_number(node.x) and is_finite_number(node.y)):
                raise GraphError(
                    f"Node '{node.id}' has a non-numeric position ({node.x!r}, {node.y!r})"
                )

        edge_ids: set[str] = set()
        pairs: set[tuple[str, str]] = set()
        for edge in self.edges:
            if edge.id in edge_ids:
                raise GraphError(f"Duplicate edge id '{edge.id}'")
            edge_ids.add(edge.id)

            if not is_finite_number(edge.weight):
                raise GraphError(f"Edge '{edge.id}' has an invalid weight {edge.weight!r}")

            for endpoint in (edge.source, edge.target):
                if endpoint not in self._index:
                    raise GraphError(f"Edge '{edge.id}' references missing node '{endpoint}'")

            if edge.source == edge.target:
                raise GraphError(f"Edge '{edge.id}' is a self-loop on '{edge.source}'")

            pair = (edge.source, edge.target)
            if not self.is_directed:
                pair = tuple(sorted(pair))
            if pair in pairs:
                raise GraphError(
                    f"Edge '{edge.id}' duplicates an existing edge between "
                    f"'{edge.source}' and '{edge.target}'"
                )
            pairs.add(pair)

    @classmethod
    def empty(
        cls,
        is_directed: bool = DEFAULT_IS_DIRECTED,
        is_weighted: bool = DEFAULT_IS_WEIGHTED,
    ) -> Graph:
        """Graph with no nodes or edges."""
        return cls(is_directed=is_directed, is_weighted=is_weighted)

    # =========================================================================
    # Lookups
    # =========================================================================

    def has_node(self, node_id: str) -> bool:
        return node_id in self._index

    def get_node(self, node_id: str) -> Node | None:
        """Get node by id, or None if not found."""
        return self._index.get(node_id)

    def get_edge(self, edge_id: str) -> Edge | None:
        """Get edge by id, or None if not found."""
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        return None

    def find_edge(self, source: str, target: str) -> Edge | None:
        """First edge leading from source to target, respecting direction."""
        for edge in self.edges:
            if edge.connects(source, target, self.is_directed):
                return edge
        return None

    def find_node_by_label(self, label: str) -> Node | None:
        """First node with this label, or None (labels need not be unique)."""
        for node in self.nodes:
            if node.label == label:
                return node
        return None

    def label_of(self, node_id: str) -> str:
        """Display label for a node id (falls back to the id itself)."""
        node = self._index.get(node_id)
        return node.label if node else node_id

    def get_neighbors(self, node_id: str) -> list[Neighbor]:
        """
        Nodes reachable from node_id through one edge.

        Directed graphs follow outgoing edges only; undirected graphs follow
        every incident edge. Order follows the edge list.
        """
        neighbors = []
        for edge in self.edges:
            if edge.source == node_id:
                neighbor_id = edge.target
            elif not self.is_directed and edge.target == node_id:
                neighbor_id = edge.source
            else:
                continue

            node = self._index.get(neighbor_id)
            if node is not None:
                neighbors.append(Neighbor(node=node, edge=edge, weight=edge.weight))
        return neighbors

    def path_edge_ids(self, path: Iterable[str]) -> list[str]:
        """
        Edge ids joining consecutive nodes of a path.

        Raises:
            GraphError: If two consecutive nodes are not connected
        """
        path = list(path)
        edge_ids = []
        for source, target in zip(path, path[1:]):
            edge = self.find_edge(source, target)
            if edge is None:
                raise GraphError(f"No edge from '{source}' to '{target}'")
            edge_ids.append(edge.id)
        return edge_ids

    def path_weight(self, path: Iterable[str]) -> float:
        """Total weight of the edges along a path."""
        path = list(path)
        total = 0
        for source, target in zip(path, path[1:]):
            edge = self.find_edge(source, target)
            if edge is None:
                raise GraphError(f"No edge from '{source}' to '{target}'")
            total += edge.weight
        return total

    @property
    def has_negative_weights(self) -> bool:
        return any(edge.weight < 0 for edge in self.edges)

    # =========================================================================
    # Mutators (return a new Graph)
    # =========================================================================

    def add_node(
        self,
        x: float,
        y: float,
        label: str | None = None,
        node_id: str | None = None,
    ) -> Graph:
        """Add a node; the label defaults to the first unused letter (A, B, C, ...)."""
        node = Node(
            id=node_id or generate_node_id(),
            x=x,
            y=y,
            label=label or self._next_label(),
        )
        if node.id in self._index:
            raise GraphError(f"Node '{node.id}' already exists")
        return replace(self, nodes=self.nodes + (node,))

    def _next_label(self) -> str:
        used = {node.label for node in self.nodes}
        index = 0
        while default_label(index) in used:
            index += 1
        return default_label(index)

    def add_edge(
        self,
        source: str,
        target: str,
        weight: float = DEFAULT_EDGE_WEIGHT,
        edge_id: str | None = None,
    ) -> Graph:
        """
        Connect two nodes.

        Self-loops and edges equivalent to an existing one are ignored and
        the graph is returned unchanged.

        Raises:
            GraphError: If either endpoint does not exist
        """
        for endpoint in (source, target):
            if endpoint not in self._index:
                raise GraphError(f"Cannot add edge: node '{endpoint}' does not exist")

        if source == target or self.find_edge(source, target) is not None:
            logger.debug(f"Ignoring redundant edge {source} -> {target}")
            return self

        edge = Edge(id=edge_id or generate_edge_id(), source=source, target=target, weight=weight)
        return replace(self, edges=self.edges + (edge,))

    def remove_node(self, node_id: str) -> Graph:
        """Remove a node and every edge touching it."""
        return replace(
            self,
            nodes=tuple(n for n in self.nodes if n.id != node_id),
            edges=tuple(e for e in self.edges if node_id not in (e.source, e.target)),
        )

    def remove_edge(self, edge_id: str) -> Graph:
        return replace(self, edges=tuple(e for e in self.edges if e.id != edge_id))

    def update_node(self, node_id: str, **changes) -> Graph:
        """
        Change a node's position or label.

        Raises:
            GraphError: If changes include anything other than x, y or label
        """
        unknown = set(changes) - {"x", "y", "label"}
        if unknown:
            raise GraphError(f"Cannot update node fields: {', '.join(sorted(unknown))}")
        return replace(
            self,
            nodes=tuple(replace(n, **changes) if n.id == node_id else n for n in self.nodes),
        )

    def update_edge(self, edge_id: str, weight: float) -> Graph:
        """Change an edge's weight."""
        return replace(
            self,
            edges=tuple(replace(e, weight=weight) if e.id == edge_id else e for e in self.edges),
        )

    def with_direction(self, is_directed: bool) -> Graph:
        """
        Same nodes and edges, different direction flag.

        Raises:
            GraphError: If making the graph undirected would merge two edges
        """
        return replace(self, is_directed=is_directed)

    def with_weighting(self, is_weighted: bool) -> Graph:
        return replace(self, is_weighted=is_weighted)


def create_empty_graph(
    is_directed: bool = DEFAULT_IS_DIRECTED,
    is_weighted: bool = DEFAULT_IS_WEIGHTED,
) -> Graph:
    """Blank graph, undirected and weighted by default."""
    return Graph.empty(is_directed=is_directed, is_weighted=is_weighted)

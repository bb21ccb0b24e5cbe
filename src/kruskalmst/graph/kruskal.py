"""Kruskal's minimum spanning tree / forest selection."""

import math
from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Any

from kruskalmst.errors import InvalidInputError
from kruskalmst.graph.models import Edge, Graph, Weight, is_weight
from kruskalmst.graph.union_find import DisjointSet

__all__ = ["SpanningForest", "kruskal"]


@dataclass(frozen=True)
class SpanningForest:
    """Result of a Kruskal run.

    Attributes
    ----------
    edges : tuple[Edge, ...]
        Selected edges in selection (ascending weight) order.
    total_weight : int | float
        Sum of selected edge weights.
    node_count : int
        Declared number of nodes.
    edges_considered : int
        Sorted edges examined before the loop stopped.
    cycles_rejected : int
        Examined edges skipped because both endpoints shared a root.
    sorted_edges : tuple[Edge, ...]
        Full input edge list in the order the loop visits it.
    """

    edges: tuple[Edge, ...]
    total_weight: Weight
    node_count: int
    edges_considered: int = 0
    cycles_rejected: int = 0
    sorted_edges: tuple[Edge, ...] = field(default=(), repr=False, compare=False)

    @property
    def is_spanning_tree(self) -> bool:
        """True if the selected edges connect all ``node_count`` nodes."""
        return len(self.edges) == max(self.node_count - 1, 0)

    @property
    def component_count(self) -> int:
        """Number of trees in the forest, isolated declared nodes included."""
        return self.node_count - len(self.edges)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {
            "edges": [edge.to_dict() for edge in self.edges],
            "total_weight": self.total_weight,
            "node_count": self.node_count,
            "is_spanning_tree": self.is_spanning_tree,
            "component_count": self.component_count,
            "edges_considered": self.edges_considered,
            "cycles_rejected": self.cycles_rejected,
        }


def _check_count(name: str, value: Any, minimum: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidInputError(f"{name} must be >= {minimum}, got {value}")
    return value


def _validate(
    node_count: Any,
    edges: Sequence[Any],
    edge_count: Any,
) -> list[Edge]:
    """Check all inputs and return the typed edges the run will use."""
    _check_count("node_count", node_count, 1)
    edges = list(edges)
    if edge_count is None:
        edge_count = len(edges)
    _check_count("edge_count", edge_count, 0)

    if len(edges) < edge_count:
        raise InvalidInputError(f"Expected {edge_count} edges, got {len(edges)}")

    typed: list[Edge] = []
    nodes: set[Hashable] = set()
    for index, raw in enumerate(edges[:edge_count]):
        try:
            edge = Edge.from_tuple(raw)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Edge {index} is not a (from, to, weight) triple: {e}") from e

        if not is_weight(edge.w) or not math.isfinite(edge.w):
            raise InvalidInputError(f"Edge {index} has invalid weight: {edge.w!r}")

        try:
            nodes.add(edge.v1)
            nodes.add(edge.v2)
        except TypeError as e:
            raise InvalidInputError(f"Edge {index} has an unhashable node: {e}") from e

        # find() walks parents until a node equals its own parent
        for node in (edge.v1, edge.v2):
            if node != node:
                raise InvalidInputError(f"Edge {index} has a node not equal to itself: {node!r}")

        typed.append(edge)

    if len(nodes) > node_count:
        raise InvalidInputError(
            f"Edges reference {len(nodes)} distinct nodes but node_count is {node_count}"
        )

    return typed


def kruskal(
    node_count: int,
    edges: Sequence[Any],
    edge_count: int | None = None,
) -> SpanningForest:
    """Compute a minimum spanning tree, or forest if the graph is disconnected.

    Parameters
    ----------
    node_count : int
        Declared number of nodes (``n``). Nodes that appear in no edge are
        isolated components.
    edges : Sequence[Any]
        ``Edge`` objects or ``(from, to, weight)`` triples.
    edge_count : int | None, optional
        Declared number of edges (``m``). Only the first ``m`` edges are
        used. Defaults to ``len(edges)``.

    Returns
    -------
    SpanningForest
        Selected edges, total weight and connectivity flag.

    Raises
    ------
    InvalidInputError
        If the counts, edge triples or weights are malformed.

    Examples
    --------
        >>> forest = kruskal(3, [("a", "b", 1), ("b", "c", 2), ("a", "c", 3)])
        >>> forest.total_weight, forest.is_spanning_tree
        (3, True)
    """
    typed_edges = _validate(node_count, edges, edge_count)

    graph = Graph.from_edges(typed_edges)
    sorted_edges = graph.sorted_edges()
    subsets = DisjointSet(graph.nodes)

    target = node_count - 1
    selected: list[Edge] = []
    cost: Weight = 0
    considered = 0
    rejected = 0

    for edge in sorted_edges:
        if len(selected) >= target:
            break
        considered += 1

        root1 = subsets.find(edge.v1)
        root2 = subsets.find(edge.v2)

        if root1 == root2:
            rejected += 1
            continue

        selected.append(edge)
        cost += edge.w
        subsets.union(root1, root2)

    return SpanningForest(
        edges=tuple(selected),
        total_weight=cost,
        node_count=node_count,
        edges_considered=considered,
        cycles_rejected=rejected,
        sorted_edges=tuple(sorted_edges),
    )

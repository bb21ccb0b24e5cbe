"""Edge and graph data model."""

from collections.abc import Hashable, Iterable, Iterator, KeysView
from dataclasses import dataclass
from numbers import Real
from typing import Any

__all__ = ["Edge", "Graph", "Weight", "is_weight"]

Weight = int | float


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge.

    Endpoint order is kept as given for reporting; the algorithm treats
    ``(v1, v2)`` and ``(v2, v1)`` as the same connection.

    Attributes
    ----------
    v1 : Hashable
        First endpoint.
    v2 : Hashable
        Second endpoint.
    w : int | float
        Edge weight.
    """

    v1: Hashable
    v2: Hashable
    w: Weight = 0

    @staticmethod
    def from_tuple(data: Any) -> "Edge":
        """Create an Edge from an ``(v1, v2, w)`` triple.

        Existing Edge instances are returned unchanged.

        Parameters
        ----------
        data : Any
            Edge or three-item sequence.

        Returns
        -------
        Edge
            Typed edge.

        Raises
        ------
        ValueError
            If ``data`` is not a three-item sequence.
        """
        if isinstance(data, Edge):
            return data
        v1, v2, w = data
        return Edge(v1=v1, v2=v2, w=w)

    @property
    def is_self_loop(self) -> bool:
        """True if both endpoints are the same node."""
        return self.v1 == self.v2

    def as_tuple(self) -> tuple[Hashable, Hashable, Weight]:
        """Return ``(v1, v2, w)``."""
        return (self.v1, self.v2, self.w)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {"from": self.v1, "to": self.v2, "weight": self.w}

    def __str__(self) -> str:
        return f"{self.v1} -- {self.v2} ( {self.w} )"


def is_weight(value: Any) -> bool:
    """True for real, non-boolean numbers usable as edge weights."""
    return isinstance(value, Real) and not isinstance(value, bool)


class Graph:
    """Edge list plus the set of distinct endpoint nodes.

    The graph is filled once and then only read. Nodes are kept in a dict
    so membership checks are hashed while first-seen order is preserved.

    Attributes
    ----------
    edges : list[Edge]
        Edges in insertion order.
    """

    def __init__(self) -> None:
        """Initialize empty graph."""
        self.edges: list[Edge] = []
        self._nodes: dict[Hashable, None] = {}

    @classmethod
    def from_edges(cls, edges: Iterable[Any]) -> "Graph":
        """Build a graph from Edge objects or ``(v1, v2, w)`` triples.

        Parameters
        ----------
        edges : Iterable[Any]
            Edges to add, in order.

        Returns
        -------
        Graph
            Populated graph.
        """
        graph = cls()
        for edge in edges:
            graph.add_edge(Edge.from_tuple(edge))
        return graph

    def add_edge(self, edge: Edge) -> None:
        """Append an edge and register its endpoints.

        Parameters
        ----------
        edge : Edge
            Edge to add. Self-loops and parallel edges are allowed.
        """
        self.edges.append(edge)
        self._nodes.setdefault(edge.v1, None)
        self._nodes.setdefault(edge.v2, None)

    def get_edge(self, pos: int) -> Edge:
        return self.edges[pos]

    @property
    def nodes(self) -> KeysView[Hashable]:
        """Read-only view of the distinct nodes in first-seen order."""
        return self._nodes.keys()

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def has_node(self, node: Hashable) -> bool:
        return node in self._nodes

    def sorted_edges(self) -> list[Edge]:
        """Return a copy of the edges in ascending weight order.

        The sort is stable, so edges of equal weight keep their input order.

        Returns
        -------
        list[Edge]
            Sorted copy; the graph's own edge list is not modified.
        """
        return sorted(self.edges, key=lambda edge: edge.w)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)

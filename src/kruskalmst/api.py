"""Public API for computing minimum spanning trees.

This module provides the main public API for kruskalmst, enabling:
- Solving an in-memory edge list
- Loading an edge list file
- Solving an edge list file in one call
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from kruskalmst.graph.kruskal import SpanningForest, kruskal
from kruskalmst.parse.reader import GraphInput, read_graph_file

__all__ = [
    "minimum_spanning_forest",
    "load_graph",
    "solve_file",
]


def minimum_spanning_forest(
    node_count: int,
    edges: Iterable[Any],
    edge_count: int | None = None,
) -> SpanningForest:
    """Compute the minimum spanning tree (or forest) of an undirected graph.

    Parameters
    ----------
    node_count : int
        Number of nodes in the graph.
    edges : Iterable[Any]
        ``Edge`` objects or ``(from, to, weight)`` triples. Node identifiers
        may be any hashable value.
    edge_count : int | None, optional
        Use only the first ``edge_count`` edges, by default all of them.

    Returns
    -------
    SpanningForest
        Selected edges, total weight and ``is_spanning_tree`` flag.

    Raises
    ------
    InvalidInputError
        If counts or edges are malformed.

    Examples
    --------
        >>> from kruskalmst import minimum_spanning_forest
        >>> forest = minimum_spanning_forest(
        ...     4, [("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("A", "D", 4)]
        ... )
        >>> forest.total_weight
        6
    """
    return kruskal(node_count, list(edges), edge_count=edge_count)


def load_graph(path: str | Path) -> GraphInput:
    """Read an edge list file without solving it.

    Parameters
    ----------
    path : str | Path
        File to read.

    Returns
    -------
    GraphInput
        Header counts, edges and warnings.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    InvalidInputError
        If the content is malformed.
    """
    return read_graph_file(path)


def solve_file(path: str | Path) -> SpanningForest:
    """Read an edge list file and compute its minimum spanning forest.

    Parameters
    ----------
    path : str | Path
        File to read.

    Returns
    -------
    SpanningForest
        Kruskal result.

    Raises
    ------
    FileNotFoundError
        If file does not exist.
    InvalidInputError
        If the content is malformed.
    """
    graph_input = read_graph_file(path)
    return kruskal(graph_input.node_count, graph_input.edges, edge_count=graph_input.edge_count)

"""Graph model, disjoint-set structure and Kruskal's algorithm."""

from kruskalmst.graph.kruskal import SpanningForest, kruskal
from kruskalmst.graph.models import Edge, Graph
from kruskalmst.graph.union_find import DisjointSet

__all__ = [
    "DisjointSet",
    "Edge",
    "Graph",
    "SpanningForest",
    "kruskal",
]

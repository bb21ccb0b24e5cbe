"""Minimum spanning trees with Kruskal's algorithm.

This package provides:
- Graph (kruskalmst.graph) — edge/graph model, disjoint set, Kruskal engine
- Parsing (kruskalmst.parse) — edge list file reading
- Reporting (kruskalmst.report) — text and JSON rendering
- Engine (kruskalmst.engine) — audited solver runs
- Audit (kruskalmst.audit) — event log and run manifest
- CLI (kruskalmst.cli) — command-line interface
- Public API (kruskalmst.api) — high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from kruskalmst.api import load_graph, minimum_spanning_forest, solve_file
from kruskalmst.errors import InvalidInputError, MSTError, NotFoundError
from kruskalmst.graph import DisjointSet, Edge, Graph, SpanningForest, kruskal

__all__ = [
    "__version__",
    "__license__",
    "DisjointSet",
    "Edge",
    "Graph",
    "SpanningForest",
    "kruskal",
    "minimum_spanning_forest",
    "load_graph",
    "solve_file",
    "MSTError",
    "InvalidInputError",
    "NotFoundError",
]

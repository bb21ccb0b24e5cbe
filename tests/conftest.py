"""Pytest configuration and fixtures for test suite."""

import heapq
import sys
from collections.abc import Callable, Hashable, Sequence
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "graphs"
SCHEMAS_DIR = Path(__file__).parent.parent / "schemas"

SCENARIO_A_EDGES = [
    ("A", "B", 1),
    ("B", "C", 2),
    ("C", "D", 3),
    ("A", "D", 4),
    ("A", "C", 5),
]


def prim_weight(nodes: Sequence[Hashable], edges: Sequence[tuple]) -> int | float:
    """Reference MST weight of a connected graph using Prim's algorithm."""
    adjacency: dict[Hashable, list[tuple]] = {node: [] for node in nodes}
    for u, v, w in edges:
        adjacency[u].append((w, v))
        adjacency[v].append((w, u))

    start = nodes[0]
    visited = {start}
    heap = list(adjacency[start])
    heapq.heapify(heap)
    total: int | float = 0

    while heap and len(visited) < len(nodes):
        w, v = heapq.heappop(heap)
        if v in visited:
            continue
        visited.add(v)
        total += w
        for item in adjacency[v]:
            if item[1] not in visited:
                heapq.heappush(heap, item)

    assert len(visited) == len(nodes), "reference graph must be connected"
    return total


@pytest.fixture
def write_graph(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing edge list text to a temporary file."""

    def _factory(text: str, name: str = "graph.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _factory


@pytest.fixture
def scenario_a_file(write_graph: Callable[..., Path]) -> Path:
    """Four-node connected graph with a known MST of weight 6."""
    lines = ["4 5"] + [f"{u} {v} {w}" for u, v, w in SCENARIO_A_EDGES]
    return write_graph("\n".join(lines) + "\n")

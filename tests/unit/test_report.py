"""Tests for text and JSON rendering."""

import json
from pathlib import Path

import pytest

from conftest import SCENARIO_A_EDGES
from kruskalmst.graph.kruskal import kruskal
from kruskalmst.report import (
    forest_payload,
    format_forest,
    format_sorted_edges,
    write_forest_json,
)


@pytest.mark.unit
def test_format_forest_spanning_tree() -> None:
    """Test one line per edge followed by weight and connectivity."""
    text = format_forest(kruskal(4, SCENARIO_A_EDGES))

    assert text.splitlines() == [
        "A -- B ( 1 )",
        "B -- C ( 2 )",
        "C -- D ( 3 )",
        "total weight: 6",
        "spanning tree: yes",
    ]


@pytest.mark.unit
def test_format_forest_disconnected() -> None:
    """Test disconnected results report the number of components."""
    text = format_forest(kruskal(4, [("A", "B", 1), ("C", "D", 1)]))

    assert text.splitlines()[-1] == "spanning tree: no (2 components)"


@pytest.mark.unit
def test_format_sorted_edges() -> None:
    """Test sorted edge echo lists every edge in visiting order."""
    forest = kruskal(4, SCENARIO_A_EDGES)

    lines = format_sorted_edges(forest.sorted_edges).splitlines()

    assert lines == [
        "A -- B ( 1 )",
        "B -- C ( 2 )",
        "C -- D ( 3 )",
        "A -- D ( 4 )",
        "A -- C ( 5 )",
    ]


@pytest.mark.unit
def test_forest_payload_sorted_edges_optional() -> None:
    """Test the sorted edge list is added only when asked for."""
    forest = kruskal(4, SCENARIO_A_EDGES)

    plain = forest_payload(forest)
    full = forest_payload(forest, include_sorted_edges=True)

    assert "sorted_edges" not in plain
    assert plain == forest.to_dict()
    assert [e["weight"] for e in full["sorted_edges"]] == [1, 2, 3, 4, 5]
    assert full["edges"] == plain["edges"]


@pytest.mark.unit
def test_write_forest_json(tmp_path: Path) -> None:
    """Test JSON artifact is written atomically with optional sorted edges."""
    forest = kruskal(4, SCENARIO_A_EDGES)
    path = tmp_path / "nested" / "forest.json"

    written = write_forest_json(forest, path, include_sorted_edges=True)

    assert written == path
    assert not path.with_suffix(".tmp").exists()
    data = json.loads(path.read_text())
    assert data["total_weight"] == 6
    assert len(data["sorted_edges"]) == 5


@pytest.mark.unit
def test_write_forest_json_non_string_nodes(tmp_path: Path) -> None:
    """Test integer and tuple node identifiers serialize."""
    forest = kruskal(3, [((0, 0), (0, 1), 1), ((0, 1), (1, 1), 2)])

    data = json.loads(write_forest_json(forest, tmp_path / "f.json").read_text())

    assert data["edges"][0]["from"] == [0, 0]
    assert "sorted_edges" not in data

"""Tests for solver configuration and result types."""

from pathlib import Path

import pytest

from kruskalmst.engine import SolverConfig, SolverResult
from kruskalmst.graph.kruskal import kruskal


@pytest.mark.unit
def test_default_config_writes_nothing() -> None:
    """Test defaults disable on-disk artifacts."""
    config = SolverConfig()

    assert config.output_dir is None
    assert config.to_dict()["output_dir"] is None


@pytest.mark.unit
def test_output_dir_coerced_to_path(tmp_path: Path) -> None:
    """Test string output directories become Path objects."""
    config = SolverConfig(output_dir=str(tmp_path / "out"))  # type: ignore[arg-type]

    assert isinstance(config.output_dir, Path)
    assert config.to_dict()["output_dir"] == str(tmp_path / "out")


@pytest.mark.unit
def test_output_dir_must_not_be_file(tmp_path: Path) -> None:
    """Test an existing file is rejected as output directory."""
    file_path = tmp_path / "file.txt"
    file_path.write_text("x")

    with pytest.raises(ValueError, match="not a directory"):
        SolverConfig(output_dir=file_path)


@pytest.mark.unit
def test_sorted_edges_requires_json() -> None:
    """Test contradictory artifact flags are rejected."""
    with pytest.raises(ValueError, match="requires write_json"):
        SolverConfig(write_json=False, include_sorted_edges=True)


@pytest.mark.unit
def test_result_to_dict() -> None:
    """Test result serialization nests the forest."""
    result = SolverResult(success=True, forest=kruskal(2, [("a", "b", 1)]))

    data = result.to_dict()

    assert data["success"] is True
    assert data["forest"]["total_weight"] == 1
    assert data["error_message"] is None
    assert SolverResult(success=False, error_message="x").to_dict()["forest"] is None

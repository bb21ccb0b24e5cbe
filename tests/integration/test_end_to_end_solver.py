"""Integration tests for end-to-end solver runs on fixture files."""

import json
from pathlib import Path

import pytest

from conftest import FIXTURES_DIR
from kruskalmst.engine import SolverConfig, run_solver


def _read_events(output_dir: Path) -> list[dict]:
    with (output_dir / "events.jsonl").open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.integration
def test_nine_node_graph_in_memory() -> None:
    """Test the nine-node fixture without writing any files."""
    result = run_solver(FIXTURES_DIR / "data1.txt")

    assert result.success
    assert result.error_message is None
    assert result.output_files == {}

    forest = result.forest
    assert forest is not None
    assert forest.total_weight == 37
    assert forest.is_spanning_tree
    assert [e.as_tuple() for e in forest.edges] == [
        ("6", "7", 1),
        ("2", "8", 2),
        ("5", "6", 2),
        ("0", "1", 4),
        ("2", "5", 4),
        ("2", "3", 7),
        ("0", "7", 8),
        ("3", "4", 9),
    ]
    assert forest.edges_considered == 11
    assert forest.cycles_rejected == 3


@pytest.mark.integration
def test_nine_node_graph_with_audit_trail(tmp_path: Path) -> None:
    """Test a full run writes the artifact, event log and manifest."""
    output_dir = tmp_path / "out"

    result = run_solver(
        FIXTURES_DIR / "data1.txt",
        config=SolverConfig(output_dir=output_dir),
        command_argv=["kruskalmst", "solve", "data1.txt"],
    )

    assert result.success
    assert set(result.output_files) == {"spanning_forest", "events", "manifest"}

    with Path(result.output_files["spanning_forest"]).open() as f:
        artifact = json.load(f)
    assert artifact["total_weight"] == 37
    assert len(artifact["edges"]) == 8

    with Path(result.output_files["manifest"]).open() as f:
        manifest = json.load(f)
    assert manifest["status"] == "success"
    assert manifest["argv"] == ["kruskalmst", "solve", "data1.txt"]
    assert manifest["input"]["name"] == "data1.txt"
    assert manifest["input"]["edge_count"] == 14
    assert [s["name"] for s in manifest["stages"]] == ["parse", "mst", "write"]
    mst_stage = manifest["stages"][1]
    assert mst_stage["counters"]["edges_selected"] == 8
    assert mst_stage["counters"]["cycles_rejected"] == 3
    assert {a["path"] for a in manifest["artifacts"]} == {
        "artifacts/spanning_forest.json",
        "events.jsonl",
    }

    events = [e["event"] for e in _read_events(output_dir)]
    assert events[0] == "run_started"
    assert events[-1] == "run_finished"
    assert events.count("stage_started") == 3
    assert "artifact_written" in events


@pytest.mark.integration
def test_disconnected_fixture_is_forest(tmp_path: Path) -> None:
    """Test the disconnected fixture is solved as a flagged forest."""
    result = run_solver(
        FIXTURES_DIR / "disconnected.txt",
        config=SolverConfig(output_dir=tmp_path),
    )

    assert result.success
    forest = result.forest
    assert forest is not None
    assert [e.as_tuple() for e in forest.edges] == [
        ("b", "c", 1),
        ("d", "e", 2),
        ("a", "b", 3),
    ]
    assert forest.total_weight == 6
    assert not forest.is_spanning_tree
    assert forest.component_count == 3


@pytest.mark.integration
def test_truncated_fixture_fails_without_partial_output(tmp_path: Path) -> None:
    """Test a truncated file fails before any stage after parsing runs."""
    output_dir = tmp_path / "out"

    result = run_solver(
        FIXTURES_DIR / "truncated.txt",
        config=SolverConfig(output_dir=output_dir),
    )

    assert not result.success
    assert result.forest is None
    assert "InvalidInputError" in (result.error_message or "")
    assert "spanning_forest" not in result.output_files
    assert not (output_dir / "artifacts" / "spanning_forest.json").exists()

    with (output_dir / "run.json").open() as f:
        manifest = json.load(f)
    assert manifest["status"] == "failed"
    assert [s["name"] for s in manifest["stages"]] == ["parse"]
    assert manifest["errors"][0]["stage"] == "parse"


@pytest.mark.integration
def test_missing_input_reports_failure() -> None:
    """Test a missing input file yields a failed result rather than raising."""
    result = run_solver(FIXTURES_DIR / "does_not_exist.txt")

    assert not result.success
    assert "FileNotFoundError" in (result.error_message or "")


@pytest.mark.integration
def test_uncreatable_output_dir_reports_failure(tmp_path: Path) -> None:
    """Test an output directory under a regular file yields a failed result."""
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    result = run_solver(
        FIXTURES_DIR / "data1.txt",
        config=SolverConfig(output_dir=blocker / "out"),
    )

    assert not result.success
    assert result.forest is None
    assert "Cannot create output directory" in (result.error_message or "")
    assert not (blocker / "out").exists()


@pytest.mark.integration
def test_warnings_are_logged(tmp_path: Path) -> None:
    """Test input warnings reach the result and the event log."""
    input_path = tmp_path / "g.txt"
    input_path.write_text("2 1\nA B 1 x\n")
    output_dir = tmp_path / "out"

    result = run_solver(input_path, config=SolverConfig(output_dir=output_dir))

    assert result.success
    assert len(result.warnings) == 1
    warn_events = [e for e in _read_events(output_dir) if e["event"] == "warning"]
    assert warn_events[0]["level"] == "WARN"
    assert warn_events[0]["stage"] == "parse"

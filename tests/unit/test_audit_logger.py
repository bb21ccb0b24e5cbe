"""Tests for audit logger module."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from kruskalmst.audit.logger import AuditLogger


@pytest.fixture
def logger(tmp_path: Path) -> Iterator[AuditLogger]:
    """Create a logger that auto-closes after test."""
    lg = AuditLogger(run_id="test_run", log_path=tmp_path / "logs" / "events.jsonl")
    yield lg
    lg.close()


def _read_events(path: Path) -> list[dict]:
    """Read all JSONL events from file."""
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_logger_init_creates_file(logger: AuditLogger) -> None:
    """Test logger creates parent dirs and the log file."""
    assert logger.log_path.exists()
    assert logger.current_stage is None
    assert logger.run_id == "test_run"


@pytest.mark.unit
def test_logger_event_writes_valid_jsonl(logger: AuditLogger) -> None:
    """Test event() writes one JSON line with the full envelope."""
    logger.event("test_event", data={"key": "value"}, level="DEBUG")

    events = _read_events(logger.log_path)

    assert len(events) == 1
    evt = events[0]
    assert evt["run_id"] == "test_run"
    assert evt["event"] == "test_event"
    assert evt["level"] == "DEBUG"
    assert evt["data"] == {"key": "value"}
    assert evt["stage"] is None
    assert evt["ts"].endswith("Z")


@pytest.mark.unit
def test_logger_stage_context_inheritance(logger: AuditLogger) -> None:
    """Test stage_started sets the stage used by later events."""
    logger.stage_started("mst")
    logger.event("ev1")
    logger.event("ev2", stage="override")
    logger.set_stage(None)
    logger.event("ev3")

    events = _read_events(logger.log_path)

    assert [e["stage"] for e in events] == ["mst", "mst", "override", None]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("method", "kwargs", "expected_event", "expected_level"),
    [
        ("run_started", {"argv": ["kruskalmst"], "parameters": {"k": 1}}, "run_started", "INFO"),
        ("run_finished", {"status": "success", "duration_seconds": 1.5}, "run_finished", "INFO"),
        ("stage_started", {"stage": "parse"}, "stage_started", "INFO"),
        (
            "stage_finished",
            {"stage": "parse", "duration_seconds": 2.0, "counters": {"n": 5}},
            "stage_finished",
            "INFO",
        ),
        ("warning", {"message": "extra token"}, "warning", "WARN"),
        (
            "artifact_written",
            {"path": "artifacts/f.json", "sha256": "sha256:abc", "bytes_written": 10},
            "artifact_written",
            "INFO",
        ),
        ("error", {"exception_class": "InvalidInputError", "message": "bad"}, "error", "ERROR"),
    ],
)
def test_logger_convenience_methods(
    logger: AuditLogger,
    method: str,
    kwargs: dict,
    expected_event: str,
    expected_level: str,
) -> None:
    """Test all convenience methods produce correct event type and level."""
    getattr(logger, method)(**kwargs)

    events = _read_events(logger.log_path)

    assert len(events) == 1
    assert events[0]["event"] == expected_event
    assert events[0]["level"] == expected_level


@pytest.mark.unit
def test_logger_close_is_idempotent(tmp_path: Path) -> None:
    """Test close() may be called more than once, also via context manager."""
    with AuditLogger(run_id="r", log_path=tmp_path / "events.jsonl") as lg:
        lg.event("only")
        lg.close()

    assert _read_events(tmp_path / "events.jsonl")[0]["event"] == "only"

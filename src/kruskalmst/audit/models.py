"""Dataclasses for the event log and the run manifest."""

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "EnvironmentInfo",
    "InputInfo",
    "ArtifactInfo",
    "StageInfo",
    "ErrorInfo",
    "ManifestData",
    "LogEvent",
]


@dataclass
class EnvironmentInfo:
    """Execution environment.

    Attributes
    ----------
    python_version : str
        Python version (e.g., "3.12.3").
    platform : str
        OS and architecture (e.g., "Linux-6.8.0-x86_64").
    package_version : str
        kruskalmst version.
    dependencies : dict[str, str]
        Versions of key third-party packages.
    """

    python_version: str
    platform: str
    package_version: str
    dependencies: dict[str, str] = field(default_factory=dict)


@dataclass
class InputInfo:
    """Graph input file that was solved.

    Attributes
    ----------
    name : str
        File basename.
    sha256 : str
        Digest of the raw bytes, ``sha256:`` prefixed.
    node_count : int
        Declared node count.
    edge_count : int
        Declared edge count.
    """

    name: str
    sha256: str
    node_count: int
    edge_count: int


@dataclass
class ArtifactInfo:
    """Written output file.

    Attributes
    ----------
    path : str
        Path relative to the output directory.
    sha256 : str
        Digest with ``sha256:`` prefix.
    bytes : int | None
        File size in bytes.
    """

    path: str
    sha256: str
    bytes: int | None = None


@dataclass
class StageInfo:
    """Timing and counters of one solver stage.

    Attributes
    ----------
    name : str
        Stage identifier ("parse", "mst", "write").
    started_at : str
        ISO8601 start time.
    finished_at : str | None
        ISO8601 end time.
    duration_seconds : float | None
        Wall-clock duration.
    counters : dict[str, int]
        Stage-specific counts.
    """

    name: str
    started_at: str
    counters: dict[str, int] = field(default_factory=dict)
    finished_at: str | None = None
    duration_seconds: float | None = None


@dataclass
class ErrorInfo:
    """Error raised during a run.

    Attributes
    ----------
    timestamp : str
        ISO8601 time the error was recorded.
    exception_class : str
        Exception class name.
    message : str
        Error message.
    stage : str | None
        Stage that was running.
    traceback : str | None
        Formatted stack trace, when requested.
    """

    timestamp: str
    exception_class: str
    message: str
    stage: str | None = None
    traceback: str | None = None


@dataclass
class ManifestData:
    """Complete run manifest written to ``run.json``.

    Attributes
    ----------
    manifest_version : str
        Schema version (semver).
    run_id : str
        Unique run identifier.
    created_at : str
        ISO8601 UTC time the run started.
    status : str
        "success", "failed" or "partial".
    argv : list[str]
        Command line.
    environment : EnvironmentInfo
        Execution environment.
    parameters : dict[str, Any]
        Configuration snapshot.
    input : InputInfo | None
        Solved input file, once parsed.
    stages : list[StageInfo]
        Stage records in start order.
    artifacts : list[ArtifactInfo]
        Output files.
    finished_at : str | None
        ISO8601 UTC time the run finished.
    duration_seconds : float | None
        Total run time.
    errors : list[ErrorInfo]
        Recorded errors.
    """

    manifest_version: str
    run_id: str
    created_at: str
    status: str
    argv: list[str]
    environment: EnvironmentInfo
    parameters: dict[str, Any]
    input: InputInfo | None = None
    stages: list[StageInfo] = field(default_factory=list)
    artifacts: list[ArtifactInfo] = field(default_factory=list)
    finished_at: str | None = None
    duration_seconds: float | None = None
    errors: list[ErrorInfo] = field(default_factory=list)


@dataclass
class LogEvent:
    """One line of ``events.jsonl``.

    Attributes
    ----------
    ts : str
        ISO8601 timestamp with microseconds (UTC).
    run_id : str
        Unique run identifier.
    level : str
        "DEBUG", "INFO", "WARN" or "ERROR".
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Stage the event belongs to.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any]
    stage: str | None = None

"""Structured JSONL event logger for solver runs."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from kruskalmst.audit.models import LogEvent
from kruskalmst.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Writes the events of one solver run to ``events.jsonl``.

    The file stays open for the whole run; every line is a complete JSON
    object and is flushed before the call returns, so a crashed run still
    leaves a readable log.

    Attributes
    ----------
    run_id : str
        Identifier shared with ``run.json``.
    log_path : Path
        The ``events.jsonl`` file being written.
    current_stage : str | None
        Stage attached to events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        """Open ``log_path`` for appending, creating its directory if needed.

        Parameters
        ----------
        run_id : str
            Identifier copied into every event.
        log_path : Path
            Destination of the event lines.
        """
        self.run_id = run_id
        self.log_path = log_path
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the file; calling it again does nothing."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def set_stage(self, stage: str | None) -> None:
        self.current_stage = stage

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        stage: str | None = None,
    ) -> None:
        """Append one event line.

        Parameters
        ----------
        event_type : str
            Name stored under ``event``, for instance ``"artifact_written"``.
        data : dict[str, Any] | None, optional
            JSON-serializable details; an empty object when omitted.
        level : str, optional
            One of ``DEBUG``, ``INFO``, ``WARN`` or ``ERROR``.
        stage : str | None, optional
            Solver stage (``parse``, ``mst``, ``write``). Falls back to
            ``current_stage``.
        """
        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data if data is not None else {},
            stage=stage if stage is not None else self.current_stage,
        )

        json.dump(asdict(log_event), self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def run_started(self, argv: list[str], parameters: dict[str, Any]) -> None:
        self.event("run_started", data={"argv": argv, "parameters": parameters})

    def run_finished(self, status: str, duration_seconds: float) -> None:
        self.event(
            "run_finished",
            data={"status": status, "duration_seconds": duration_seconds},
        )

    def stage_started(self, stage: str) -> None:
        """Log stage_started and make ``stage`` the current stage."""
        self.set_stage(stage)
        self.event("stage_started", stage=stage)

    def stage_finished(
        self,
        stage: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Record how long a stage took and what it counted.

        Parameters
        ----------
        stage : str
            Stage that just ended.
        duration_seconds : float
            Wall-clock time spent in the stage.
        counters : dict[str, int] | None, optional
            Totals such as ``edges_selected`` or ``cycles_rejected``; left out
            of the event when empty.
        """
        data: dict[str, Any] = {"duration_seconds": duration_seconds}
        if counters:
            data["counters"] = counters

        self.event("stage_finished", data=data, stage=stage)

    def warning(self, message: str, stage: str | None = None) -> None:
        self.event("warning", data={"message": message}, level="WARN", stage=stage)

    def artifact_written(self, path: str, sha256: str, bytes_written: int | None = None) -> None:
        """Record a file the run produced.

        Parameters
        ----------
        path : str
            Location under the output directory, e.g.
            ``artifacts/spanning_forest.json``.
        sha256 : str
            ``sha256:``-prefixed content digest.
        bytes_written : int | None, optional
            Size of the file.
        """
        data: dict[str, Any] = {"path": path, "sha256": sha256}
        if bytes_written is not None:
            data["bytes"] = bytes_written

        self.event("artifact_written", data=data)

    def error(
        self,
        exception_class: str,
        message: str,
        stage: str | None = None,
        traceback: str | None = None,
    ) -> None:
        """Record a failure at ``ERROR`` level.

        Parameters
        ----------
        exception_class : str
            Name of the raised type, e.g. ``InvalidInputError``.
        message : str
            ``str()`` of the exception.
        stage : str | None, optional
            Stage that was running; ``current_stage`` when omitted.
        traceback : str | None, optional
            Formatted traceback, only present when the run asked for it.
        """
        data: dict[str, Any] = {
            "exception_class": exception_class,
            "message": message,
        }
        if traceback is not None:
            data["traceback"] = traceback

        self.event("error", data=data, stage=stage, level="ERROR")

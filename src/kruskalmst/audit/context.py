"""Run context: ties the event log and the manifest to one solver run."""

import sys
import traceback
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from kruskalmst.audit.helpers import (
    generate_run_id,
    get_dependency_versions,
    get_package_version,
    get_platform_info,
    get_python_version,
)
from kruskalmst.audit.logger import AuditLogger
from kruskalmst.audit.manifest import ManifestWriter
from kruskalmst.audit.models import (
    EnvironmentInfo,
    ErrorInfo,
    InputInfo,
    StageInfo,
)
from kruskalmst.utils import get_iso_timestamp

__all__ = ["RunContext"]


class RunContext:
    """Context manager for a solver run.

    Writes ``events.jsonl`` as the run progresses and ``run.json`` when it
    ends. Leaving the ``with`` block through an exception records the error
    and finishes the run as failed.

    Attributes
    ----------
    run_id : str
        Identifier shared by the events and the manifest.
    output_dir : Path
        Root of everything the run writes.
    audit_logger : AuditLogger
        Writer of ``events.jsonl``.
    manifest_writer : ManifestWriter
        Builder of ``run.json``.
    """

    def __init__(
        self,
        run_id: str,
        output_dir: Path,
        audit_logger: AuditLogger,
        manifest_writer: ManifestWriter,
    ) -> None:
        self.run_id = run_id
        self.output_dir = output_dir
        self.audit_logger = audit_logger
        self.manifest_writer = manifest_writer
        self.start_time = datetime.now(UTC)
        self.finished = False
        self._stage_start_times: dict[str, datetime] = {}

    @classmethod
    def start(
        cls,
        output_dir: Path,
        parameters: dict[str, Any],
        command_argv: list[str] | None = None,
    ) -> "RunContext":
        """Create the output directory, open the log and emit run_started.

        Parameters
        ----------
        output_dir : Path
            Directory receiving ``events.jsonl``, ``run.json`` and
            ``artifacts/``. Created with its parents if missing.
        parameters : dict[str, Any]
            Solver settings copied into the manifest and ``run_started``.
        command_argv : list[str] | None, optional
            Command line to record; ``sys.argv`` when omitted.

        Returns
        -------
        RunContext
            Open run, ready for ``start_stage``.

        Raises
        ------
        OSError
            If the output directory or the log file cannot be created.
        """
        run_id = generate_run_id()

        output_dir.mkdir(parents=True, exist_ok=True)
        (output_dir / "artifacts").mkdir(exist_ok=True)

        argv = list(command_argv or sys.argv)

        environment = EnvironmentInfo(
            python_version=get_python_version(),
            platform=get_platform_info(),
            package_version=get_package_version(),
            dependencies=get_dependency_versions(["click"]),
        )

        audit_logger = AuditLogger(run_id=run_id, log_path=output_dir / "events.jsonl")

        manifest_writer = ManifestWriter(
            run_id=run_id,
            output_dir=output_dir,
            argv=argv,
            environment=environment,
            parameters=parameters,
        )

        audit_logger.run_started(argv=argv, parameters=parameters)

        return cls(
            run_id=run_id,
            output_dir=output_dir,
            audit_logger=audit_logger,
            manifest_writer=manifest_writer,
        )

    def start_stage(self, stage_name: str) -> None:
        self._stage_start_times[stage_name] = datetime.now(UTC)
        self.manifest_writer.add_stage(StageInfo(name=stage_name, started_at=get_iso_timestamp()))
        self.audit_logger.stage_started(stage_name)

    def finish_stage(
        self,
        stage_name: str,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Close a stage in both the manifest and the event log.

        Parameters
        ----------
        stage_name : str
            Name passed to the matching ``start_stage`` call.
        counters : dict[str, int] | None, optional
            Totals reported by the stage.

        Raises
        ------
        ValueError
            If ``start_stage`` was never called for ``stage_name``.
        """
        start_time = self._stage_start_times.pop(stage_name, None)
        if start_time is None:
            raise ValueError(f"Stage not started: {stage_name}")

        duration = (datetime.now(UTC) - start_time).total_seconds()

        self.manifest_writer.finish_stage(stage_name, duration_seconds=duration, counters=counters)
        self.audit_logger.stage_finished(stage_name, duration_seconds=duration, counters=counters)
        self.audit_logger.set_stage(None)

    def set_input(self, input_info: InputInfo) -> None:
        self.manifest_writer.set_input(input_info)

    def add_warning(self, message: str) -> None:
        self.audit_logger.warning(message)

    def register_artifact(self, path: Path) -> None:
        """Hash an output file, add it to the manifest and log it."""
        artifact = self.manifest_writer.add_artifact(path)
        self.audit_logger.artifact_written(
            path=artifact.path,
            sha256=artifact.sha256,
            bytes_written=artifact.bytes,
        )

    def record_error(
        self,
        exception: BaseException,
        stage: str | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Add a failure to ``run.json`` and emit an ``error`` event.

        Parameters
        ----------
        exception : BaseException
            The exception that stopped the stage.
        stage : str | None, optional
            Stage to blame; the one still open when omitted.
        include_traceback : bool, optional
            Attach the formatted traceback, by default False.
        """
        if stage is None:
            stage = self.audit_logger.current_stage

        tb = None
        if include_traceback:
            tb = "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            )

        error_info = ErrorInfo(
            timestamp=get_iso_timestamp(),
            exception_class=type(exception).__name__,
            message=str(exception),
            stage=stage,
            traceback=tb,
        )

        self.manifest_writer.add_error(error_info)
        self.audit_logger.error(
            exception_class=error_info.exception_class,
            message=error_info.message,
            stage=stage,
            traceback=tb,
        )

    def finish(self, status: str = "success") -> None:
        """Close the event log, register it as an artifact and write run.json.

        Parameters
        ----------
        status : str, optional
            Final run status, by default "success".
        """
        if self.finished:
            return
        self.finished = True

        duration = (datetime.now(UTC) - self.start_time).total_seconds()

        self.audit_logger.run_finished(status=status, duration_seconds=duration)
        self.audit_logger.close()

        events_path = self.audit_logger.log_path
        if events_path.exists():
            self.manifest_writer.add_artifact(events_path)

        self.manifest_writer.finish(status=status, duration_seconds=duration)

    def __enter__(self) -> "RunContext":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            self.record_error(exc_val, include_traceback=True)
            self.finish(status="failed")
        else:
            self.finish(status="success")

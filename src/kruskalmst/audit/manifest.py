"""Run manifest (``run.json``) builder with atomic writes."""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from kruskalmst.audit.models import (
    ArtifactInfo,
    EnvironmentInfo,
    ErrorInfo,
    InputInfo,
    ManifestData,
    StageInfo,
)
from kruskalmst.utils import calculate_file_sha256, get_iso_timestamp

__all__ = ["ManifestWriter", "MANIFEST_VERSION"]

MANIFEST_VERSION = "1.0.0"


class ManifestWriter:
    """Builds the run manifest and writes it atomically.

    Attributes
    ----------
    manifest : ManifestData
        Manifest being built.
    output_dir : Path
        Directory that receives ``run.json``.
    """

    def __init__(
        self,
        run_id: str,
        output_dir: Path,
        argv: list[str],
        environment: EnvironmentInfo,
        parameters: dict[str, Any],
    ) -> None:
        """Initialize manifest writer.

        Parameters
        ----------
        run_id : str
            Unique run identifier.
        output_dir : Path
            Output directory for manifest.
        argv : list[str]
            Command line.
        environment : EnvironmentInfo
            Execution environment.
        parameters : dict[str, Any]
            Configuration parameters.
        """
        self.output_dir = output_dir
        self.manifest_path = output_dir / "run.json"

        self.manifest = ManifestData(
            manifest_version=MANIFEST_VERSION,
            run_id=run_id,
            created_at=get_iso_timestamp(),
            status="partial",
            argv=argv,
            environment=environment,
            parameters=parameters,
        )

        self._stage_index: dict[str, StageInfo] = {}

    def _get_stage(self, stage_name: str) -> StageInfo:
        stage = self._stage_index.get(stage_name)
        if stage is None:
            raise ValueError(f"Stage not found: {stage_name}")
        return stage

    def set_input(self, input_info: InputInfo) -> None:
        self.manifest.input = input_info

    def add_stage(self, stage: StageInfo) -> None:
        self.manifest.stages.append(stage)
        self._stage_index[stage.name] = stage

    def finish_stage(
        self,
        stage_name: str,
        duration_seconds: float,
        counters: dict[str, int] | None = None,
    ) -> None:
        """Mark stage as finished and merge its counters.

        Parameters
        ----------
        stage_name : str
            Name of stage to finish.
        duration_seconds : float
            Stage duration in seconds.
        counters : dict[str, int] | None, optional
            Counter values to merge.

        Raises
        ------
        ValueError
            If stage not found.
        """
        stage = self._get_stage(stage_name)
        stage.finished_at = get_iso_timestamp()
        stage.duration_seconds = duration_seconds
        if counters:
            stage.counters.update(counters)

    def add_artifact(self, path: Path) -> ArtifactInfo:
        """Hash a written file and register it as an output artifact.

        Parameters
        ----------
        path : Path
            Artifact path inside ``output_dir``.

        Returns
        -------
        ArtifactInfo
            Registered artifact metadata.
        """
        artifact = ArtifactInfo(
            path=path.relative_to(self.output_dir).as_posix(),
            sha256=calculate_file_sha256(path),
            bytes=path.stat().st_size,
        )
        self.manifest.artifacts.append(artifact)
        return artifact

    def add_error(self, error: ErrorInfo) -> None:
        self.manifest.errors.append(error)

    def finish(self, status: str, duration_seconds: float | None = None) -> None:
        """Finalize manifest and write it.

        Parameters
        ----------
        status : str
            Final run status ("success", "failed", "partial").
        duration_seconds : float | None, optional
            Total run duration in seconds.
        """
        self.manifest.status = status
        self.manifest.finished_at = get_iso_timestamp()
        self.manifest.duration_seconds = duration_seconds

        self._write_manifest_atomic(self.manifest_path)

    def _write_manifest_atomic(self, path: Path) -> None:
        """Write to a temp file, fsync, then rename over ``path``."""
        temp_path = path.with_suffix(".tmp")

        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(asdict(self.manifest), f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())

        temp_path.replace(path)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self.manifest)

"""Solver configuration and result dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from kruskalmst.graph.kruskal import SpanningForest


@dataclass
class SolverConfig:
    """Configuration for one solver run.

    Attributes
    ----------
    output_dir : Path | None
        Directory for ``events.jsonl``, ``run.json`` and artifacts. If None,
        nothing is written to disk.
    write_json : bool
        Write ``artifacts/spanning_forest.json`` when ``output_dir`` is set.
    include_sorted_edges : bool
        Add the full weight-sorted edge list to the JSON artifact.
    include_traceback : bool
        Store stack traces of failures in the audit trail.
    """

    output_dir: Path | None = None
    write_json: bool = True
    include_sorted_edges: bool = False
    include_traceback: bool = False

    def __post_init__(self) -> None:
        """Coerce paths and validate."""
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)
            if self.output_dir.exists() and not self.output_dir.is_dir():
                raise ValueError(f"output_dir is not a directory: {self.output_dir}")

        if self.include_sorted_edges and not self.write_json:
            raise ValueError("include_sorted_edges requires write_json")

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_dir": str(self.output_dir) if self.output_dir is not None else None,
            "write_json": self.write_json,
            "include_sorted_edges": self.include_sorted_edges,
            "include_traceback": self.include_traceback,
        }


@dataclass
class SolverResult:
    """Outcome of ``run_solver``.

    Attributes
    ----------
    success : bool
        Whether the input was read and solved.
    forest : SpanningForest | None
        Kruskal result, None on failure.
    output_files : dict[str, str]
        Map of artifact type to file path.
    warnings : list[str]
        Non-fatal input warnings.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    forest: SpanningForest | None = None
    output_files: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "forest": self.forest.to_dict() if self.forest is not None else None,
            "output_files": dict(self.output_files),
            "warnings": list(self.warnings),
            "error_message": self.error_message,
        }

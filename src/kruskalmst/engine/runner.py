"""Solver runner: read an edge list file, run Kruskal, write artifacts.

Stages:
    parse: Read and validate the input file
    mst:   Sort edges and select the spanning forest
    write: Persist the JSON result (only when an output directory is set)
"""

from pathlib import Path

from kruskalmst.audit.context import RunContext
from kruskalmst.audit.models import InputInfo
from kruskalmst.engine.config import SolverConfig, SolverResult
from kruskalmst.errors import InvalidInputError
from kruskalmst.graph.kruskal import SpanningForest, kruskal
from kruskalmst.parse.reader import GraphInput, read_graph_file
from kruskalmst.report.writer import write_forest_json

FOREST_ARTIFACT = "spanning_forest.json"


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def _stage_parse(input_path: Path, run: RunContext | None) -> GraphInput:
    """Stage parse: read the edge list file."""
    if run:
        run.start_stage("parse")

    graph_input = read_graph_file(input_path)

    if run:
        run.set_input(
            InputInfo(
                name=input_path.name,
                sha256=graph_input.file_digest,
                node_count=graph_input.node_count,
                edge_count=graph_input.edge_count,
            )
        )
        for warning in graph_input.warnings:
            run.add_warning(warning)
        run.finish_stage(
            "parse",
            counters={
                "node_count": graph_input.node_count,
                "edge_count": graph_input.edge_count,
                "warnings": len(graph_input.warnings),
            },
        )

    return graph_input


def _stage_mst(graph_input: GraphInput, run: RunContext | None) -> SpanningForest:
    """Stage mst: run Kruskal on the parsed edges."""
    if run:
        run.start_stage("mst")

    forest = kruskal(
        graph_input.node_count,
        graph_input.edges,
        edge_count=graph_input.edge_count,
    )

    if run:
        run.finish_stage(
            "mst",
            counters={
                "edges_selected": len(forest.edges),
                "edges_considered": forest.edges_considered,
                "cycles_rejected": forest.cycles_rejected,
                "component_count": forest.component_count,
            },
        )

    return forest


def _stage_write(
    forest: SpanningForest,
    config: SolverConfig,
    run: RunContext,
) -> dict[str, str]:
    """Stage write: persist the JSON artifact."""
    run.start_stage("write")

    output_files: dict[str, str] = {}
    if config.write_json:
        path = write_forest_json(
            forest,
            run.output_dir / "artifacts" / FOREST_ARTIFACT,
            include_sorted_edges=config.include_sorted_edges,
        )
        run.register_artifact(path)
        output_files["spanning_forest"] = str(path)

    run.finish_stage("write", counters={"artifacts": len(output_files)})
    return output_files


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------


def _run_stages(
    input_path: Path,
    config: SolverConfig,
    run: RunContext | None,
) -> SolverResult:
    """Execute the stages, turning bad input into a failed result.

    ``NotFoundError`` and other unexpected exceptions are not caught here;
    they indicate a defect and propagate to the caller.
    """
    warnings: list[str] = []

    try:
        graph_input = _stage_parse(input_path, run)
        warnings = list(graph_input.warnings)

        forest = _stage_mst(graph_input, run)

        output_files: dict[str, str] = {}
        if run:
            output_files = _stage_write(forest, config, run)

    except (InvalidInputError, OSError) as e:
        if run:
            run.record_error(e, include_traceback=config.include_traceback)
        return SolverResult(
            success=False,
            warnings=warnings,
            error_message=f"{type(e).__name__}: {e}",
        )

    return SolverResult(
        success=True,
        forest=forest,
        output_files=output_files,
        warnings=warnings,
    )


def run_solver(
    input_path: Path | str,
    config: SolverConfig | None = None,
    command_argv: list[str] | None = None,
) -> SolverResult:
    """Solve the minimum spanning forest of an edge list file.

    Parameters
    ----------
    input_path : Path | str
        Edge list file.
    config : SolverConfig | None, optional
        Run configuration. If None, uses defaults (no files written).
    command_argv : list[str] | None, optional
        Command line recorded in the audit trail, uses sys.argv if None.

    Returns
    -------
    SolverResult
        ``success=False`` with ``error_message`` set when the input is
        missing or malformed, or the output directory cannot be created.

    Examples
    --------
        >>> from kruskalmst.engine import run_solver
        >>> result = run_solver("graph.txt")
        >>> if result.success:
        ...     print(result.forest.total_weight)
    """
    input_path = Path(input_path)

    if config is None:
        config = SolverConfig()

    if config.output_dir is None:
        return _run_stages(input_path, config, None)

    parameters = {"input_path": str(input_path), **config.to_dict()}

    try:
        run_context = RunContext.start(
            output_dir=config.output_dir,
            parameters=parameters,
            command_argv=command_argv,
        )
    except OSError as e:
        return SolverResult(
            success=False,
            error_message=f"Cannot create output directory {config.output_dir}: {e}",
        )

    with run_context as run:
        result = _run_stages(input_path, config, run)
        run.finish(status="success" if result.success else "failed")

    result.output_files["events"] = str(run.audit_logger.log_path)
    result.output_files["manifest"] = str(run.manifest_writer.manifest_path)
    return result

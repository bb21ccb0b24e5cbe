"""Command-line interface for kruskalmst.

Provides CLI commands for solving and validating edge list files.
"""

import importlib.metadata
import json
import sys
from pathlib import Path

import click

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("kruskalmst")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="kruskalmst")
def cli() -> None:
    """Minimum spanning trees of weighted undirected graphs (Kruskal).

    Use 'kruskalmst COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default=None,
    help="Write events.jsonl, run.json and artifacts/ to this directory",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as JSON instead of text",
)
@click.option(
    "--show-sorted",
    is_flag=True,
    help="Also print all edges in ascending weight order",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def solve(
    input_path: str,
    output_dir: str | None,
    as_json: bool,
    show_sorted: bool,
    verbose: bool,
) -> None:
    """Compute the minimum spanning tree of INPUT_PATH.

    INPUT_PATH is an edge list: a header line "<nodes> <edges>" followed by
    one "<from> <to> <weight>" line per edge.

    A disconnected graph yields a spanning forest; this is reported, not
    treated as an error.

    Examples
    --------
        kruskalmst solve graph.txt
        kruskalmst solve graph.txt --json
        kruskalmst solve graph.txt -o runs/graph --show-sorted
    """
    from kruskalmst.engine import SolverConfig, run_solver
    from kruskalmst.report import forest_payload, format_forest, format_sorted_edges

    if verbose:
        click.echo(f"Solving: {input_path}", err=True)
        if output_dir:
            click.echo(f"  Output: {output_dir}", err=True)

    config = SolverConfig(
        output_dir=Path(output_dir) if output_dir else None,
        include_sorted_edges=show_sorted,
        include_traceback=verbose,
    )

    result = run_solver(input_path, config=config)

    for warning in result.warnings:
        click.secho(f"Warning: {warning}", fg="yellow", err=True)

    if not result.success or result.forest is None:
        click.secho(f"✗ Error: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    forest = result.forest

    if as_json:
        payload = forest_payload(forest, include_sorted_edges=show_sorted)
        click.echo(json.dumps(payload, indent=2, default=str))
    else:
        if show_sorted:
            click.echo("sorted edges:")
            click.echo(format_sorted_edges(forest.sorted_edges))
            click.echo()
        click.echo(format_forest(forest))

    if verbose:
        click.echo(
            f"\nConsidered {forest.edges_considered} edges, "
            f"rejected {forest.cycles_rejected} forming cycles",
            err=True,
        )
        for name, path in result.output_files.items():
            click.echo(f"  {name}: {path}", err=True)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
def validate(input_path: str) -> None:
    """Check that INPUT_PATH is a well-formed edge list without solving it.

    Examples
    --------
        kruskalmst validate graph.txt
    """
    from kruskalmst import InvalidInputError, load_graph

    try:
        graph_input = load_graph(input_path)
    except (InvalidInputError, OSError) as e:
        click.secho(f"✗ Invalid: {e}", fg="red", err=True)
        sys.exit(1)

    for warning in graph_input.warnings:
        click.secho(f"Warning: {warning}", fg="yellow", err=True)

    click.secho(
        f"✓ Valid: {graph_input.node_count} nodes, {graph_input.edge_count} edges",
        fg="green",
    )


if __name__ == "__main__":
    cli()

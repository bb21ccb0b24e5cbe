"""Text and JSON rendering of Kruskal results."""

import json
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from kruskalmst.graph.kruskal import SpanningForest
from kruskalmst.graph.models import Edge

__all__ = ["forest_payload", "format_forest", "format_sorted_edges", "write_forest_json"]


def format_sorted_edges(edges: Iterable[Edge]) -> str:
    """Render edges one per line, as ``<v1> -- <v2> ( <w> )``."""
    return "\n".join(str(edge) for edge in edges)


def format_forest(forest: SpanningForest) -> str:
    """Render selected edges, total weight and connectivity.

    Parameters
    ----------
    forest : SpanningForest
        Kruskal result.

    Returns
    -------
    str
        Multi-line report without a trailing newline.
    """
    lines = [str(edge) for edge in forest.edges]
    lines.append(f"total weight: {forest.total_weight}")

    if forest.is_spanning_tree:
        lines.append("spanning tree: yes")
    else:
        lines.append(f"spanning tree: no ({forest.component_count} components)")

    return "\n".join(lines)


def forest_payload(forest: SpanningForest, include_sorted_edges: bool = False) -> dict[str, Any]:
    """Build the JSON document for a result, optionally with the sorted edge list."""
    payload = forest.to_dict()
    if include_sorted_edges:
        payload["sorted_edges"] = [edge.to_dict() for edge in forest.sorted_edges]
    return payload


def write_forest_json(
    forest: SpanningForest,
    path: Path,
    include_sorted_edges: bool = False,
) -> Path:
    """Write the result as pretty-printed JSON, atomically.

    Parameters
    ----------
    forest : SpanningForest
        Kruskal result.
    path : Path
        Destination file.
    include_sorted_edges : bool, optional
        Also write the full weight-sorted edge list, by default False.

    Returns
    -------
    Path
        The written path.
    """
    payload = forest_payload(forest, include_sorted_edges)

    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_suffix(".tmp")

    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False, default=str)
        f.write("\n")
        f.flush()
        os.fsync(f.fileno())

    temp_path.replace(path)
    return path

"""Rendering of spanning forests for the console and for JSON files."""

from kruskalmst.report.writer import (
    forest_payload,
    format_forest,
    format_sorted_edges,
    write_forest_json,
)

__all__ = [
    "forest_payload",
    "format_forest",
    "format_sorted_edges",
    "write_forest_json",
]

"""Edge list input parsing.

Main entry points:
- read_graph_file: Read and parse a file
- parse_graph_text: Parse an in-memory document
"""

from kruskalmst.parse.reader import GraphInput, parse_graph_text, read_graph_file

__all__ = [
    "GraphInput",
    "parse_graph_text",
    "read_graph_file",
]

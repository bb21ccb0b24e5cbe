"""Reader for the whitespace-separated edge list format.

Format::

    <node_count> <edge_count>
    <from> <to> <weight>
    ...

Blank lines are skipped. Node tokens are kept as strings.
"""

import math
import re
from dataclasses import dataclass, replace
from pathlib import Path

from kruskalmst.errors import InvalidInputError
from kruskalmst.graph.models import Edge, Weight
from kruskalmst.utils import calculate_file_digest

__all__ = [
    "GraphInput",
    "detect_encoding",
    "parse_graph_text",
    "parse_weight",
    "read_graph_file",
]

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class GraphInput:
    """Parsed graph description, ready for the Kruskal engine.

    Attributes
    ----------
    node_count : int
        Declared node count (header field 1).
    edge_count : int
        Declared edge count (header field 2).
    edges : tuple[Edge, ...]
        Exactly ``edge_count`` edges in file order.
    warnings : tuple[str, ...]
        Non-fatal oddities found while reading.
    source : str | None
        File name the input came from, if any.
    file_digest : str
        SHA-256 digest of the raw file bytes ("" for in-memory text).
    """

    node_count: int
    edge_count: int
    edges: tuple[Edge, ...]
    warnings: tuple[str, ...] = ()
    source: str | None = None
    file_digest: str = ""


def detect_encoding(file_bytes: bytes) -> str:
    """Pick utf-8-sig, utf-8 or latin-1 for the given bytes."""
    if file_bytes.startswith(b"\xef\xbb\xbf"):
        return "utf-8-sig"

    try:
        file_bytes.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    return "latin-1"


def parse_weight(token: str, line: int | None = None, source: str | None = None) -> Weight:
    """Convert a weight token to int, or to float for decimal notation.

    Parameters
    ----------
    token : str
        Raw token.
    line : int | None, optional
        Line number for error messages.
    source : str | None, optional
        Source name for error messages.

    Returns
    -------
    int | float
        Parsed weight.

    Raises
    ------
    InvalidInputError
        If the token is not a finite number.
    """
    if _INT_RE.fullmatch(token):
        return int(token)

    try:
        value = float(token)
    except ValueError:
        raise InvalidInputError(f"Unparsable weight: {token!r}", line=line, source=source) from None

    if not math.isfinite(value):
        raise InvalidInputError(f"Weight must be finite: {token!r}", line=line, source=source)
    return value


def _parse_count(token: str, name: str, minimum: int, line: int, source: str | None) -> int:
    if not _INT_RE.fullmatch(token):
        raise InvalidInputError(f"{name} is not an integer: {token!r}", line=line, source=source)
    value = int(token)
    if value < minimum:
        raise InvalidInputError(f"{name} must be >= {minimum}, got {value}", line=line, source=source)
    return value


def parse_graph_text(text: str, source: str | None = None) -> GraphInput:
    """Parse an edge list document.

    Parameters
    ----------
    text : str
        Whole document.
    source : str | None, optional
        Name used in error messages.

    Returns
    -------
    GraphInput
        Header counts and the declared edges.

    Raises
    ------
    InvalidInputError
        On a missing or malformed header, a malformed edge line, or fewer
        edge lines than the header declares.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [(number, raw.split()) for number, raw in enumerate(text.split("\n"), start=1)]
    lines = [(number, tokens) for number, tokens in lines if tokens]

    if not lines:
        raise InvalidInputError("Missing header line", source=source)

    header_line, header = lines[0]
    if len(header) < 2:
        raise InvalidInputError(
            "Header must contain node_count and edge_count", line=header_line, source=source
        )

    node_count = _parse_count(header[0], "node_count", 1, header_line, source)
    edge_count = _parse_count(header[1], "edge_count", 0, header_line, source)

    warnings: list[str] = []
    if len(header) > 2:
        warnings.append(f"line {header_line}: ignored {len(header) - 2} extra header token(s)")

    body = lines[1:]
    if len(body) < edge_count:
        raise InvalidInputError(
            f"Header declares {edge_count} edges but only {len(body)} edge lines found",
            source=source,
        )

    edges: list[Edge] = []
    for number, tokens in body[:edge_count]:
        if len(tokens) < 3:
            raise InvalidInputError(
                "Edge line must contain from, to and weight", line=number, source=source
            )
        if len(tokens) > 3:
            warnings.append(f"line {number}: ignored {len(tokens) - 3} extra token(s)")
        weight = parse_weight(tokens[2], line=number, source=source)
        edges.append(Edge(v1=tokens[0], v2=tokens[1], w=weight))

    extra = len(body) - edge_count
    if extra:
        warnings.append(f"ignored {extra} line(s) after the declared {edge_count} edges")

    return GraphInput(
        node_count=node_count,
        edge_count=edge_count,
        edges=tuple(edges),
        warnings=tuple(warnings),
        source=source,
    )


def read_graph_file(path: str | Path) -> GraphInput:
    """Read and parse an edge list file.

    Parameters
    ----------
    path : str | Path
        File to read.

    Returns
    -------
    GraphInput
        Parsed input, with ``file_digest`` set.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    InvalidInputError
        If the content is malformed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    file_bytes = file_path.read_bytes()
    text = file_bytes.decode(detect_encoding(file_bytes))
    parsed = parse_graph_text(text, source=file_path.name)

    return replace(parsed, file_digest=calculate_file_digest(file_bytes))

"""Exception hierarchy for kruskalmst."""

from collections.abc import Hashable

__all__ = ["MSTError", "InvalidInputError", "NotFoundError"]


class MSTError(Exception):
    """Base class for all kruskalmst errors."""


class InvalidInputError(MSTError):
    """Raised when a graph description is malformed.

    Raised before any algorithmic work starts, so no partial result
    exists when this error is seen.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        source: str | None = None,
    ) -> None:
        """Initialize invalid input error.

        Parameters
        ----------
        message : str
            Error message.
        line : int | None, optional
            1-based line number of the offending input line.
        source : str | None, optional
            Name of the input file, if any.
        """
        location = ""
        if source is not None and line is not None:
            location = f"{source}:{line}: "
        elif line is not None:
            location = f"line {line}: "
        elif source is not None:
            location = f"{source}: "
        super().__init__(f"{location}{message}")
        self.line = line
        self.source = source


class NotFoundError(MSTError, KeyError):
    """Raised when a disjoint-set operation references an unregistered node."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(f"Node not registered in disjoint set: {node!r}")
        self.node = node

    def __str__(self) -> str:
        return str(self.args[0])

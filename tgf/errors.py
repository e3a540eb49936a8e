"""Errors raised by graph operations."""

from typing import Optional


class GraphError(Exception):

    """Base class for all errors raised by the graph and its records."""


class ParseError(GraphError):

    """A line of text could not be decoded as a node or edge record.

    Carries the offending line, a short reason, and the 1-based line number
    when the line came from a whole document.
    """

    def __init__(self, line: str, reason: str, lineno: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.lineno = lineno
        super().__init__(str(self))

    def __str__(self) -> str:
        where = f"line {self.lineno}: " if self.lineno is not None else ""
        return f"{where}{self.reason} in {self.line!r}"

    def at(self, lineno: int) -> "ParseError":
        """Return a copy of this error located at lineno."""
        return ParseError(self.line, self.reason, lineno)


class DuplicateNodeError(GraphError):

    """A node was inserted with an id that is already in the graph."""

    def __init__(self, id: int):
        self.id = id
        super().__init__(f"node {id} already exists")


class InvalidEdgeError(GraphError):

    """An edge was inserted with an endpoint that is not in the graph."""

    def __init__(self, begin: int, end: int, missing: int):
        self.begin = begin
        self.end = end
        self.missing = missing
        super().__init__(f"edge {begin} -> {end}: node {missing} does not exist")


class InvalidValueError(GraphError):

    """A node value does not encode to a single non-empty token."""

    def __init__(self, id: int, token: str):
        self.id = id
        self.token = token
        super().__init__(f"value of node {id} encodes to invalid token {token!r}")

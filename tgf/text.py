"""Line structure of the graph text format.

A document lists one node per line, then a line holding only "#", then one
edge per line:

    1 123
    2 321
    #
    1 2

The separator is always written, even when either section is empty. When it is
missing, every line is a node.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple

SEPARATOR = "#"


class Kind(Enum):
    NODE = "node"
    EDGE = "edge"


class Record(NamedTuple):

    """A node or edge line with its 1-based line number."""

    lineno: int
    kind: Kind
    line: str


def lines(text: str) -> List[str]:
    """Split text into lines, dropping trailing blank lines."""
    result = text.splitlines()
    while result and not result[-1].strip():
        result.pop()
    return result


def records(text: str) -> Iterator[Record]:
    """Classify the lines of text as node and edge records.

    Only the first separator line switches sections; it is not yielded. Every
    other line is yielded undecoded, so blank lines and repeated separators
    fail later when decoded as records.
    """
    kind = Kind.NODE
    for lineno, line in enumerate(lines(text), start=1):
        if line == SEPARATOR and kind is Kind.NODE:
            kind = Kind.EDGE
            continue
        yield Record(lineno, kind, line)

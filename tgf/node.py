"""Node and edge records."""

from __future__ import annotations

from typing import Generic, List, NamedTuple, TypeVar

from tgf.codec import ID_MAX, Codec, parse_uint
from tgf.errors import ParseError

V = TypeVar("V")


def check_id(id: int) -> int:
    """Return id if it is a valid node id, otherwise raise."""
    if isinstance(id, bool) or not isinstance(id, int):
        raise TypeError(f"node id must be int, not {type(id).__name__}")
    if not 0 <= id < ID_MAX:
        raise ValueError(f"node id out of range: {id}")
    return id


def split_record(line: str) -> List[str]:
    """Split a record into its two tokens, raising ParseError otherwise."""
    tokens = line.split(" ")
    if len(tokens) != 2:
        raise ParseError(line, f"expected 2 tokens, got {len(tokens)}")
    return tokens


def decode_id(line: str, token: str) -> int:
    try:
        return parse_uint(token)
    except ValueError:
        raise ParseError(line, f"invalid id {token!r}") from None


class Node(Generic[V]):

    """A node in a graph.

    Nodes are identified by id alone: two nodes with the same id compare equal
    regardless of their values.
    """

    __slots__ = ("id", "value")

    def __init__(self, id: int, value: V):
        self.id = id
        self.value = value

    def __repr__(self) -> str:
        return f"Node(id={self.id!r}, value={self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def encode(self, codec: Codec[V]) -> str:
        return f"{self.id} {codec.encode(self.value)}"

    @staticmethod
    def decode(line: str, codec: Codec[V]) -> Node[V]:
        id_token, value_token = split_record(line)
        id = decode_id(line, id_token)
        try:
            value = codec.decode(value_token)
        except ValueError:
            raise ParseError(line, f"invalid {codec.name} value {value_token!r}") from None
        return Node(id, value)


class Edge(NamedTuple):

    """A directed edge from the node with id begin to the node with id end."""

    begin: int
    end: int

    def encode(self) -> str:
        return f"{self.begin} {self.end}"

    @staticmethod
    def decode(line: str) -> Edge:
        begin, end = split_record(line)
        return Edge(decode_id(line, begin), decode_id(line, end))

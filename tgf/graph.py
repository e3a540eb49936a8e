"""Generic directed graph structure."""

from __future__ import annotations

import logging
import sys
from typing import (
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    TextIO,
    TypeVar,
)

from tgf.codec import INT, Codec
from tgf.errors import DuplicateNodeError, InvalidEdgeError, InvalidValueError, ParseError
from tgf.node import Edge, Node, check_id
from tgf.text import SEPARATOR, Kind, Record, records

V = TypeVar("V")


class Graph(Generic[V]):

    """A directed graph.

    Nodes hold values of type V, which are converted to text with the graph's
    codec. Node ids are unique, every edge connects existing nodes, and no edge
    appears twice. Nodes and edges keep their insertion order.

    Mutating methods return the graph so that calls can be chained:

        g = Graph(INT).add_node(1, 10).add_node(2, 20).add_edge(1, 2)
    """

    def __init__(self, codec: Codec[V] = INT):
        self.codec = codec
        self.nodes: List[Node[V]] = []
        self.edges: List[Edge] = []
        self.by_id: Dict[int, Node[V]] = {}

    def __repr__(self) -> str:
        return f"Graph(N={len(self.nodes)}, E={len(self.edges)})"

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, id: object) -> bool:
        return id in self.by_id

    def add_node(self, id: int, value: V) -> Graph[V]:
        """Add a node.

        Raises DuplicateNodeError if the id is taken, and InvalidValueError if
        the value cannot be written as a single token that reads back.
        """
        check_id(id)
        if id in self.by_id:
            raise DuplicateNodeError(id)
        token = self.codec.encode(value)
        if not self.codec.check(token):
            raise InvalidValueError(id, token)
        try:
            self.codec.decode(token)
        except ValueError:
            raise InvalidValueError(id, token) from None
        node = Node(id, value)
        self.nodes.append(node)
        self.by_id[id] = node
        return self

    def remove_node(self, id: int) -> Graph[V]:
        """Remove a node and all edges that start or end at it."""
        node = self.by_id.pop(id, None)
        if node is None:
            return self
        self.nodes.remove(node)
        kept = [e for e in self.edges if e.begin != id and e.end != id]
        logging.debug("removed node %d and %d edges", id, len(self.edges) - len(kept))
        self.edges = kept
        return self

    def add_edge(self, begin: int, end: int) -> Graph[V]:
        """Add an edge from begin to end.

        Raises InvalidEdgeError unless both nodes exist. Adding an edge that is
        already present does nothing.
        """
        check_id(begin)
        check_id(end)
        for id in (begin, end):
            if id not in self.by_id:
                raise InvalidEdgeError(begin, end, id)
        edge = Edge(begin, end)
        if edge in self.edges:
            logging.debug("skipping duplicate edge %d -> %d", begin, end)
            return self
        self.edges.append(edge)
        return self

    def remove_edge(self, edge: Edge) -> Graph[V]:
        """Remove the edge with the same begin and end, if any."""
        self.edges = [
            e for e in self.edges if not (e.begin == edge.begin and e.end == edge.end)
        ]
        return self

    def get_node(self, id: int) -> Optional[Node[V]]:
        return self.by_id.get(id)

    def all_nodes(self) -> Sequence[Node[V]]:
        """Return the nodes in insertion order. Do not modify the result."""
        return self.nodes

    def all_edges(self) -> Sequence[Edge]:
        """Return the edges in insertion order. Do not modify the result."""
        return self.edges

    def get_connected(self, node: Node[V]) -> List[Node[V]]:
        """Return the targets of edges leaving node, in edge order."""
        result = []
        for edge in self.edges:
            if edge.begin != node.id:
                continue
            target = self.by_id.get(edge.end)
            if target is not None:
                result.append(target)
        return result

    def walk(self, root: Node[V]) -> Iterator[Node[V]]:
        """Iterate over the nodes reachable from root in depth-first preorder.

        Each node is produced once, the first time a path reaches it, so cycles
        terminate. Successors are explored in get_connected order. The root is
        always produced, even if it does not belong to the graph.
        """
        visited: Set[int] = set()
        stack = [root]
        while stack:
            node = stack.pop()
            if node.id in visited:
                continue
            visited.add(node.id)
            yield node
            # Reversed so that the first successor is popped first.
            stack.extend(reversed(self.get_connected(node)))

    def traverse_from(self, root: Node[V], visit: Callable[[Node[V]], None]):
        """Call visit on every node reachable from root (see walk)."""
        for node in self.walk(root):
            visit(node)

    def dumps(self) -> str:
        """Serialize the graph to text."""
        parts = [node.encode(self.codec) + "\n" for node in self.nodes]
        parts.append(SEPARATOR + "\n")
        parts.extend(edge.encode() + "\n" for edge in self.edges)
        return "".join(parts)

    def dump(self, out: Optional[TextIO] = None):
        """Write the serialized graph to out (default: stdout)."""
        if out is None:
            out = sys.stdout
        out.write(self.dumps())

    @staticmethod
    def loads(text: str, codec: Codec[V] = INT) -> Graph[V]:
        """Deserialize a graph from text.

        Raises ParseError (with a line number) for malformed lines, and
        DuplicateNodeError or InvalidEdgeError for lines that break the graph's
        invariants.
        """
        graph = Graph(codec)
        for record in records(text):
            try:
                graph.add_record(record)
            except ParseError as ex:
                raise ex.at(record.lineno) from None
        logging.debug("loaded %r", graph)
        return graph

    def add_record(self, record: Record) -> Graph[V]:
        """Decode a node or edge line and add it to the graph."""
        if record.kind is Kind.NODE:
            node = Node.decode(record.line, self.codec)
            return self.add_node(node.id, node.value)
        edge = Edge.decode(record.line)
        return self.add_edge(edge.begin, edge.end)

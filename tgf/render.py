"""Rendering of node lines for display."""

from typing import Sequence

from jinja2 import Environment, StrictUndefined, TemplateError

from tgf.errors import GraphError
from tgf.graph import Graph
from tgf.node import Node


class FormatError(GraphError):

    """The node_format template is invalid."""


class NodeRenderer:

    """Render one line of text per node from a Jinja2 template.

    The template sees the variables "node" (with "id" and "value") and
    "neighbors", the list of nodes the node has edges to.
    """

    def __init__(self, graph: Graph, node_format: str):
        self.graph = graph
        self.env = Environment(autoescape=False, undefined=StrictUndefined)
        try:
            self.template = self.env.from_string(node_format)
        except TemplateError as ex:
            raise FormatError(f"invalid node_format: {ex}") from ex

    def render(self, node: Node) -> str:
        neighbors: Sequence[Node] = self.graph.get_connected(node)
        try:
            return self.template.render(node=node, neighbors=neighbors)
        except TemplateError as ex:
            raise FormatError(f"cannot render node {node.id}: {ex}") from ex

"""Tests for node line rendering."""

import pytest

from tgf.config import DEFAULT_NODE_FORMAT
from tgf.graph import Graph
from tgf.render import FormatError, NodeRenderer


def graph():
    return Graph.loads("1 123\n2 321\n3 7\n#\n1 2\n1 3\n")


def test_default_format():
    g = graph()
    renderer = NodeRenderer(g, DEFAULT_NODE_FORMAT)
    lines = [renderer.render(n) for n in g.all_nodes()]
    assert lines == [
        "node id: 1, neighbors: [ 2 3 ], value: 123",
        "node id: 2, neighbors: [ ], value: 321",
        "node id: 3, neighbors: [ ], value: 7",
    ]


def test_custom_format():
    g = graph()
    renderer = NodeRenderer(g, "{{ node.id }}={{ node.value }} ({{ neighbors|length }})")
    assert renderer.render(g.get_node(1)) == "1=123 (2)"


def test_syntax_error():
    with pytest.raises(FormatError, match="invalid node_format"):
        NodeRenderer(graph(), "{{ node.id ")


def test_undefined_variable():
    g = graph()
    renderer = NodeRenderer(g, "{{ edges }}")
    with pytest.raises(FormatError, match="cannot render node 1"):
        renderer.render(g.get_node(1))

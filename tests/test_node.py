"""Tests for node and edge records."""

import pytest

from tgf.codec import INT, STR
from tgf.errors import ParseError
from tgf.node import Edge, Node, check_id


def test_node_encode():
    assert Node(1, 123).encode(INT) == "1 123"
    assert Node(7, "abc").encode(STR) == "7 abc"


def test_node_decode():
    node = Node.decode("2 321", INT)
    assert node.id == 2
    assert node.value == 321


def test_node_decode_str_value():
    assert Node.decode("3 hello", STR).value == "hello"


@pytest.mark.parametrize(
    "line",
    ["", "1", "1 2 3", "1  2", "1\t2", "x 2", "-1 2", "+1 2", "4294967296 2", "1 x"],
)
def test_node_decode_invalid(line):
    with pytest.raises(ParseError) as info:
        Node.decode(line, INT)
    assert info.value.line == line
    assert info.value.lineno is None


def test_node_equality_uses_id_only():
    assert Node(1, "a") == Node(1, "b")
    assert Node(1, "a") != Node(2, "a")
    assert len({Node(1, "a"), Node(1, "b")}) == 1


def test_edge_encode_decode():
    assert Edge(1, 4).encode() == "1 4"
    assert Edge.decode("2 3") == Edge(2, 3)


def test_edge_decode_does_not_check_references():
    assert Edge.decode("100 200") == Edge(100, 200)


@pytest.mark.parametrize("line", ["1", "1 2 3", "1 a", "a 1", "1 -2", " 1 2"])
def test_edge_decode_invalid(line):
    with pytest.raises(ParseError):
        Edge.decode(line)


def test_parse_error_message():
    with pytest.raises(ParseError, match="expected 2 tokens, got 3"):
        Edge.decode("1 2 3")
    err = ParseError("1 2 3", "expected 2 tokens, got 3").at(5)
    assert err.lineno == 5
    assert str(err) == "line 5: expected 2 tokens, got 3 in '1 2 3'"


def test_check_id():
    assert check_id(0) == 0
    assert check_id(2 ** 32 - 1) == 2 ** 32 - 1
    with pytest.raises(ValueError):
        check_id(-1)
    with pytest.raises(ValueError):
        check_id(2 ** 32)
    with pytest.raises(TypeError):
        check_id("1")
    with pytest.raises(TypeError):
        check_id(True)

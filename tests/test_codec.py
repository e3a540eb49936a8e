"""Tests for value codecs."""

import pytest

from tgf.codec import FLOAT, INT, STR, UINT, Codec, codecs, parse_uint


def test_registry():
    assert set(codecs) == {"int", "uint", "float", "str"}
    assert codecs["int"] is INT


def test_int():
    assert INT.decode("-12") == -12
    assert INT.encode(-12) == "-12"
    for token in ["1.5", "1_000", " 1", "", "٣"]:
        with pytest.raises(ValueError):
            INT.decode(token)


def test_uint():
    assert UINT.decode("4294967295") == 4294967295
    with pytest.raises(ValueError):
        UINT.decode("-1")
    with pytest.raises(ValueError):
        UINT.decode("4294967296")


def test_float():
    assert FLOAT.decode("1.5") == 1.5
    assert FLOAT.encode(0.1) == "0.1"
    assert FLOAT.decode(FLOAT.encode(1e300)) == 1e300
    with pytest.raises(ValueError):
        FLOAT.decode("abc")


def test_str():
    assert STR.decode("a-b") == "a-b"
    with pytest.raises(ValueError):
        STR.decode("")


def test_check():
    assert Codec.check("abc")
    assert not Codec.check("")
    assert not Codec.check("a b")
    assert not Codec.check("a\tb")


def test_parse_uint():
    assert parse_uint("007") == 7
    with pytest.raises(ValueError):
        parse_uint("1e3")

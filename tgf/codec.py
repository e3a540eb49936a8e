"""Value codecs.

A graph stores values of an arbitrary type V. To serialize them it needs a
Codec[V] that turns a value into a single token of text and back.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Generic, TypeVar

V = TypeVar("V")

ID_MAX = 2 ** 32

_UINT = re.compile(r"[0-9]+")
_INT = re.compile(r"-?[0-9]+")
_SPACE = re.compile(r"\s")


def parse_uint(token: str) -> int:
    """Parse an unsigned 32-bit decimal integer.

    Raises ValueError for signs, whitespace, underscores, non-ASCII digits, and
    values that do not fit in 32 bits. These are all accepted by int().
    """
    if not _UINT.fullmatch(token):
        raise ValueError(f"not an unsigned integer: {token!r}")
    n = int(token)
    if n >= ID_MAX:
        raise ValueError(f"out of range: {token!r}")
    return n


class Codec(ABC, Generic[V]):

    """Abstract base class for value codecs."""

    name: str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    @abstractmethod
    def encode(self, value: V) -> str:
        """Encode value as a token."""

    @abstractmethod
    def decode(self, token: str) -> V:
        """Decode a token. Raises ValueError if it is malformed."""

    @staticmethod
    def check(token: str) -> bool:
        """Return True if token is non-empty and contains no whitespace."""
        return isinstance(token, str) and bool(token) and not _SPACE.search(token)


class IntCodec(Codec[int]):

    name = "int"

    def encode(self, value: int) -> str:
        return str(value)

    def decode(self, token: str) -> int:
        if not _INT.fullmatch(token):
            raise ValueError(f"not an integer: {token!r}")
        return int(token)


class UintCodec(Codec[int]):

    """Unsigned 32-bit integers, with the same syntax as node ids."""

    name = "uint"

    def encode(self, value: int) -> str:
        return str(value)

    def decode(self, token: str) -> int:
        return parse_uint(token)


class FloatCodec(Codec[float]):

    name = "float"

    def encode(self, value: float) -> str:
        return repr(float(value))

    def decode(self, token: str) -> float:
        if not self.check(token):
            raise ValueError(f"not a float: {token!r}")
        return float(token)


class StrCodec(Codec[str]):

    name = "str"

    def encode(self, value: str) -> str:
        return value

    def decode(self, token: str) -> str:
        if not self.check(token):
            raise ValueError(f"not a token: {token!r}")
        return token


INT = IntCodec()
UINT = UintCodec()
FLOAT = FloatCodec()
STR = StrCodec()

codecs: Dict[str, Codec] = {c.name: c for c in [INT, UINT, FLOAT, STR]}

"""
Reading and writing integers on text streams.

Tokens are maximal runs of non-whitespace characters. `read_integer` pulls
one character at a time, so it can be interleaved with other reads on the
same stream; `read_integers` consumes the stream line by line.
"""

from __future__ import annotations

from typing import Iterator, TextIO

from ..bigint.errors import ParseError
from ..bigint.types import BigInteger
from .text_codec import format_integer, parse_integer


def read_token(stream: TextIO) -> str | None:
    """Next whitespace-delimited token, or None at end of stream."""
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    if not ch:
        return None
    chars: list[str] = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars)


def read_integer(stream: TextIO, base: int = 10) -> BigInteger:
    """Parse the next token of ``stream``.

    Raises:
        ParseError: end of stream before any token, or an invalid token.
    """
    token = read_token(stream)
    if token is None:
        raise ParseError("end of stream: no integer to read")
    return parse_integer(token, base)


def read_integers(stream: TextIO, base: int = 10) -> Iterator[BigInteger]:
    for line in stream:
        for token in line.split():
            yield parse_integer(token, base)


def write_integer(stream: TextIO, value: BigInteger, base: int = 10, end: str = "\n") -> None:
    stream.write(format_integer(value, base))
    if end:
        stream.write(end)

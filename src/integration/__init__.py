"""
Adapters around the bigint engine: text codec and stream I/O
"""

from .text_codec import (
    chunk_digits,
    format_integer,
    parse_integer,
)
from .streams import (
    read_integer,
    read_integers,
    read_token,
    write_integer,
)

__all__ = [
    "chunk_digits",
    "format_integer",
    "parse_integer",
    "read_integer",
    "read_integers",
    "read_token",
    "write_integer",
]

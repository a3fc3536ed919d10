"""
Text <-> BigInteger codec for bases 2..36.

Digit alphabet: ``0-9`` then ``a-z`` (values 10..35), lowercase only. A digit
is valid only if its value is below the base. One optional leading ``-``; no
``+``. Leading zeros are accepted on input and never produced on output.

Base 10 maps 8 decimal digits straight onto one limb. Every other base works
in chunks of ``k`` digits, with ``k`` the largest exponent such that
``base ** k <= RADIX``, so each chunk fits in one limb.
"""

from __future__ import annotations

from typing import Any

from ..bigint.addsub import add
from ..bigint.config import get_config
from ..bigint.division import div_small_inplace
from ..bigint.errors import ParseError
from ..bigint.limbs import LIMB_DIGITS, RADIX, is_zero_limbs, limb_buffer
from ..bigint.multiply import mul
from ..bigint.power import binary_power
from ..bigint.types import BigInteger, Sign

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DIGIT_VALUES: dict[str, int] = {ch: i for i, ch in enumerate(DIGITS)}

MIN_BASE = 2
MAX_BASE = 36


def _require_base(base: Any) -> int:
    if not isinstance(base, int) or isinstance(base, bool):
        raise TypeError("base must be an int")
    if not (MIN_BASE <= base <= MAX_BASE):
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}]: {base}")
    return base


def chunk_digits(base: int) -> int:
    """Largest ``k`` with ``base ** k <= RADIX``."""
    _require_base(base)
    k = 1
    while binary_power(base, k + 1) <= RADIX:
        k += 1
    return k


def _split_sign(text: str) -> tuple[Sign, str, int]:
    if text.startswith("-"):
        return Sign.NEGATIVE, text[1:], 1
    return Sign.POSITIVE, text, 0


def _validate_digits(digits: str, base: int, offset: int) -> None:
    for pos, ch in enumerate(digits):
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            raise ParseError(f"invalid digit {ch!r} at position {pos + offset} for base {base}")


def _chunk_value(chunk: str, base: int) -> int:
    value = 0
    for ch in chunk:
        value = value * base + _DIGIT_VALUES[ch]
    return value


def parse_integer(text: str, base: int = 10) -> BigInteger:
    """Parse ``text`` written in ``base`` into a normalized BigInteger.

    Raises:
        ParseError: empty text, lone ``-``, invalid digit, or text longer
            than the configured ``max_text_length``.
        ValueError: base outside [2, 36].
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    _require_base(base)

    max_len = get_config().max_text_length
    if len(text) > max_len:
        raise ParseError(f"text too long: {len(text)} > {max_len} characters")
    if not text:
        raise ParseError("empty string")

    sign, digits, offset = _split_sign(text)
    if not digits:
        raise ParseError("sign without digits")
    _validate_digits(digits, base, offset)

    if base == 10:
        buf: list[int] = []
        end = len(digits)
        while end > 0:
            start = max(0, end - LIMB_DIGITS)
            buf.append(_chunk_value(digits[start:end], 10))
            end = start
        return BigInteger.from_limbs(sign, buf)

    k = chunk_digits(base)
    head = len(digits) % k or k
    acc = BigInteger.from_int(_chunk_value(digits[:head], base))
    step = BigInteger.from_int(binary_power(base, k))
    for start in range(head, len(digits), k):
        acc = add(mul(acc, step), BigInteger.from_int(_chunk_value(digits[start:start + k], base)))
    if sign is Sign.NEGATIVE:
        return -acc
    return acc


def _chunk_text(value: int, base: int, width: int) -> str:
    out: list[str] = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    text = "".join(reversed(out))
    return text.rjust(width, "0")


def format_integer(value: BigInteger, base: int = 10) -> str:
    """Render ``value`` in ``base``: optional ``-``, no leading zeros, zero is ``"0"``."""
    if not isinstance(value, BigInteger):
        raise TypeError("value must be a BigInteger")
    _require_base(base)
    if value.is_zero:
        return "0"
    prefix = "-" if value.is_negative else ""

    if base == 10:
        limbs = value.limbs
        body = str(limbs[-1]) + "".join(f"{limb:0{LIMB_DIGITS}d}" for limb in reversed(limbs[:-1]))
        return prefix + body

    k = chunk_digits(base)
    step = binary_power(base, k)
    chunks: list[int] = []
    buf = limb_buffer(value)
    while not is_zero_limbs(buf):
        chunks.append(div_small_inplace(buf, step))

    parts = [_chunk_text(chunks[-1], base, 1)]
    parts.extend(_chunk_text(c, base, k) for c in reversed(chunks[:-1]))
    return prefix + "".join(parts)

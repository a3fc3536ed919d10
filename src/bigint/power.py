"""Exponentiation by squaring.

Two separate utilities:
- `binary_power` works on native ints (the text codec uses it for chunk
  multipliers such as ``base ** k``);
- `power` runs the same loop over `BigInteger` through `mul`.

Neither is modular.
"""

from __future__ import annotations

from .multiply import mul
from .types import ONE, BigInteger


def _require_exponent(exponent: int) -> None:
    if not isinstance(exponent, int) or isinstance(exponent, bool):
        raise TypeError("exponent must be an int")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")


def binary_power(base: int, exponent: int) -> int:
    """``base ** exponent`` in O(log exponent) multiplications."""
    if not isinstance(base, int) or isinstance(base, bool):
        raise TypeError("base must be an int")
    _require_exponent(exponent)
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base
    return result


def power(base: BigInteger, exponent: int) -> BigInteger:
    """``base ** exponent`` for an arbitrary-precision base."""
    _require_exponent(exponent)
    result = ONE
    while exponent:
        if exponent & 1:
            result = mul(result, base)
        exponent >>= 1
        if exponent:
            base = mul(base, base)
    return result

"""Multiplication: schoolbook grid and Karatsuba divide-and-conquer.

Both magnitude routines take limb sequences (leading zeros tolerated) and
return a fresh normalized list. `mul` adds the sign.

Karatsuba, for operands padded to even length n = 2h:

    a = a1*R^h + a0,  b = b1*R^h + b0
    z0 = a0*b0,  z2 = a1*b1
    z1 = (a0 + a1)*(b0 + b1) - z0 - z2
    a*b = z2*R^(2h) + z1*R^h + z0

Three half-size products instead of four gives O(n^1.585).
"""

from __future__ import annotations

from typing import Sequence

from .addsub import add_magnitudes, sub_magnitudes
from .config import KARATSUBA_THRESHOLD_BOUNDS, get_config
from .limbs import RADIX, allocate_limbs, normalize, pad_to, shift_limbs, trim_leading_zeros
from .types import BigInteger


def schoolbook_mul(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """O(len(a) * len(b)) product with per-row carry propagation."""
    out = allocate_limbs(len(a) + len(b))
    for i, ai in enumerate(a):
        if ai == 0:
            continue
        carry = 0
        k = i
        for bj in b:
            carry, out[k] = divmod(out[k] + ai * bj + carry, RADIX)
            k += 1
        while carry:
            carry, out[k] = divmod(out[k] + carry, RADIX)
            k += 1
    return trim_leading_zeros(out)


def karatsuba_mul(a: Sequence[int], b: Sequence[int], threshold: int | None = None) -> list[int]:
    """Sub-quadratic product of two magnitudes.

    Falls back to `schoolbook_mul` once either operand is at or below
    ``threshold`` limbs (default: configured ``karatsuba_threshold``).
    """
    if threshold is None:
        threshold = get_config().karatsuba_threshold
    if threshold < KARATSUBA_THRESHOLD_BOUNDS[0]:
        raise ValueError(f"threshold must be at least {KARATSUBA_THRESHOLD_BOUNDS[0]}, got {threshold}")

    x = trim_leading_zeros(list(a))
    y = trim_leading_zeros(list(b))
    if len(x) <= threshold or len(y) <= threshold:
        return schoolbook_mul(x, y)

    n = max(len(x), len(y))
    pad_to(x, n)
    pad_to(y, len(x))
    half = len(x) // 2

    x0, x1 = x[:half], x[half:]
    y0, y1 = y[:half], y[half:]

    z0 = karatsuba_mul(x0, y0, threshold)
    z2 = karatsuba_mul(x1, y1, threshold)
    z1 = karatsuba_mul(add_magnitudes(x0, x1), add_magnitudes(y0, y1), threshold)
    z1 = sub_magnitudes(sub_magnitudes(z1, z0), z2)

    result = add_magnitudes(shift_limbs(z2, 2 * half), shift_limbs(z1, half))
    result = add_magnitudes(result, z0)
    return normalize(result)


def mul(a: BigInteger, b: BigInteger) -> BigInteger:
    """Signed product ``a * b``."""
    return BigInteger.from_limbs(a.sign.times(b.sign), karatsuba_mul(a.limbs, b.limbs))

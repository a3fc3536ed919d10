"""Signed addition and subtraction.

The unsigned helpers work on limb sequences and always return a fresh list;
the signed wrappers pick operand order with the comparator so the unsigned
subtraction precondition (minuend >= subtrahend) always holds.
"""

from __future__ import annotations

from typing import Sequence

from .compare import compare_limbs
from .limbs import RADIX, allocate_limbs, trim_leading_zeros
from .types import BigInteger, Relation, Sign


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """``|a| + |b|`` with carry propagation; result may grow by one limb."""
    if len(a) < len(b):
        a, b = b, a
    out = allocate_limbs(len(a) + 1)
    carry = 0
    for i in range(len(a)):
        s = a[i] + carry
        if i < len(b):
            s += b[i]
        if s >= RADIX:
            out[i] = s - RADIX
            carry = 1
        else:
            out[i] = s
            carry = 0
    out[len(a)] = carry
    return trim_leading_zeros(out)


def sub_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """``|a| - |b|`` with borrow propagation.

    Precondition: ``|a| >= |b|``. Callers order the operands first; breaking
    the precondition is a bug in the caller, not a user error.
    """
    if compare_limbs(a, b) is Relation.LESS:
        raise AssertionError("sub_magnitudes: minuend smaller than subtrahend")
    out = allocate_limbs(len(a))
    borrow = 0
    for i in range(len(a)):
        d = a[i] - borrow
        if i < len(b):
            d -= b[i]
        if d < 0:
            out[i] = d + RADIX
            borrow = 1
        else:
            out[i] = d
            borrow = 0
    return trim_leading_zeros(out)


def negate(x: BigInteger) -> BigInteger:
    if x.is_zero:
        return x
    return BigInteger(x.sign.flipped(), x.limbs)


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """Signed sum ``a + b``."""
    if a.sign is b.sign:
        return BigInteger.from_limbs(a.sign, add_magnitudes(a.limbs, b.limbs))

    rel = compare_limbs(a.limbs, b.limbs)
    if rel is Relation.EQUAL:
        return BigInteger(Sign.POSITIVE, (0,))
    if rel is Relation.GREATER:
        return BigInteger.from_limbs(a.sign, sub_magnitudes(a.limbs, b.limbs))
    return BigInteger.from_limbs(b.sign, sub_magnitudes(b.limbs, a.limbs))


def sub(a: BigInteger, b: BigInteger) -> BigInteger:
    """Signed difference ``a - b``."""
    return add(a, negate(b))

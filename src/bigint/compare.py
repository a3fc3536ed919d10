"""Magnitude and signed comparison.

Normalized limb sequences have no leading zeros, so a longer sequence is
always the larger magnitude; only equal lengths need a limb walk.
"""

from __future__ import annotations

from typing import Sequence

from .types import BigInteger, Relation, Sign


def compare_limbs(a: Sequence[int], b: Sequence[int]) -> Relation:
    """Three-way comparison of two normalized magnitudes."""
    if len(a) != len(b):
        return Relation.GREATER if len(a) > len(b) else Relation.LESS
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return Relation.GREATER if a[i] > b[i] else Relation.LESS
    return Relation.EQUAL


def compare_magnitude(a: BigInteger, b: BigInteger) -> Relation:
    """Compare ``|a|`` with ``|b|``."""
    return compare_limbs(a.limbs, b.limbs)


def compare(a: BigInteger, b: BigInteger) -> Relation:
    """Signed comparison of ``a`` with ``b``."""
    if a.sign is not b.sign:
        # Zero is always positive, so differing signs never tie.
        return Relation.LESS if a.sign is Sign.NEGATIVE else Relation.GREATER
    rel = compare_limbs(a.limbs, b.limbs)
    if a.sign is Sign.NEGATIVE:
        return Relation(-rel)
    return rel


def max_of(a: BigInteger, b: BigInteger) -> BigInteger:
    return b if compare(a, b) is Relation.LESS else a


def min_of(a: BigInteger, b: BigInteger) -> BigInteger:
    return b if compare(a, b) is Relation.GREATER else a

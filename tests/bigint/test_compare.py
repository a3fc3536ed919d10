"""Tests for src/bigint/compare.py — magnitude and signed comparison."""

import random

from src.bigint.compare import compare, compare_limbs, compare_magnitude, max_of, min_of
from src.bigint.limbs import RADIX
from src.bigint.types import ZERO, BigInteger, Relation


def B(n: int) -> BigInteger:
    return BigInteger.from_int(n)


def _native_relation(x: int, y: int) -> Relation:
    if x < y:
        return Relation.LESS
    if x > y:
        return Relation.GREATER
    return Relation.EQUAL


class TestCompareLimbs:
    def test_length_decides(self):
        assert compare_limbs([0, 1], [RADIX - 1]) is Relation.GREATER
        assert compare_limbs([5], [0, 0, 1]) is Relation.LESS

    def test_equal(self):
        assert compare_limbs([1, 2, 3], [1, 2, 3]) is Relation.EQUAL

    def test_most_significant_difference_wins(self):
        assert compare_limbs([9, 1, 5], [0, 2, 5]) is Relation.LESS

    def test_least_significant_difference(self):
        assert compare_limbs([4, 2], [3, 2]) is Relation.GREATER


class TestCompareMagnitude:
    def test_ignores_sign(self):
        assert compare_magnitude(B(-10), B(3)) is Relation.GREATER
        assert compare_magnitude(B(-3), B(3)) is Relation.EQUAL
        assert compare_magnitude(B(2), B(-(10**9))) is Relation.LESS


class TestCompareSigned:
    def test_mixed_signs(self):
        assert compare(B(-(10**30)), B(1)) is Relation.LESS
        assert compare(B(1), B(-(10**30))) is Relation.GREATER

    def test_zero(self):
        assert compare(ZERO, B(-1)) is Relation.GREATER
        assert compare(ZERO, ZERO) is Relation.EQUAL

    def test_both_negative_reverses(self):
        assert compare(B(-5), B(-7)) is Relation.GREATER
        assert compare(B(-(10**20)), B(-5)) is Relation.LESS

    def test_matches_native(self):
        rng = random.Random(1234)
        for _ in range(300):
            x = rng.randint(-(10**40), 10**40)
            y = rng.choice([x, -x, rng.randint(-(10**40), 10**40)])
            assert compare(B(x), B(y)) is _native_relation(x, y)


class TestMaxMin:
    def test_max_min(self):
        assert max_of(B(-4), B(3)) == B(3)
        assert min_of(B(-4), B(3)) == B(-4)

    def test_ties_return_first(self):
        a, b = B(7), B(7)
        assert max_of(a, b) is a
        assert min_of(a, b) is a

"""Tests for src/bigint/addsub.py — signed addition and subtraction."""

import random

import pytest

from src.bigint.addsub import add, add_magnitudes, negate, sub, sub_magnitudes
from src.bigint.limbs import RADIX
from src.bigint.types import ZERO, BigInteger, Sign
from src.integration.text_codec import parse_integer


def B(n: int) -> BigInteger:
    return BigInteger.from_int(n)


# ---------------------------------------------------------------------------
# Unsigned helpers
# ---------------------------------------------------------------------------

class TestAddMagnitudes:
    def test_no_carry(self):
        assert add_magnitudes([1, 2], [3]) == [4, 2]

    def test_carry_ripples_into_new_limb(self):
        assert add_magnitudes([RADIX - 1, RADIX - 1], [1]) == [0, 0, 1]

    def test_shorter_first(self):
        assert add_magnitudes([1], [RADIX - 1, 4]) == [0, 5]

    def test_fresh_list(self):
        a = [1]
        out = add_magnitudes(a, [0])
        assert out == [1]
        assert out is not a

    def test_tolerates_leading_zeros(self):
        assert add_magnitudes([1, 0, 0], [2, 0]) == [3]


class TestSubMagnitudes:
    def test_no_borrow(self):
        assert sub_magnitudes([5, 2], [3, 1]) == [2, 1]

    def test_borrow_ripples(self):
        assert sub_magnitudes([0, 0, 1], [1]) == [RADIX - 1, RADIX - 1]

    def test_equal_gives_zero(self):
        assert sub_magnitudes([7, 7], [7, 7]) == [0]

    def test_precondition_violation_is_assertion(self):
        with pytest.raises(AssertionError):
            sub_magnitudes([1], [2])


# ---------------------------------------------------------------------------
# Signed wrappers
# ---------------------------------------------------------------------------

class TestNegate:
    def test_flip(self):
        assert negate(B(5)) == B(-5)
        assert negate(B(-5)) == B(5)

    def test_zero_stays_positive(self):
        assert negate(ZERO).sign is Sign.POSITIVE

    def test_operand_untouched(self):
        x = B(9)
        negate(x)
        assert x == B(9)


class TestAdd:
    def test_same_sign_positive(self):
        assert add(B(3), B(4)) == B(7)

    def test_same_sign_negative(self):
        assert add(B(-3), B(-4)) == B(-7)

    def test_opposite_signs_larger_positive(self):
        assert add(B(10), B(-4)) == B(6)

    def test_opposite_signs_larger_negative(self):
        assert add(B(4), B(-10)) == B(-6)
        assert add(B(-10), B(4)) == B(-6)

    def test_cancellation_is_positive_zero(self):
        result = add(B(-(10**25)), B(10**25))
        assert result == ZERO
        assert result.sign is Sign.POSITIVE

    def test_identity(self):
        x = B(-(10**33) - 1)
        assert add(x, ZERO) == x
        assert add(ZERO, x) == x

    def test_scenario_carry_across_limbs(self):
        a = parse_integer("99999999999999999999", 10)
        assert add(a, parse_integer("1", 10)) == parse_integer("100000000000000000000", 10)

    def test_matches_native(self):
        rng = random.Random(20240601)
        for _ in range(300):
            x = rng.randint(-(10**50), 10**50)
            y = rng.randint(-(10**50), 10**50)
            assert add(B(x), B(y)).to_int() == x + y


class TestSub:
    def test_basic(self):
        assert sub(B(10), B(3)) == B(7)
        assert sub(B(3), B(10)) == B(-7)

    def test_negative_minus_negative(self):
        assert sub(B(-3), B(-10)) == B(7)

    def test_self_is_zero(self):
        x = B(123456789012345678901234567890)
        assert sub(x, x) == ZERO

    def test_borrow_across_many_limbs(self):
        assert sub(B(10**40), B(1)).to_int() == 10**40 - 1

    def test_matches_native(self):
        rng = random.Random(77)
        for _ in range(300):
            x = rng.randint(-(10**45), 10**45)
            y = rng.randint(-(10**45), 10**45)
            assert sub(B(x), B(y)).to_int() == x - y

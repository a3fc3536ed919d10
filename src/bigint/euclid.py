"""GCD, extended GCD (Bezout coefficients) and LCM.

The Euclidean recurrences

    gcd(a, 0) = |a|
    gcd(a, b) = gcd(b, a mod b)

    xgcd(a, 0) = (1, 0, a)
    xgcd(a, b) = (y1, x1 - (a div b) * y1, g)   where (x1, y1, g) = xgcd(b, a mod b)

are evaluated as loops: the step count is O(log min(|a|, |b|)) and must not
be bounded by the interpreter recursion limit.
"""

from __future__ import annotations

from .addsub import sub
from .compare import compare_magnitude
from .division import div_rem, divide, remainder
from .errors import UndefinedResultError
from .multiply import mul
from .types import ONE, ZERO, BigInteger, Bezout, Relation, Sign


def gcd(a: BigInteger, b: BigInteger) -> BigInteger:
    """Greatest common divisor of ``|a|`` and ``|b|``; ``gcd(0, 0) == 0``."""
    x, y = abs(a), abs(b)
    while not y.is_zero:
        x, y = y, remainder(x, y)
    return x


def _xgcd_ordered(a: BigInteger, b: BigInteger) -> Bezout:
    """Extended Euclid for non-negative ``a >= b``.

    Keeps the coefficient pairs of the two most recent remainders, which is
    the recursion above unrolled from the bottom up.
    """
    old_r, r = a, b
    old_x, x = ONE, ZERO
    old_y, y = ZERO, ONE
    while not r.is_zero:
        q, rem = div_rem(old_r, r)
        old_r, r = r, rem
        old_x, x = x, sub(old_x, mul(q, x))
        old_y, y = y, sub(old_y, mul(q, y))
    return Bezout(x=old_x, y=old_y, gcd=old_r)


def _with_sign(value: BigInteger, sign: Sign) -> BigInteger:
    if sign is Sign.POSITIVE:
        return value
    return -value


def xgcd(a: BigInteger, b: BigInteger) -> Bezout:
    """Return ``(x, y, g)`` with ``a*x + b*y == g == gcd(a, b)``."""
    abs_a, abs_b = abs(a), abs(b)
    swapped = compare_magnitude(abs_a, abs_b) is Relation.LESS
    if swapped:
        res = _xgcd_ordered(abs_b, abs_a)
        x, y = res.y, res.x
    else:
        res = _xgcd_ordered(abs_a, abs_b)
        x, y = res.x, res.y
    # |a|*x + |b|*y == g  <=>  a*(sign(a)*x) + b*(sign(b)*y) == g
    return Bezout(x=_with_sign(x, a.sign), y=_with_sign(y, b.sign), gcd=res.gcd)


def lcm(a: BigInteger, b: BigInteger) -> BigInteger:
    """Least common multiple ``|a*b| / gcd(a, b)``, always non-negative."""
    if a.is_zero and b.is_zero:
        raise UndefinedResultError("lcm(0, 0) is undefined")
    return divide(abs(mul(a, b)), gcd(a, b))

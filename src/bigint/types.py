"""Value types for the `bigint` engine.

`BigInteger` is a frozen dataclass: sign plus a tuple of limbs in radix 1e8,
least-significant first. Construction validates the representation invariants
(see `invariants.py`), so every instance a caller can hold is normalized.

Conventions:
- zero is ``BigInteger(Sign.POSITIVE, (0,))``,
- equality is value equality (normalized form is unique),
- ``//`` and ``%`` are deliberately not defined: Python floors, the engine
  truncates toward zero. Use `divide`, `remainder` or `div_rem`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, unique
from typing import NamedTuple

from .errors import InvariantViolation
from .invariants import check_all
from .limbs import int_to_limbs, is_zero_limbs, limbs_to_int, normalize


@unique
class Sign(Enum):
    POSITIVE = 1
    NEGATIVE = -1

    def flipped(self) -> "Sign":
        return Sign.NEGATIVE if self is Sign.POSITIVE else Sign.POSITIVE

    def times(self, other: "Sign") -> "Sign":
        """Sign of a product: negative iff exactly one factor is negative."""
        return Sign.POSITIVE if self is other else Sign.NEGATIVE


@unique
class Relation(IntEnum):
    """Three-way comparison outcome."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class BigInteger:
    """Arbitrary-precision signed integer in sign-magnitude form."""

    sign: Sign
    limbs: tuple[int, ...]

    def __post_init__(self) -> None:
        violations = check_all(self)
        if violations:
            raise InvariantViolation(violations)

    # -- construction --------------------------------------------------------

    @classmethod
    def from_int(cls, n: int) -> "BigInteger":
        if not isinstance(n, int) or isinstance(n, bool):
            raise TypeError("n must be an int")
        sign = Sign.NEGATIVE if n < 0 else Sign.POSITIVE
        return cls(sign, tuple(int_to_limbs(n)))

    @classmethod
    def from_limbs(cls, sign: Sign, buf: list[int]) -> "BigInteger":
        """Normalize a raw limb buffer (in place) and wrap it.

        A zero magnitude always comes back positive.
        """
        normalize(buf)
        if is_zero_limbs(buf):
            sign = Sign.POSITIVE
        return cls(sign, tuple(buf))

    def to_int(self) -> int:
        return self.sign.value * limbs_to_int(self.limbs)

    # -- predicates ----------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return is_zero_limbs(self.limbs)

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        return self.to_int()

    # -- operators (thin wrappers over the module-level operations) -----------

    def __neg__(self) -> "BigInteger":
        from .addsub import negate

        return negate(self)

    def __abs__(self) -> "BigInteger":
        if self.sign is Sign.POSITIVE:
            return self
        return BigInteger(Sign.POSITIVE, self.limbs)

    def __add__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        from .addsub import add

        return add(self, other)

    def __sub__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        from .addsub import sub

        return sub(self, other)

    def __mul__(self, other: object) -> "BigInteger":
        if not isinstance(other, BigInteger):
            return NotImplemented
        from .multiply import mul

        return mul(self, other)

    def _relation(self, other: "BigInteger") -> Relation:
        from .compare import compare

        return compare(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._relation(other) is Relation.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._relation(other) is not Relation.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._relation(other) is Relation.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._relation(other) is not Relation.LESS


ZERO = BigInteger(Sign.POSITIVE, (0,))
ONE = BigInteger(Sign.POSITIVE, (1,))


class Bezout(NamedTuple):
    """Coefficients with ``a*x + b*y == gcd``."""

    x: BigInteger
    y: BigInteger
    gcd: BigInteger


class DivRem(NamedTuple):
    quotient: BigInteger
    remainder: BigInteger

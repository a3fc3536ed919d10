"""`bigint`: arbitrary-precision signed integers on radix-1e8 limbs.

- immutable values (frozen dataclass, limbs stored as a tuple),
- every public operation returns a fresh normalized value,
- in-place limb helpers (`pad_to`, `trim_leading_zeros`, `shift_by_one_limb`)
  only ever touch a caller-owned `list[int]` buffer.

Public API:
- `add`, `sub`, `negate`, `mul`, `divide`, `remainder`, `div_rem`
- `gcd`, `xgcd`, `lcm`, `power`, `binary_power`
- `compare`, `compare_magnitude`, `max_of`, `min_of`

Text parsing/formatting lives in `src.integration.text_codec`.
"""

from .addsub import add, negate, sub
from .compare import compare, compare_magnitude, max_of, min_of
from .division import div_rem, divide, remainder
from .errors import (
    AllocationFailure,
    BigIntError,
    ConfigError,
    DivisionByZeroError,
    InvariantViolation,
    ParseError,
    UndefinedResultError,
)
from .euclid import gcd, lcm, xgcd
from .limbs import LIMB_DIGITS, RADIX
from .multiply import karatsuba_mul, mul, schoolbook_mul
from .power import binary_power, power
from .types import ONE, ZERO, BigInteger, Bezout, DivRem, Relation, Sign

__all__ = [
    "add",
    "sub",
    "negate",
    "mul",
    "karatsuba_mul",
    "schoolbook_mul",
    "divide",
    "remainder",
    "div_rem",
    "gcd",
    "xgcd",
    "lcm",
    "power",
    "binary_power",
    "compare",
    "compare_magnitude",
    "max_of",
    "min_of",
    "BigInteger",
    "Bezout",
    "DivRem",
    "Relation",
    "Sign",
    "ZERO",
    "ONE",
    "LIMB_DIGITS",
    "RADIX",
    "BigIntError",
    "ParseError",
    "DivisionByZeroError",
    "UndefinedResultError",
    "AllocationFailure",
    "InvariantViolation",
    "ConfigError",
]

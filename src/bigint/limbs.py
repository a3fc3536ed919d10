"""Limb buffers and the normalization helpers that restore their invariants.

A magnitude is a sequence of limbs in radix ``RADIX = 10**8``, least-significant
limb first. A *normalized* magnitude has:

- no redundant leading zero limb (zero itself is exactly ``[0]``),
- every limb in ``[0, RADIX)``.

The helpers below that take a ``buf`` mutate that list in place and return it.
They need exclusive access to the list for the duration of the call; values
(`BigInteger`) never hand out their storage, so callers get a private buffer
from `limb_buffer()` first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .errors import AllocationFailure

if TYPE_CHECKING:
    from .types import BigInteger

LIMB_DIGITS: int = 8
RADIX: int = 10**LIMB_DIGITS


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def allocate_limbs(n: int) -> list[int]:
    """Return a fresh buffer of ``n`` zero limbs."""
    _require_int("n", n)
    if n < 0:
        raise ValueError(f"limb count must be non-negative, got {n}")
    try:
        return [0] * n
    except MemoryError as exc:
        raise AllocationFailure(f"cannot allocate {n} limbs") from exc


def limb_buffer(value: "BigInteger") -> list[int]:
    """Private mutable copy of a value's limbs."""
    return list(value.limbs)


def is_zero_limbs(limbs: Sequence[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def trim_leading_zeros(buf: list[int]) -> list[int]:
    """Strip most-significant zero limbs; the zero magnitude stays ``[0]``.

    No carry repair: the caller already guarantees every limb is in range.
    """
    while len(buf) > 1 and buf[-1] == 0:
        buf.pop()
    if not buf:
        buf.append(0)
    return buf


def normalize(buf: list[int]) -> list[int]:
    """Carry out-of-range limbs leftwards, then trim leading zeros.

    Limbs ``>= RADIX`` push their excess into the next limb; negative limbs
    borrow from it. New most-significant limbs are appended while carry
    remains. Idempotent on normalized input.
    """
    carry = 0
    for i in range(len(buf)):
        carry, buf[i] = divmod(buf[i] + carry, RADIX)
    if carry < 0:
        raise AssertionError("normalize: limb buffer encodes a negative magnitude")
    while carry:
        carry, limb = divmod(carry, RADIX)
        buf.append(limb)
    return trim_leading_zeros(buf)


def pad_to(buf: list[int], n: int) -> list[int]:
    """Append zero limbs until ``len(buf)`` reaches ``n`` rounded up to even.

    Never removes limbs. Karatsuba splits need equal, even-length operands.
    """
    _require_int("n", n)
    target = n + (n & 1)
    missing = target - len(buf)
    if missing > 0:
        buf.extend(allocate_limbs(missing))
    return buf


def shift_by_one_limb(buf: list[int]) -> list[int]:
    """Multiply by ``RADIX``: insert a zero at the least-significant end."""
    buf.insert(0, 0)
    return buf


def shift_limbs(buf: list[int], count: int) -> list[int]:
    """Multiply by ``RADIX ** count``."""
    _require_int("count", count)
    if count < 0:
        raise ValueError(f"shift count must be non-negative, got {count}")
    if count and not is_zero_limbs(buf):
        buf[0:0] = allocate_limbs(count)
    return buf


def int_to_limbs(n: int) -> list[int]:
    """Magnitude of a native int as a normalized limb buffer."""
    _require_int("n", n)
    n = abs(n)
    if n == 0:
        return [0]
    out: list[int] = []
    while n:
        n, limb = divmod(n, RADIX)
        out.append(limb)
    return out


def limbs_to_int(limbs: Sequence[int]) -> int:
    total = 0
    for limb in reversed(limbs):
        total = total * RADIX + limb
    return total

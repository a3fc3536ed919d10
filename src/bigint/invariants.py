"""Representation invariants for `BigInteger`.

Each function returns True when the invariant holds; `check_all()` returns the
list of violated invariant IDs (empty = all pass). `BigInteger` runs
`check_all()` on construction, so an unnormalized value can never escape to a
caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from .limbs import RADIX

if TYPE_CHECKING:
    from .types import BigInteger


def inv_sign_is_member(v: "BigInteger") -> bool:
    from .types import Sign

    return isinstance(v.sign, Sign)


def inv_limbs_is_tuple(v: "BigInteger") -> bool:
    return isinstance(v.limbs, tuple)


def inv_limbs_nonempty(v: "BigInteger") -> bool:
    return len(v.limbs) >= 1


def inv_limbs_are_ints(v: "BigInteger") -> bool:
    return all(isinstance(limb, int) and not isinstance(limb, bool) for limb in v.limbs)


def inv_limb_range(v: "BigInteger") -> bool:
    if not inv_limbs_are_ints(v):
        return False
    return all(0 <= limb < RADIX for limb in v.limbs)


def inv_no_leading_zero_limb(v: "BigInteger") -> bool:
    if len(v.limbs) <= 1:
        return True
    return v.limbs[-1] != 0


def inv_zero_is_positive(v: "BigInteger") -> bool:
    from .types import Sign

    if tuple(v.limbs) != (0,):
        return True
    return v.sign is Sign.POSITIVE


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[["BigInteger"], bool]] = {
    "inv_sign_is_member": inv_sign_is_member,
    "inv_limbs_is_tuple": inv_limbs_is_tuple,
    "inv_limbs_nonempty": inv_limbs_nonempty,
    "inv_limbs_are_ints": inv_limbs_are_ints,
    "inv_limb_range": inv_limb_range,
    "inv_no_leading_zero_limb": inv_no_leading_zero_limb,
    "inv_zero_is_positive": inv_zero_is_positive,
}


def check_all(value: "BigInteger") -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(value)
    ]

#!/usr/bin/env python3
"""
Command-line calculator over the bigint engine.

Operands are written in `--base` (default 10); `-` reads the next integer
from stdin instead.

Examples:
  python3 tools/bigint_calc.py mul 123456789012345678901234567890 2
  python3 tools/bigint_calc.py gcd 48 18
  python3 tools/bigint_calc.py xgcd 35 15           # prints: x y g
  python3 tools/bigint_calc.py add ff 1 --base 16
  echo 99999999999999999999 | python3 tools/bigint_calc.py add - 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, TextIO

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.bigint import (
    BigInteger,
    BigIntError,
    add,
    divide,
    gcd,
    lcm,
    mul,
    power,
    remainder,
    sub,
    xgcd,
)
from src.integration.streams import read_integer
from src.integration.text_codec import format_integer, parse_integer

_logger = logging.getLogger("bigint_calc")

BinaryOp = Callable[[BigInteger, BigInteger], BigInteger]

BINARY_OPS: dict[str, BinaryOp] = {
    "add": add,
    "sub": sub,
    "mul": mul,
    "div": divide,
    "rem": remainder,
    "gcd": gcd,
    "lcm": lcm,
}

ALL_OPS: tuple[str, ...] = tuple(BINARY_OPS) + ("xgcd", "pow")


def _operand(text: str, base: int, stdin: TextIO) -> BigInteger:
    if text == "-":
        return read_integer(stdin, base)
    return parse_integer(text, base)


def evaluate(op: str, a_text: str, b_text: str, *, base: int = 10, stdin: TextIO | None = None) -> str:
    """Run one operation and return its printed form."""
    stdin = stdin if stdin is not None else sys.stdin
    a = _operand(a_text, base, stdin)

    if op == "pow":
        # Exponent is a plain non-negative native int, always decimal.
        try:
            exponent = int(b_text, 10)
        except ValueError as exc:
            raise ValueError(f"exponent must be a decimal integer: {b_text!r}") from exc
        _logger.debug("pow: %d-limb base, exponent %d", len(a.limbs), exponent)
        return format_integer(power(a, exponent), base)

    b = _operand(b_text, base, stdin)
    _logger.debug("%s: operands of %d and %d limbs", op, len(a.limbs), len(b.limbs))

    if op == "xgcd":
        res = xgcd(a, b)
        return " ".join(format_integer(v, base) for v in (res.x, res.y, res.gcd))

    fn = BINARY_OPS.get(op)
    if fn is None:
        raise ValueError(f"unknown operation: {op}")
    return format_integer(fn(a, b), base)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Exact arbitrary-precision integer calculator.")
    p.add_argument("op", choices=ALL_OPS, help="Operation to apply")
    p.add_argument("a", help="First operand ('-' reads from stdin)")
    p.add_argument("b", help="Second operand ('-' reads from stdin); exponent for pow")
    p.add_argument("--base", type=int, default=10, help="Base for operands and result, 2..36 (default: 10)")
    p.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        out = evaluate(args.op, args.a, args.b, base=int(args.base))
    except (BigIntError, ValueError) as exc:
        print(f"bigint_calc error: {exc}", file=sys.stderr)
        return 2

    print(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Exception types for the `bigint` engine.

Every arithmetic failure is deterministic in its inputs, so nothing here is
retried by the engine; callers get the exception directly.
"""

from __future__ import annotations


class BigIntError(Exception):
    """Base class for all engine errors."""


class ParseError(BigIntError, ValueError):
    """Raised when text is empty or holds a character invalid in the requested base."""


class DivisionByZeroError(BigIntError, ZeroDivisionError):
    """Raised when a division or remainder is requested with a zero divisor."""


class UndefinedResultError(BigIntError, ArithmeticError):
    """Raised for results with no mathematical definition, e.g. ``lcm(0, 0)``."""


class AllocationFailure(BigIntError, MemoryError):
    """Raised when limb storage cannot be allocated. Not recoverable."""


class InvariantViolation(BigIntError):
    """Raised when a value would be built from an unnormalized limb sequence."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class ConfigError(BigIntError):
    """Raised when the engine configuration file is malformed."""

"""
Fixed-width integer descriptors (deterministic, integer-only).

Python ints never overflow, so every width used by the kernels is described
explicitly and all range checks are done against these descriptors:

- `I128`: the wide signed type.
- `U64`: the narrow unsigned type.
- `U128`: the double-width intermediate used when a `U64` product overflows.

Also provides the two division primitives the kernels are written in terms of:
truncating division (toward zero) and the Euclidean remainder (always >= 0).
Python's `//` and `%` follow floor semantics instead, so neither can be used
directly for signed operands.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import OperandOutOfRangeError


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


@dataclass(frozen=True)
class IntWidth:
    name: str
    bits: int
    signed: bool

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def require(self, name: str, value: int) -> None:
        """Raise unless `value` is an int representable in this width."""
        _require_int(name, value)
        if not self.contains(value):
            raise OperandOutOfRangeError(f"{name} out of {self.name} range: {value}")

    def checked_mul(self, a: int, b: int) -> Optional[int]:
        """Product of `a` and `b`, or None when it does not fit this width."""
        r = a * b
        return r if self.contains(r) else None

    def widened(self) -> "IntWidth":
        """Double-width type with the same signedness."""
        prefix = "i" if self.signed else "u"
        return IntWidth(name=f"{prefix}{self.bits * 2}", bits=self.bits * 2, signed=self.signed)


I128 = IntWidth(name="i128", bits=128, signed=True)
U64 = IntWidth(name="u64", bits=64, signed=False)
U128 = U64.widened()


def trunc_div(x: int, d: int) -> int:
    """
    Integer division rounding toward zero.

    Raises ZeroDivisionError when d == 0.
    """
    q = abs(x) // abs(d)
    return -q if (x < 0) != (d < 0) else q


def rem_euclid(x: int, d: int) -> int:
    """
    Euclidean remainder: the r with 0 <= r < |d| and x = q*d + r for some integer q.

    Raises ZeroDivisionError when d == 0.
    """
    return x % abs(d)

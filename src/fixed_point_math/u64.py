"""
Narrow unsigned kernel (u64) with u128 widening.

All operands are non-negative, so truncating division is floor and no sign
handling is needed. The product is first attempted in u64; when it overflows
(phantom overflow), the operands are promoted to u128 and the quotient is
computed there. A widened quotient is only returned if it narrows back into u64.
"""

from __future__ import annotations

from .fixed_point import Failure, FixedPoint, MulDivResult
from .widths import U64, U128


def _mul_div(x: int, y: int, z: int, *, round_up: bool) -> MulDivResult:
    U64.require("x", x)
    U64.require("y", y)
    U64.require("z", z)

    widened = False
    r = U64.checked_mul(x, y)
    if r is None:
        widened = True
        r = U128.checked_mul(x, y)
        if r is None:
            return MulDivResult.fail(Failure.PRODUCT_OVERFLOW, widened=True)

    if z == 0:
        return MulDivResult.fail(Failure.DIVISION_BY_ZERO, widened=widened)

    q, remainder = divmod(r, z)
    if round_up and remainder > 0:
        q += 1
    if not U64.contains(q):
        return MulDivResult.fail(Failure.RESULT_OVERFLOW, widened=widened)
    return MulDivResult.success(q, widened=widened)


def mul_div_floor(x: int, y: int, z: int) -> MulDivResult:
    """floor(x * y / z) over u64, widening to u128 on phantom overflow."""
    return _mul_div(x, y, z, round_up=False)


def mul_div_ceil(x: int, y: int, z: int) -> MulDivResult:
    """ceil(x * y / z) over u64, widening to u128 on phantom overflow."""
    return _mul_div(x, y, z, round_up=True)


class U64FixedPoint(FixedPoint):
    width = U64

    def mul_div_floor(self, x: int, y: int, z: int) -> MulDivResult:
        return mul_div_floor(x, y, z)

    def mul_div_ceil(self, x: int, y: int, z: int) -> MulDivResult:
        return mul_div_ceil(x, y, z)


U64_FIXED_POINT = U64FixedPoint()

fixed_mul_floor = U64_FIXED_POINT.fixed_mul_floor
fixed_mul_ceil = U64_FIXED_POINT.fixed_mul_ceil
fixed_div_floor = U64_FIXED_POINT.fixed_div_floor
fixed_div_ceil = U64_FIXED_POINT.fixed_div_ceil

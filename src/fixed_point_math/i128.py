"""
Wide signed kernel (i128).

The product is computed once and checked against the i128 range; there is no
wider fallback. Rounding is derived from truncating division:

- truncation rounds toward zero, which is floor for a non-negative quotient
  and ceiling for a negative one;
- the sign of the true quotient is fixed by the signs of the product and the
  divisor, so each kernel only applies a +/-1 correction (when the Euclidean
  remainder is non-zero) on the side where truncation rounds the wrong way.

A negative product over a negative divisor is a positive quotient and takes
the no-correction path for floor.
"""

from __future__ import annotations

from typing import Optional

from .fixed_point import Failure, FixedPoint, MulDivResult
from .widths import I128, rem_euclid, trunc_div


def _quotient_is_negative(r: int, z: int) -> bool:
    return r != 0 and (r < 0) != (z < 0)


def _checked_product(x: int, y: int, z: int) -> tuple[int, Optional[Failure]]:
    I128.require("x", x)
    I128.require("y", y)
    I128.require("z", z)

    r = I128.checked_mul(x, y)
    if r is None:
        return 0, Failure.PRODUCT_OVERFLOW
    if z == 0:
        return 0, Failure.DIVISION_BY_ZERO
    return r, None


def _narrow(q: int) -> MulDivResult:
    # Only reachable with r == I128.min_value and z == -1.
    if not I128.contains(q):
        return MulDivResult.fail(Failure.RESULT_OVERFLOW)
    return MulDivResult.success(q)


def mul_div_floor(x: int, y: int, z: int) -> MulDivResult:
    """floor(x * y / z) over i128."""
    r, failure = _checked_product(x, y, z)
    if failure is not None:
        return MulDivResult.fail(failure)

    q = trunc_div(r, z)
    if _quotient_is_negative(r, z):
        # truncation took the ceiling
        if rem_euclid(r, z) > 0:
            q -= 1
    return _narrow(q)


def mul_div_ceil(x: int, y: int, z: int) -> MulDivResult:
    """ceil(x * y / z) over i128."""
    r, failure = _checked_product(x, y, z)
    if failure is not None:
        return MulDivResult.fail(failure)

    q = trunc_div(r, z)
    if r != 0 and not _quotient_is_negative(r, z):
        # truncation took the floor
        if rem_euclid(r, z) > 0:
            q += 1
    return _narrow(q)


class I128FixedPoint(FixedPoint):
    width = I128

    def mul_div_floor(self, x: int, y: int, z: int) -> MulDivResult:
        return mul_div_floor(x, y, z)

    def mul_div_ceil(self, x: int, y: int, z: int) -> MulDivResult:
        return mul_div_ceil(x, y, z)


I128_FIXED_POINT = I128FixedPoint()

fixed_mul_floor = I128_FIXED_POINT.fixed_mul_floor
fixed_mul_ceil = I128_FIXED_POINT.fixed_mul_ceil
fixed_div_floor = I128_FIXED_POINT.fixed_div_floor
fixed_div_ceil = I128_FIXED_POINT.fixed_div_ceil

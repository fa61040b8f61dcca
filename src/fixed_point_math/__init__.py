"""
`fixed_point_math`: overflow-safe fixed-point multiply-divide for scaled integers.

Two independent kernels implement the same contract:
- `i128`: wide signed integers, checked product, sign-aware floor/ceil correction.
- `u64`: narrow unsigned integers, u128 widening on phantom overflow.

Every operation returns the exactly rounded result or None; it never returns a
wrapped or truncated value.

Public API:
- `I128.fixed_mul_floor(x, y, denominator) -> int | None` (and `_ceil`, `fixed_div_*`)
- `U64.fixed_mul_floor(x, y, denominator) -> int | None` (and `_ceil`, `fixed_div_*`)
- `FixedPoint.evaluate(op, x, y, denominator) -> MulDivResult` (failure detail)
- `FixedPointConfig` / `load_config(path)` for a ledger's width + decimals
"""

from . import i128, u64
from .config import FixedPointConfig, get_kernel, load_config
from .errors import (
    DivisionByZeroError,
    FixedPointConfigError,
    FixedPointError,
    OperandOutOfRangeError,
    ProductOverflowError,
    ResultOverflowError,
)
from .fixed_point import Failure, FixedPoint, MulDivResult, Operation
from .i128 import I128_FIXED_POINT as I128
from .u64 import U64_FIXED_POINT as U64

# One unit with 7 decimal digits of precision.
STROOP: int = 10_000_000

__all__ = [
    "STROOP",
    "i128",
    "u64",
    "I128",
    "U64",
    "FixedPoint",
    "Operation",
    "Failure",
    "MulDivResult",
    "FixedPointConfig",
    "get_kernel",
    "load_config",
    "FixedPointError",
    "DivisionByZeroError",
    "ProductOverflowError",
    "ResultOverflowError",
    "OperandOutOfRangeError",
    "FixedPointConfigError",
]

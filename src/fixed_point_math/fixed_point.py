"""
Fixed-point multiply-divide contract.

Every width implements the same four operations with the same failure semantics:

- `fixed_mul_floor(x, y, denominator)` = floor(x * y / denominator)
- `fixed_mul_ceil(x, y, denominator)`  = ceil(x * y / denominator)
- `fixed_div_floor(x, y, denominator)` = floor(x * denominator / y)
- `fixed_div_ceil(x, y, denominator)`  = ceil(x * denominator / y)

Each returns the exact rounded result, or None when the divisor is zero, the
intermediate product overflows, or the result does not fit the output width.
The causes are not distinguished in the return value; `evaluate()` exposes them
through `MulDivResult.failure` for diagnostics.

Divide is defined as multiply-divide with `y` and `denominator` swapped, so
`fixed_div_floor(x, y, d) == fixed_mul_floor(x, d, y)` holds exactly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional

from .errors import DivisionByZeroError, FixedPointError, ProductOverflowError, ResultOverflowError
from .widths import IntWidth


@unique
class Operation(Enum):
    MUL_FLOOR = "mul_floor"
    MUL_CEIL = "mul_ceil"
    DIV_FLOOR = "div_floor"
    DIV_CEIL = "div_ceil"


@unique
class Failure(Enum):
    """Why a kernel produced no result."""
    DIVISION_BY_ZERO = "division_by_zero"
    PRODUCT_OVERFLOW = "product_overflow"
    RESULT_OVERFLOW = "result_overflow"


_FAILURE_ERRORS: dict[Failure, type[FixedPointError]] = {
    Failure.DIVISION_BY_ZERO: DivisionByZeroError,
    Failure.PRODUCT_OVERFLOW: ProductOverflowError,
    Failure.RESULT_OVERFLOW: ResultOverflowError,
}


@dataclass(frozen=True)
class MulDivResult:
    """Outcome of one kernel call: exactly one of `value` / `failure` is set."""

    value: Optional[int] = None
    failure: Optional[Failure] = None
    # True when the product was computed in the double-width intermediate.
    widened: bool = False

    def __post_init__(self) -> None:
        if (self.value is None) == (self.failure is None):
            raise ValueError("exactly one of value/failure must be set")

    @classmethod
    def success(cls, value: int, *, widened: bool = False) -> "MulDivResult":
        return cls(value=value, widened=widened)

    @classmethod
    def fail(cls, failure: Failure, *, widened: bool = False) -> "MulDivResult":
        return cls(failure=failure, widened=widened)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> int:
        """Return the value, or raise the error matching `failure`."""
        if self.failure is not None:
            raise _FAILURE_ERRORS[self.failure](self.failure.value)
        if self.value is None:  # pragma: no cover
            raise AssertionError("internal error: result without value or failure")
        return self.value


class FixedPoint(ABC):
    """
    Multiply-divide contract over one fixed integer width.

    Subclasses supply the two rounding kernels; the four contract operations and
    the divide-via-multiply identity are defined here once.
    """

    width: IntWidth

    @abstractmethod
    def mul_div_floor(self, x: int, y: int, z: int) -> MulDivResult:
        """floor(x * y / z) with failure detail."""

    @abstractmethod
    def mul_div_ceil(self, x: int, y: int, z: int) -> MulDivResult:
        """ceil(x * y / z) with failure detail."""

    def fixed_mul_floor(self, x: int, y: int, denominator: int) -> Optional[int]:
        return self.mul_div_floor(x, y, denominator).value

    def fixed_mul_ceil(self, x: int, y: int, denominator: int) -> Optional[int]:
        return self.mul_div_ceil(x, y, denominator).value

    def fixed_div_floor(self, x: int, y: int, denominator: int) -> Optional[int]:
        return self.mul_div_floor(x, denominator, y).value

    def fixed_div_ceil(self, x: int, y: int, denominator: int) -> Optional[int]:
        return self.mul_div_ceil(x, denominator, y).value

    def evaluate(self, operation: Operation, x: int, y: int, denominator: int) -> MulDivResult:
        """Run one of the four operations and return the detailed outcome."""
        if operation is Operation.MUL_FLOOR:
            return self.mul_div_floor(x, y, denominator)
        if operation is Operation.MUL_CEIL:
            return self.mul_div_ceil(x, y, denominator)
        if operation is Operation.DIV_FLOOR:
            return self.mul_div_floor(x, denominator, y)
        if operation is Operation.DIV_CEIL:
            return self.mul_div_ceil(x, denominator, y)
        raise ValueError(f"unknown operation: {operation!r}")

    def evaluate_or_raise(self, operation: Operation, x: int, y: int, denominator: int) -> int:
        """Like ``evaluate()`` but raises a ``FixedPointError`` instead of returning a failure."""
        return self.evaluate(operation, x, y, denominator).unwrap()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width.name})"

"""Exception types for the fixed-point kernels.

The contract functions (`fixed_mul_floor` and friends) never raise for
arithmetic failures; they return None. These types are used by
``MulDivResult.unwrap()`` and ``FixedPoint.evaluate_or_raise()`` for callers
that prefer exceptions, and for operand/config validation.
"""

from __future__ import annotations


class FixedPointError(ArithmeticError):
    """Base class for fixed-point arithmetic errors."""


class DivisionByZeroError(FixedPointError, ZeroDivisionError):
    """Raised when the effective divisor is zero."""


class ProductOverflowError(FixedPointError, OverflowError):
    """Raised when the intermediate product does not fit any available width."""


class ResultOverflowError(FixedPointError, OverflowError):
    """Raised when the rounded quotient does not fit the output width."""


class OperandOutOfRangeError(FixedPointError, ValueError):
    """Raised when an operand is not representable in the kernel's width."""


class FixedPointConfigError(ValueError):
    """Raised when a fixed-point configuration is invalid."""

"""Tests for fixed_point_math/fixed_point.py: shared contract and result type."""

import pytest

from fixed_point_math import I128, STROOP, U64, FixedPoint
from fixed_point_math.errors import (
    DivisionByZeroError,
    FixedPointError,
    ProductOverflowError,
    ResultOverflowError,
)
from fixed_point_math.fixed_point import Failure, MulDivResult, Operation


KERNELS = [I128, U64]


class TestMulDivResult:
    def test_success(self):
        r = MulDivResult.success(42)
        assert r.ok is True
        assert r.unwrap() == 42

    def test_failure_has_no_value(self):
        r = MulDivResult.fail(Failure.DIVISION_BY_ZERO)
        assert r.ok is False
        assert r.value is None

    def test_rejects_both_value_and_failure(self):
        with pytest.raises(ValueError):
            MulDivResult(value=1, failure=Failure.RESULT_OVERFLOW)

    def test_rejects_neither(self):
        with pytest.raises(ValueError):
            MulDivResult()

    @pytest.mark.parametrize(
        "failure,error",
        [
            (Failure.DIVISION_BY_ZERO, DivisionByZeroError),
            (Failure.PRODUCT_OVERFLOW, ProductOverflowError),
            (Failure.RESULT_OVERFLOW, ResultOverflowError),
        ],
    )
    def test_unwrap_raises_matching_error(self, failure, error):
        with pytest.raises(error):
            MulDivResult.fail(failure).unwrap()

    def test_errors_share_base_and_builtin_types(self):
        assert issubclass(DivisionByZeroError, ZeroDivisionError)
        assert issubclass(ResultOverflowError, OverflowError)
        assert issubclass(ProductOverflowError, FixedPointError)


class TestContract:
    @pytest.mark.parametrize("kernel", KERNELS)
    def test_is_fixed_point(self, kernel):
        assert isinstance(kernel, FixedPoint)

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_divide_is_multiply_with_swapped_operands(self, kernel):
        x, y, d = 314_1592653, 1_5391280, STROOP
        assert kernel.fixed_div_floor(x, y, d) == kernel.fixed_mul_floor(x, d, y)
        assert kernel.fixed_div_ceil(x, y, d) == kernel.fixed_mul_ceil(x, d, y)

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_evaluate_matches_contract_functions(self, kernel):
        x, y, d = 1_5391283, 314_1592653, 1_0000001
        assert kernel.evaluate(Operation.MUL_FLOOR, x, y, d).value == kernel.fixed_mul_floor(x, y, d)
        assert kernel.evaluate(Operation.MUL_CEIL, x, y, d).value == kernel.fixed_mul_ceil(x, y, d)
        assert kernel.evaluate(Operation.DIV_FLOOR, x, y, d).value == kernel.fixed_div_floor(x, y, d)
        assert kernel.evaluate(Operation.DIV_CEIL, x, y, d).value == kernel.fixed_div_ceil(x, y, d)

    @pytest.mark.parametrize("kernel", KERNELS)
    def test_evaluate_or_raise_zero_divisor(self, kernel):
        with pytest.raises(DivisionByZeroError):
            kernel.evaluate_or_raise(Operation.MUL_FLOOR, 1, 1, 0)
        with pytest.raises(DivisionByZeroError):
            kernel.evaluate_or_raise(Operation.DIV_CEIL, 1, 0, STROOP)

    def test_evaluate_or_raise_result_overflow(self):
        with pytest.raises(ResultOverflowError):
            U64.evaluate_or_raise(Operation.MUL_FLOOR, 18_446_744_073_000_000_000, 2_000_000_000, 1_000_000_000)

    def test_evaluate_or_raise_product_overflow(self):
        with pytest.raises(ProductOverflowError):
            I128.evaluate_or_raise(Operation.MUL_CEIL, 2**126, 4, 4)

    def test_evaluate_or_raise_returns_value(self):
        assert I128.evaluate_or_raise(Operation.MUL_FLOOR, 1_5391283, 314_1592653, 1_0000001) == 483_5313675

    def test_repr_names_width(self):
        assert repr(I128) == "I128FixedPoint(width=i128)"
        assert repr(U64) == "U64FixedPoint(width=u64)"

    def test_stroop(self):
        assert STROOP == 10**7

"""Checked uint256 arithmetic"""

import pytest

from amm_invest.core.exceptions import ArithmeticOverflow, PoolEmpty
from amm_invest.utils.math import (
    MAX_UINT256,
    check_uint256,
    mul_div,
    safe_add,
    safe_div,
    safe_mul,
    safe_sub,
)


def test_operations_within_range():
    assert safe_add(2, 3) == 5
    assert safe_sub(5, 3) == 2
    assert safe_mul(4, 5) == 20
    assert safe_div(7, 2) == 3
    assert mul_div(100, 500, 1000) == 50


def test_add_overflow():
    with pytest.raises(ArithmeticOverflow):
        safe_add(MAX_UINT256, 1)


def test_sub_underflow():
    with pytest.raises(ArithmeticOverflow):
        safe_sub(1, 2)


def test_mul_overflow():
    with pytest.raises(ArithmeticOverflow):
        safe_mul(2 ** 128, 2 ** 128)


def test_mul_div_checks_intermediate_product():
    # The result would fit, but the product does not
    with pytest.raises(ArithmeticOverflow):
        mul_div(MAX_UINT256, 2, 4)


def test_division_by_zero_is_pool_empty():
    with pytest.raises(PoolEmpty, match="token reserve"):
        safe_div(10, 0, "token reserve")


def test_operands_must_be_uint256():
    with pytest.raises(ArithmeticOverflow):
        check_uint256(-1)
    with pytest.raises(ArithmeticOverflow):
        check_uint256(MAX_UINT256 + 1)
    with pytest.raises(TypeError):
        check_uint256(1.5)
    with pytest.raises(TypeError):
        check_uint256(True)
    assert check_uint256(MAX_UINT256) == MAX_UINT256

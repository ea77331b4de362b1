"""Checked uint256 arithmetic.

Python integers never wrap, so every helper here validates its operands and its
result against the uint256 range and raises ArithmeticOverflow instead.
"""

from ..core.exceptions import ArithmeticOverflow, PoolEmpty

MAX_UINT256 = 2 ** 256 - 1

# Withdrawal fractions are expressed in parts per 10000
BPS_DENOMINATOR = 10000


def check_uint256(value, name="value"):
    """Return value if it fits in a uint256, raise otherwise"""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT256:
        raise ArithmeticOverflow(f"{name} out of uint256 range: {value}")
    return value


def safe_add(a, b):
    check_uint256(a, "a")
    check_uint256(b, "b")
    return check_uint256(a + b, "a + b")


def safe_sub(a, b):
    check_uint256(a, "a")
    check_uint256(b, "b")
    if b > a:
        raise ArithmeticOverflow(f"Subtraction underflow: {a} - {b}")
    return a - b


def safe_mul(a, b):
    check_uint256(a, "a")
    check_uint256(b, "b")
    return check_uint256(a * b, "a * b")


def safe_div(a, b, what="divisor"):
    """
    Floor division of two uint256 values.

    Args:
        a: Dividend
        b: Divisor
        what: Name of the divisor used in the PoolEmpty message

    Raises:
        PoolEmpty: If b is zero (an empty reserve or supply)
    """
    check_uint256(a, "a")
    check_uint256(b, "b")
    if b == 0:
        raise PoolEmpty(f"Division by zero {what}")
    return a // b


def mul_div(a, b, denominator, what="denominator"):
    """floor(a * b / denominator) with the intermediate product checked"""
    return safe_div(safe_mul(a, b), denominator, what)

"""Utility functions for checked math and transactions"""

from .math import MAX_UINT256, safe_add, safe_sub, safe_mul, safe_div, mul_div
from .transactions import TransactionBuilder

__all__ = [
    "MAX_UINT256",
    "safe_add",
    "safe_sub",
    "safe_mul",
    "safe_div",
    "mul_div",
    "TransactionBuilder",
]

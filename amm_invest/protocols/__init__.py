"""
Protocol implementations for AMM Invest.

Supported protocols:
- uniswap_v1: token/ETH exchange pools with pool-issued share tokens
"""

from .base import BaseInvestManager

__all__ = ["BaseInvestManager"]

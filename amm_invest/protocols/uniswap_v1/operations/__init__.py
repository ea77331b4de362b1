"""Uniswap V1 operations"""

from .invest import InvestmentManager

__all__ = ["InvestmentManager"]

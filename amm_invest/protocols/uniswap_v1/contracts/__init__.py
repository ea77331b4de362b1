"""Uniswap V1 contract wrappers"""

from .exchange import Exchange
from .factory import PoolRegistry

__all__ = ["Exchange", "PoolRegistry"]

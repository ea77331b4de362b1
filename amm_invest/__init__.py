"""
AMM Invest - invest a custodial wallet's tokens into AMM liquidity pools
"""

from .core.connection import Web3Manager
from .core.config import Config
from .core.exceptions import (
    InvestError,
    ConfigError,
    ConnectionError,
    TransactionError,
    NotOwner,
    AccountLocked,
    PoolNotFound,
    PoolEmpty,
    InvalidFraction,
    InvalidAmount,
    InsufficientNativeBalance,
    ArithmeticOverflow,
)
from .protocols.uniswap_v1 import InvestmentManager

__version__ = "0.1.0"
__all__ = [
    "Web3Manager",
    "Config",
    "InvestmentManager",
    "InvestError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "NotOwner",
    "AccountLocked",
    "PoolNotFound",
    "PoolEmpty",
    "InvalidFraction",
    "InvalidAmount",
    "InsufficientNativeBalance",
    "ArithmeticOverflow",
]

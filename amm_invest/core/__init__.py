"""Core module - configuration, connection, exceptions, and shared types"""

from .config import Config
from .connection import Web3Manager
from .exceptions import (
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
from .assets import NATIVE, NativeAsset, Token, as_asset
from .events import EventEmitter, InvestmentAdded, InvestmentRemoved
from .guard import AuthorizationGuard, ContractAuthorizationGuard, owner_only
from .invocation import Invocation
from .balances import BalanceQuery

__all__ = [
    "Config",
    "Web3Manager",
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
    "NATIVE",
    "NativeAsset",
    "Token",
    "as_asset",
    "EventEmitter",
    "InvestmentAdded",
    "InvestmentRemoved",
    "AuthorizationGuard",
    "ContractAuthorizationGuard",
    "owner_only",
    "Invocation",
    "BalanceQuery",
]

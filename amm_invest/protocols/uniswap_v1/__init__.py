"""Uniswap V1 protocol implementation"""

from .config import UniswapV1Config
from .contracts.exchange import Exchange
from .contracts.factory import PoolRegistry
from .operations.invest import InvestmentManager
from .planning import (
    DepositPlan,
    PoolSnapshot,
    WithdrawalPlan,
    plan_deposit,
    plan_liquidity,
    plan_withdrawal,
    value_investment,
)

__all__ = [
    "UniswapV1Config",
    "Exchange",
    "PoolRegistry",
    "InvestmentManager",
    "DepositPlan",
    "PoolSnapshot",
    "WithdrawalPlan",
    "plan_deposit",
    "plan_liquidity",
    "plan_withdrawal",
    "value_investment",
]

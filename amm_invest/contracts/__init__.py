"""Contract wrappers for ERC20 tokens and custodial wallets"""

from .erc20 import ERC20
from .wallet import Wallet

__all__ = ["ERC20", "Wallet"]

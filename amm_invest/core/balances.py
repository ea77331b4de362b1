"""Native and token balance queries for an account"""

from .connection import Web3Manager
from ..contracts.erc20 import ERC20


class BalanceQuery:
    """Query native and configured token balances for an address"""

    def __init__(self, manager=None):
        """
        Args:
            manager: Web3Manager instance (created if None)
        """
        self.manager = manager or Web3Manager(require_signer=False)
        self.config = self.manager.config

    def get_native_balance(self, address):
        balance_wei = self.manager.get_native_balance(address)
        return {
            "symbol": "ETH",
            "address": None,
            "balance": balance_wei / 1e18,
            "balance_wei": str(balance_wei),
            "decimals": 18,
        }

    def get_token_balance(self, token_address, address):
        token = ERC20(self.manager, token_address)
        balance_wei = token.balance_of(address)
        return {
            "symbol": token.symbol,
            "address": token.address,
            "balance": token.from_wei(balance_wei),
            "balance_wei": str(balance_wei),
            "decimals": token.decimals,
        }

    def get_all_balances(self, address):
        """
        Native balance plus every token in tokens.json.

        A token that fails to answer is reported with an "error" entry
        instead of aborting the whole query.
        """
        addr = self.manager.checksum(address)
        balances = [self.get_native_balance(addr)]

        for symbol, token_address in self.config.common_tokens.items():
            try:
                balances.append(self.get_token_balance(token_address, addr))
            except Exception as e:
                balances.append({
                    "symbol": symbol,
                    "address": token_address,
                    "error": str(e),
                })

        return {
            "address": addr,
            "balances": balances,
        }

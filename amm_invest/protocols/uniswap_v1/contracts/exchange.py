"""Uniswap V1 exchange (token/ETH pool) contract wrapper"""

from ....contracts.erc20 import ERC20
from ..planning import PoolSnapshot


class Exchange:
    """
    Wrapper for a token/ETH exchange.

    The exchange is its own share token: balanceOf and totalSupply are pool
    shares. Reserves are the exchange's ETH balance and its token balance.
    """

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Exchange contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "uniswap_v1_exchange")
        self._token_address = None

    @property
    def token_address(self):
        """Token this exchange pairs with ETH"""
        if self._token_address is None:
            self._token_address = self.contract.functions.tokenAddress().call()
        return self._token_address

    def native_reserve(self):
        return self.manager.get_native_balance(self.address)

    def token_reserve(self, token=None):
        token = token or ERC20(self.manager, self.token_address)
        return token.balance_of(self.address)

    def balance_of(self, address):
        """Pool shares held by address"""
        return self.contract.functions.balanceOf(self.manager.checksum(address)).call()

    def total_supply(self):
        return self.contract.functions.totalSupply().call()

    def quote_native_for_exact_token_output(self, token_amount):
        """Native needed to buy exactly token_amount tokens"""
        return self.contract.functions.getEthToTokenOutputPrice(token_amount).call()

    def snapshot(self, token=None):
        """Read reserves and share supply together"""
        return PoolSnapshot(
            token_reserve=self.token_reserve(token),
            native_reserve=self.native_reserve(),
            total_supply=self.total_supply(),
        )

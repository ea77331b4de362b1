"""Uniswap V1 factory: token -> exchange lookup"""

from ....core.assets import ADDRESS_ZERO


class PoolRegistry:
    """Locates the exchange paired with a token"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Factory contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "uniswap_v1_factory")

    def locate(self, token):
        """
        Exchange address for token.

        Returns:
            Checksummed exchange address, or None if the token has no exchange
        """
        pool = self.contract.functions.getExchange(self.manager.checksum(token)).call()
        if not pool or pool == ADDRESS_ZERO:
            return None
        return self.manager.checksum(pool)

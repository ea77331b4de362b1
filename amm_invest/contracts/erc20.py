"""ERC20 token contract wrapper (read side; writes go through the wallet)"""


class ERC20:
    """Wrapper for ERC20 token reads"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Token contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "erc20")
        self._info = None

    @property
    def info(self):
        """Get token info (cached)"""
        if self._info is None:
            self._info = {
                "address": self.address,
                "symbol": self._get_symbol(),
                "decimals": self.contract.functions.decimals().call(),
            }
        return self._info

    def _get_symbol(self):
        """Get token symbol, handling tokens (MKR, SAI) that return bytes32"""
        try:
            raw = self.contract.functions.symbol().call()
        except Exception:
            return "UNKNOWN"
        if isinstance(raw, bytes):
            return raw.rstrip(b'\x00').decode('utf-8')
        return str(raw)

    @property
    def symbol(self):
        return self.info["symbol"]

    @property
    def decimals(self):
        return self.info["decimals"]

    def balance_of(self, address):
        """Token balance of address in base units"""
        return self.contract.functions.balanceOf(self.manager.checksum(address)).call()

    def total_supply(self):
        return self.contract.functions.totalSupply().call()

    def to_wei(self, amount):
        """Convert human amount to base units"""
        return int(amount * (10 ** self.decimals))

    def from_wei(self, amount):
        """Convert base units to human amount"""
        return amount / (10 ** self.decimals)

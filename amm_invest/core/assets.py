"""Asset identifiers: the chain's native asset or an ERC20 token"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from web3 import Web3

# Address zero never identifies a token contract
ADDRESS_ZERO = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class NativeAsset:
    """The chain's base currency (ETH on mainnet). Not a contract."""

    symbol: str = "ETH"
    decimals: int = 18

    @property
    def is_native(self) -> bool:
        return True


@dataclass(frozen=True)
class Token:
    """
    An ERC20 token identified by its contract address.

    Attributes:
        address: Checksummed token contract address
    """

    address: str

    def __post_init__(self):
        if not Web3.is_address(self.address):
            raise ValueError(f"Invalid token address: {self.address}")
        checksummed = Web3.to_checksum_address(self.address)
        if checksummed == ADDRESS_ZERO:
            raise ValueError("Address zero is reserved for the native asset")
        # frozen dataclass, normalise through object.__setattr__
        object.__setattr__(self, "address", checksummed)

    @property
    def is_native(self) -> bool:
        return False


Asset = Union[NativeAsset, Token]

NATIVE = NativeAsset()


def as_asset(value) -> Asset:
    """
    Coerce an address string or asset into an Asset.

    ADDRESS_ZERO and "ETH" map to the native asset.
    """
    if isinstance(value, (NativeAsset, Token)):
        return value
    if isinstance(value, str) and (value.upper() == "ETH" or value.lower() == ADDRESS_ZERO):
        return NATIVE
    return Token(value)


def require_token(value) -> Token:
    """Coerce to a Token, rejecting the native asset"""
    asset = as_asset(value)
    if asset.is_native:
        raise ValueError("Native asset cannot be invested, pass an ERC20 token")
    return asset

"""Uniswap V1 specific configuration"""

import os
import json
from pathlib import Path

from ...core.exceptions import ConfigError


# Chain ID to network name mapping
CHAIN_NAMES = {
    1: "mainnet",
}


class UniswapV1Config:
    """Configuration manager for Uniswap V1 exchanges"""

    _instance = None
    _addresses = None
    _abis = None

    # Package files (not user-configurable)
    ADDRESSES_FILE = Path(__file__).parent / "addresses.json"
    ABIS_FILE = Path(__file__).parent / "abis.json"

    # Seconds added to "now" for pool deadlines
    DEFAULT_DEADLINE_BUFFER = 1

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if UniswapV1Config._addresses is None:
            self._load()

    def _load(self):
        """Load V1 package files"""
        if not self.ADDRESSES_FILE.exists():
            raise ConfigError(f"V1 addresses not found: {self.ADDRESSES_FILE}")
        with open(self.ADDRESSES_FILE) as f:
            UniswapV1Config._addresses = json.load(f)

        if not self.ABIS_FILE.exists():
            raise ConfigError(f"V1 ABIs not found: {self.ABIS_FILE}")
        with open(self.ABIS_FILE) as f:
            UniswapV1Config._abis = json.load(f)

    def get_contracts(self, chain_id=None):
        """Contract addresses for a chain (mainnet by default)"""
        network = CHAIN_NAMES.get(chain_id, f"chain {chain_id}") if chain_id else "mainnet"
        if network not in UniswapV1Config._addresses:
            raise ConfigError(f"Uniswap V1 is not configured for {network}")
        return UniswapV1Config._addresses[network]

    def factory_address(self, chain_id=None):
        """Factory address, overridable with UNISWAP_V1_FACTORY"""
        override = os.getenv("UNISWAP_V1_FACTORY")
        if override:
            return override
        return self.get_contracts(chain_id)["factory"]

    @property
    def deadline_buffer(self):
        """Seconds added to the current time for pool deadlines (DEADLINE_BUFFER)"""
        raw = os.getenv("DEADLINE_BUFFER")
        if raw is None:
            return self.DEFAULT_DEADLINE_BUFFER
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(f"DEADLINE_BUFFER must be an integer, got {raw!r}")
        if value < 0:
            raise ConfigError(f"DEADLINE_BUFFER must not be negative, got {value}")
        return value

    def get_abi(self, name):
        """
        Get V1 ABI by name.

        Accepts both short names ("exchange") and prefixed names ("uniswap_v1_exchange").
        """
        short_name = name.replace("uniswap_v1_", "", 1) if name.startswith("uniswap_v1_") else name
        if short_name in UniswapV1Config._abis:
            return UniswapV1Config._abis[short_name]
        raise ConfigError(f"V1 ABI not found: {name}")

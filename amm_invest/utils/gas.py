"""EIP-1559 gas settings for wallet invocations"""

import json
from pathlib import Path


class GasPriceTooHighError(Exception):
    """Raised when current base fee exceeds the configured maximum"""
    pass


class GasConfig:
    """Gas limits and fee caps, from gas_config.json or defaults"""

    # Limits cover the wallet's invoke() overhead on top of the inner call
    DEFAULT_GAS_LIMITS = {
        "approve": 90000,
        "swap": 150000,
        "addLiquidity": 220000,
        "removeLiquidity": 180000,
        "invoke": 250000,
        "default": 300000,
    }

    DEFAULT_PRIORITY_FEE_GWEI = 1.5

    def __init__(self, config_path=None, config_dir=None):
        """
        Args:
            config_path: Explicit path to gas_config.json
            config_dir: Config directory searched before the home directory
        """
        self._config = self._load_config(config_path, config_dir)

    def _load_config(self, config_path=None, config_dir=None):
        search_paths = [
            Path(config_path) if config_path else None,
            Path(config_dir) / "gas_config.json" if config_dir else None,
            Path.cwd() / "gas_config.json",
            Path.home() / ".amm-invest" / "gas_config.json",
        ]

        for path in search_paths:
            if path and path.exists():
                with open(path) as f:
                    return json.load(f)

        return {
            "maxFeePerGas": None,
            "maxPriorityFeePerGas": self.DEFAULT_PRIORITY_FEE_GWEI,
            "gasLimit": self.DEFAULT_GAS_LIMITS.copy(),
        }

    @property
    def maxFeePerGas(self):
        """Max fee per gas in Gwei (None = no limit)"""
        return self._config.get("maxFeePerGas")

    @property
    def maxPriorityFeePerGas(self):
        """Priority fee (tip) in Gwei"""
        return self._config.get("maxPriorityFeePerGas", self.DEFAULT_PRIORITY_FEE_GWEI)

    def getGasLimit(self, operation_type):
        """Gas limit for an operation, falling back to "default" """
        gas_limits = self._config.get("gasLimit", self.DEFAULT_GAS_LIMITS)
        return gas_limits.get(operation_type, gas_limits.get("default", self.DEFAULT_GAS_LIMITS["default"]))


class GasManager:
    """
    EIP-1559 fee parameters for transactions sent by the signer.

    Fee caps passed to the constructor take precedence over gas_config.json.
    """

    def __init__(self, manager, maxFeePerGas=None, maxPriorityFeePerGas=None, config=None):
        self.manager = manager
        self.config = config or GasConfig(config_dir=manager.config.config_dir)
        self._maxFeePerGas = maxFeePerGas
        self._maxPriorityFeePerGas = maxPriorityFeePerGas

    @property
    def maxFeePerGas(self):
        if self._maxFeePerGas is not None:
            return self._maxFeePerGas
        return self.config.maxFeePerGas

    @property
    def maxPriorityFeePerGas(self):
        if self._maxPriorityFeePerGas is not None:
            return self._maxPriorityFeePerGas
        return self.config.maxPriorityFeePerGas

    def getGasLimit(self, operation_type=None):
        return self.config.getGasLimit(operation_type or "default")

    def getBaseFee(self):
        """Base fee of the latest block in wei"""
        latest_block = self.manager.w3.eth.get_block("latest")
        return latest_block.get("baseFeePerGas", 0)

    def getGasParams(self, operation_type=None):
        """
        Get EIP-1559 fee parameters.

        Returns:
            Dict with maxFeePerGas and maxPriorityFeePerGas in wei

        Raises:
            GasPriceTooHighError: If base fee exceeds maxFeePerGas
        """
        base_fee = self.getBaseFee()
        priority_fee_wei = int((self.maxPriorityFeePerGas or self.config.DEFAULT_PRIORITY_FEE_GWEI) * 1e9)

        if self.maxFeePerGas is not None:
            max_fee_wei = int(self.maxFeePerGas * 1e9)
            if max_fee_wei < base_fee:
                raise GasPriceTooHighError(
                    f"Current base fee ({base_fee / 1e9:.2f} Gwei) exceeds your "
                    f"maxFeePerGas ({self.maxFeePerGas} Gwei)"
                )
        else:
            max_fee_wei = int((base_fee + priority_fee_wei) * 1.2)

        return {
            "maxFeePerGas": max_fee_wei,
            "maxPriorityFeePerGas": priority_fee_wei,
        }

    def estimateGas(self, contract_func, from_address, operation_type=None, value=0):
        """Estimate gas for a call, falling back to the configured limit"""
        fallback = self.getGasLimit(operation_type)
        try:
            return contract_func.estimate_gas({"from": from_address, "value": value})
        except Exception:
            return fallback

"""Transaction building with EIP-1559 support"""

import logging

from .gas import GasManager
from ..core.exceptions import TransactionError

logger = logging.getLogger(__name__)


class TransactionBuilder:
    """Build, sign and send EIP-1559 transactions from the manager's signer"""

    def __init__(self, manager, gas_manager=None):
        """
        Args:
            manager: Web3Manager instance (must have a signer to send)
            gas_manager: GasManager instance (created if None)
        """
        self.manager = manager
        self.gas_manager = gas_manager or GasManager(manager)

    def build(self, contract_func, operation_type=None, gas_buffer=1.2, value=0):
        """
        Build an EIP-1559 transaction for a contract function.

        Args:
            contract_func: Bound contract function
            operation_type: Operation name for the gas limit fallback
            gas_buffer: Multiplier applied to the gas estimate
            value: Native value to attach in wei
        """
        gas_params = self.gas_manager.getGasParams(operation_type)
        estimated_gas = self.gas_manager.estimateGas(
            contract_func, self.manager.address, operation_type, value
        )

        tx = {
            "from": self.manager.address,
            "nonce": self.manager.get_nonce(),
            "gas": int(estimated_gas * gas_buffer),
            "maxFeePerGas": gas_params["maxFeePerGas"],
            "maxPriorityFeePerGas": gas_params["maxPriorityFeePerGas"],
            "chainId": self.manager.chain_id,
            "type": 2,
        }

        if value > 0:
            tx["value"] = value

        return contract_func.build_transaction(tx)

    def build_and_send(self, contract_func, operation_type=None, gas_buffer=1.2, value=0):
        """
        Build, sign, send and wait for a transaction.

        Returns:
            Transaction receipt

        Raises:
            TransactionError: If the receipt status is not 1
        """
        if self.manager.account is None:
            raise TransactionError("Sending transactions requires a signer (PRIVATE_KEY)")

        tx = self.build(contract_func, operation_type, gas_buffer, value)

        signed = self.manager.account.sign_transaction(tx)
        tx_hash = self.manager.w3.eth.send_raw_transaction(signed.raw_transaction)
        logger.debug("Sent %s tx %s", operation_type, tx_hash.hex())

        receipt = self.manager.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt.status != 1:
            raise TransactionError(f"{operation_type or 'Transaction'} failed: {tx_hash.hex()}")
        return receipt

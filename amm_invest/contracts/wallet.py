"""Custodial wallet contract wrapper"""

import logging

from ..utils.gas import GasManager
from ..utils.transactions import TransactionBuilder

logger = logging.getLogger(__name__)


class Wallet:
    """
    A smart-contract wallet that moves funds only through invoke().

    The manager's signer must be authorised on the wallet to call
    invoke(target, value, data).
    """

    def __init__(self, manager, address, maxFeePerGas=None, maxPriorityFeePerGas=None):
        """
        Args:
            manager: Web3Manager instance with a signer
            address: Wallet contract address
            maxFeePerGas: Maximum fee per gas in Gwei (None = use config/no limit)
            maxPriorityFeePerGas: Priority fee in Gwei (None = use config)
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(address, "wallet")

        self.gas_manager = GasManager(manager, maxFeePerGas=maxFeePerGas, maxPriorityFeePerGas=maxPriorityFeePerGas)
        self.tx_builder = TransactionBuilder(manager, self.gas_manager)

    def owner(self):
        return self.contract.functions.owner().call()

    def native_balance(self):
        """Native balance held by the wallet, in wei"""
        return self.manager.get_native_balance(self.address)

    def invoke(self, invocation):
        """
        Have the wallet perform one call.

        Args:
            invocation: Invocation(target, value, data)

        Returns:
            Transaction receipt

        Raises:
            TransactionError: If the transaction reverts
        """
        contract_func = self.contract.functions.invoke(
            self.manager.checksum(invocation.target),
            invocation.value,
            invocation.data,
        )
        logger.info("Wallet %s invoking %r", self.address, invocation)
        return self.tx_builder.build_and_send(
            contract_func,
            operation_type=invocation.operation,
        )

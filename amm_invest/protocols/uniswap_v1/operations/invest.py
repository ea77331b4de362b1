"""Investment operations for Uniswap V1 exchanges"""

import logging
import time
from dataclasses import replace

from web3 import Web3

from ....core.assets import require_token
from ....core.events import EventEmitter, InvestmentAdded, InvestmentRemoved
from ....core.exceptions import PoolNotFound
from ....core.guard import owner_only
from ....utils.math import check_uint256
from ...base import BaseInvestManager
from ..config import UniswapV1Config
from ..planning import (
    PoolSnapshot,
    plan_deposit,
    plan_liquidity,
    plan_withdrawal,
    validate_fraction,
    value_investment,
)

logger = logging.getLogger(__name__)


class InvestmentManager(BaseInvestManager):
    """
    Invest an account's tokens into the token's ETH exchange.

    Collaborators are passed in so the manager works the same against
    contracts and in-memory stand-ins:

    - registry: has locate(token) -> pool address or None
    - guard: AuthorizationGuard
    - pools: callable(pool_address) -> object with native_reserve(),
      balance_of(address), total_supply(), quote_native_for_exact_token_output(n)
    - tokens: callable(token_address) -> object with balance_of(address)
    - accounts: callable(account_address) -> object with native_balance()
      and invoke(invocation)
    """

    def __init__(
        self,
        registry,
        guard,
        pools,
        tokens,
        accounts,
        clock=None,
        deadline_buffer=UniswapV1Config.DEFAULT_DEADLINE_BUFFER,
        events=None,
    ):
        self.registry = registry
        self.guard = guard
        self.pools = pools
        self.tokens = tokens
        self.accounts = accounts
        self.clock = clock or (lambda: int(time.time()))
        self.deadline_buffer = deadline_buffer
        self.events = events or EventEmitter()

    @classmethod
    def connect(cls, manager=None, lock_manager_address=None):
        """
        Build a manager backed by live contracts.

        The lock manager is only resolved on the first guarded call, so reads
        and dry runs work without LOCK_MANAGER_ADDRESS.

        Args:
            manager: Web3Manager instance (created with signer if None)
            lock_manager_address: Lock manager contract (LOCK_MANAGER_ADDRESS if None)
        """
        from ....core.connection import Web3Manager
        from ....core.guard import ContractAuthorizationGuard
        from ....contracts.erc20 import ERC20
        from ....contracts.wallet import Wallet
        from ..contracts.exchange import Exchange
        from ..contracts.factory import PoolRegistry

        manager = manager or Web3Manager(require_signer=True)
        v1_config = UniswapV1Config()

        return cls(
            registry=PoolRegistry(manager, v1_config.factory_address(manager.chain_id)),
            guard=ContractAuthorizationGuard(manager, lock_manager_address),
            pools=lambda address: Exchange(manager, address),
            tokens=lambda address: ERC20(manager, address),
            accounts=lambda address: Wallet(manager, address),
            clock=manager.block_timestamp,
            deadline_buffer=v1_config.deadline_buffer,
        )

    def _locate(self, token):
        pool = self.registry.locate(token)
        if not pool:
            raise PoolNotFound(f"No exchange registered for token {token}")
        return pool

    def _deadline(self):
        return self.clock() + self.deadline_buffer

    def _snapshot(self, pool_address, pool, token_contract):
        """Read the pool's reserves and share supply for this request"""
        snapshot = PoolSnapshot(
            token_reserve=token_contract.balance_of(pool_address),
            native_reserve=pool.native_reserve(),
            total_supply=pool.total_supply(),
        )
        logger.debug("Pool %s snapshot %s", pool_address, snapshot)
        return snapshot

    def _dispatch(self, account, invocations):
        wallet = self.accounts(account)
        for invocation in invocations:
            logger.debug("Dispatching %r from %s", invocation, account)
            wallet.invoke(invocation)

    def plan_investment(self, account, token, amount):
        """
        Plan a deposit without dispatching anything.

        Returns:
            DepositPlan
        """
        account = Web3.to_checksum_address(account)
        token = require_token(token).address
        pool_address = self._locate(token)

        pool = self.pools(pool_address)
        token_contract = self.tokens(token)
        snapshot = self._snapshot(pool_address, pool, token_contract)

        return plan_deposit(
            account=account,
            token=token,
            pool=pool_address,
            amount=amount,
            token_balance=token_contract.balance_of(account),
            native_balance=self.accounts(account).native_balance(),
            snapshot=snapshot,
            deadline=self._deadline(),
            quote_native_cost=pool.quote_native_for_exact_token_output,
        )

    @owner_only
    def add_investment(self, account, token, amount, period=0, caller=None):
        """
        Deposit `amount` tokens plus matching ETH into the token's exchange.

        Buys any token shortfall first. After the swap the pool and the account's
        native balance are read again and the liquidity leg is priced on those.
        `period` is recorded in the event only, no time-lock is enforced.

        Returns:
            amount * 2, the token leg plus an equal-valued ETH leg
        """
        check_uint256(period, "period")
        plan = self.plan_investment(account, token, amount)

        if plan.swaps:
            logger.info(
                "Buying %d of %s for %d native from %s",
                plan.shortfall, plan.token, plan.swap_cost, plan.account,
            )
            self._dispatch(plan.account, plan.swap_invocations)
            plan = self._reprice_liquidity(plan)

        logger.info(
            "Investing %d of %s from %s into %s (native %d)",
            plan.amount, plan.token, plan.account, plan.pool, plan.native_to_pool,
        )
        self._dispatch(plan.account, plan.liquidity_invocations)
        self.events.emit(InvestmentAdded(plan.account, plan.token, plan.amount, period))
        return plan.invested

    def _reprice_liquidity(self, plan):
        """Re-plan approve + addLiquidity on reserves and balance read after the swap"""
        pool = self.pools(plan.pool)
        snapshot = self._snapshot(plan.pool, pool, self.tokens(plan.token))
        native_to_pool, liquidity = plan_liquidity(
            plan.token,
            plan.pool,
            plan.amount,
            self.accounts(plan.account).native_balance(),
            snapshot,
            plan.deadline,
        )
        if native_to_pool != plan.native_to_pool:
            logger.info(
                "Pool %s moved during swap, native leg %d -> %d",
                plan.pool, plan.native_to_pool, native_to_pool,
            )
        return replace(
            plan,
            native_to_pool=native_to_pool,
            invocations=plan.swap_invocations + liquidity,
        )

    def plan_divestment(self, account, token, fraction):
        """
        Plan a withdrawal without dispatching anything.

        Returns:
            WithdrawalPlan
        """
        validate_fraction(fraction)
        account = Web3.to_checksum_address(account)
        token = require_token(token).address
        pool_address = self._locate(token)

        shares = self.pools(pool_address).balance_of(account)
        return plan_withdrawal(account, token, pool_address, fraction, shares, self._deadline())

    @owner_only
    def remove_investment(self, account, token, fraction, caller=None):
        """
        Redeem fraction / 10000 of the account's shares in the token's exchange.

        Returns:
            WithdrawalPlan that was dispatched
        """
        plan = self.plan_divestment(account, token, fraction)

        logger.info(
            "Removing %d/%d shares of %s for %s",
            plan.shares_to_remove, plan.shares, plan.pool, plan.account,
        )
        self._dispatch(plan.account, plan.invocations)
        self.events.emit(InvestmentRemoved(plan.account, plan.token, plan.fraction))
        return plan

    def get_investment(self, account, token):
        """
        Token-equivalent value of the account's shares.

        Read-only, no owner or lock check.

        Returns:
            (token_value, period_end), period_end is always 0
        """
        account = Web3.to_checksum_address(account)
        token = require_token(token).address
        pool_address = self._locate(token)

        pool = self.pools(pool_address)
        snapshot = self._snapshot(pool_address, pool, self.tokens(token))
        return value_investment(pool.balance_of(account), snapshot)

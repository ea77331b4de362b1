"""
Deposit, withdrawal and valuation arithmetic for token/ETH exchange pools.

Everything here is pure: chain state comes in as a PoolSnapshot and balances,
fund movement goes out as Invocation values. Nothing is dispatched.

All amounts are raw integer units (wei / token base units) and every operation
goes through the checked uint256 helpers.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from . import encoding
from ...core.exceptions import (
    InsufficientNativeBalance,
    InvalidAmount,
    InvalidFraction,
    PoolEmpty,
)
from ...core.invocation import Invocation
from ...utils.math import (
    BPS_DENOMINATOR,
    check_uint256,
    mul_div,
    safe_add,
    safe_mul,
    safe_sub,
)

logger = logging.getLogger(__name__)

# Minimum pool shares minted, and minimum native / token returned on removal
MIN_SHARES = 1
MIN_NATIVE_OUT = 1
MIN_TOKENS_OUT = 1

# No time-lock exists, valuation always reports "no end time"
PERIOD_END = 0


@dataclass(frozen=True)
class PoolSnapshot:
    """
    Pool state read once, immediately before planning.

    Attributes:
        token_reserve: Token balance held at the pool address
        native_reserve: Native balance of the pool
        total_supply: Total pool shares outstanding
    """

    token_reserve: int
    native_reserve: int
    total_supply: int

    def after_swap(self, native_in, tokens_out):
        """State after buying tokens_out for native_in through the pool"""
        return PoolSnapshot(
            token_reserve=safe_sub(self.token_reserve, tokens_out),
            native_reserve=safe_add(self.native_reserve, native_in),
            total_supply=self.total_supply,
        )


@dataclass(frozen=True)
class DepositPlan:
    """Everything a deposit will do, in dispatch order"""

    account: str
    token: str
    pool: str
    amount: int
    shortfall: int
    swap_cost: int
    native_to_pool: int
    invested: int
    deadline: int
    invocations: Tuple[Invocation, ...] = field(default_factory=tuple)

    @property
    def swaps(self):
        return self.shortfall > 0

    @property
    def swap_invocations(self):
        return self.invocations[:1] if self.swaps else ()

    @property
    def liquidity_invocations(self):
        return self.invocations[1:] if self.swaps else self.invocations


@dataclass(frozen=True)
class WithdrawalPlan:
    """A single removeLiquidity for a fraction of the account's shares"""

    account: str
    token: str
    pool: str
    fraction: int
    shares: int
    shares_to_remove: int
    deadline: int
    invocations: Tuple[Invocation, ...] = field(default_factory=tuple)


def validate_fraction(fraction):
    """Raise InvalidFraction unless 0 <= fraction <= 10000"""
    if not isinstance(fraction, int) or isinstance(fraction, bool):
        raise InvalidFraction(f"Fraction must be an integer number of basis points, got {fraction!r}")
    if fraction < 0 or fraction > BPS_DENOMINATOR:
        raise InvalidFraction(f"Fraction must be between 0 and {BPS_DENOMINATOR}, got {fraction}")
    return fraction


def liquidity_native_amount(amount, native_reserve, token_reserve):
    """
    Native amount to pair with `amount` tokens at the pool's ratio.

    Quotes for amount - 1 tokens so the pool's own rounding (it computes the
    token side as native * token_reserve / native_reserve + 1) never asks for
    more than `amount` tokens.

    Raises:
        PoolEmpty: If the pool holds no tokens
    """
    if token_reserve == 0:
        raise PoolEmpty("Pool token reserve is zero")
    return mul_div(safe_sub(amount, 1), native_reserve, token_reserve, "token reserve")


def plan_liquidity(token, pool, amount, native_balance, snapshot, deadline):
    """
    approve + addLiquidity pairing `amount` tokens at the snapshot's ratio.

    Returns:
        (native_to_pool, invocations)

    Raises:
        PoolEmpty: pool holds no tokens
        InsufficientNativeBalance: native_balance cannot cover the native leg
        InvalidAmount: the native leg rounds to zero, which the pool rejects
    """
    native_to_pool = liquidity_native_amount(amount, snapshot.native_reserve, snapshot.token_reserve)
    if native_to_pool > native_balance:
        raise InsufficientNativeBalance(
            f"Deposit needs {native_to_pool} native, account holds {native_balance}"
        )
    if native_to_pool == 0:
        raise InvalidAmount(f"Deposit of {amount} tokens is too small to pair with any native asset")

    return native_to_pool, (
        encoding.approve(token, pool, amount),
        encoding.add_liquidity(pool, MIN_SHARES, amount, deadline, native_to_pool),
    )


def plan_deposit(
    account: str,
    token: str,
    pool: str,
    amount: int,
    token_balance: int,
    native_balance: int,
    snapshot: PoolSnapshot,
    deadline: int,
    quote_native_cost: Optional[Callable[[int], int]] = None,
) -> DepositPlan:
    """
    Plan a deposit of `amount` tokens plus the matching native amount.

    If the account holds fewer than `amount` tokens the shortfall is bought
    first with an output-exact swap priced by quote_native_cost. The liquidity
    leg is priced on the snapshot with that swap applied (exactly the quoted
    native in, exactly the shortfall out). That projection lets every check run
    before dispatch; the caller re-plans the liquidity leg with plan_liquidity on
    reserves read after the swap lands.

    Args:
        account: Account address
        token: Token address
        pool: Pool address
        amount: Tokens to deposit, > 0
        token_balance: Account's current token balance
        native_balance: Account's current native balance
        snapshot: Pool state read for this request
        deadline: Deadline passed to the pool
        quote_native_cost: Native cost of buying N tokens exactly; only called
            when there is a shortfall

    Returns:
        DepositPlan with invocations [swap,] approve, addLiquidity

    Raises:
        InvalidAmount: amount is zero, or too small to pair any native
        PoolEmpty: pool holds no tokens
        InsufficientNativeBalance: native balance cannot cover swap + deposit
        ArithmeticOverflow: any uint256 bound is crossed
    """
    check_uint256(amount, "amount")
    check_uint256(token_balance, "token_balance")
    check_uint256(native_balance, "native_balance")
    if amount == 0:
        raise InvalidAmount("Deposit amount must be greater than zero")
    if snapshot.token_reserve == 0:
        raise PoolEmpty(f"Pool {pool} has no token reserve")

    invocations = []
    shortfall = 0
    swap_cost = 0
    state = snapshot

    if token_balance < amount:
        shortfall = safe_sub(amount, token_balance)
        if quote_native_cost is None:
            raise ValueError("A native price quote is required to cover a token shortfall")
        swap_cost = check_uint256(quote_native_cost(shortfall), "swap_cost")
        if swap_cost > native_balance:
            raise InsufficientNativeBalance(
                f"Buying {shortfall} tokens costs {swap_cost} native, account holds {native_balance}"
            )
        invocations.append(encoding.eth_to_token_swap_output(pool, shortfall, deadline, swap_cost))
        native_balance = safe_sub(native_balance, swap_cost)
        state = snapshot.after_swap(swap_cost, shortfall)

    native_to_pool, liquidity = plan_liquidity(token, pool, amount, native_balance, state, deadline)
    invocations.extend(liquidity)

    plan = DepositPlan(
        account=account,
        token=token,
        pool=pool,
        amount=amount,
        shortfall=shortfall,
        swap_cost=swap_cost,
        native_to_pool=native_to_pool,
        # Liquidity value modelled as the token leg plus an equal native leg
        invested=safe_mul(amount, 2),
        deadline=deadline,
        invocations=tuple(invocations),
    )
    logger.debug("Planned deposit %s", plan)
    return plan


def plan_withdrawal(account, token, pool, fraction, shares, deadline):
    """
    Plan redemption of fraction / 10000 of the account's pool shares.

    A fraction of 0 is valid and plans a zero-share removal.

    Raises:
        InvalidFraction: fraction outside 0-10000
    """
    validate_fraction(fraction)
    check_uint256(shares, "shares")
    shares_to_remove = mul_div(shares, fraction, BPS_DENOMINATOR)

    return WithdrawalPlan(
        account=account,
        token=token,
        pool=pool,
        fraction=fraction,
        shares=shares,
        shares_to_remove=shares_to_remove,
        deadline=deadline,
        invocations=(
            encoding.remove_liquidity(pool, shares_to_remove, MIN_NATIVE_OUT, MIN_TOKENS_OUT, deadline),
        ),
    )


def value_investment(shares, snapshot):
    """
    Token-equivalent value of `shares`.

    Doubles the token leg on the assumption that the pool is balanced 50/50 in
    value between native and token. Fees and price drift make that approximate.

    Returns:
        (token_value, period_end) where period_end is always 0

    Raises:
        PoolEmpty: pool has no share supply or no token reserve
    """
    check_uint256(shares, "shares")
    if snapshot.total_supply == 0:
        raise PoolEmpty("Pool share supply is zero")
    if snapshot.token_reserve == 0:
        raise PoolEmpty("Pool token reserve is zero")
    token_value = mul_div(safe_mul(shares, snapshot.token_reserve), 2, snapshot.total_supply, "total supply")
    return token_value, PERIOD_END

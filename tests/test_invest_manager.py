"""InvestmentManager against in-memory collaborators"""

import pytest
from eth_abi import decode

from amm_invest.core.events import InvestmentAdded, InvestmentRemoved
from amm_invest.core.exceptions import (
    AccountLocked,
    InsufficientNativeBalance,
    InvalidFraction,
    NotOwner,
    PoolEmpty,
    PoolNotFound,
)
from amm_invest.protocols.base import BaseInvestManager

from conftest import ACCOUNT, NOW, OWNER, POOL, STRANGER, TOKEN, UNLISTED_TOKEN


def test_manager_implements_invest_interface(world):
    assert isinstance(world.manager, BaseInvestManager)


def test_add_investment_with_enough_tokens(world):
    world.token.balances[ACCOUNT] = 101

    invested = world.manager.add_investment(ACCOUNT, TOKEN, 101, period=3600, caller=OWNER)

    assert invested == 202
    assert [i.operation for i in world.invocations] == ["approve", "addLiquidity"]
    assert world.invocations[1].value == 50
    assert world.pool.quotes == []
    assert world.events.history == [InvestmentAdded(ACCOUNT, TOKEN, 101, 3600)]


def test_add_investment_buys_shortfall(make_world):
    world = make_world(token_balance=60, native_balance=1000, cost_per_token=2)

    world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)

    assert world.pool.quotes == [41]
    swap, approve, add = world.invocations
    assert swap.operation == "swap"
    assert swap.value == 82
    assert decode(["uint256", "uint256"], swap.data[4:])[0] == 41
    assert approve.operation == "approve"
    assert add.operation == "addLiquidity"


def test_deadline_is_now_plus_buffer(world):
    world.token.balances[ACCOUNT] = 101
    world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)
    add = world.invocations[-1]
    assert decode(["uint256", "uint256", "uint256"], add.data[4:])[2] == NOW + 1


def test_add_investment_insufficient_native_dispatches_nothing(make_world):
    world = make_world(token_balance=0, native_balance=10, cost_per_token=1)
    with pytest.raises(InsufficientNativeBalance):
        world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)
    assert world.invocations == []
    assert world.events.history == []


def test_add_investment_empty_pool(make_world):
    world = make_world(token_reserve=0, token_balance=101)
    with pytest.raises(PoolEmpty):
        world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)
    assert world.invocations == []


def test_unlisted_token(world):
    with pytest.raises(PoolNotFound):
        world.manager.add_investment(ACCOUNT, UNLISTED_TOKEN, 101, caller=OWNER)
    with pytest.raises(PoolNotFound):
        world.manager.remove_investment(ACCOUNT, UNLISTED_TOKEN, 5000, caller=OWNER)
    with pytest.raises(PoolNotFound):
        world.manager.get_investment(ACCOUNT, UNLISTED_TOKEN)
    assert world.invocations == []
    assert world.events.history == []


def test_native_asset_cannot_be_invested(world):
    with pytest.raises(ValueError):
        world.manager.add_investment(ACCOUNT, "ETH", 101, caller=OWNER)


@pytest.mark.parametrize("call", [
    lambda m, caller: m.add_investment(ACCOUNT, TOKEN, 101, caller=caller),
    lambda m, caller: m.remove_investment(ACCOUNT, TOKEN, 5000, caller=caller),
])
def test_non_owner_rejected_before_pool_reads(world, call):
    with pytest.raises(NotOwner):
        call(world.manager, STRANGER)
    with pytest.raises(NotOwner):
        call(world.manager, None)
    assert world.registry.calls == 0
    assert world.pool.reads == 0
    assert world.invocations == []


@pytest.mark.parametrize("call", [
    lambda m: m.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER),
    lambda m: m.remove_investment(ACCOUNT, TOKEN, 5000, caller=OWNER),
])
def test_locked_account_rejected_for_owner(make_world, call):
    world = make_world(locked=True, token_balance=101, shares=250)
    with pytest.raises(AccountLocked):
        call(world.manager)
    assert world.registry.calls == 0
    assert world.invocations == []


def test_remove_investment(make_world):
    world = make_world(shares=250)

    plan = world.manager.remove_investment(ACCOUNT, TOKEN, 2500, caller=OWNER)

    assert plan.shares_to_remove == 62
    (remove,) = world.invocations
    assert remove.target == POOL
    assert decode(["uint256"] * 4, remove.data[4:]) == (62, 1, 1, NOW + 1)
    assert world.events.history == [InvestmentRemoved(ACCOUNT, TOKEN, 2500)]


def test_remove_zero_fraction_is_valid(make_world):
    world = make_world(shares=250)
    plan = world.manager.remove_investment(ACCOUNT, TOKEN, 0, caller=OWNER)
    assert plan.shares_to_remove == 0
    assert len(world.invocations) == 1


@pytest.mark.parametrize("fraction", [10001, 20000])
def test_remove_invalid_fraction_dispatches_nothing(make_world, fraction):
    world = make_world(shares=250)
    with pytest.raises(InvalidFraction):
        world.manager.remove_investment(ACCOUNT, TOKEN, fraction, caller=OWNER)
    assert world.registry.calls == 0
    assert world.invocations == []
    assert world.events.history == []


def test_get_investment(make_world):
    world = make_world(shares=10, token_reserve=1000, total_supply=100)
    assert world.manager.get_investment(ACCOUNT, TOKEN) == (200, 0)


def test_get_investment_is_idempotent(make_world):
    world = make_world(shares=10)
    first = world.manager.get_investment(ACCOUNT, TOKEN)
    second = world.manager.get_investment(ACCOUNT, TOKEN)
    assert first == second
    assert world.invocations == []


def test_get_investment_skips_guard(make_world):
    world = make_world(shares=10, locked=True)
    assert world.manager.get_investment(ACCOUNT, TOKEN) == (200, 0)


@pytest.mark.parametrize("kwargs", [{"total_supply": 0}, {"token_reserve": 0}])
def test_get_investment_empty_pool(make_world, kwargs):
    world = make_world(shares=10, **kwargs)
    with pytest.raises(PoolEmpty):
        world.manager.get_investment(ACCOUNT, TOKEN)


def test_event_subscribers_see_deposit(world):
    seen = []
    world.events.subscribe(seen.append)
    world.token.balances[ACCOUNT] = 101
    world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)
    assert seen == [InvestmentAdded(ACCOUNT, TOKEN, 101, 0)]


def test_plan_investment_dispatches_nothing(world):
    world.token.balances[ACCOUNT] = 101
    plan = world.manager.plan_investment(ACCOUNT, TOKEN, 101)
    assert plan.native_to_pool == 50
    assert world.invocations == []


def move_pool_on_swap(world, token_reserve, native_reserve):
    """Swap lands, then someone else trades and leaves the given reserves"""

    def on_invoke(invocation):
        if invocation.operation != "swap":
            return
        world.account.native -= invocation.value
        world.token.balances[ACCOUNT] = world.token.balances.get(ACCOUNT, 0) + 101
        world.token.balances[POOL] = token_reserve
        world.pool._native_reserve = native_reserve

    world.account.on_invoke = on_invoke


def test_add_investment_reprices_after_swap(make_world):
    world = make_world(token_balance=0, native_balance=10_000)
    move_pool_on_swap(world, token_reserve=800, native_reserve=800)

    assert world.manager.plan_investment(ACCOUNT, TOKEN, 101).native_to_pool == 100 * 601 // 899
    invested = world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)

    assert invested == 202
    swap, approve, add = world.invocations
    assert swap.operation == "swap"
    assert approve.operation == "approve"
    assert add.value == 100 * 800 // 800
    assert world.events.history == [InvestmentAdded(ACCOUNT, TOKEN, 101, 0)]


def test_add_investment_rechecks_native_after_swap(make_world):
    world = make_world(token_balance=0, native_balance=200)
    move_pool_on_swap(world, token_reserve=100, native_reserve=900)

    with pytest.raises(InsufficientNativeBalance):
        world.manager.add_investment(ACCOUNT, TOKEN, 101, caller=OWNER)

    assert [i.operation for i in world.invocations] == ["swap"]
    assert world.events.history == []

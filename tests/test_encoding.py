"""Calldata for wallet invocations"""

from eth_abi import decode

from amm_invest.protocols.uniswap_v1 import encoding

from conftest import POOL, TOKEN


def test_approve():
    inv = encoding.approve(TOKEN, POOL, 101)
    assert inv.target == TOKEN
    assert inv.value == 0
    assert inv.operation == "approve"
    assert inv.data[:4].hex() == "095ea7b3"
    spender, amount = decode(["address", "uint256"], inv.data[4:])
    assert spender.lower() == POOL.lower()
    assert amount == 101


def test_swap_carries_native_cost():
    inv = encoding.eth_to_token_swap_output(POOL, 41, 1234, native_cost=30)
    assert inv.target == POOL
    assert inv.value == 30
    assert decode(["uint256", "uint256"], inv.data[4:]) == (41, 1234)


def test_add_liquidity():
    inv = encoding.add_liquidity(POOL, 1, 101, 1234, native_amount=50)
    assert inv.value == 50
    assert decode(["uint256", "uint256", "uint256"], inv.data[4:]) == (1, 101, 1234)


def test_remove_liquidity():
    inv = encoding.remove_liquidity(POOL, 62, 1, 1, 1234)
    assert inv.value == 0
    assert decode(["uint256"] * 4, inv.data[4:]) == (62, 1, 1, 1234)


def test_selectors_differ():
    selectors = {
        encoding.approve(TOKEN, POOL, 1).data[:4],
        encoding.eth_to_token_swap_output(POOL, 1, 1, 1).data[:4],
        encoding.add_liquidity(POOL, 1, 1, 1, 1).data[:4],
        encoding.remove_liquidity(POOL, 1, 1, 1, 1).data[:4],
    }
    assert len(selectors) == 4

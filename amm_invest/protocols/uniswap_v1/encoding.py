"""Calldata encoding for the exchange and token calls made through a wallet"""

from eth_abi import encode
from eth_utils import function_signature_to_4byte_selector

from ...core.invocation import Invocation


def encode_call(signature, arg_types, args):
    """
    ABI-encode a function call.

    Args:
        signature: Canonical signature, e.g. "approve(address,uint256)"
        arg_types: ABI types matching the signature
        args: Argument values

    Returns:
        selector + encoded arguments
    """
    return function_signature_to_4byte_selector(signature) + encode(arg_types, args)


def approve(token, spender, amount):
    """ERC20 approve(spender, amount) on token"""
    data = encode_call("approve(address,uint256)", ["address", "uint256"], [spender, amount])
    return Invocation(target=token, value=0, data=data, operation="approve")


def eth_to_token_swap_output(pool, tokens_bought, deadline, native_cost):
    """Buy exactly tokens_bought, paying native_cost as the call value"""
    data = encode_call(
        "ethToTokenSwapOutput(uint256,uint256)",
        ["uint256", "uint256"],
        [tokens_bought, deadline],
    )
    return Invocation(target=pool, value=native_cost, data=data, operation="swap")


def add_liquidity(pool, min_shares, max_tokens, deadline, native_amount):
    """Deposit native_amount plus up to max_tokens at the pool's ratio"""
    data = encode_call(
        "addLiquidity(uint256,uint256,uint256)",
        ["uint256", "uint256", "uint256"],
        [min_shares, max_tokens, deadline],
    )
    return Invocation(target=pool, value=native_amount, data=data, operation="addLiquidity")


def remove_liquidity(pool, shares, min_native, min_tokens, deadline):
    """Burn shares for the proportional native and token amounts"""
    data = encode_call(
        "removeLiquidity(uint256,uint256,uint256,uint256)",
        ["uint256", "uint256", "uint256", "uint256"],
        [shares, min_native, min_tokens, deadline],
    )
    return Invocation(target=pool, value=0, data=data, operation="removeLiquidity")

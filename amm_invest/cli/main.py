"""Main CLI entry point"""

import sys
import json
import logging
import argparse
from pathlib import Path

from ..core.balances import BalanceQuery
from ..core.connection import Web3Manager
from ..contracts.erc20 import ERC20
from ..protocols.uniswap_v1 import Exchange, InvestmentManager, PoolRegistry, UniswapV1Config


def get_results_dir():
    """Get results directory, create if needed"""
    results_dir = Path.cwd() / "results"
    results_dir.mkdir(exist_ok=True)
    return results_dir


def save_result(filename, data):
    """Save result to JSON file in results directory"""
    filepath = get_results_dir() / filename
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return filepath


def resolve_account(manager, args):
    """--account, or WALLET_ADDRESS from wallet.env"""
    account = args.account or manager.config.wallet_address
    if not account:
        raise ValueError("No account given. Pass --account or set WALLET_ADDRESS in wallet.env")
    return manager.checksum(account)


def resolve_token(manager, symbol_or_address):
    return ERC20(manager, manager.config.get_token_address(symbol_or_address))


def plan_to_dict(plan, token):
    """Human-readable view of a DepositPlan"""
    return {
        "account": plan.account,
        "token": token.symbol,
        "token_address": plan.token,
        "pool": plan.pool,
        "amount": token.from_wei(plan.amount),
        "amount_wei": str(plan.amount),
        "shortfall_wei": str(plan.shortfall),
        "swap_cost_eth": plan.swap_cost / 1e18,
        "native_to_pool_eth": plan.native_to_pool / 1e18,
        "deadline": plan.deadline,
        "invocations": [repr(i) for i in plan.invocations],
    }


def cmd_query_balances(args):
    """Query native and token balances for the account"""
    query = BalanceQuery()
    result = query.get_all_balances(resolve_account(query.manager, args))

    print(f"Balances for {result['address']}")
    print("-" * 60)
    for bal in result["balances"]:
        if "error" in bal:
            print(f"  {bal['symbol']}: ERROR - {bal['error']}")
        else:
            print(f"  {bal['symbol']}: {bal['balance']:.6f}")
    print("-" * 60)

    filepath = save_result(f"balances_{result['address'][:10]}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_pool_info(args):
    """Show the exchange paired with a token"""
    manager = Web3Manager(require_signer=False)
    token = resolve_token(manager, args.token)
    registry = PoolRegistry(manager, UniswapV1Config().factory_address(manager.chain_id))

    pool_address = registry.locate(token.address)
    if pool_address is None:
        print(f"No exchange for {token.symbol} ({token.address})")
        sys.exit(1)

    snapshot = Exchange(manager, pool_address).snapshot(token)
    result = {
        "token": token.symbol,
        "token_address": token.address,
        "pool": pool_address,
        "token_reserve": token.from_wei(snapshot.token_reserve),
        "native_reserve_eth": snapshot.native_reserve / 1e18,
        "total_supply_wei": str(snapshot.total_supply),
    }
    if snapshot.token_reserve:
        result["price_eth_per_token"] = (
            (snapshot.native_reserve / 1e18) / token.from_wei(snapshot.token_reserve)
        )

    print(json.dumps(result, indent=2, default=str))
    filepath = save_result(f"pool_{token.symbol}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_invest_plan(args):
    """Dry run: show what a deposit would do"""
    manager = Web3Manager(require_signer=False)
    investor = InvestmentManager.connect(manager)
    account = resolve_account(manager, args)
    token = resolve_token(manager, args.token)

    plan = investor.plan_investment(account, token.address, token.to_wei(args.amount))
    result = plan_to_dict(plan, token)

    print(json.dumps(result, indent=2, default=str))
    if plan.swaps:
        print(f"\nWill first buy {token.from_wei(plan.shortfall)} {token.symbol} "
              f"for {plan.swap_cost / 1e18:.6f} ETH", file=sys.stderr)


def cmd_invest_add(args):
    """Invest tokens from the account"""
    manager = Web3Manager(require_signer=True)
    investor = InvestmentManager.connect(manager)
    account = resolve_account(manager, args)
    token = resolve_token(manager, args.token)

    print(f"Investing {args.amount} {token.symbol} from {account}")

    invested = investor.add_investment(
        account,
        token.address,
        token.to_wei(args.amount),
        period=args.period,
        caller=manager.address,
    )

    print(f"\nSuccess! Invested value: {token.from_wei(invested)} {token.symbol}")

    save_data = {
        "account": account,
        "token": token.symbol,
        "amount": args.amount,
        "period": args.period,
        "invested_wei": str(invested),
    }
    filepath = save_result(f"invest_add_{token.symbol}.json", save_data)
    print(f"Saved to {filepath}", file=sys.stderr)


def cmd_invest_remove(args):
    """Withdraw a fraction (basis points) of the investment"""
    manager = Web3Manager(require_signer=True)
    investor = InvestmentManager.connect(manager)
    account = resolve_account(manager, args)
    token = resolve_token(manager, args.token)

    print(f"Removing {args.fraction / 100:.2f}% of {token.symbol} investment for {account}")

    plan = investor.remove_investment(account, token.address, args.fraction, caller=manager.address)

    print(f"\nSuccess! Redeemed {plan.shares_to_remove} of {plan.shares} pool shares")

    save_data = {
        "account": account,
        "token": token.symbol,
        "pool": plan.pool,
        "fraction": plan.fraction,
        "shares_removed": str(plan.shares_to_remove),
    }
    filepath = save_result(f"invest_remove_{token.symbol}.json", save_data)
    print(f"Saved to {filepath}", file=sys.stderr)


def cmd_invest_value(args):
    """Report the token-equivalent value of the investment"""
    manager = Web3Manager(require_signer=False)
    investor = InvestmentManager.connect(manager)
    account = resolve_account(manager, args)
    token = resolve_token(manager, args.token)

    token_value, period_end = investor.get_investment(account, token.address)
    result = {
        "account": account,
        "token": token.symbol,
        "value": token.from_wei(token_value),
        "value_wei": str(token_value),
        "period_end": period_end,
    }

    print(json.dumps(result, indent=2, default=str))
    filepath = save_result(f"invest_value_{token.symbol}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="amm-invest",
        description="AMM Invest - put a custodial wallet's tokens to work in Uniswap V1 pools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""commands overview:
  query       Query ETH/token balances of the wallet
  pool        Inspect the exchange paired with a token
  invest      Plan, add, remove and value investments

examples:
  amm-invest query balances                      # Wallet balances
  amm-invest pool info DAI                       # Reserves of the DAI exchange
  amm-invest invest plan DAI 100                 # Dry run a 100 DAI deposit
  amm-invest invest add DAI 100                  # Deposit 100 DAI plus matching ETH
  amm-invest invest remove DAI 2500              # Withdraw 25% of the position
  amm-invest invest value DAI                    # Current token-equivalent value

configuration:
  RPC_URL               Set in .env file
  signer                Set PRIVATE_KEY in wallet.env (must be allowed to call invoke())
  WALLET_ADDRESS        Default custodial wallet, in wallet.env
  LOCK_MANAGER_ADDRESS  Contract answering isLocked(wallet)
  tokens                config/tokens.json
  gas                   config/gas_config.json
""",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # ── query ──────────────────────────────────────────────────────────
    query_parser = subparsers.add_parser("query", help="Query wallet data")
    query_sub = query_parser.add_subparsers(dest="query_type")

    balances_parser = query_sub.add_parser("balances", help="ETH and token balances")
    balances_parser.add_argument("--account", help="Wallet address (default: WALLET_ADDRESS)")
    balances_parser.set_defaults(func=cmd_query_balances)

    # ── pool ───────────────────────────────────────────────────────────
    pool_parser = subparsers.add_parser("pool", help="Exchange pools")
    pool_sub = pool_parser.add_subparsers(dest="pool_command")

    pool_info_parser = pool_sub.add_parser("info", help="Exchange address, reserves and share supply")
    pool_info_parser.add_argument("token", help="Token symbol or address")
    pool_info_parser.set_defaults(func=cmd_pool_info)

    # ── invest ─────────────────────────────────────────────────────────
    invest_parser = subparsers.add_parser("invest", help="Investment operations")
    invest_sub = invest_parser.add_subparsers(dest="invest_command")

    plan_parser = invest_sub.add_parser("plan", help="Show what a deposit would do, without sending")
    plan_parser.add_argument("token", help="Token symbol or address")
    plan_parser.add_argument("amount", type=float, help="Token amount to deposit")
    plan_parser.add_argument("--account", help="Wallet address (default: WALLET_ADDRESS)")
    plan_parser.set_defaults(func=cmd_invest_plan)

    add_parser = invest_sub.add_parser("add", help="Deposit tokens plus matching ETH")
    add_parser.add_argument("token", help="Token symbol or address")
    add_parser.add_argument("amount", type=float, help="Token amount to deposit")
    add_parser.add_argument("--period", type=int, default=0, help="Investment period in seconds (recorded only)")
    add_parser.add_argument("--account", help="Wallet address (default: WALLET_ADDRESS)")
    add_parser.set_defaults(func=cmd_invest_add)

    remove_parser = invest_sub.add_parser("remove", help="Withdraw part of the investment")
    remove_parser.add_argument("token", help="Token symbol or address")
    remove_parser.add_argument("fraction", type=int, help="Basis points to withdraw (0-10000)")
    remove_parser.add_argument("--account", help="Wallet address (default: WALLET_ADDRESS)")
    remove_parser.set_defaults(func=cmd_invest_remove)

    value_parser = invest_sub.add_parser("value", help="Token-equivalent value of the investment")
    value_parser.add_argument("token", help="Token symbol or address")
    value_parser.add_argument("--account", help="Wallet address (default: WALLET_ADDRESS)")
    value_parser.set_defaults(func=cmd_invest_value)

    return parser, {"query": query_parser, "pool": pool_parser, "invest": invest_parser}


def main(argv=None):
    parser, sub_parsers = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if not hasattr(args, "func"):
        sub_parsers[args.command].print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

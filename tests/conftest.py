"""In-memory stand-ins for the wallet, token, exchange, factory and lock manager"""

import pytest
from web3 import Web3

from amm_invest.core.events import EventEmitter
from amm_invest.core.guard import AuthorizationGuard
from amm_invest.protocols.uniswap_v1 import InvestmentManager


def address(byte):
    return Web3.to_checksum_address("0x" + byte * 20)


OWNER = address("a1")
STRANGER = address("b2")
ACCOUNT = address("c3")
TOKEN = address("d4")
POOL = address("e5")
UNLISTED_TOKEN = address("f6")

NOW = 1_700_000_000


class FakeToken:
    def __init__(self, balances=None):
        self.balances = dict(balances or {})
        self.reads = 0

    def balance_of(self, address):
        self.reads += 1
        return self.balances.get(address, 0)


class FakePool:
    """Exchange with fixed reserves; swap cost is cost_per_token per token bought"""

    def __init__(self, native_reserve, shares=None, total_supply=0, cost_per_token=1):
        self._native_reserve = native_reserve
        self.shares = dict(shares or {})
        self._total_supply = total_supply
        self.cost_per_token = cost_per_token
        self.quotes = []
        self.reads = 0

    def native_reserve(self):
        self.reads += 1
        return self._native_reserve

    def balance_of(self, address):
        self.reads += 1
        return self.shares.get(address, 0)

    def total_supply(self):
        self.reads += 1
        return self._total_supply

    def quote_native_for_exact_token_output(self, token_amount):
        self.quotes.append(token_amount)
        return token_amount * self.cost_per_token


class FakeAccount:
    """Records invocations; on_invoke(invocation) can mutate the world as it lands"""

    def __init__(self, native=0):
        self.native = native
        self.invocations = []
        self.on_invoke = None

    def native_balance(self):
        return self.native

    def invoke(self, invocation):
        self.invocations.append(invocation)
        if self.on_invoke:
            self.on_invoke(invocation)


class FakeRegistry:
    def __init__(self, pools):
        self.pools = dict(pools)
        self.calls = 0

    def locate(self, token):
        self.calls += 1
        return self.pools.get(token)


class FakeGuard(AuthorizationGuard):
    def __init__(self, owners, locked=()):
        self.owners = {k.lower(): v.lower() for k, v in owners.items()}
        self.locked = {a.lower() for a in locked}

    def is_owner(self, account, caller):
        return caller is not None and self.owners.get(account.lower()) == caller.lower()

    def is_locked(self, account):
        return account.lower() in self.locked


class World:
    """A wallet, its owner, one listed token and its exchange"""

    def __init__(self, token_reserve=1000, native_reserve=500, token_balance=0,
                 native_balance=10_000, shares=0, total_supply=100, cost_per_token=1,
                 locked=False):
        self.token = FakeToken({POOL: token_reserve, ACCOUNT: token_balance})
        self.pool = FakePool(native_reserve, {ACCOUNT: shares}, total_supply, cost_per_token)
        self.account = FakeAccount(native_balance)
        self.registry = FakeRegistry({TOKEN: POOL})
        self.guard = FakeGuard({ACCOUNT: OWNER}, locked=[ACCOUNT] if locked else [])
        self.events = EventEmitter()
        self.manager = InvestmentManager(
            registry=self.registry,
            guard=self.guard,
            pools=lambda a: {POOL: self.pool}[a],
            tokens=lambda a: {TOKEN: self.token}[a],
            accounts=lambda a: {ACCOUNT: self.account}[a],
            clock=lambda: NOW,
            events=self.events,
        )

    @property
    def invocations(self):
        return self.account.invocations


@pytest.fixture
def make_world():
    return World


@pytest.fixture
def world():
    return World()

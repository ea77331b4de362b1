"""Owner and lock preconditions for mutating operations"""

import functools
import logging
from abc import ABC, abstractmethod

from .exceptions import AccountLocked, NotOwner

logger = logging.getLogger(__name__)


class AuthorizationGuard(ABC):
    """Answers who owns an account and whether it is locked"""

    @abstractmethod
    def is_owner(self, account: str, caller: str) -> bool:
        pass

    @abstractmethod
    def is_locked(self, account: str) -> bool:
        pass

    def check(self, account, caller):
        """
        Raise unless caller owns the account and the account is unlocked.

        Raises:
            NotOwner: caller is not the account owner
            AccountLocked: account is locked, even for its owner
        """
        if not self.is_owner(account, caller):
            raise NotOwner(f"{caller} is not the owner of {account}")
        if self.is_locked(account):
            raise AccountLocked(f"Account {account} is locked")


class ContractAuthorizationGuard(AuthorizationGuard):
    """Guard backed by the wallet's owner() and a lock manager contract"""

    def __init__(self, manager, lock_manager_address=None):
        """
        Args:
            manager: Web3Manager instance
            lock_manager_address: Address of the contract exposing isLocked(wallet),
                LOCK_MANAGER_ADDRESS on first lock check if None
        """
        self.manager = manager
        self.lock_manager_address = lock_manager_address
        self._lock_manager = None

    @property
    def lock_manager(self):
        if self._lock_manager is None:
            address = self.lock_manager_address or self.manager.config.lock_manager_address
            self._lock_manager = self.manager.get_contract(address, "lock_manager")
        return self._lock_manager

    def is_owner(self, account, caller):
        if not caller:
            return False
        wallet = self.manager.get_contract(account, "wallet")
        owner = wallet.functions.owner().call()
        return owner.lower() == caller.lower()

    def is_locked(self, account):
        return bool(self.lock_manager.functions.isLocked(self.manager.checksum(account)).call())


def owner_only(method):
    """
    Gate a manager method on self.guard before it runs.

    The wrapped method must take (self, account, ...) and a `caller` keyword.
    """

    @functools.wraps(method)
    def wrapper(self, account, *args, caller=None, **kwargs):
        self.guard.check(account, caller)
        logger.debug("%s authorised for %s by %s", method.__name__, account, caller)
        return method(self, account, *args, caller=caller, **kwargs)

    return wrapper

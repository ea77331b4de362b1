"""Abstract base class for invest protocol implementations"""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class BaseInvestManager(ABC):
    """
    The invest interface: put a token to work in a pool on behalf of an
    account, take a fraction back out, and report what it is worth.
    """

    @abstractmethod
    def add_investment(
        self, account: str, token: str, amount: int, period: int = 0, **kwargs
    ) -> int:
        """
        Invest `amount` of `token` from `account`.

        Args:
            account: Account address
            token: Token address
            amount: Token amount in base units
            period: Requested lock period in seconds (informational)

        Returns:
            Invested value in token units
        """
        pass

    @abstractmethod
    def remove_investment(
        self, account: str, token: str, fraction: int, **kwargs
    ) -> Any:
        """
        Withdraw `fraction` (basis points, 0-10000) of the investment.
        """
        pass

    @abstractmethod
    def get_investment(self, account: str, token: str) -> Tuple[int, int]:
        """
        Current value of the investment.

        Returns:
            (token_value, period_end)
        """
        pass

"""Custom exceptions for AMM Invest"""


class InvestError(Exception):
    """Base exception for all investment errors"""
    pass


class ConfigError(InvestError):
    """Configuration-related errors"""
    pass


class ConnectionError(InvestError):
    """Web3 connection errors"""
    pass


class TransactionError(InvestError):
    """Transaction execution errors"""
    pass


class NotOwner(InvestError):
    """Caller is not the registered owner of the account"""
    pass


class AccountLocked(InvestError):
    """Account is administratively locked"""
    pass


class PoolNotFound(InvestError):
    """No pool is registered for the token"""
    pass


class PoolEmpty(InvestError):
    """Pool has no token reserve or no share supply"""
    pass


class InvalidFraction(InvestError):
    """Withdrawal fraction outside 0-10000 basis points"""
    pass


class InvalidAmount(InvestError):
    """
    Deposit amount is zero, or so small its native leg rounds to zero.

    The second case is checked here because the pool would reject a
    zero-value addLiquidity after any shortfall swap had already gone out.
    """
    pass


class InsufficientNativeBalance(InvestError):
    """Account cannot cover the native-asset leg of an operation"""
    pass


class ArithmeticOverflow(InvestError):
    """uint256 overflow or underflow"""
    pass

"""
Exception hierarchy for the account ledger.

Business rule failures also derive from ValueError, so callers
that only care about "the request was rejected" can catch that.
Persistence failures do not: they mean the disk and memory may
disagree, which is a different kind of problem.
"""

from decimal import Decimal


class LedgerError(Exception):
    """Base exception for all ledger errors."""


class ConfigurationError(LedgerError):
    """Raised when a configuration value is invalid."""


class AccountNotFoundError(LedgerError, ValueError):
    """Raised when no account has the requested number."""

    def __init__(self, account_number: str):
        super().__init__(f"Account {account_number} not found")
        self.account_number = account_number


class AuthorizationError(LedgerError, ValueError):
    """Raised when a credential does not match the stored one."""


class InputValidationError(LedgerError, ValueError):
    """Raised when an input field is rejected outside schema validation."""


class PolicyViolationError(LedgerError, ValueError):
    """Raised when an operation would break a balance rule."""


class InvalidAmountError(PolicyViolationError):
    """Raised when an amount is zero or negative."""


class MinimumBalanceError(PolicyViolationError):
    """Raised when a withdrawal would leave less than the minimum balance."""

    def __init__(self, account_type, minimum_balance: Decimal):
        super().__init__(
            f"Minimum balance requirement not met: "
            f"{account_type.value} accounts must keep at least {minimum_balance:.2f}"
        )
        self.account_type = account_type
        self.minimum_balance = minimum_balance


class InsufficientFundsError(PolicyViolationError):
    """Raised when a withdrawal exceeds the balance."""


class PersistenceError(LedgerError):
    """Raised when a ledger file cannot be read or written."""


class RecordFormatError(PersistenceError):
    """Raised when the accounts file does not hold well-formed records."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number

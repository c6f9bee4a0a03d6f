"""
Minimum balance rules.

Every account type has a floor that a withdrawal may not cross.
The floors are configuration, so the policy is a value object
built from settings rather than a pair of module constants.
"""

from dataclasses import dataclass
from decimal import Decimal

from account_ledger.models.enums import AccountType


@dataclass(frozen=True)
class BalancePolicy:
    savings_minimum: Decimal = Decimal("100")
    current_minimum: Decimal = Decimal("500")

    def minimum_for(self, account_type: AccountType) -> Decimal:
        """Return the minimum balance for an account type."""
        if account_type == AccountType.SAVINGS:
            return self.savings_minimum
        return self.current_minimum

    @classmethod
    def from_settings(cls, settings) -> "BalancePolicy":
        return cls(
            savings_minimum=settings.SAVINGS_MIN_BALANCE,
            current_minimum=settings.CURRENT_MIN_BALANCE,
        )


DEFAULT_POLICY = BalancePolicy()

"""
Customer account model.

An account keeps its balance directly and records every
mutation as a narration line. Narrations are append-only:
they are never edited or removed, only added to by opening,
depositing and withdrawing.

Balance rules live here so that no caller can move money
without passing through them.
"""

import hmac
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from account_ledger.exceptions import (
    AuthorizationError,
    InsufficientFundsError,
    InvalidAmountError,
    MinimumBalanceError,
)
from account_ledger.models.balance_policy import BalancePolicy, DEFAULT_POLICY
from account_ledger.models.enums import AccountType


def to_amount(value) -> Decimal:
    """Coerce a number to Decimal without picking up float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass
class Account:
    account_number: str
    holder_name: str
    address: str
    phone: str
    email: str
    balance: Decimal
    account_type: AccountType
    credential: str
    narrations: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.account_type = AccountType(self.account_type)
        self.balance = to_amount(self.balance)

    @classmethod
    def open(
        cls,
        account_number: str,
        holder_name: str,
        address: str,
        phone: str,
        email: str,
        initial_deposit,
        account_type: AccountType,
        credential: str,
    ) -> "Account":
        """
        Open a new account with its initial deposit as the balance.

        The minimum balance is not checked here. An account may
        start below its type's floor; only withdrawals are held
        to it.
        """
        deposit = to_amount(initial_deposit)
        account = cls(
            account_number=account_number,
            holder_name=holder_name,
            address=address,
            phone=phone,
            email=email,
            balance=deposit,
            account_type=account_type,
            credential=credential,
        )
        if deposit > 0:
            account._narrate(f"Account opened with initial deposit: {deposit:.2f}")
        return account

    def check_credential(self, credential: str) -> bool:
        """Compare a credential against the stored one."""
        return hmac.compare_digest(
            self.credential.encode("utf-8"), str(credential).encode("utf-8")
        )

    def minimum_balance(self, policy: BalancePolicy = DEFAULT_POLICY) -> Decimal:
        return policy.minimum_for(self.account_type)

    def deposit(self, amount) -> Decimal:
        """Add funds and return the new balance."""
        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(f"Invalid deposit amount: {amount}")

        self.balance += amount
        self._narrate(f"Deposit: +{amount:.2f}")
        return self.balance

    def withdraw(
        self, amount, credential: str, policy: BalancePolicy = DEFAULT_POLICY
    ) -> Decimal:
        """
        Remove funds and return the new balance.

        Checks run in a fixed order and the first failure wins:
        credential, amount sign, minimum balance, then available
        funds. A failed check changes nothing.
        """
        if not self.check_credential(credential):
            raise AuthorizationError(
                f"Authentication failed for account {self.account_number}"
            )

        amount = to_amount(amount)
        if amount <= 0:
            raise InvalidAmountError(f"Invalid withdrawal amount: {amount}")

        minimum = self.minimum_balance(policy)
        if self.balance - amount < minimum:
            raise MinimumBalanceError(self.account_type, minimum)

        # Unreachable while minimums are non-negative
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient funds: available={self.balance}, requested={amount}"
            )

        self.balance -= amount
        self._narrate(f"Withdrawal: -{amount:.2f}")
        return self.balance

    def _narrate(self, description: str) -> None:
        self.narrations.append(f"{datetime.now().ctime()} - {description}")

    def __repr__(self) -> str:
        return (
            f"<Account {self.account_number} "
            f"{self.account_type.value} {self.balance:.2f}>"
        )

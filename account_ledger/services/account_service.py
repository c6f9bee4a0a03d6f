"""
Account service: opening accounts and looking them up.

This service coordinates between the request schemas and the
ledger store. Opening an account mints a number, applies the
opening deposit rule, persists, and writes the transaction log.
"""

import hmac
from decimal import Decimal

from account_ledger.exceptions import (
    AuthorizationError,
    InputValidationError,
    PolicyViolationError,
)
from account_ledger.models.account import Account
from account_ledger.models.enums import EventType
from account_ledger.schemas.account import (
    AccountCreate,
    AccountDetails,
    AccountSummary,
)
from account_ledger.services.ledger_service import LedgerService


class AccountService:

    def __init__(self, ledger: LedgerService):
        self.ledger = ledger

    def create_account(self, request: AccountCreate) -> Account:
        """
        Open a new account.

        The opening deposit must cover the account type's minimum
        balance. The account record itself does not require this;
        it is a rule for accounts opened through this service.
        """
        length = self.ledger.settings.CREDENTIAL_LENGTH
        if len(request.credential) != length:
            raise InputValidationError(f"Credential must be {length} digits")

        minimum = self.ledger.policy.minimum_for(request.account_type)
        if request.initial_deposit < minimum:
            raise PolicyViolationError(
                f"Minimum deposit for {request.account_type.value} "
                f"account is {minimum:.2f}"
            )

        account = Account.open(
            account_number=self.ledger.generate_account_number(),
            holder_name=request.holder_name,
            address=request.address,
            phone=request.phone,
            email=request.email,
            initial_deposit=request.initial_deposit,
            account_type=request.account_type,
            credential=request.credential,
        )
        self.ledger.add_account(account)
        self.ledger.save()
        self.ledger.log_event(
            EventType.ACCOUNT_CREATED,
            f"Account created: {account.account_number} for {account.holder_name}",
        )
        return account

    def get_account(self, account_number: str) -> Account:
        return self.ledger.get_account(account_number)

    def get_balance(self, account_number: str) -> Decimal:
        return self.ledger.get_account(account_number).balance

    def get_details(self, account_number: str) -> AccountDetails:
        return AccountDetails.model_validate(
            self.ledger.get_account(account_number)
        )

    def get_history(self, account_number: str) -> list[str]:
        """Narrations for an account, oldest first."""
        return list(self.ledger.get_account(account_number).narrations)

    def list_accounts(self) -> list[AccountSummary]:
        return [
            AccountSummary.model_validate(account)
            for account in self.ledger.accounts
        ]

    def verify_admin_password(self, password: str) -> bool:
        """False when no admin password is configured."""
        expected = self.ledger.settings.ADMIN_PASSWORD
        if not expected:
            return False
        return hmac.compare_digest(expected.encode("utf-8"), password.encode("utf-8"))

    def authenticate(self, account_number: str, credential: str) -> Account:
        """
        Check a credential for remote access.

        Failed attempts are written to the transaction log.
        """
        account = self.ledger.get_account(account_number)
        if not account.check_credential(credential):
            self.ledger.log_event(
                EventType.FAILED_ACCESS,
                f"Failed remote access attempt for account: {account_number}",
            )
            raise AuthorizationError(
                f"Authentication failed for account {account_number}"
            )
        return account

"""
Transaction service: deposits and withdrawals.

Each operation:
1. Finds the account (AccountNotFoundError if unknown)
2. Applies the change through the account record, which
   enforces the balance rules
3. Rewrites the ledger files
4. Appends an event to the transaction log

If step 2 fails nothing is saved or logged, except a failed
credential check, which is logged as an access attempt.
"""

import logging
from decimal import Decimal

from account_ledger.exceptions import AuthorizationError
from account_ledger.models.enums import EventType
from account_ledger.schemas.transaction import DepositRequest, WithdrawalRequest
from account_ledger.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class TransactionService:

    def __init__(self, ledger: LedgerService):
        self.ledger = ledger

    def deposit(self, request: DepositRequest) -> Decimal:
        """Deposit into an account and return the new balance."""
        account = self.ledger.get_account(request.account_number)
        balance = account.deposit(request.amount)

        self.ledger.save()
        self.ledger.log_event(
            EventType.DEPOSIT,
            f"Deposit to {account.account_number}: {request.amount:.2f}",
        )
        return balance

    def withdraw(self, request: WithdrawalRequest) -> Decimal:
        """
        Withdraw from an account and return the new balance.

        A remote withdrawal follows the same rules and is only
        logged differently.
        """
        account = self.ledger.get_account(request.account_number)
        try:
            balance = account.withdraw(
                request.amount, request.credential, self.ledger.policy
            )
        except AuthorizationError:
            logger.info("Rejected withdrawal credential for %s", account.account_number)
            if request.remote:
                message = f"Failed remote access attempt for account: {account.account_number}"
            else:
                message = f"Failed withdrawal attempt for account: {account.account_number}"
            self.ledger.log_event(EventType.FAILED_ACCESS, message)
            raise

        self.ledger.save()
        if request.remote:
            self.ledger.log_event(
                EventType.REMOTE_WITHDRAWAL,
                f"Remote withdrawal from {account.account_number}: {request.amount:.2f}",
            )
        else:
            self.ledger.log_event(
                EventType.WITHDRAWAL,
                f"Withdrawal from {account.account_number}: {request.amount:.2f}",
            )
        return balance

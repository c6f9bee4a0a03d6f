"""Business logic services."""

from account_ledger.services.ledger_service import LedgerService
from account_ledger.services.account_service import AccountService
from account_ledger.services.transaction_service import TransactionService

__all__ = ["LedgerService", "AccountService", "TransactionService"]

"""Flat-file persistence."""

from account_ledger.storage.account_file import AccountFile, CounterFile
from account_ledger.storage.transaction_log import TransactionLog

__all__ = ["AccountFile", "CounterFile", "TransactionLog"]

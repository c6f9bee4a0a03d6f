"""
Ledger service: the store behind every other service.

This service owns the rules of the account collection:
1. Account numbers are unique and never reused
2. The counter never falls behind an existing account number
3. State is loaded once and rewritten in full after each change
4. The transaction log is best effort and never blocks a change

No other service touches the account files directly.
"""

import logging
import re

from account_ledger.config import Settings, get_settings
from account_ledger.exceptions import AccountNotFoundError, PersistenceError
from account_ledger.models.account import Account
from account_ledger.models.audit_log import AuditLogEntry
from account_ledger.models.balance_policy import BalancePolicy
from account_ledger.models.enums import EventType
from account_ledger.storage.account_file import AccountFile, CounterFile
from account_ledger.storage.transaction_log import TransactionLog

logger = logging.getLogger(__name__)

_NUMERIC_SUFFIX = re.compile(r"(\d+)$")


def account_number_suffix(account_number: str) -> int | None:
    """Return the trailing integer of an account number, if any."""
    match = _NUMERIC_SUFFIX.search(account_number)
    return int(match.group(1)) if match else None


class LedgerService:
    """
    All account storage passes through this service.

    Other services share one instance, so they all see the same
    in-memory collection and the same counter.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.policy = BalancePolicy.from_settings(self.settings)
        self.account_file = AccountFile(self.settings.ACCOUNTS_FILE)
        self.counter_file = CounterFile(self.settings.COUNTER_FILE)
        self.transaction_log = TransactionLog(self.settings.TRANSACTION_LOG)
        self.counter = self.settings.ACCOUNT_COUNTER_SEED
        self._accounts: list[Account] = []

    @property
    def accounts(self) -> tuple[Account, ...]:
        """All accounts, in the order they were added."""
        return tuple(self._accounts)

    def generate_account_number(self) -> str:
        """Advance the counter and return the next account number."""
        self.counter += 1
        return f"{self.settings.ACCOUNT_NUMBER_PREFIX}{self.counter}"

    def find_by_number(self, account_number: str) -> Account | None:
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def get_account(self, account_number: str) -> Account:
        """Like find_by_number, but raises AccountNotFoundError."""
        account = self.find_by_number(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def add_account(self, account: Account) -> Account:
        """
        Add an account to the collection.

        Raises ValueError if the account number is already taken.
        """
        if self.find_by_number(account.account_number) is not None:
            raise ValueError(
                f"Account with number '{account.account_number}' already exists"
            )
        self._accounts.append(account)
        return account

    def load(self) -> None:
        """
        Replace in-memory state with what is on disk.

        The counter becomes the largest of the seed, the stored
        counter and every loaded account number, so a stale or
        missing counter file cannot cause a number to be reused.
        """
        accounts = self.account_file.load()
        stored_counter = self.counter_file.load()

        candidates = [self.settings.ACCOUNT_COUNTER_SEED]
        if stored_counter is not None:
            candidates.append(stored_counter)
        for account in accounts:
            suffix = account_number_suffix(account.account_number)
            if suffix is None:
                logger.warning(
                    "Account number %r has no numeric suffix",
                    account.account_number,
                )
                continue
            candidates.append(suffix)

        self._accounts = accounts
        self.counter = max(candidates)
        if stored_counter is not None and self.counter > stored_counter:
            logger.info(
                "Counter file was behind (%d), advanced to %d",
                stored_counter, self.counter,
            )
        logger.info("Loaded %d accounts, counter at %d", len(accounts), self.counter)

    def save(self) -> None:
        """
        Rewrite the accounts file and the counter file.

        On failure the error is logged and re-raised; the in-memory
        state keeps the change even though the disk does not.
        """
        try:
            self.account_file.save(self._accounts)
            self.counter_file.save(self.counter)
        except PersistenceError:
            logger.error("Error saving accounts to file", exc_info=True)
            raise

    def log_event(self, event_type: EventType, details: str) -> bool:
        """Append an event to the transaction log. Never raises."""
        return self.transaction_log.append(
            AuditLogEntry(event_type=event_type, details=details)
        )

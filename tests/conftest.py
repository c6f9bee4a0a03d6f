"""
Shared test fixtures.

Points every ledger file at a temporary directory so tests
never touch real data. Each test gets fresh settings, a fresh
store and services wired to it.
"""

import pytest

from account_ledger.config import Settings
from account_ledger.services.account_service import AccountService
from account_ledger.services.ledger_service import LedgerService
from account_ledger.services.transaction_service import TransactionService


LEDGER_ENV_VARS = [
    "LOG_LEVEL",
    "LEDGER_DATA_DIR",
    "ACCOUNTS_FILE",
    "COUNTER_FILE",
    "TRANSACTION_LOG",
    "ACCOUNT_NUMBER_PREFIX",
    "ACCOUNT_COUNTER_SEED",
    "CREDENTIAL_LENGTH",
    "SAVINGS_MIN_BALANCE",
    "CURRENT_MIN_BALANCE",
    "ADMIN_PASSWORD",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any ledger variables inherited from the shell or a .env file."""
    for name in LEDGER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env, tmp_path):
    clean_env.setenv("LEDGER_DATA_DIR", str(tmp_path))
    return Settings()


@pytest.fixture
def ledger(settings):
    return LedgerService(settings)


@pytest.fixture
def account_service(ledger):
    return AccountService(ledger)


@pytest.fixture
def transaction_service(ledger):
    return TransactionService(ledger)

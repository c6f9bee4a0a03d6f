"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode credentials or file locations in code.
"""

import os
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from account_ledger.exceptions import ConfigurationError

# Load .env file into environment variables
load_dotenv()


def _int_env(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _decimal_env(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{name} must be a decimal amount, got {raw!r}")
    if not value.is_finite() or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative amount, got {raw!r}")
    return value


class Settings:
    """
    Application settings loaded from environment variables.

    Values are read when the instance is created, so a test can
    set variables and build a fresh Settings without touching
    the cached one.
    """

    def __init__(self) -> None:
        # Application
        self.APP_NAME: str = "Account Ledger"
        self.APP_VERSION: str = "0.1.0"
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        # Persisted files, relative to the data directory
        self.DATA_DIR: Path = Path(os.getenv("LEDGER_DATA_DIR", "."))
        self.ACCOUNTS_FILE: Path = self.DATA_DIR / os.getenv(
            "ACCOUNTS_FILE", "bank_accounts.dat"
        )
        self.COUNTER_FILE: Path = self.DATA_DIR / os.getenv(
            "COUNTER_FILE", "account_counter.dat"
        )
        self.TRANSACTION_LOG: Path = self.DATA_DIR / os.getenv(
            "TRANSACTION_LOG", "bank_transactions.log"
        )

        # Account numbering
        self.ACCOUNT_NUMBER_PREFIX: str = os.getenv("ACCOUNT_NUMBER_PREFIX", "ACCT")
        self.ACCOUNT_COUNTER_SEED: int = _int_env("ACCOUNT_COUNTER_SEED", "1000")

        # Withdrawal credential
        self.CREDENTIAL_LENGTH: int = _int_env("CREDENTIAL_LENGTH", "4")
        if self.CREDENTIAL_LENGTH < 1:
            raise ConfigurationError("CREDENTIAL_LENGTH must be at least 1")

        # Minimum balance per account type
        self.SAVINGS_MIN_BALANCE: Decimal = _decimal_env("SAVINGS_MIN_BALANCE", "100")
        self.CURRENT_MIN_BALANCE: Decimal = _decimal_env("CURRENT_MIN_BALANCE", "500")

        # Operator password for the all-accounts view. Front ends decide
        # whether to ask for it; None means no password is configured.
        self.ADMIN_PASSWORD: str | None = os.getenv("ADMIN_PASSWORD") or None


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    Using lru_cache means the Settings object is created once
    and reused for all subsequent calls. This avoids reading
    environment variables repeatedly.
    """
    return Settings()

"""
Account Ledger: application bootstrap.

This is the entry point for any front end. It configures
logging, loads the ledger from disk once, and wires the
services to a shared store.
"""

from dataclasses import dataclass

from account_ledger.config import Settings, get_settings
from account_ledger.logging_config import get_logger, setup_logging
from account_ledger.services.account_service import AccountService
from account_ledger.services.ledger_service import LedgerService
from account_ledger.services.transaction_service import TransactionService

logger = get_logger(__name__)


@dataclass
class Ledger:
    """The loaded store and the services that operate on it."""
    store: LedgerService
    accounts: AccountService
    transactions: TransactionService


def create_ledger(settings: Settings | None = None, configure_logging: bool = True) -> Ledger:
    """
    Load the ledger from disk and return it with its services.

    Settings default to the cached environment settings. Pass
    configure_logging=False when the caller owns logging setup.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.LOG_LEVEL)

    store = LedgerService(settings)
    store.load()
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)

    return Ledger(
        store=store,
        accounts=AccountService(store),
        transactions=TransactionService(store),
    )

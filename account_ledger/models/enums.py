"""
Shared enumerations for ledger models.

Enum values are what gets written to disk, so an unknown
account type in the accounts file is caught when the record
is parsed, not later when a withdrawal looks up its minimum.
"""

import enum


class AccountType(str, enum.Enum):
    """Account types, each with its own minimum balance."""
    SAVINGS = "Savings"
    CURRENT = "Current"


class EventType(str, enum.Enum):
    """Events recorded in the transaction log."""
    ACCOUNT_CREATED = "ACCOUNT_CREATED"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"
    REMOTE_WITHDRAWAL = "REMOTE_WITHDRAWAL"
    FAILED_ACCESS = "FAILED_ACCESS"

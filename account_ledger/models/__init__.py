"""
Ledger models package.

The account record, its balance policy and the audit log
entry are plain data structures. Persistence lives in
account_ledger.storage.
"""

from account_ledger.models.enums import AccountType, EventType
from account_ledger.models.balance_policy import BalancePolicy, DEFAULT_POLICY
from account_ledger.models.audit_log import AuditLogEntry
from account_ledger.models.account import Account, to_amount

__all__ = [
    "AccountType",
    "EventType",
    "BalancePolicy",
    "DEFAULT_POLICY",
    "AuditLogEntry",
    "Account",
    "to_amount",
]

"""
Audit log model.

Records significant ledger events in the transaction log.
Every account creation, deposit and withdrawal must be
traceable, and so must failed access attempts.
"""

from dataclasses import dataclass, field
from datetime import datetime

from account_ledger.models.enums import EventType


@dataclass(frozen=True)
class AuditLogEntry:
    """
    Immutable record of a ledger event.

    Like narrations, log entries are append-only.
    You never update or delete an audit record.
    """

    event_type: EventType
    details: str
    created_at: datetime = field(default_factory=datetime.now)

    def render(self) -> str:
        """Timestamp line, message line, blank line."""
        return f"{self.created_at.ctime()}\n - {self.details}\n\n"

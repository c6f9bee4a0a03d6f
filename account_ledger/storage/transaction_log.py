"""
Append-only transaction log.

A human-readable trail of ledger events, separate from the
per-account narrations. It is written, never read back.
"""

import logging
from pathlib import Path

from account_ledger.models.audit_log import AuditLogEntry

logger = logging.getLogger(__name__)


class TransactionLog:

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, entry: AuditLogEntry) -> bool:
        """
        Append one entry. Returns False if the log could not be written.

        Logging is best effort: a failure here must never undo
        or block the operation that produced the entry.
        """
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(entry.render())
        except OSError as e:
            logger.warning("Cannot write transaction log %s: %s", self.path, e)
            return False
        return True

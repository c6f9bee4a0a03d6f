"""
Accounts file and account counter file.

Both files are rewritten in full on every save. The new content
goes to a temporary file in the same directory first and is then
moved over the old one, so an interrupted write leaves the
previous file intact.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, TextIO

from account_ledger.exceptions import PersistenceError
from account_ledger.models.account import Account
from account_ledger.storage.codec import read_accounts, write_accounts

logger = logging.getLogger(__name__)


def atomic_write(path: Path, write: Callable[[TextIO], None]) -> None:
    """
    Replace the file at path with whatever write() produces.

    Raises PersistenceError if the directory is not writable
    or the write fails. The temporary file is removed on any
    failure, and errors other than OSError propagate unchanged.
    """
    path = Path(path)
    directory = path.parent
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=directory, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise PersistenceError(f"Cannot write {path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            write(tmp)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
    except BaseException as e:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.debug("Could not remove temporary file %s", tmp_name)
        if isinstance(e, OSError):
            raise PersistenceError(f"Cannot write {path}: {e}") from e
        raise


class AccountFile:
    """The flat file holding every account record."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> list[Account]:
        """Read all records. A missing file means no accounts yet."""
        if not self.path.exists():
            logger.info("No accounts file at %s, starting empty", self.path)
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                accounts = read_accounts(f)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        logger.debug("Loaded %d accounts from %s", len(accounts), self.path)
        return accounts

    def save(self, accounts: Iterable[Account]) -> None:
        accounts = list(accounts)
        atomic_write(self.path, lambda f: write_accounts(f, accounts))
        logger.debug("Saved %d accounts to %s", len(accounts), self.path)


class CounterFile:
    """A single integer: the last account counter value handed out."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> int | None:
        """
        Return the stored counter, or None if there is no usable value.

        A damaged counter is not fatal. The ledger recomputes the
        counter from the loaded account numbers anyway.
        """
        if not self.path.exists():
            return None
        try:
            raw = self.path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read counter file %s: %s", self.path, e)
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring invalid counter %r in %s", raw, self.path)
            return None

    def save(self, value: int) -> None:
        atomic_write(self.path, lambda f: f.write(str(value)))

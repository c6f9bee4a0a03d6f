"""Single-user account ledger persisted to flat text files."""

__version__ = "0.1.0"

"""
Line-oriented account record codec.

Each record is one field per line in a fixed order:

    account number
    holder name
    address
    phone
    email
    balance (two decimal places)
    account type
    credential
    narration count
    narration lines, as many as the count says

Records follow each other with no separator and the file has
no header, so no field may contain a line break.
The balance is written rounded to two places and
read back as written, so a round trip normalizes it.
"""

from decimal import Decimal, InvalidOperation
from typing import Iterable, TextIO

from account_ledger.exceptions import PersistenceError, RecordFormatError
from account_ledger.models.account import Account
from account_ledger.models.enums import AccountType


class LineReader:
    """Hands out lines one at a time and remembers where it is."""

    def __init__(self, lines: list[str]):
        self._lines = lines
        self._position = 0
        # Trailing blank lines count as end of input
        self._content_end = len(lines)
        while self._content_end and not lines[self._content_end - 1].strip():
            self._content_end -= 1

    @property
    def line_number(self) -> int:
        return self._position

    def at_end(self) -> bool:
        return self._position >= self._content_end

    def next_line(self, field_name: str) -> str:
        if self._position >= len(self._lines):
            raise RecordFormatError(
                f"unexpected end of file, expected {field_name}",
                self._position + 1,
            )
        line = self._lines[self._position]
        self._position += 1
        return line


def serialize_account(account: Account) -> list[str]:
    """
    Return the lines that represent one account.

    Raises PersistenceError if a field holds a line break, since
    the record could not be read back.
    """
    lines = [
        account.account_number,
        account.holder_name,
        account.address,
        account.phone,
        account.email,
        f"{account.balance:.2f}",
        account.account_type.value,
        account.credential,
        str(len(account.narrations)),
    ]
    lines.extend(account.narrations)
    for line in lines:
        if "\n" in line or "\r" in line:
            raise PersistenceError(
                f"Account {account.account_number!r} has a field with a line break"
            )
    return lines


def deserialize_account(reader: LineReader) -> Account:
    """Read exactly one account record."""
    account_number = reader.next_line("account number")
    holder_name = reader.next_line("holder name")
    address = reader.next_line("address")
    phone = reader.next_line("phone")
    email = reader.next_line("email")

    raw_balance = reader.next_line("balance")
    try:
        balance = Decimal(raw_balance.strip())
    except InvalidOperation:
        raise RecordFormatError(
            f"invalid balance {raw_balance!r}", reader.line_number
        )
    if not balance.is_finite():
        raise RecordFormatError(
            f"invalid balance {raw_balance!r}", reader.line_number
        )

    raw_type = reader.next_line("account type")
    try:
        account_type = AccountType(raw_type.strip())
    except ValueError:
        raise RecordFormatError(
            f"unknown account type {raw_type!r}", reader.line_number
        )

    credential = reader.next_line("credential")

    raw_count = reader.next_line("narration count")
    try:
        count = int(raw_count.strip())
    except ValueError:
        raise RecordFormatError(
            f"invalid narration count {raw_count!r}", reader.line_number
        )
    if count < 0:
        raise RecordFormatError(
            f"negative narration count {count}", reader.line_number
        )

    narrations = [reader.next_line("narration") for _ in range(count)]

    return Account(
        account_number=account_number,
        holder_name=holder_name,
        address=address,
        phone=phone,
        email=email,
        balance=balance,
        account_type=account_type,
        credential=credential,
        narrations=narrations,
    )


def read_accounts(stream: TextIO) -> list[Account]:
    """Read every record in a stream, in order."""
    text = stream.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    reader = LineReader(lines)
    accounts = []
    seen = set()
    while not reader.at_end():
        start = reader.line_number + 1
        account = deserialize_account(reader)
        if account.account_number in seen:
            raise RecordFormatError(
                f"duplicate account number {account.account_number!r}", start
            )
        seen.add(account.account_number)
        accounts.append(account)
    return accounts


def write_accounts(stream: TextIO, accounts: Iterable[Account]) -> None:
    """Serialize every account first, then write, so a bad record writes nothing."""
    lines = [line for account in accounts for line in serialize_account(account)]
    stream.write("".join(line + "\n" for line in lines))

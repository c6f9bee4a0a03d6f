"""
Pydantic schemas for deposits and withdrawals.

Amounts must be numbers, but their sign is left to the account
record: a zero or negative amount is a rejected transaction,
not malformed input.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


class DepositRequest(BaseModel):
    account_number: str = Field(min_length=1)
    amount: Decimal = Field(allow_inf_nan=False)


class WithdrawalRequest(BaseModel):
    account_number: str = Field(min_length=1)
    amount: Decimal = Field(allow_inf_nan=False)
    credential: str
    remote: bool = False

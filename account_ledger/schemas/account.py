"""
Pydantic schemas for account operations.

Every text field ends up on its own line in the accounts file,
so line breaks are rejected here, before a record can be built.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from account_ledger.models.enums import AccountType


def _single_line(v: str) -> str:
    if "\n" in v or "\r" in v:
        raise ValueError("must be a single line")
    return v


class AccountCreate(BaseModel):
    """Request to open a new account."""
    holder_name: str = Field(min_length=1, max_length=100)
    address: str = Field(min_length=1, max_length=255)
    phone: str = Field(min_length=1, max_length=20, pattern=r"^[0-9]+$")
    email: str = Field(min_length=3, max_length=255)
    account_type: AccountType
    initial_deposit: Decimal = Field(ge=0, allow_inf_nan=False)
    credential: str = Field(min_length=1, pattern=r"^[0-9]+$")

    @field_validator("holder_name", "address")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("cannot be empty")
        return _single_line(v)

    @field_validator("email")
    @classmethod
    def must_look_like_email(cls, v: str) -> str:
        if "@" not in v or "." not in v:
            raise ValueError("invalid email format")
        return _single_line(v)


class AccountDetails(BaseModel):
    """Everything about an account except its credential."""
    account_number: str
    holder_name: str
    address: str
    phone: str
    email: str
    account_type: AccountType
    balance: Decimal

    model_config = {"from_attributes": True}


class AccountSummary(BaseModel):
    """One row of the all-accounts listing."""
    account_number: str
    holder_name: str
    account_type: AccountType
    balance: Decimal

    model_config = {"from_attributes": True}

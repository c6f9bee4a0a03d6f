"""
Comprehensive tests for the AccountService.
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from account_ledger.config import Settings
from account_ledger.exceptions import (
    AccountNotFoundError,
    AuthorizationError,
    InputValidationError,
    PolicyViolationError,
)
from account_ledger.models.enums import AccountType
from account_ledger.schemas.account import AccountCreate, AccountDetails
from account_ledger.services.account_service import AccountService
from account_ledger.services.ledger_service import LedgerService


def make_request(**overrides):
    data = dict(
        holder_name="Jane Doe",
        address="12 Harbour Road",
        phone="5550100",
        email="jane@example.com",
        account_type=AccountType.SAVINGS,
        initial_deposit=Decimal("100.00"),
        credential="1234",
    )
    data.update(overrides)
    return AccountCreate(**data)


# --- Input Validation Tests ---

class TestAccountCreateSchema:

    @pytest.mark.parametrize("field, value", [
        ("holder_name", ""),
        ("holder_name", "   "),
        ("holder_name", "Jane\nDoe"),
        ("address", ""),
        ("address", "12 Harbour\rRoad"),
        ("phone", "555-0100"),
        ("phone", ""),
        ("email", "jane.example.com"),
        ("email", "jane@example"),
        ("account_type", "Checking"),
        ("initial_deposit", Decimal("-1")),
        ("initial_deposit", "ten"),
        ("credential", "12a4"),
    ])
    def test_invalid_field_rejected(self, field, value):
        with pytest.raises(ValidationError):
            make_request(**{field: value})

    def test_account_type_from_text(self):
        request = make_request(account_type="Current")
        assert request.account_type == AccountType.CURRENT


# --- Account Opening Tests ---

class TestCreateAccount:

    def test_create_account_succeeds(self, account_service):
        account = account_service.create_account(make_request())

        assert account.account_number == "ACCT1001"
        assert account.balance == Decimal("100.00")
        assert account.account_type == AccountType.SAVINGS
        assert len(account.narrations) == 1

    def test_numbers_are_sequential(self, account_service):
        first = account_service.create_account(make_request())
        second = account_service.create_account(make_request(holder_name="John Roe"))

        assert first.account_number == "ACCT1001"
        assert second.account_number == "ACCT1002"

    def test_account_is_persisted(self, account_service, settings):
        account_service.create_account(make_request())

        reloaded = LedgerService(settings)
        reloaded.load()
        assert reloaded.get_account("ACCT1001").holder_name == "Jane Doe"
        assert reloaded.generate_account_number() == "ACCT1002"

    def test_creation_is_logged(self, account_service, settings):
        account_service.create_account(make_request())

        text = settings.TRANSACTION_LOG.read_text(encoding="utf-8")
        assert " - Account created: ACCT1001 for Jane Doe" in text

    @pytest.mark.parametrize("credential", ["123", "12345"])
    def test_credential_length_enforced(self, account_service, credential):
        with pytest.raises(InputValidationError, match="4 digits"):
            account_service.create_account(make_request(credential=credential))

        assert account_service.list_accounts() == []

    def test_opening_deposit_must_cover_minimum(self, account_service):
        with pytest.raises(PolicyViolationError, match="Minimum deposit for Current"):
            account_service.create_account(make_request(
                account_type=AccountType.CURRENT,
                initial_deposit=Decimal("499.99"),
            ))

        assert account_service.list_accounts() == []

    def test_rejected_request_does_not_use_a_number(self, account_service):
        with pytest.raises(PolicyViolationError):
            account_service.create_account(make_request(initial_deposit=Decimal("5")))

        account = account_service.create_account(make_request())
        assert account.account_number == "ACCT1001"


# --- Lookup Tests ---

class TestLookups:

    def test_get_balance(self, account_service):
        account_service.create_account(make_request(initial_deposit=Decimal("250.50")))
        assert account_service.get_balance("ACCT1001") == Decimal("250.50")

    def test_get_details_omits_credential(self, account_service):
        account_service.create_account(make_request())
        details = account_service.get_details("ACCT1001")

        assert isinstance(details, AccountDetails)
        assert details.email == "jane@example.com"
        assert "credential" not in details.model_dump()

    def test_get_history_is_a_copy(self, account_service):
        account_service.create_account(make_request())
        history = account_service.get_history("ACCT1001")
        history.append("tampered")

        assert len(account_service.get_history("ACCT1001")) == 1

    def test_list_accounts(self, account_service):
        account_service.create_account(make_request())
        account_service.create_account(make_request(
            holder_name="John Roe",
            account_type=AccountType.CURRENT,
            initial_deposit=Decimal("750"),
        ))

        summaries = account_service.list_accounts()
        assert [(s.account_number, s.holder_name, s.account_type, s.balance) for s in summaries] == [
            ("ACCT1001", "Jane Doe", AccountType.SAVINGS, Decimal("100.00")),
            ("ACCT1002", "John Roe", AccountType.CURRENT, Decimal("750")),
        ]

    @pytest.mark.parametrize("method", ["get_account", "get_balance", "get_details", "get_history"])
    def test_unknown_account(self, account_service, method):
        with pytest.raises(AccountNotFoundError):
            getattr(account_service, method)("ACCT9999")


# --- Remote Access Tests ---

class TestAuthenticate:

    def test_correct_credential(self, account_service):
        created = account_service.create_account(make_request())
        assert account_service.authenticate("ACCT1001", "1234") is created

    def test_wrong_credential_is_logged(self, account_service, settings):
        account_service.create_account(make_request())

        with pytest.raises(AuthorizationError):
            account_service.authenticate("ACCT1001", "4321")

        text = settings.TRANSACTION_LOG.read_text(encoding="utf-8")
        assert "Failed remote access attempt for account: ACCT1001" in text

    def test_unknown_account(self, account_service):
        with pytest.raises(AccountNotFoundError):
            account_service.authenticate("ACCT9999", "1234")


# --- Admin Password Tests ---

class TestVerifyAdminPassword:

    def test_not_configured(self, account_service):
        assert account_service.verify_admin_password("") is False
        assert account_service.verify_admin_password("secret") is False

    def test_configured(self, clean_env, tmp_path):
        clean_env.setenv("LEDGER_DATA_DIR", str(tmp_path))
        clean_env.setenv("ADMIN_PASSWORD", "s3cret")
        service = AccountService(LedgerService(Settings()))

        assert service.verify_admin_password("s3cret") is True
        assert service.verify_admin_password("S3CRET") is False
        assert service.verify_admin_password("") is False

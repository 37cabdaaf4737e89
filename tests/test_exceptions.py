"""Tests for custom exception hierarchy."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankLedgerError,
    ConfigurationError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    NotANumberError,
    RequiredFieldError,
    ValidationError,
)
from bank_ledger.result import ErrorKind


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_error_is_exception(self) -> None:
        assert isinstance(BankLedgerError("test"), Exception)

    def test_validation_subclasses(self) -> None:
        for cls in (RequiredFieldError, NotANumberError):
            err = cls("test")
            assert isinstance(err, ValidationError)
            assert isinstance(err, BankLedgerError)

    def test_ledger_errors_are_base_errors(self) -> None:
        for cls in (
            DuplicateAccountError,
            AccountNotFoundError,
            InvalidAmountError,
            InsufficientFundsError,
            ConfigurationError,
        ):
            assert isinstance(cls("test"), BankLedgerError)

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account not found")
        assert str(err) == "Account not found"


class TestErrorKinds:
    """Each user-facing error carries exactly one kind."""

    def test_kinds(self) -> None:
        assert ValidationError("x").kind is ErrorKind.VALIDATION
        assert RequiredFieldError("x").kind is ErrorKind.VALIDATION
        assert NotANumberError("x").kind is ErrorKind.VALIDATION
        assert DuplicateAccountError("x").kind is ErrorKind.DUPLICATE_ACCOUNT
        assert AccountNotFoundError("x").kind is ErrorKind.NOT_FOUND
        assert InvalidAmountError("x").kind is ErrorKind.INVALID_AMOUNT
        assert InsufficientFundsError("x").kind is ErrorKind.INSUFFICIENT_FUNDS

    def test_configuration_error_has_no_kind(self) -> None:
        assert ConfigurationError("x").kind is None

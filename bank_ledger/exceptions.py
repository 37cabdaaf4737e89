"""Custom exception hierarchy for bank-ledger.

Every user-facing failure carries an ``ErrorKind`` so it can travel inside a
``Result`` and still be raised by ``Result.unwrap()``.
"""

from bank_ledger.result import ErrorKind


class BankLedgerError(Exception):
    """Base exception for all bank-ledger errors."""

    kind: ErrorKind | None = None


class ValidationError(BankLedgerError):
    """Raised when an input field is missing or malformed."""

    kind = ErrorKind.VALIDATION


class RequiredFieldError(ValidationError):
    """Raised when a required input field is blank."""


class NotANumberError(ValidationError):
    """Raised when a numeric input field cannot be parsed."""


class DuplicateAccountError(BankLedgerError):
    """Raised when an account number is already in use."""

    kind = ErrorKind.DUPLICATE_ACCOUNT


class AccountNotFoundError(BankLedgerError):
    """Raised when a referenced account does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidAmountError(BankLedgerError):
    """Raised when a deposit or withdrawal amount is zero or negative."""

    kind = ErrorKind.INVALID_AMOUNT


class InsufficientFundsError(BankLedgerError):
    """Raised when a withdrawal exceeds the available balance."""

    kind = ErrorKind.INSUFFICIENT_FUNDS


class ConfigurationError(BankLedgerError):
    """Raised when configuration is invalid or missing."""

"""Parsing of raw text input into typed ledger arguments.

Parse failures are reported with the same error taxonomy as the ledger
itself (``ValidationError`` and its ``RequiredFieldError`` and
``NotANumberError`` subclasses), so a caller can treat "bad text" and
"bad value" the same way.

Only ASCII digits are accepted. Digit-group underscores, non-ASCII digits
and the special values ``NaN`` and ``Infinity`` are all rejected.
"""

import re
from decimal import Decimal, InvalidOperation

from bank_ledger.exceptions import NotANumberError, RequiredFieldError, ValidationError
from bank_ledger.models import AccountType
from bank_ledger.money import MAX_AMOUNT
from bank_ledger.result import Result

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")
DECIMAL_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_account_number(text: str | None, field: str = "Account number") -> Result[int]:
    """Parse a positive whole account number."""
    if text is None or not text.strip():
        return Result.failure(RequiredFieldError(f"{field} is required"))
    text = text.strip()
    if not WHOLE_NUMBER.fullmatch(text):
        return Result.failure(NotANumberError(f"{field} must be a whole number"))
    number = int(text)
    if number <= 0:
        return Result.failure(ValidationError(f"{field} must be positive"))
    return Result.success(number)


def parse_amount(text: str | None, field: str = "Amount") -> Result[Decimal]:
    """Parse a decimal amount.

    Sign is not checked here; the account rejects zero and negative
    amounts with ``InvalidAmountError``. Amounts above ``MAX_AMOUNT`` are
    refused.
    """
    if text is None or not text.strip():
        return Result.failure(RequiredFieldError(f"{field} is required"))
    text = text.strip()
    if not DECIMAL_NUMBER.fullmatch(text):
        return Result.failure(NotANumberError(f"{field} must be a number"))
    try:
        amount = Decimal(text)
    except InvalidOperation:
        return Result.failure(NotANumberError(f"{field} must be a number"))
    if amount > MAX_AMOUNT:
        return Result.failure(NotANumberError(f"{field} must not exceed {MAX_AMOUNT}"))
    return Result.success(amount)


def parse_account_type(text: str | None) -> Result[AccountType]:
    """Parse ``Savings`` or ``Current`` (case-insensitive)."""
    if text is None or not text.strip():
        return Result.failure(RequiredFieldError("Account type is required"))
    try:
        return Result.success(AccountType.parse(text))
    except ValueError as exc:
        return Result.failure(ValidationError(str(exc)))

"""Account model for the ledger."""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Callable

from bank_ledger.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    ValidationError,
)
from bank_ledger.models.enums import AccountType, EntryKind
from bank_ledger.models.transaction import DEFAULT_TIMESTAMP_FORMAT, TransactionEntry
from bank_ledger.money import format_amount, from_minor_units, to_minor_units
from bank_ledger.result import Result

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Set once on construction; the ledger keys accounts by number.
IDENTITY_FIELDS = frozenset({"account_number", "name", "account_type"})


@dataclass
class Account:
    """Bank account with a balance and an append-only transaction log.

    Number, name and type are fixed once the account exists. The balance
    is kept in integer minor units. Every successful deposit or
    withdrawal appends exactly one ``TransactionEntry``; failed operations
    leave both the balance and the log untouched.
    """

    account_number: int
    name: str
    account_type: AccountType
    created_at: datetime
    balance_minor: int = 0
    transactions: list[TransactionEntry] = field(default_factory=list)
    clock: Clock = field(default=datetime.now, repr=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name in IDENTITY_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    @classmethod
    def open(
        cls,
        account_number: int,
        name: str,
        account_type: AccountType | str,
        clock: Clock = datetime.now,
    ) -> Account:
        """Open a new account with a zero balance.

        Parameters
        ----------
        account_number : int
            Identity key, validated by the ledger.
        name : str
            Holder name; surrounding whitespace is stripped.
        account_type : AccountType | str
            Savings or Current.
        clock : Callable[[], datetime]
            Timestamp source for log entries.

        Returns
        -------
        Account
            Account holding one "opened" log entry.

        Raises
        ------
        ValidationError
            If the name is blank.
        """
        name = name.strip()
        if not name:
            raise ValidationError("Name is required")

        now = clock()
        account = cls(
            account_number=account_number,
            name=name,
            account_type=AccountType.parse(account_type),
            created_at=now,
            clock=clock,
        )
        account._append(
            EntryKind.OPENED,
            0,
            f"Account opened with balance {format_amount(0)}",
            now,
        )
        return account

    @property
    def balance(self) -> Decimal:
        """Current balance as a two-digit ``Decimal``."""
        return from_minor_units(self.balance_minor)

    def deposit(self, amount: Decimal | int | str) -> Result[Account]:
        """Add ``amount`` to the balance."""
        minor = _positive_minor_units(amount)
        if not minor.ok:
            return Result.failure(minor.error)

        self.balance_minor += minor.value
        self._append(
            EntryKind.DEPOSIT,
            minor.value,
            f"Deposited {format_amount(minor.value)} | New Balance {format_amount(self.balance_minor)}",
        )
        logger.debug(
            "Account %d: deposited %s",
            self.account_number,
            format_amount(minor.value),
            extra=self._log_context("deposit", minor.value),
        )
        return Result.success(self)

    def withdraw(self, amount: Decimal | int | str) -> Result[Account]:
        """Take ``amount`` from the balance if funds allow."""
        minor = _positive_minor_units(amount)
        if not minor.ok:
            return Result.failure(minor.error)
        if minor.value > self.balance_minor:
            return Result.failure(InsufficientFundsError("Insufficient balance"))

        self.balance_minor -= minor.value
        self._append(
            EntryKind.WITHDRAWAL,
            minor.value,
            f"Withdrew {format_amount(minor.value)} | New Balance {format_amount(self.balance_minor)}",
        )
        logger.debug(
            "Account %d: withdrew %s",
            self.account_number,
            format_amount(minor.value),
            extra=self._log_context("withdraw", minor.value),
        )
        return Result.success(self)

    def log_lines(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> list[str]:
        """Formatted transaction log, oldest first."""
        return [entry.format_line(timestamp_format) for entry in self.transactions]

    def _log_context(self, operation: str, amount_minor: int) -> dict[str, object]:
        return {
            "operation": operation,
            "account_number": self.account_number,
            "amount": format_amount(amount_minor),
        }

    def _append(
        self,
        kind: EntryKind,
        amount_minor: int,
        description: str,
        timestamp: datetime | None = None,
    ) -> None:
        self.transactions.append(
            TransactionEntry(
                timestamp=timestamp or self.clock(),
                kind=kind,
                amount_minor=amount_minor,
                balance_minor=self.balance_minor,
                description=description,
            )
        )


def _positive_minor_units(amount: Decimal | int | str) -> Result[int]:
    try:
        minor = to_minor_units(amount)
    except ValueError:
        return Result.failure(InvalidAmountError("Amount must be a number"))
    if minor <= 0:
        return Result.failure(InvalidAmountError("Amount must be positive"))
    return Result.success(minor)

"""Tagged success/error values returned by ledger operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from bank_ledger.exceptions import BankLedgerError

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    DUPLICATE_ACCOUNT = "DUPLICATE_ACCOUNT"
    NOT_FOUND = "NOT_FOUND"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a ledger operation: either a value or exactly one error.

    Expected failures (bad input, unknown account, overdraft) are returned
    rather than raised so callers handle each ``ErrorKind`` explicitly.
    ``unwrap()`` converts back to exception style when that reads better.
    """

    value: T | None = None
    error: BankLedgerError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        """Wrap a successful value."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: BankLedgerError) -> Result[T]:
        """Wrap a failure."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """Error kind of a failed result, ``None`` on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> T:
        """Return the value or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

"""In-memory account ledger keyed by account number."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterator

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankLedgerError,
    DuplicateAccountError,
    ValidationError,
)
from bank_ledger.models import Account, AccountType
from bank_ledger.models.account import Clock
from bank_ledger.money import from_minor_units
from bank_ledger.result import Result

logger = logging.getLogger(__name__)


@dataclass
class AccountLedger:
    """In-memory store of accounts with uniqueness and existence checks.

    Not thread-safe: callers must serialize access (one lock over the
    ledger is enough) if the ledger is ever shared between threads.
    """

    accounts: dict[int, Account] = field(default_factory=dict)
    clock: Clock = field(default=datetime.now, repr=False)

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self.accounts

    def __iter__(self) -> Iterator[Account]:
        return iter(self.accounts.values())

    def create_account(
        self,
        account_number: int,
        name: str,
        account_type: AccountType | str,
    ) -> Result[Account]:
        """Open a new account and add it to the ledger.

        Parameters
        ----------
        account_number : int
            Positive, unused account number.
        name : str
            Holder name, must be non-blank.
        account_type : AccountType | str
            Savings or Current.

        Returns
        -------
        Result[Account]
            The new account, or a ``ValidationError`` or
            ``DuplicateAccountError`` failure.
        """
        if not isinstance(name, str) or not name.strip():
            return self._reject("create", account_number, ValidationError("Name is required"))

        if (
            isinstance(account_number, bool)
            or not isinstance(account_number, int)
            or account_number <= 0
        ):
            return self._reject(
                "create",
                account_number,
                ValidationError("Account number must be a positive whole number"),
            )

        try:
            kind = AccountType.parse(account_type)
        except ValueError as exc:
            return self._reject("create", account_number, ValidationError(str(exc)))

        if account_number in self.accounts:
            return self._reject("create", account_number, DuplicateAccountError("Account exists"))

        account = Account.open(account_number, name, kind, clock=self.clock)
        self.accounts[account_number] = account
        logger.info(
            "Created %s account %d for %s",
            kind.value,
            account_number,
            account.name,
            extra={"operation": "create", "account_number": account_number},
        )
        return Result.success(account)

    def find_account(self, account_number: int) -> Result[Account]:
        """Look up an account by number.

        The returned account is the ledger's own instance, not a copy.
        """
        account = self.accounts.get(account_number)
        if account is None:
            return Result.failure(AccountNotFoundError("Account not found"))
        return Result.success(account)

    def deposit(self, account_number: int, amount: Decimal | int | str) -> Result[Account]:
        """Deposit into the account with the given number."""
        found = self.find_account(account_number)
        if not found.ok:
            return self._reject("deposit", account_number, found.error)
        result = found.value.deposit(amount)
        if not result.ok:
            return self._reject("deposit", account_number, result.error)
        return result

    def withdraw(self, account_number: int, amount: Decimal | int | str) -> Result[Account]:
        """Withdraw from the account with the given number."""
        found = self.find_account(account_number)
        if not found.ok:
            return self._reject("withdraw", account_number, found.error)
        result = found.value.withdraw(amount)
        if not result.ok:
            return self._reject("withdraw", account_number, result.error)
        return result

    def search(self, keyword: str) -> Iterator[Account]:
        """Lazily yield accounts whose number or name contains ``keyword``.

        Number matching is on the decimal text of the account number; name
        matching ignores case. The keyword is used as given (not trimmed)
        and an empty keyword matches every account. Accounts come out in
        the order they were created.
        """
        needle = keyword.lower()
        for account in self.accounts.values():
            if keyword in str(account.account_number) or needle in account.name.lower():
                yield account

    def list(self) -> list[Account]:
        """Return all accounts in creation order."""
        return list(self.search(""))

    def summary(self) -> dict[str, Any]:
        """Return summary counts and totals for the ledger."""
        total_minor = sum(a.balance_minor for a in self.accounts.values())
        by_type = {kind.value: 0 for kind in AccountType}
        for account in self.accounts.values():
            by_type[account.account_type.value] += 1
        return {
            "accounts": len(self.accounts),
            "transactions": sum(len(a.transactions) for a in self.accounts.values()),
            "total_balance": from_minor_units(total_minor),
            "by_type": by_type,
        }

    @staticmethod
    def _reject(operation: str, account_number: Any, error: BankLedgerError) -> Result[Account]:
        logger.info(
            "Rejected %s: %s",
            operation,
            error,
            extra={
                "operation": operation,
                "account_number": account_number,
                "error_kind": error.kind.value if error.kind else None,
            },
        )
        return Result.failure(error)

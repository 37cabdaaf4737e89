"""Presentation controller between raw text input and the ledger.

``BankingSession`` plays the part of the form: it takes field text exactly
as typed, parses it, calls the ledger, and hands back either a message for
the user or the failed ``Result``. A failed action never changes the
session's filter or selection.
"""

import logging

from bank_ledger.config import DisplayConfig
from bank_ledger.models import Account
from bank_ledger.money import format_amount
from bank_ledger.parsing import parse_account_number, parse_account_type, parse_amount
from bank_ledger.result import Result
from bank_ledger.store import AccountLedger
from bank_ledger.views import AccountRow, account_rows, transaction_lines

logger = logging.getLogger(__name__)


class BankingSession:
    """Form-level actions over one explicit ``AccountLedger``."""

    def __init__(
        self,
        ledger: AccountLedger | None = None,
        display: DisplayConfig | None = None,
    ) -> None:
        self.ledger = ledger if ledger is not None else AccountLedger()
        self.display = display or DisplayConfig()
        self.keyword = ""
        self.selected: int | None = None

    def create_account(self, number_text: str, name_text: str, type_text: str) -> Result[str]:
        number = parse_account_number(number_text)
        if not number.ok:
            return Result.failure(number.error)
        account_type = parse_account_type(type_text)
        if not account_type.ok:
            return Result.failure(account_type.error)

        created = self.ledger.create_account(number.value, name_text, account_type.value)
        if not created.ok:
            return Result.failure(created.error)
        return Result.success("Account Created Successfully")

    def deposit(self, number_text: str, amount_text: str) -> Result[str]:
        return self._move_money("deposit", number_text, amount_text)

    def withdraw(self, number_text: str, amount_text: str) -> Result[str]:
        return self._move_money("withdraw", number_text, amount_text)

    def filter(self, keyword: str) -> list[AccountRow]:
        """Set the search keyword (used untrimmed) and return matching rows."""
        self.keyword = keyword
        return self.rows()

    def select(self, number_text: str) -> Result[list[str]]:
        """Select an account for the transaction panel."""
        number = parse_account_number(number_text)
        if not number.ok:
            return Result.failure(number.error)
        found = self.ledger.find_account(number.value)
        if not found.ok:
            return Result.failure(found.error)
        self.selected = number.value
        return Result.success(self.transactions())

    def clear(self) -> None:
        """Reset the search keyword and the selection."""
        self.keyword = ""
        self.selected = None

    def rows(self) -> list[AccountRow]:
        """Table rows for the current search keyword."""
        return account_rows(self.ledger.search(self.keyword), self.display.currency_symbol)

    def transactions(self) -> list[str]:
        """Log lines of the selected account, empty when nothing is selected."""
        account: Account | None = None
        if self.selected is not None:
            account = self.ledger.accounts.get(self.selected)
        return transaction_lines(account, self.display.timestamp_format)

    def _move_money(self, operation: str, number_text: str, amount_text: str) -> Result[str]:
        number = parse_account_number(number_text)
        if not number.ok:
            return Result.failure(number.error)
        amount = parse_amount(amount_text)
        if not amount.ok:
            return Result.failure(amount.error)

        if operation == "deposit":
            result = self.ledger.deposit(number.value, amount.value)
            verb = "Deposited"
        else:
            result = self.ledger.withdraw(number.value, amount.value)
            verb = "Withdrew"
        if not result.ok:
            return Result.failure(result.error)

        account = result.value
        logger.debug("Session %s on account %d", operation, account.account_number)
        symbol = self.display.currency_symbol
        return Result.success(
            f"{verb} {symbol}{format_amount(account.transactions[-1].amount_minor)}"
            f" | New Balance {symbol}{format_amount(account.balance_minor)}"
        )

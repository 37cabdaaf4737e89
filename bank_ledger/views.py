"""Rendering helpers: table rows and transaction log lines."""

from dataclasses import dataclass
from typing import Iterable

from bank_ledger.models import Account
from bank_ledger.models.transaction import DEFAULT_TIMESTAMP_FORMAT
from bank_ledger.money import format_currency

COLUMNS = ("Account No", "Name", "Type", "Balance")


@dataclass(frozen=True)
class AccountRow:
    """One row of the accounts table."""

    account_number: int
    name: str
    account_type: str
    balance: str

    def cells(self) -> tuple[str, str, str, str]:
        return (str(self.account_number), self.name, self.account_type, self.balance)


def account_row(account: Account, currency_symbol: str = "₹") -> AccountRow:
    """Table row for one account, balance formatted with the currency symbol."""
    return AccountRow(
        account_number=account.account_number,
        name=account.name,
        account_type=account.account_type.value,
        balance=format_currency(account.balance_minor, currency_symbol),
    )


def account_rows(accounts: Iterable[Account], currency_symbol: str = "₹") -> list[AccountRow]:
    """Build table rows in the order the accounts are given."""
    return [account_row(account, currency_symbol) for account in accounts]


def transaction_lines(
    account: Account | None,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> list[str]:
    """Formatted log lines for the selected account (empty if none)."""
    if account is None:
        return []
    return account.log_lines(timestamp_format)


def render_table(rows: list[AccountRow]) -> str:
    """Render rows as a fixed-width plain-text table."""
    cells = [COLUMNS] + [row.cells() for row in rows]
    widths = [max(len(r[i]) for r in cells) for i in range(len(COLUMNS))]

    def fmt(row: tuple[str, ...]) -> str:
        # balance column is right-aligned
        parts = [row[i].ljust(widths[i]) for i in range(len(row) - 1)]
        parts.append(row[-1].rjust(widths[-1]))
        return " | ".join(parts)

    lines = [fmt(COLUMNS), "-+-".join("-" * w for w in widths)]
    lines.extend(fmt(row.cells()) for row in rows)
    return "\n".join(lines)

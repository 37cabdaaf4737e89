"""Ledger domain models."""

from bank_ledger.models.account import Account
from bank_ledger.models.enums import AccountType, EntryKind
from bank_ledger.models.transaction import TransactionEntry

__all__ = [
    "Account",
    "AccountType",
    "EntryKind",
    "TransactionEntry",
]

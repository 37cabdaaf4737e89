"""In-memory banking ledger: accounts, deposits, withdrawals and audit logs."""

from bank_ledger.models import Account, AccountType, EntryKind, TransactionEntry
from bank_ledger.result import ErrorKind, Result
from bank_ledger.store import AccountLedger

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountLedger",
    "AccountType",
    "EntryKind",
    "ErrorKind",
    "Result",
    "TransactionEntry",
    "__version__",
]

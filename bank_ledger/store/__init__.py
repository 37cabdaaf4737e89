"""In-memory account store."""

from bank_ledger.store.ledger import AccountLedger

__all__ = ["AccountLedger"]

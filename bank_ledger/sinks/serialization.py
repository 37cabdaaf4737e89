"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_ledger.models import Account, TransactionEntry
from bank_ledger.money import format_amount


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, TransactionEntry):
        return entry_to_dict(obj)
    elif is_dataclass(obj):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert dataclass to dict with proper serialization.

    Only fields that take part in ``repr`` are kept, which drops
    callables such as clocks.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj) if f.repr}


def entry_to_dict(entry: TransactionEntry) -> dict:
    """Serialize a log entry with amounts as two-digit strings."""
    return {
        "timestamp": entry.timestamp.isoformat(),
        "kind": entry.kind.value,
        "amount": format_amount(entry.amount_minor),
        "balance": format_amount(entry.balance_minor),
        "description": entry.description,
    }


def account_to_dict(account: Account, include_transactions: bool = True) -> dict:
    """Serialize an account snapshot."""
    data = {
        "account_number": account.account_number,
        "name": account.name,
        "account_type": account.account_type.value,
        "balance": format_amount(account.balance_minor),
        "created_at": account.created_at.isoformat(),
    }
    if include_transactions:
        data["transactions"] = [entry_to_dict(e) for e in account.transactions]
    return data


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value

"""Enumeration types for ledger entities."""

from enum import Enum


class AccountType(str, Enum):
    SAVINGS = "Savings"
    CURRENT = "Current"

    @classmethod
    def parse(cls, value: "AccountType | str") -> "AccountType":
        """Look up a type by value or name, case-insensitively.

        Raises
        ------
        ValueError
            If no account type matches.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value.lower(), member.name.lower()):
                return member
        raise ValueError(f"Unknown account type: {value!r}")


class EntryKind(str, Enum):
    OPENED = "OPENED"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"

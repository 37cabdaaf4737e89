"""Demo data generators."""

from bank_ledger.generators.account import AccountGenerator, AccountProfile

__all__ = ["AccountGenerator", "AccountProfile"]

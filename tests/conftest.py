"""Pytest configuration and fixtures."""

import itertools
from datetime import datetime, timedelta
from typing import Callable

import pytest

from bank_ledger.models import AccountType
from bank_ledger.store import AccountLedger


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that advances one second per call from 2024-01-15 09:30:00."""
    start = datetime(2024, 1, 15, 9, 30, 0)
    ticks = itertools.count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def ledger(fixed_clock: Callable[[], datetime]) -> AccountLedger:
    """Create a fresh, empty ledger for each test."""
    return AccountLedger(clock=fixed_clock)


@pytest.fixture
def populated_ledger(ledger: AccountLedger) -> AccountLedger:
    """Ledger holding (1, Alice, Savings) and (2, Bob, Current)."""
    ledger.create_account(1, "Alice", AccountType.SAVINGS).unwrap()
    ledger.create_account(2, "Bob", AccountType.CURRENT).unwrap()
    return ledger

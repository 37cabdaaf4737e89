"""Pre-built ledger scenarios."""

from bank_ledger.scenarios.demo import DemoLedgerScenario

__all__ = ["DemoLedgerScenario"]

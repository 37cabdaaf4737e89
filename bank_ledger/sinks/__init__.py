"""Output sinks for exporting ledger snapshots."""

from bank_ledger.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]

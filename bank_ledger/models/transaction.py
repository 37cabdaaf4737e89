"""Transaction log entry model."""

from dataclasses import dataclass
from datetime import datetime

from bank_ledger.models.enums import EntryKind

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class TransactionEntry:
    """One immutable, timestamped record of a balance-changing event."""

    timestamp: datetime
    kind: EntryKind
    amount_minor: int
    balance_minor: int  # balance after this entry
    description: str

    def format_line(self, timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
        """Render as ``"[timestamp] description"``."""
        return f"[{self.timestamp.strftime(timestamp_format)}] {self.description}"

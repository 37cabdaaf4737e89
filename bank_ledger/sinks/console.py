"""Console sink for exporting ledger snapshots."""

import json
import sys
from typing import Any, TextIO

from bank_ledger.sinks.serialization import serialize_value, to_dict


class ConsoleSink:
    """Output records as JSON to a text stream (stdout by default)."""

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        stream : TextIO | None
            Destination stream; ``sys.stdout`` at write time if omitted.
        """
        self.pretty = pretty
        self.max_records = max_records
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records."""
        self._print(f"\n{'='*60}")
        self._print(f"Entity: {entity_type} ({len(records)} records)")
        self._print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            self._print(self._dumps(to_dict(record)))

        if self.max_records and len(records) > self.max_records:
            self._print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def write_summary(self, summary: dict[str, Any]) -> None:
        """Write a single summary mapping."""
        self._print(self._dumps(serialize_value(summary)))

    def close(self) -> None:
        """Print summary and close."""
        self._print(f"\n{'='*60}")
        self._print("Console Sink Summary")
        self._print("=" * 60)
        for entity_type, count in self._counts.items():
            self._print(f"  {entity_type}: {count} records")

    def _dumps(self, data: Any) -> str:
        if self.pretty:
            return json.dumps(data, indent=2, ensure_ascii=False, default=str)
        return json.dumps(data, ensure_ascii=False, default=str)

    def _print(self, text: str) -> None:
        print(text, file=self.stream or sys.stdout)

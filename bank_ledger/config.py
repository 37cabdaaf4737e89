"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError
from bank_ledger.models.transaction import DEFAULT_TIMESTAMP_FORMAT


@dataclass
class DisplayConfig:
    """How amounts and timestamps are rendered."""

    currency_symbol: str = "₹"
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT


@dataclass
class DemoConfig:
    """Demo accounts seeded into a fresh ledger at startup."""

    num_accounts: int = 0
    activity_per_account: int = 5
    locale: str = "en_IN"


@dataclass
class BankLedgerConfig:
    """Main configuration for bank-ledger."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "BankLedgerConfig":
        """Create config from environment variables."""
        display = DisplayConfig(
            currency_symbol=os.getenv("BANK_CURRENCY_SYMBOL", "₹"),
            timestamp_format=os.getenv("BANK_TIMESTAMP_FORMAT", DEFAULT_TIMESTAMP_FORMAT),
        )

        demo = DemoConfig(
            num_accounts=_int_env("DEMO_ACCOUNTS", 0),
            activity_per_account=_int_env("DEMO_ACTIVITY", 5),
            locale=os.getenv("DEMO_LOCALE", "en_IN"),
        )

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            display=display,
            demo=demo,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _int_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc

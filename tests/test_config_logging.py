"""Tests for config and logging."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from bank_ledger.config import BankLedgerConfig, DemoConfig, DisplayConfig
from bank_ledger.exceptions import ConfigurationError
from bank_ledger.logging import JsonFormatter, get_logger, setup_logging
from bank_ledger.store import AccountLedger


class TestDisplayConfig:
    """Tests for DisplayConfig."""

    def test_default_values(self) -> None:
        config = DisplayConfig()

        assert config.currency_symbol == "₹"
        assert config.timestamp_format == "%Y-%m-%d %H:%M:%S"


class TestDemoConfig:
    """Tests for DemoConfig."""

    def test_default_values(self) -> None:
        config = DemoConfig()

        assert config.num_accounts == 0
        assert config.activity_per_account == 5
        assert config.locale == "en_IN"


class TestBankLedgerConfig:
    """Tests for BankLedgerConfig."""

    def test_default_values(self) -> None:
        config = BankLedgerConfig()

        assert isinstance(config.display, DisplayConfig)
        assert isinstance(config.demo, DemoConfig)
        assert config.seed is None
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = BankLedgerConfig.from_env()

        assert config == BankLedgerConfig()

    def test_from_env_custom(self) -> None:
        env = {
            "BANK_CURRENCY_SYMBOL": "$",
            "BANK_TIMESTAMP_FORMAT": "%H:%M",
            "DEMO_ACCOUNTS": "12",
            "DEMO_ACTIVITY": "3",
            "DEMO_LOCALE": "en_US",
            "SEED": "99",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            config = BankLedgerConfig.from_env()

        assert config.display.currency_symbol == "$"
        assert config.display.timestamp_format == "%H:%M"
        assert config.demo.num_accounts == 12
        assert config.demo.activity_per_account == 3
        assert config.demo.locale == "en_US"
        assert config.seed == 99
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    @pytest.mark.parametrize("name", ["DEMO_ACCOUNTS", "DEMO_ACTIVITY", "SEED"])
    def test_from_env_bad_integer(self, name: str) -> None:
        with patch.dict(os.environ, {name: "lots"}, clear=True):
            with pytest.raises(ConfigurationError, match=f"{name} must be an integer"):
                BankLedgerConfig.from_env()

    def test_from_env_bad_log_format(self) -> None:
        with patch.dict(os.environ, {"LOG_FORMAT": "xml"}, clear=True):
            with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
                BankLedgerConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        setup_logging()

        assert logging.getLogger("bank_ledger").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in logging.getLogger().handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_external_loggers_quieted(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs: object) -> logging.LogRecord:
        defaults: dict = {
            "name": "test.logger",
            "level": logging.INFO,
            "pathname": "/path/to/file.py",
            "lineno": 42,
            "msg": "Created %s account %d",
            "args": ("Savings", 100),
            "exc_info": None,
        }
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Created Savings account 100"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info))
        )

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_ledger_context(self) -> None:
        record = self._record()
        record.operation = "create"
        record.account_number = 100

        data = json.loads(JsonFormatter().format(record))

        assert data["operation"] == "create"
        assert data["account_number"] == 100
        assert "error_kind" not in data

    def test_format_uses_record_time(self) -> None:
        record = self._record()
        record.created = 0.0

        data = json.loads(JsonFormatter().format(record))

        assert data["timestamp"] == "1970-01-01T00:00:00+00:00"

    def test_ledger_rejection_emits_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="INFO", format_type="json")
        ledger = AccountLedger()
        ledger.create_account(7, "Raj", "Current")

        ledger.withdraw(7, "50")

        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        assert lines[0]["operation"] == "create"
        assert lines[-1]["message"] == "Rejected withdraw: Insufficient balance"
        assert lines[-1]["operation"] == "withdraw"
        assert lines[-1]["account_number"] == 7
        assert lines[-1]["error_kind"] == "INSUFFICIENT_FUNDS"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("bank_ledger.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "bank_ledger.test"
        assert get_logger("bank_ledger.test") is logger


class TestPackageInit:
    """Tests for bank_ledger __init__.py."""

    def test_version_exported(self) -> None:
        from bank_ledger import __version__

        assert isinstance(__version__, str)

    def test_public_names(self) -> None:
        import bank_ledger

        for name in bank_ledger.__all__:
            assert hasattr(bank_ledger, name)

"""Tests for fixed-point money helpers."""

from decimal import Decimal

import pytest

from bank_ledger.money import (
    format_amount,
    format_currency,
    from_minor_units,
    to_decimal,
    to_minor_units,
)


class TestToDecimal:
    """Tests for amount coercion."""

    def test_decimal_passthrough(self) -> None:
        assert to_decimal(Decimal("12.34")) == Decimal("12.34")

    def test_int_and_str(self) -> None:
        assert to_decimal(5) == Decimal("5.00")
        assert to_decimal("0.1") == Decimal("0.10")

    def test_float_goes_through_str(self) -> None:
        assert to_decimal(0.1) == Decimal("0.10")

    def test_rounds_half_up_to_cents(self) -> None:
        assert to_decimal("0.005") == Decimal("0.01")
        assert to_decimal("0.004") == Decimal("0.00")
        assert to_decimal("2.675") == Decimal("2.68")

    @pytest.mark.parametrize("bad", ["abc", "", "NaN", "Infinity", "-Infinity", True, None])
    def test_rejects_non_amounts(self, bad: object) -> None:
        with pytest.raises(ValueError):
            to_decimal(bad)  # type: ignore[arg-type]

    def test_rejects_amounts_too_large_for_cents(self) -> None:
        with pytest.raises(ValueError):
            to_decimal("1e30")
        with pytest.raises(ValueError):
            to_decimal("99999999999999999999999999999")


class TestMinorUnits:
    """Tests for minor unit conversion and formatting."""

    def test_to_minor_units(self) -> None:
        assert to_minor_units("500.00") == 50000
        assert to_minor_units("0.10") == 10
        assert to_minor_units(-5) == -500

    def test_from_minor_units(self) -> None:
        assert from_minor_units(30000) == Decimal("300.00")
        assert str(from_minor_units(10)) == "0.10"

    def test_format_amount(self) -> None:
        assert format_amount(0) == "0.00"
        assert format_amount(123450) == "1234.50"
        assert format_amount(-50) == "-0.50"

    def test_format_currency(self) -> None:
        assert format_currency(30000) == "₹300.00"
        assert format_currency(30000, "$") == "$300.00"

    def test_no_drift_over_many_cycles(self) -> None:
        minor = 0
        for _ in range(1000):
            minor += to_minor_units("0.10")
            minor -= to_minor_units("0.03")
        assert format_amount(minor) == "70.00"

    def test_large_balances_stay_exact(self) -> None:
        minor = 10**30 + 5

        assert from_minor_units(minor) == Decimal("10000000000000000000000000000.05")
        assert format_amount(minor) == "10000000000000000000000000000.05"

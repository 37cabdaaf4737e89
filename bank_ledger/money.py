"""Fixed-point money helpers.

Balances are held as integer minor units (paise, cents) so repeated
deposit/withdraw cycles never drift. ``Decimal`` is only used at the edges.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MINOR_UNITS_PER_MAJOR = 100
CENT = Decimal("0.01")

# Largest amount accepted from text input.
MAX_AMOUNT = Decimal("1000000000000.00")


def to_decimal(amount: Decimal | int | str | float) -> Decimal:
    """Coerce an amount to ``Decimal`` rounded to two fractional digits.

    Raises
    ------
    ValueError
        If the amount is a bool, not a number, not finite, or too large
        to hold two fractional digits.
    """
    if isinstance(amount, bool):
        raise ValueError(f"Not an amount: {amount!r}")
    if isinstance(amount, float):
        amount = str(amount)
    try:
        value = Decimal(amount)
        if value.is_finite():
            value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Not an amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Not an amount: {amount!r}")
    return value


def to_minor_units(amount: Decimal | int | str | float) -> int:
    """Convert an amount to integer minor units."""
    return int(to_decimal(amount) * MINOR_UNITS_PER_MAJOR)


def from_minor_units(minor: int) -> Decimal:
    """Convert integer minor units back to a two-digit ``Decimal``.

    Built from the digits directly, so large balances stay exact.
    """
    sign, digits, _ = Decimal(minor).as_tuple()
    return Decimal((sign, digits, -2))


def format_amount(minor: int) -> str:
    """Render minor units as ``"1234.50"``."""
    return str(from_minor_units(minor))


def format_currency(minor: int, symbol: str = "₹") -> str:
    """Render minor units with a currency symbol, e.g. ``"₹1234.50"``."""
    return f"{symbol}{format_amount(minor)}"

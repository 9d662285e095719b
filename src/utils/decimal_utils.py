"""Helpers for Decimal normalization and formatting."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENTS = Decimal("0.01")
HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``
    instead of its binary expansion.

    Args:
        value: Raw numeric value from JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid numeric value: {value!r}")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid numeric value: {value!r}") from exc


def format_two_places(value: Decimal) -> str:
    """Return the value rounded half-up to two decimal places.

    Args:
        value: Amount or percentage to format.

    Returns:
        str: Plain string such as ``"25.00"``.
    """
    return str(value.quantize(CENTS, rounding=ROUND_HALF_UP))


def percentage_of(part: Decimal, whole: Decimal) -> str:
    """Return ``part / whole * 100`` formatted to two places.

    Args:
        part: Numerator.
        whole: Denominator; zero or negative yields ``"0.00"``.

    Returns:
        str: Percentage string, never clamped.
    """
    if whole <= 0:
        return "0.00"
    return format_two_places(part / whole * HUNDRED)


__all__ = [
    "CENTS",
    "HUNDRED",
    "coerce_decimal",
    "format_two_places",
    "percentage_of",
]

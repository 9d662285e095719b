"""Display formatting shared by the report renderers and the UI."""

from decimal import Decimal

from src.domain.constants import MONTH_NAMES
from src.utils.decimal_utils import format_two_places


def format_amount(value: Decimal) -> str:
    """Return the plain two-decimal amount used in CSV cells."""
    return format_two_places(value)


def format_brl(value: Decimal) -> str:
    """Format a value as Brazilian currency, e.g. ``R$ 1.234,56``."""
    plain = f"{Decimal(format_two_places(value)):,.2f}"
    localized = plain.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {localized}"


def month_name(month: int) -> str:
    """Return the Portuguese month name for a 1-12 month."""
    return MONTH_NAMES[month - 1]


__all__ = ["format_amount", "format_brl", "month_name"]

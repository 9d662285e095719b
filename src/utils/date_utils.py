"""Calendar date helpers.

Dates coming from the API are either plain ``YYYY-MM-DD`` strings or ISO
timestamps produced by browsers (``2024-01-31T00:00:00.000Z``). Both are
read as local calendar dates: only the date part is kept, so a value is
never shifted across a day boundary by a timezone conversion.
"""

from datetime import date, datetime


def parse_calendar_date(value) -> date:
    """Parse a calendar date from a date, datetime or ISO string.

    Args:
        value: Raw date value.

    Returns:
        date: Calendar date using the value's own year/month/day fields.

    Raises:
        ValueError: If the value is empty or not ISO formatted.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date value: {value!r}")
    return date.fromisoformat(value.strip()[:10])


def parse_timestamp(value) -> datetime | None:
    """Parse an ISO timestamp, accepting a trailing ``Z``.

    Args:
        value: Raw timestamp value or None.

    Returns:
        datetime | None: Parsed timestamp, or None for empty values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raw = str(value).strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    return datetime.fromisoformat(raw)


def shift_month(year: int, month: int, months_back: int) -> tuple[int, int]:
    """Return the (year, month) that lies ``months_back`` months earlier.

    Args:
        year: Reference year.
        month: Reference month (1-12).
        months_back: Number of calendar months to go back.

    Returns:
        tuple[int, int]: Target year and month (1-12).
    """
    index = year * 12 + (month - 1) - months_back
    return index // 12, index % 12 + 1


__all__ = ["parse_calendar_date", "parse_timestamp", "shift_month"]

"""Period aggregation over transactions."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.constants import MONTH_ABBREVIATIONS, TRAILING_MONTHS
from src.domain.models import MonthlyStats, Transaction, TransactionType, TrendPoint
from src.utils.date_utils import shift_month


def in_period(transaction: Transaction, month: int, year: int) -> bool:
    """Return True when the transaction falls in the calendar month.

    Args:
        transaction: Transaction to test.
        month: Calendar month, 1-12.
        year: Calendar year.

    Returns:
        bool: True on an exact month and year match.
    """
    return transaction.date.month == month and transaction.date.year == year


def period_transactions(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> list[Transaction]:
    """Return transactions of the period, preserving input order."""
    return [t for t in transactions if in_period(t, month, year)]


def monthly_stats(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
) -> MonthlyStats:
    """Compute income and expense totals for one month.

    Transfers move money between accounts and count as neither.

    Args:
        transactions: Transactions to aggregate.
        month: Calendar month, 1-12.
        year: Calendar year.

    Returns:
        MonthlyStats: Totals and counts for the period.
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    count_income = 0
    count_expense = 0
    for transaction in period_transactions(transactions, month, year):
        if transaction.type == TransactionType.INCOME:
            total_income += transaction.value
            count_income += 1
        elif transaction.type == TransactionType.EXPENSE:
            total_expense += transaction.value
            count_expense += 1
    return MonthlyStats(
        total_income=total_income,
        total_expense=total_expense,
        net_balance=total_income - total_expense,
        count_income=count_income,
        count_expense=count_expense,
    )


def category_breakdown(
    transactions: Iterable[Transaction],
    month: int,
    year: int,
    transaction_type: TransactionType,
) -> dict[str, Decimal]:
    """Sum values per category for one type and month.

    Returns:
        dict[str, Decimal]: Totals keyed by category, in first-seen order.
    """
    totals: dict[str, Decimal] = {}
    for transaction in period_transactions(transactions, month, year):
        if transaction.type != transaction_type:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, Decimal("0")) + transaction.value
        )
    return totals


def trailing_series(
    transactions: list[Transaction],
    today: date,
    months: int = TRAILING_MONTHS,
) -> list[TrendPoint]:
    """Return income/expense points for the last months, oldest first.

    Args:
        transactions: Every known transaction.
        today: Reference date; its month is the last point.
        months: Number of points.

    Returns:
        list[TrendPoint]: One point per calendar month.
    """
    points = []
    for months_back in range(months - 1, -1, -1):
        year, month = shift_month(today.year, today.month, months_back)
        stats = monthly_stats(transactions, month, year)
        points.append(
            TrendPoint(
                label=MONTH_ABBREVIATIONS[month - 1],
                month=month,
                year=year,
                income=stats.total_income,
                expense=stats.total_expense,
            )
        )
    return points


__all__ = [
    "in_period",
    "period_transactions",
    "monthly_stats",
    "category_breakdown",
    "trailing_series",
]

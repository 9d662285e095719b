"""Monthly financial statement builder."""

from datetime import date
from decimal import Decimal

from src.domain.constants import OFFERINGS_CATEGORY, TITHES_CATEGORY
from src.domain.models import (
    AppData,
    MonthlyStatement,
    Transaction,
    TransactionType,
)
from src.domain.services.periods import category_breakdown, period_transactions


def _signed_value(transaction: Transaction) -> Decimal:
    # Only income adds; transfers count as outflows like expenses.
    if transaction.type == TransactionType.INCOME:
        return transaction.value
    return -transaction.value


def opening_balance(data: AppData, month: int, year: int) -> Decimal:
    """Return the consolidated balance before the 1st of the period.

    Args:
        data: Current snapshot.
        month: Calendar month, 1-12.
        year: Calendar year.

    Returns:
        Decimal: Initial balances plus prior income minus every other
            movement before the period, transfers included.
    """
    period_start = date(year, month, 1)
    balance = sum(
        (account.initial_balance for account in data.accounts),
        Decimal("0"),
    )
    for transaction in data.transactions:
        if transaction.date < period_start:
            balance += _signed_value(transaction)
    return balance


def _total(transactions: list[Transaction]) -> Decimal:
    return sum((t.value for t in transactions), Decimal("0"))


def build_monthly_statement(
    data: AppData,
    month: int,
    year: int,
) -> MonthlyStatement:
    """Build the statement for one calendar month.

    Args:
        data: Current snapshot.
        month: Calendar month, 1-12.
        year: Calendar year.

    Returns:
        MonthlyStatement: Partitioned entries, totals and balances.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month: {month}")
    in_month = period_transactions(data.transactions, month, year)
    income = [t for t in in_month if t.type == TransactionType.INCOME]
    expenses = [t for t in in_month if t.type == TransactionType.EXPENSE]
    tithes = [t for t in income if t.category == TITHES_CATEGORY]
    offerings = [t for t in income if t.category == OFFERINGS_CATEGORY]
    other_income = [
        t
        for t in income
        if t.category not in (TITHES_CATEGORY, OFFERINGS_CATEGORY)
    ]
    total_income = _total(income)
    total_expense = _total(expenses)
    opening = opening_balance(data, month, year)
    period_net = total_income - total_expense
    return MonthlyStatement(
        month=month,
        year=year,
        tithes=tithes,
        offerings=offerings,
        other_income=other_income,
        expenses=expenses,
        total_tithes=_total(tithes),
        total_offerings=_total(offerings),
        total_other_income=_total(other_income),
        total_income=total_income,
        total_expense=total_expense,
        opening_balance=opening,
        period_net=period_net,
        closing_balance=opening + period_net,
        income_by_category=category_breakdown(
            in_month, month, year, TransactionType.INCOME
        ),
        expense_by_category=category_breakdown(
            in_month, month, year, TransactionType.EXPENSE
        ),
        transaction_count=len(in_month),
    )


def available_years(transactions: list[Transaction], today: date) -> list[int]:
    """Return the years offered by the report period selector.

    Range runs from the oldest transaction year to one year after the
    later of the current year and the newest transaction year.
    """
    if not transactions:
        return [today.year]
    years = [t.date.year for t in transactions]
    last = max(today.year, max(years)) + 1
    return list(range(min(years), last + 1))


__all__ = ["opening_balance", "build_monthly_statement", "available_years"]

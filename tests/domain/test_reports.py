"""Tests for the monthly statement builder."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.models import AppData, TransactionType
from src.domain.services.reports import (
    available_years,
    build_monthly_statement,
    opening_balance,
)


def _snapshot(make_account, make_tx):
    return AppData(
        accounts=[make_account("a", "1000"), make_account("b", "500")],
        transactions=[
            make_tx(TransactionType.INCOME, "300", date(2024, 2, 5), tx_id="p1"),
            make_tx(TransactionType.EXPENSE, "100", date(2024, 2, 9), tx_id="p2"),
            make_tx(
                TransactionType.TRANSFER,
                "250",
                date(2024, 2, 10),
                account_id="a",
                to_account_id="b",
                category="Transferência",
                tx_id="p3",
            ),
            make_tx(
                TransactionType.INCOME,
                "400",
                date(2024, 3, 3),
                category="Dízimos",
                description="João",
                tx_id="m1",
            ),
            make_tx(
                TransactionType.INCOME,
                "120",
                date(2024, 3, 10),
                category="Ofertas",
                description="Culto",
                tx_id="m2",
            ),
            make_tx(
                TransactionType.INCOME,
                "80",
                date(2024, 3, 11),
                category="Eventos",
                description="Bazar",
                tx_id="m3",
            ),
            make_tx(
                TransactionType.EXPENSE,
                "150",
                date(2024, 3, 15),
                category="Luz",
                description="Conta de luz",
                tx_id="m4",
            ),
            make_tx(TransactionType.INCOME, "999", date(2024, 4, 1), tx_id="n1"),
        ],
    )


def test_opening_balance_includes_history_before_period(make_account, make_tx):
    """Opening balance is initial balances plus prior income minus outflows."""
    data = _snapshot(make_account, make_tx)

    assert opening_balance(data, 3, 2024) == Decimal("1450")
    assert opening_balance(data, 1, 2024) == Decimal("1500")



def test_opening_balance_subtracts_prior_transfers(make_account, make_tx):
    """A transfer before the period lowers the opening balance like an expense."""
    data = AppData(
        accounts=[make_account("a", "1000"), make_account("b", "0")],
        transactions=[
            make_tx(
                TransactionType.TRANSFER,
                "250",
                date(2024, 2, 10),
                account_id="a",
                to_account_id="b",
                category="Transferência",
            ),
        ],
    )

    assert opening_balance(data, 3, 2024) == Decimal("750")
    assert opening_balance(data, 2, 2024) == Decimal("1000")

def test_statement_partitions_income(make_account, make_tx):
    """Income splits into tithes, offerings and the rest."""
    statement = build_monthly_statement(_snapshot(make_account, make_tx), 3, 2024)

    assert [t.id for t in statement.tithes] == ["m1"]
    assert [t.id for t in statement.offerings] == ["m2"]
    assert [t.id for t in statement.other_income] == ["m3"]
    assert [t.id for t in statement.expenses] == ["m4"]
    assert statement.total_income == (
        statement.total_tithes
        + statement.total_offerings
        + statement.total_other_income
    )
    assert statement.transaction_count == 4


def test_statement_balances_chain(make_account, make_tx):
    """Closing balance equals opening plus the period net."""
    statement = build_monthly_statement(_snapshot(make_account, make_tx), 3, 2024)

    assert statement.opening_balance == Decimal("1450")
    assert statement.period_net == Decimal("450")
    assert statement.closing_balance == Decimal("1900")
    assert statement.income_by_category == {
        "Dízimos": Decimal("400"),
        "Ofertas": Decimal("120"),
        "Eventos": Decimal("80"),
    }
    assert statement.expense_by_category == {"Luz": Decimal("150")}


def test_next_month_opens_with_previous_closing(make_account, make_tx):
    """Consecutive statements chain closing into opening."""
    data = _snapshot(make_account, make_tx)

    march = build_monthly_statement(data, 3, 2024)
    april = build_monthly_statement(data, 4, 2024)

    assert april.opening_balance == march.closing_balance


def test_empty_month_statement(make_account):
    """A month without transactions reports zeros and the opening balance."""
    data = AppData(accounts=[make_account("a", "42")])

    statement = build_monthly_statement(data, 6, 2024)

    assert statement.total_income == Decimal("0")
    assert statement.transaction_count == 0
    assert statement.closing_balance == Decimal("42")


def test_statement_rejects_invalid_month():
    """Months outside 1-12 are rejected."""
    with pytest.raises(ValueError):
        build_monthly_statement(AppData(), 13, 2024)


def test_available_years_spans_history(make_tx):
    """Years run from the oldest transaction to one after the newest."""
    txs = [make_tx(day=date(2021, 5, 1)), make_tx(day=date(2023, 1, 1))]

    assert available_years(txs, date(2024, 6, 1)) == [
        2021,
        2022,
        2023,
        2024,
        2025,
    ]
    assert available_years([], date(2024, 6, 1)) == [2024]

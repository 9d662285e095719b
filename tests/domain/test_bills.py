"""Tests for bill aggregation, urgency and payment."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.models import BillStatus, TransactionType, UrgencyLevel
from src.domain.services.bills import (
    bill_alerts,
    bucket_totals,
    build_bill_payment,
    classify_urgency,
    days_until_due,
    filter_by_status,
)


def test_bucket_totals_sum_per_status(make_bill):
    """Totals split by stored status and add up to the overall sum."""
    bills = [
        make_bill("1", "100", status=BillStatus.PENDING),
        make_bill("2", "50", status=BillStatus.PENDING),
        make_bill("3", "30", status=BillStatus.OVERDUE),
        make_bill("4", "20", status=BillStatus.PAID),
    ]

    totals = bucket_totals(bills)

    assert totals.pending == Decimal("150")
    assert totals.overdue == Decimal("30")
    assert totals.paid == Decimal("20")
    assert totals.total == Decimal("200")


def test_filter_by_status_none_keeps_all(make_bill):
    """A None filter returns every bill."""
    bills = [make_bill("1"), make_bill("2", status=BillStatus.PAID)]

    assert filter_by_status(bills, None) == bills
    assert filter_by_status(bills, BillStatus.PAID) == [bills[1]]


@pytest.mark.parametrize(
    ("days", "level", "label"),
    [
        (-2, UrgencyLevel.URGENT, "Atrasada"),
        (0, UrgencyLevel.URGENT, "Vence HOJE"),
        (1, UrgencyLevel.URGENT, "Vence AMANHÃ"),
        (3, UrgencyLevel.WARNING, "Vence em 3 dias"),
        (10, UrgencyLevel.INFO, "Vence em 10 dias"),
    ],
)
def test_classify_urgency_levels(days, level, label):
    """Urgency follows the day-distance thresholds."""
    assert classify_urgency(days) == (level, label)


def test_classify_urgency_beyond_horizon_is_none():
    """Bills more than ten days away raise no alert."""
    assert classify_urgency(11) is None


def test_days_until_due_ignores_month_rollover(make_bill):
    """A bill due on the 3rd seen on the 28th counts as late."""
    bill = make_bill(due_date=3)

    assert days_until_due(bill, date(2024, 3, 28)) == -25


def test_bill_alerts_skip_paid_and_sort_by_urgency(make_bill):
    """Paid bills never alert and alerts are sorted by days remaining."""
    today = date(2024, 3, 10)
    bills = [
        make_bill("later", due_date=15),
        make_bill("late", due_date=5),
        make_bill("paid", due_date=10, status=BillStatus.PAID),
        make_bill("far", due_date=30),
        make_bill("today", due_date=10),
    ]

    alerts = bill_alerts(bills, today)

    assert [alert.bill.id for alert in alerts] == ["late", "today", "later"]
    assert alerts[0].label == "Atrasada"


def test_build_bill_payment_uses_first_account(make_bill, make_account):
    """Payment creates an expense on the first account and marks the bill paid."""
    bill = make_bill(value="80", description="Internet", category="Internet")
    accounts = [make_account("first"), make_account("second")]
    today = date(2024, 4, 2)

    expense, paid = build_bill_payment(bill, accounts, today, user_id="u1")

    assert expense.type == TransactionType.EXPENSE
    assert expense.value == Decimal("80")
    assert expense.account_id == "first"
    assert expense.description == "Pagamento: Internet"
    assert expense.category == "Internet"
    assert expense.date == today
    assert expense.user_id == "u1"
    assert paid.status == BillStatus.PAID
    assert paid.last_payment_date == today


def test_build_bill_payment_requires_account(make_bill):
    """Paying without accounts is rejected."""
    with pytest.raises(ValidationError):
        build_bill_payment(make_bill(), [], date(2024, 1, 1))


def test_build_bill_payment_rejects_paid_bill(make_bill, make_account):
    """A paid bill cannot be paid twice."""
    bill = make_bill(status=BillStatus.PAID)

    with pytest.raises(ValidationError):
        build_bill_payment(bill, [make_account()], date(2024, 1, 1))


@pytest.mark.parametrize(("day", "expected"), [(6, -1), (20, -15)])
def test_bill_past_due_day_stays_late(make_bill, day, expected):
    """Every day after the due day in the month reports the bill as late."""
    bill = make_bill(due_date=5)

    [alert] = bill_alerts([bill], date(2024, 3, day))

    assert alert.days_until == expected
    assert alert.level == UrgencyLevel.URGENT
    assert alert.label == "Atrasada"

"""Bill status aggregation, urgency and payment."""

from dataclasses import replace
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    ALERT_HORIZON_DAYS,
    BILL_PAYMENT_PREFIX,
    WARNING_HORIZON_DAYS,
)
from src.domain.errors import ValidationError
from src.domain.models import (
    BankAccount,
    Bill,
    BillAlert,
    BillBucketTotals,
    BillStatus,
    Transaction,
    TransactionType,
    UrgencyLevel,
)
from src.domain.policies import select_payment_account


def bucket_totals(bills: list[Bill]) -> BillBucketTotals:
    """Sum bill values per stored status.

    Args:
        bills: Bills to aggregate.

    Returns:
        BillBucketTotals: Totals for PENDING, OVERDUE and PAID.
    """
    totals = {status: Decimal("0") for status in BillStatus}
    for bill in bills:
        totals[bill.status] += bill.value
    return BillBucketTotals(
        pending=totals[BillStatus.PENDING],
        overdue=totals[BillStatus.OVERDUE],
        paid=totals[BillStatus.PAID],
    )


def filter_by_status(
    bills: list[Bill],
    status: BillStatus | None,
) -> list[Bill]:
    """Return bills with the given status; ``None`` keeps all of them."""
    if status is None:
        return list(bills)
    return [bill for bill in bills if bill.status == status]


def days_until_due(bill: Bill, today: date) -> int:
    """Return the naive day-of-month distance to the due day.

    Month rollover is ignored: a bill due on the 3rd evaluated on the
    28th yields -25 and is reported as late.
    """
    return bill.due_date - today.day


def classify_urgency(days_until: int) -> tuple[UrgencyLevel, str] | None:
    """Map a day distance to an urgency level and label.

    Args:
        days_until: Result of ``days_until_due``.

    Returns:
        tuple | None: Level and label, or None beyond the alert horizon.
    """
    if days_until < 0:
        return UrgencyLevel.URGENT, "Atrasada"
    if days_until == 0:
        return UrgencyLevel.URGENT, "Vence HOJE"
    if days_until == 1:
        return UrgencyLevel.URGENT, "Vence AMANHÃ"
    if days_until <= WARNING_HORIZON_DAYS:
        return UrgencyLevel.WARNING, f"Vence em {days_until} dias"
    if days_until <= ALERT_HORIZON_DAYS:
        return UrgencyLevel.INFO, f"Vence em {days_until} dias"
    return None


def bill_alerts(bills: list[Bill], today: date) -> list[BillAlert]:
    """Return alerts for unpaid bills, most urgent first.

    Args:
        bills: Bills from the snapshot.
        today: Evaluation date; only its day of month is used.

    Returns:
        list[BillAlert]: Alerts sorted by ascending ``days_until``.
    """
    alerts = []
    for bill in bills:
        if bill.status == BillStatus.PAID:
            continue
        days_until = days_until_due(bill, today)
        classification = classify_urgency(days_until)
        if classification is None:
            continue
        level, label = classification
        alerts.append(
            BillAlert(
                bill=bill,
                days_until=days_until,
                level=level,
                label=label,
            )
        )
    return sorted(alerts, key=lambda alert: alert.days_until)


def build_bill_payment(
    bill: Bill,
    accounts: list[BankAccount],
    today: date,
    user_id: str | None = None,
) -> tuple[Transaction, Bill]:
    """Prepare the expense transaction and the paid bill for a payment.

    Args:
        bill: Bill being paid.
        accounts: Accounts in snapshot order; the first one pays.
        today: Payment date.
        user_id: Optional user recording the payment.

    Returns:
        tuple[Transaction, Bill]: Unsaved expense and the updated bill.

    Raises:
        ValidationError: If the bill is already paid or no account exists.
    """
    if bill.status == BillStatus.PAID:
        raise ValidationError(f"Bill {bill.id} is already paid")
    account = select_payment_account(accounts)
    expense = Transaction(
        id="",
        type=TransactionType.EXPENSE,
        value=bill.value,
        date=today,
        description=f"{BILL_PAYMENT_PREFIX}{bill.description}",
        category=bill.category,
        account_id=account.id,
        user_id=user_id,
    )
    paid_bill = replace(
        bill,
        status=BillStatus.PAID,
        last_payment_date=today,
    )
    return expense, paid_bill


__all__ = [
    "bucket_totals",
    "filter_by_status",
    "days_until_due",
    "classify_urgency",
    "bill_alerts",
    "build_bill_payment",
]

"""Tests for read-only query use cases."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.get_account_balances import GetAccountBalancesUseCase
from src.application.use_cases.get_bills_overview import GetBillsOverviewUseCase
from src.application.use_cases.get_dashboard_summary import GetDashboardSummaryUseCase
from src.application.use_cases.get_monthly_report import GetMonthlyReportUseCase
from src.domain.models import AppData, BillStatus, TransactionType


def _data(make_account, make_tx, make_bill):
    return AppData(
        accounts=[make_account("a", "100"), make_account("b", "0")],
        transactions=[
            make_tx(TransactionType.INCOME, "50", date(2024, 3, 2), account_id="a", tx_id="1"),
            make_tx(TransactionType.EXPENSE, "20", date(2024, 3, 3), account_id="b", tx_id="2"),
        ],
        bills=[
            make_bill("due", due_date=12),
            make_bill("paid", status=BillStatus.PAID, value="30"),
        ],
    )


def test_account_balances(make_store, make_account, make_tx, make_bill, fake_logger):
    """Balances are derived per account."""
    store = make_store(_data(make_account, make_tx, make_bill))

    balances = GetAccountBalancesUseCase(store, logger=fake_logger).execute()

    assert [b.balance for b in balances] == [Decimal("150"), Decimal("-20")]


def test_dashboard_summary(make_store, make_account, make_tx, make_bill, fake_logger):
    """The dashboard combines balance, month stats, alerts and trend."""
    store = make_store(_data(make_account, make_tx, make_bill))

    summary = GetDashboardSummaryUseCase(store, logger=fake_logger).execute(
        today=date(2024, 3, 10)
    )

    assert summary.consolidated_balance == Decimal("130")
    assert summary.month_stats.total_income == Decimal("50")
    assert [a.bill.id for a in summary.alerts] == ["due"]
    assert len(summary.trend) == 6
    assert summary.trend[-1].expense == Decimal("20")


def test_bills_overview_filters(make_store, make_account, make_tx, make_bill, fake_logger):
    """Totals cover all bills while the list honours the filter."""
    store = make_store(_data(make_account, make_tx, make_bill))

    overview = GetBillsOverviewUseCase(store, logger=fake_logger).execute(
        status=BillStatus.PAID,
        today=date(2024, 3, 10),
    )

    assert [b.id for b in overview.bills] == ["paid"]
    assert overview.totals.pending == Decimal("150")
    assert overview.totals.paid == Decimal("30")


def test_monthly_report(make_store, make_account, make_tx, make_bill, fake_logger):
    """The report use case builds the statement from the snapshot."""
    store = make_store(_data(make_account, make_tx, make_bill))

    statement = GetMonthlyReportUseCase(store, logger=fake_logger).execute(3, 2024)

    assert statement.opening_balance == Decimal("100")
    assert statement.closing_balance == Decimal("130")

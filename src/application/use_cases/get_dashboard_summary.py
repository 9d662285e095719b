"""Use case assembling the dashboard figures."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.application.state import AppStateStore
from src.domain.models import BillAlert, MonthlyStats, TrendPoint
from src.domain.services.balances import consolidated_balance
from src.domain.services.bills import bill_alerts
from src.domain.services.periods import monthly_stats, trailing_series
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSummary:
    """Figures shown on the dashboard.

    Attributes:
        consolidated_balance: Sum of all account balances.
        month_stats: Income and expense of the current month.
        alerts: Unpaid bills due soon or late, most urgent first.
        trend: Income/expense for the trailing months, oldest first.
    """

    consolidated_balance: Decimal
    month_stats: MonthlyStats
    alerts: list[BillAlert]
    trend: list[TrendPoint]


class GetDashboardSummaryUseCase:
    """Compute the dashboard summary from the current snapshot."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> DashboardSummary:
        """Return the dashboard summary.

        Args:
            today: Reference date; defaults to the current date.

        Returns:
            DashboardSummary: Balance, month totals, alerts and trend.
        """
        today = today or date.today()
        snapshot = self._store.snapshot
        summary = DashboardSummary(
            consolidated_balance=consolidated_balance(
                snapshot.accounts,
                snapshot.transactions,
            ),
            month_stats=monthly_stats(
                snapshot.transactions,
                today.month,
                today.year,
            ),
            alerts=bill_alerts(snapshot.bills, today),
            trend=trailing_series(snapshot.transactions, today),
        )
        self._logger.info(
            f"Dashboard summary for {today.isoformat()}: "
            f"{len(summary.alerts)} bill alerts"
        )
        return summary


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]

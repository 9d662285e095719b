"""Use case for the bills view."""

from dataclasses import dataclass
from datetime import date

from src.application.state import AppStateStore
from src.domain.models import Bill, BillAlert, BillBucketTotals, BillStatus
from src.domain.services.bills import bill_alerts, bucket_totals, filter_by_status
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BillsOverview:
    """Bucket totals, the filtered list and urgency alerts."""

    totals: BillBucketTotals
    bills: list[Bill]
    alerts: list[BillAlert]


class GetBillsOverviewUseCase:
    """Aggregate bills by status."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        status: BillStatus | None = None,
        today: date | None = None,
    ) -> BillsOverview:
        """Return the bills overview.

        Args:
            status: Optional status filter; None lists every bill.
            today: Reference date for alerts.

        Returns:
            BillsOverview: Totals over all bills plus the filtered list.
        """
        bills = self._store.snapshot.bills
        overview = BillsOverview(
            totals=bucket_totals(bills),
            bills=filter_by_status(bills, status),
            alerts=bill_alerts(bills, today or date.today()),
        )
        label = status.value if status else "all"
        self._logger.info(f"Listed {len(overview.bills)} bills ({label})")
        return overview


__all__ = ["GetBillsOverviewUseCase", "BillsOverview"]

"""Use case producing the monthly financial statement."""

from src.application.state import AppStateStore
from src.domain.models import MonthlyStatement
from src.domain.services.reports import build_monthly_statement
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyReportUseCase:
    """Build the statement for a calendar month."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, month: int, year: int) -> MonthlyStatement:
        """Return the statement.

        Args:
            month: Calendar month, 1-12.
            year: Calendar year.

        Returns:
            MonthlyStatement: Entries, totals and balances of the period.
        """
        statement = build_monthly_statement(self._store.snapshot, month, year)
        self._logger.info(
            f"Built statement for {year}-{month:02d} with "
            f"{statement.transaction_count} transactions"
        )
        return statement


__all__ = ["GetMonthlyReportUseCase", "MonthlyStatement"]

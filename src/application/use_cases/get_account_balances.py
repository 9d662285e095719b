"""Use case to compute current account balances for the accounts view."""

from src.application.state import AppStateStore
from src.domain.models import AccountBalance
from src.domain.services.balances import account_balances
from src.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute the current balance of every account."""

    def __init__(self, store: AppStateStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> list[AccountBalance]:
        """Return account balances in snapshot order.

        Returns:
            list[AccountBalance]: One entry per account.
        """
        snapshot = self._store.snapshot
        balances = account_balances(snapshot.accounts, snapshot.transactions)
        self._logger.info(f"Computed {len(balances)} account balances")
        return balances


__all__ = ["GetAccountBalancesUseCase", "AccountBalance"]

"""Use case for paying a bill.

Paying creates an expense on the first account and then marks the bill
as paid. The two remote writes are not atomic: when the bill update
fails, the expense is deleted again so the ledger does not record a
payment for a bill that still shows as unpaid.
"""

from dataclasses import dataclass
from datetime import date

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.errors import RemoteApiError
from src.domain.models import Bill, Transaction
from src.domain.services.bills import build_bill_payment
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BillPayment:
    """Records produced by a successful payment."""

    transaction: Transaction
    bill: Bill


class PayBillUseCase:
    """Pay a bill from the first account."""

    def __init__(
        self,
        api: TreasuryApiPort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            api: Port for the remote treasury API.
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._api = api
        self._store = store
        self._logger = logger or get_app_logger()
        self._sync = SyncAppDataUseCase(api, store, logger=self._logger)

    def execute(
        self,
        bill_id: str,
        today: date | None = None,
        user_id: str | None = None,
    ) -> BillPayment:
        """Pay the bill.

        Args:
            bill_id: Bill to pay.
            today: Payment date; defaults to the current date.
            user_id: Optional user recording the payment.

        Returns:
            BillPayment: Created expense and updated bill.

        Raises:
            NotFoundError: If the bill is not in the snapshot.
            ValidationError: If the bill is paid or no account exists.
            RemoteApiError: If a remote write fails; the snapshot is unchanged.
        """
        today = today or date.today()
        snapshot = self._store.snapshot
        bill = find_by_id(snapshot.bills, bill_id, "Bill")
        expense, paid_bill = build_bill_payment(
            bill,
            snapshot.accounts,
            today,
            user_id=user_id,
        )
        created = self._api.create_transaction(expense)
        try:
            updated = self._api.update_bill(paid_bill)
        except RemoteApiError:
            self._compensate(created)
            raise
        self._store.apply(
            lambda data: data.with_transaction_added(created).with_bill_replaced(
                updated
            )
        )
        self._logger.info(
            f"Paid bill {bill_id} with transaction {created.id} "
            f"from account {created.account_id}"
        )
        self._sync.run()
        return BillPayment(transaction=created, bill=updated)

    def _compensate(self, created: Transaction) -> None:
        self._logger.warning(
            f"Bill update failed; deleting payment transaction {created.id}"
        )
        try:
            self._api.delete_transaction(created.id)
        except RemoteApiError as exc:
            self._logger.error(
                f"Could not delete orphan payment transaction {created.id}: {exc}"
            )


__all__ = ["PayBillUseCase", "BillPayment"]

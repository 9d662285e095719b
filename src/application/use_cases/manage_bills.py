"""Use cases for creating and deleting bills."""

from dataclasses import replace

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.models import Bill, BillStatus
from src.domain.services.validation import validate_bill
from src.infrastructure.logging.logger import get_app_logger


class CreateBillUseCase:
    """Create a bill; new bills always start pending."""

    def __init__(
        self,
        api: TreasuryApiPort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        self._api = api
        self._store = store
        self._logger = logger or get_app_logger()
        self._sync = SyncAppDataUseCase(api, store, logger=self._logger)

    def execute(self, bill: Bill) -> Bill:
        """Validate and persist the bill.

        Args:
            bill: Unsaved bill; its status is forced to PENDING.

        Returns:
            Bill: Record as returned by the API.
        """
        bill = replace(bill, status=BillStatus.PENDING, last_payment_date=None)
        validate_bill(bill)
        created = self._api.create_bill(bill)
        self._store.apply(lambda data: data.with_bill_added(created))
        self._logger.info(
            f"Created bill {created.id} due on day {created.due_date}"
        )
        self._sync.run()
        return created


class DeleteBillUseCase:
    """Delete a bill."""

    def __init__(
        self,
        api: TreasuryApiPort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        self._api = api
        self._store = store
        self._logger = logger or get_app_logger()
        self._sync = SyncAppDataUseCase(api, store, logger=self._logger)

    def execute(self, bill_id: str) -> None:
        find_by_id(self._store.snapshot.bills, bill_id, "Bill")
        self._api.delete_bill(bill_id)
        self._store.apply(lambda data: data.with_bill_removed(bill_id))
        self._logger.info(f"Deleted bill {bill_id}")
        self._sync.run()


__all__ = ["CreateBillUseCase", "DeleteBillUseCase"]

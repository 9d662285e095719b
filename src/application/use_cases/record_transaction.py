"""Use cases for recording and deleting transactions."""

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.models import Transaction
from src.domain.services.validation import validate_transaction
from src.infrastructure.logging.logger import get_app_logger


class CreateTransactionUseCase:
    """Validate, persist and record a new transaction."""

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

    def execute(self, transaction: Transaction) -> Transaction:
        """Create the transaction remotely and patch the snapshot.

        Args:
            transaction: Unsaved transaction (empty ``id``).

        Returns:
            Transaction: Record as returned by the API.

        Raises:
            ValidationError: If the transaction is invalid.
            RemoteApiError: If the API rejects the creation.
        """
        validate_transaction(transaction, self._store.snapshot.accounts)
        created = self._api.create_transaction(transaction)
        self._store.apply(lambda data: data.with_transaction_added(created))
        self._logger.info(
            f"Created {created.type.value} transaction {created.id} "
            f"of {created.value} on account {created.account_id}"
        )
        self._sync.run()
        return created


class DeleteTransactionUseCase:
    """Delete a transaction remotely and from the snapshot."""

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

    def execute(self, transaction_id: str) -> None:
        """Delete the transaction.

        Raises:
            NotFoundError: If the id is not in the snapshot.
            RemoteApiError: If the API rejects the deletion.
        """
        find_by_id(self._store.snapshot.transactions, transaction_id, "Transaction")
        self._api.delete_transaction(transaction_id)
        self._store.apply(
            lambda data: data.with_transaction_removed(transaction_id)
        )
        self._logger.info(f"Deleted transaction {transaction_id}")
        self._sync.run()


__all__ = ["CreateTransactionUseCase", "DeleteTransactionUseCase"]

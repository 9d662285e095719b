"""Use cases for bank accounts and the consolidated balance edit."""

from decimal import Decimal

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.errors import ValidationError
from src.domain.models import BankAccount
from src.domain.policies import can_delete_account
from src.domain.services.balances import adjust_consolidated_balance
from src.domain.services.validation import validate_account
from src.infrastructure.logging.logger import get_app_logger


class _AccountUseCase:
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


class CreateAccountUseCase(_AccountUseCase):
    """Create a bank account."""

    def execute(self, account: BankAccount) -> BankAccount:
        """Validate and persist the account.

        Returns:
            BankAccount: Record as returned by the API.
        """
        validate_account(account)
        created = self._api.create_account(account)
        self._store.apply(lambda data: data.with_account_added(created))
        self._logger.info(f"Created account {created.id} ({created.name})")
        self._sync.run()
        return created


class DeleteAccountUseCase(_AccountUseCase):
    """Delete an account that no transaction references."""

    def execute(self, account_id: str) -> None:
        """Delete the account.

        Raises:
            NotFoundError: If the id is not in the snapshot.
            ValidationError: If any transaction references the account.
        """
        snapshot = self._store.snapshot
        find_by_id(snapshot.accounts, account_id, "Account")
        if not can_delete_account(account_id, snapshot.transactions):
            raise ValidationError(
                f"Account {account_id} has transactions and cannot be deleted"
            )
        self._api.delete_account(account_id)
        self._store.apply(lambda data: data.with_account_removed(account_id))
        self._logger.info(f"Deleted account {account_id}")
        self._sync.run()


class AdjustConsolidatedBalanceUseCase(_AccountUseCase):
    """Set the consolidated balance by moving the first account's offset."""

    def execute(self, new_total: Decimal) -> BankAccount:
        """Apply the consolidated balance edit.

        The whole difference lands on the first account. With no accounts,
        a default cash account is created holding ``new_total``.

        Args:
            new_total: Desired consolidated balance.

        Returns:
            BankAccount: Account as persisted by the API.
        """
        snapshot = self._store.snapshot
        adjusted = adjust_consolidated_balance(
            snapshot.accounts,
            snapshot.transactions,
            new_total,
        )
        if snapshot.accounts:
            saved = self._api.update_account(adjusted)
            self._store.apply(lambda data: data.with_account_replaced(saved))
        else:
            saved = self._api.create_account(adjusted)
            self._store.apply(lambda data: data.with_account_added(saved))
        self._logger.info(
            f"Adjusted consolidated balance to {new_total} via account {saved.id}"
        )
        self._sync.run()
        return saved


__all__ = [
    "CreateAccountUseCase",
    "DeleteAccountUseCase",
    "AdjustConsolidatedBalanceUseCase",
]

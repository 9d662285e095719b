"""Use cases for user administration.

Only administrators manage users, and nobody can delete their own user.
"""

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.lookups import find_by_id
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.errors import ValidationError
from src.domain.models import User, UserRole
from src.domain.services.validation import validate_user
from src.infrastructure.logging.logger import get_app_logger


def _ensure_admin(actor: User) -> None:
    if actor.role != UserRole.ADMIN:
        raise ValidationError("Only administrators can manage users")


class CreateUserUseCase:
    """Create a user on behalf of an administrator."""

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

    def execute(self, user: User, actor: User) -> User:
        """Create the user.

        Args:
            user: New user including its password.
            actor: User performing the operation.

        Returns:
            User: Record as returned by the API, without password.
        """
        _ensure_admin(actor)
        validate_user(user)
        created = self._api.create_user(user)
        self._store.apply(lambda data: data.with_user_added(created))
        self._logger.info(
            f"User {actor.username} created user {created.username} "
            f"({created.role.value})"
        )
        self._sync.run()
        return created


class DeleteUserUseCase:
    """Delete a user other than the actor."""

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

    def execute(self, user_id: str, actor: User) -> None:
        _ensure_admin(actor)
        if user_id == actor.id:
            raise ValidationError("Users cannot delete themselves")
        find_by_id(self._store.snapshot.users, user_id, "User")
        self._api.delete_user(user_id)
        self._store.apply(lambda data: data.with_user_removed(user_id))
        self._logger.info(f"User {actor.username} deleted user {user_id}")
        self._sync.run()


__all__ = ["CreateUserUseCase", "DeleteUserUseCase"]

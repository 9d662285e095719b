"""Session use cases: login and logout."""

from src.application.ports.snapshot_cache import AuthStoragePort
from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.application.use_cases.sync_app_data import SyncAppDataUseCase
from src.domain.errors import ValidationError
from src.domain.models import User
from src.infrastructure.logging.logger import get_app_logger


class LoginUseCase:
    """Authenticate against the API and load the dataset."""

    def __init__(
        self,
        api: TreasuryApiPort,
        auth_storage: AuthStoragePort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            api: Port for the remote treasury API.
            auth_storage: Port storing the token and the session user.
            store: Application state container.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._api = api
        self._auth_storage = auth_storage
        self._store = store
        self._logger = logger or get_app_logger()
        self._sync = SyncAppDataUseCase(api, store, logger=self._logger)

    def execute(self, username: str, password: str) -> User:
        """Log in and sync.

        Returns:
            User: Authenticated user.

        Raises:
            ValidationError: If credentials are empty.
            RemoteApiError: If the API rejects the credentials.
        """
        if not username.strip() or not password:
            raise ValidationError("Username and password are required")
        token, user = self._api.login(username.strip(), password)
        self._auth_storage.save(token, user)
        self._store.apply(lambda data: data.with_session_user(user))
        self._logger.info(f"User {user.username} logged in as {user.role.value}")
        self._sync.run()
        return user


class LogoutUseCase:
    """Forget the session and fall back to the cached snapshot."""

    def __init__(
        self,
        auth_storage: AuthStoragePort,
        store: AppStateStore,
        logger=None,
    ) -> None:
        self._auth_storage = auth_storage
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self) -> None:
        user = self._auth_storage.load_user()
        self._auth_storage.clear()
        self._store.reset()
        name = user.username if user else "unknown"
        self._logger.info(f"User {name} logged out")


__all__ = ["LoginUseCase", "LogoutUseCase"]

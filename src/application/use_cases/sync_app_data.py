"""Use case for refreshing the local snapshot from the remote API.

The server is the source of truth. A successful fetch replaces the whole
snapshot (and the cache); a failed fetch keeps whatever is in memory,
which is the cached copy at cold start.
"""

from dataclasses import dataclass, field

from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.domain.errors import RemoteApiError
from src.domain.models import AppData
from src.infrastructure.logging.logger import get_app_logger

SOURCE_REMOTE = "remote"
SOURCE_CACHE = "cache"


@dataclass(frozen=True)
class SyncResult:
    """Result of a sync run.

    Attributes:
        refreshed: True when the snapshot was replaced by remote data.
        source: ``"remote"`` or ``"cache"``.
        counts: Number of records per collection in the current snapshot.
    """

    refreshed: bool
    source: str
    counts: dict[str, int] = field(default_factory=dict)


def snapshot_counts(data: AppData) -> dict[str, int]:
    """Return record counts per collection."""
    return {
        "users": len(data.users),
        "accounts": len(data.accounts),
        "transactions": len(data.transactions),
        "bills": len(data.bills),
        "closings": len(data.closings),
        "mission_campaigns": len(data.mission_campaigns),
        "mission_incomes": len(data.mission_incomes),
    }


class SyncAppDataUseCase:
    """Fetch every collection and replace the snapshot."""

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

    def run(self) -> SyncResult:
        """Execute the sync.

        Returns:
            SyncResult: Whether remote data was applied and current counts.
        """
        try:
            data = self._api.fetch_app_data()
        except RemoteApiError as exc:
            self._logger.warning(
                f"Remote sync failed, keeping local snapshot: {exc}"
            )
            return SyncResult(
                refreshed=False,
                source=SOURCE_CACHE,
                counts=snapshot_counts(self._store.snapshot),
            )
        self._store.replace(data)
        counts = snapshot_counts(data)
        self._logger.info(f"Synced snapshot from remote API: {counts}")
        return SyncResult(refreshed=True, source=SOURCE_REMOTE, counts=counts)


__all__ = ["SyncAppDataUseCase", "SyncResult", "snapshot_counts"]

"""Application state container owning the current snapshot."""

from collections.abc import Callable

from src.application.ports.snapshot_cache import SnapshotCachePort
from src.domain.models import AppData
from src.infrastructure.logging.logger import get_app_logger


class AppStateStore:
    """Single owner of the in-memory ``AppData`` snapshot.

    Every change is written to the snapshot cache. The cache is advisory,
    so a failed write is logged and the in-memory change stands.
    """

    def __init__(
        self,
        cache: SnapshotCachePort | None = None,
        initial: AppData | None = None,
        logger=None,
    ) -> None:
        """Initialize the store.

        Args:
            cache: Optional cache receiving every new snapshot.
            initial: Starting snapshot; defaults to an empty one.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._cache = cache
        self._data = initial if initial is not None else AppData()
        self._logger = logger or get_app_logger()

    @classmethod
    def from_cache(cls, cache: SnapshotCachePort, logger=None) -> "AppStateStore":
        """Build a store seeded from the cache, or defaults when it is empty."""
        store = cls(cache=cache, initial=None, logger=logger)
        store._data = store._load_cached() or AppData()
        return store

    @property
    def snapshot(self) -> AppData:
        return self._data

    def replace(self, data: AppData) -> AppData:
        """Swap the whole snapshot, typically after a sync."""
        self._data = data
        self._persist()
        return self._data

    def apply(self, reducer: Callable[[AppData], AppData]) -> AppData:
        """Patch the snapshot with a reducer from ``AppData.with_*``."""
        self._data = reducer(self._data)
        self._persist()
        return self._data

    def reset(self, data: AppData | None = None) -> AppData:
        """Reset the snapshot on logout.

        Args:
            data: Replacement snapshot; defaults to the cached copy, or to
                an empty snapshot when nothing is cached.

        Returns:
            AppData: The new snapshot.
        """
        if data is None:
            data = self._load_cached() or AppData()
        self._data = data
        return self._data

    def _load_cached(self) -> AppData | None:
        if self._cache is None:
            return None
        try:
            return self._cache.load()
        except Exception as exc:
            self._logger.warning(f"Could not read snapshot cache: {exc}")
            return None

    def _persist(self) -> None:
        if self._cache is None:
            return
        try:
            self._cache.save(self._data)
        except Exception as exc:
            self._logger.warning(f"Could not write snapshot cache: {exc}")


__all__ = ["AppStateStore"]

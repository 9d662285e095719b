"""SQLAlchemy-backed local storage for the snapshot and the session.

Everything lives in one key/value table. Payloads are JSON text; readers
treat a missing or malformed payload as "nothing stored".
"""

from datetime import datetime, timezone
import json

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_cache import AuthStoragePort, SnapshotCachePort
from src.domain.constants import (
    APP_STORAGE_KEY,
    TOKEN_STORAGE_KEY,
    USER_STORAGE_KEY,
)
from src.domain.models import AppData, User
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.serialization import (
    app_data_from_json,
    app_data_to_json,
    user_from_json,
    user_to_json,
)

CREATE_CACHE_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS cache_entries (
    key TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

SELECT_ENTRY_SQL = text(
    """
    SELECT payload
    FROM cache_entries
    WHERE key = :key
    """
)

DELETE_ENTRY_SQL = text(
    """
    DELETE FROM cache_entries
    WHERE key = :key
    """
)

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO cache_entries (key, payload, updated_at)
    VALUES (:key, :payload, :updated_at)
    """
)


class SqlAlchemyKeyValueStore:
    """Key/value table on top of the cache engine."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing the cache engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._prepared = False

    def get(self, key: str) -> str | None:
        """Return the payload stored under ``key``, if any."""
        self._ensure_table()
        engine = self._db_port.get_cache_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_ENTRY_SQL, {"key": key}).first()
        return None if row is None else row.payload

    def put(self, key: str, payload: str) -> None:
        """Store ``payload`` under ``key``, replacing any previous value."""
        self._ensure_table()
        engine = self._db_port.get_cache_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_ENTRY_SQL, {"key": key})
            conn.execute(
                INSERT_ENTRY_SQL,
                {
                    "key": key,
                    "payload": payload,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                },
            )

    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        self._ensure_table()
        engine = self._db_port.get_cache_engine()
        with engine.begin() as conn:
            conn.execute(DELETE_ENTRY_SQL, {"key": key})

    def _ensure_table(self) -> None:
        if self._prepared:
            return
        engine = self._db_port.get_cache_engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_CACHE_ENTRIES_SQL)
        self._prepared = True


class SqlAlchemySnapshotCache(SnapshotCachePort):
    """Snapshot cache stored under the application storage key."""

    def __init__(self, store: SqlAlchemyKeyValueStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def load(self) -> AppData | None:
        """Return the cached snapshot.

        Returns:
            AppData | None: Snapshot, or None when missing or malformed.
        """
        raw = self._store.get(APP_STORAGE_KEY)
        if raw is None:
            return None
        try:
            return app_data_from_json(json.loads(raw))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            self._logger.warning(f"Ignoring malformed cached snapshot: {exc}")
            return None

    def save(self, data: AppData) -> None:
        self._store.put(
            APP_STORAGE_KEY,
            json.dumps(app_data_to_json(data), ensure_ascii=False),
        )


class SqlAlchemyAuthStorage(AuthStoragePort):
    """Bearer token and session user stored as separate keys."""

    def __init__(self, store: SqlAlchemyKeyValueStore, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def save(self, token: str, user: User) -> None:
        self._store.put(TOKEN_STORAGE_KEY, token)
        self._store.put(
            USER_STORAGE_KEY,
            json.dumps(user_to_json(user), ensure_ascii=False),
        )

    def clear(self) -> None:
        self._store.delete(TOKEN_STORAGE_KEY)
        self._store.delete(USER_STORAGE_KEY)

    def get_token(self) -> str | None:
        return self._store.get(TOKEN_STORAGE_KEY) or None

    def load_user(self) -> User | None:
        """Return the stored user, or None when missing or malformed."""
        raw = self._store.get(USER_STORAGE_KEY)
        if not raw:
            return None
        try:
            return user_from_json(json.loads(raw))
        except (TypeError, ValueError, AttributeError) as exc:
            self._logger.warning(f"Ignoring malformed stored user: {exc}")
            return None


__all__ = [
    "SqlAlchemyKeyValueStore",
    "SqlAlchemySnapshotCache",
    "SqlAlchemyAuthStorage",
]

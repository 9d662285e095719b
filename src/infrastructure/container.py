"""Composition root for wiring infrastructure adapters."""

from dataclasses import dataclass

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_cache import AuthStoragePort, SnapshotCachePort
from src.application.ports.treasury_api import TreasuryApiPort
from src.application.state import AppStateStore
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.local_store import (
    SqlAlchemyAuthStorage,
    SqlAlchemyKeyValueStore,
    SqlAlchemySnapshotCache,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import TreasurySettings
from src.infrastructure.treasury_api import RequestsTreasuryApi


@dataclass(frozen=True)
class AppContext:
    """Wired adapters shared by the CLIs and the UI."""

    api: TreasuryApiPort
    auth_storage: AuthStoragePort
    store: AppStateStore


def build_database_adapter(
    settings: TreasurySettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    resolved = settings or TreasurySettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved.cache_db_url)


def build_key_value_store(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyKeyValueStore:
    """Return the key/value store over the cache database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyKeyValueStore(resolved_db, logger=get_app_logger())


def build_snapshot_cache(
    db_port: DatabaseEnginePort | None = None,
) -> SnapshotCachePort:
    """Return the snapshot cache adapter."""
    return SqlAlchemySnapshotCache(
        build_key_value_store(db_port),
        logger=get_app_logger(),
    )


def build_auth_storage(
    db_port: DatabaseEnginePort | None = None,
) -> AuthStoragePort:
    """Return the auth storage adapter."""
    return SqlAlchemyAuthStorage(
        build_key_value_store(db_port),
        logger=get_app_logger(),
    )


def build_treasury_api(
    auth_storage: AuthStoragePort | None = None,
    settings: TreasurySettings | None = None,
) -> TreasuryApiPort:
    """Return the REST client for the remote treasury API."""
    resolved = settings or TreasurySettings.from_env()
    return RequestsTreasuryApi(
        resolved,
        auth_storage=auth_storage,
        logger=get_app_logger(),
    )


def build_state_store(
    cache: SnapshotCachePort | None = None,
) -> AppStateStore:
    """Return a state store seeded from the snapshot cache."""
    resolved_cache = cache or build_snapshot_cache()
    return AppStateStore.from_cache(resolved_cache, logger=get_app_logger())


def build_app_context(
    settings: TreasurySettings | None = None,
) -> AppContext:
    """Wire the API client, auth storage and state store together."""
    resolved = settings or TreasurySettings.from_env()
    db_port = build_database_adapter(resolved)
    auth_storage = build_auth_storage(db_port)
    return AppContext(
        api=build_treasury_api(auth_storage, resolved),
        auth_storage=auth_storage,
        store=build_state_store(build_snapshot_cache(db_port)),
    )


__all__ = [
    "AppContext",
    "build_database_adapter",
    "build_key_value_store",
    "build_snapshot_cache",
    "build_auth_storage",
    "build_treasury_api",
    "build_state_store",
    "build_app_context",
]

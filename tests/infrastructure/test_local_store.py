"""Tests for the SQLite-backed snapshot cache and auth storage."""

from src.domain.constants import APP_STORAGE_KEY
from src.domain.models import AppData
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.local_store import (
    SqlAlchemyAuthStorage,
    SqlAlchemyKeyValueStore,
    SqlAlchemySnapshotCache,
)


def _store(tmp_path, fake_logger):
    adapter = SqlAlchemyDatabaseEngineAdapter(f"sqlite:///{tmp_path / 'cache.db'}")
    return SqlAlchemyKeyValueStore(adapter, logger=fake_logger)


def test_key_value_store_put_get_delete(tmp_path, fake_logger):
    """Values are replaced on put and removed on delete."""
    store = _store(tmp_path, fake_logger)

    assert store.get("k") is None
    store.put("k", "one")
    store.put("k", "two")
    assert store.get("k") == "two"
    store.delete("k")
    assert store.get("k") is None


def test_snapshot_cache_round_trip(tmp_path, fake_logger, make_account, make_tx):
    """A saved snapshot loads back equal."""
    cache = SqlAlchemySnapshotCache(_store(tmp_path, fake_logger), logger=fake_logger)
    data = AppData(accounts=[make_account()], transactions=[make_tx()])

    assert cache.load() is None
    cache.save(data)

    assert cache.load() == data


def test_snapshot_cache_ignores_malformed_payload(tmp_path, fake_logger):
    """Corrupt cache entries read as empty."""
    store = _store(tmp_path, fake_logger)
    store.put(APP_STORAGE_KEY, "{not json")
    cache = SqlAlchemySnapshotCache(store, logger=fake_logger)

    assert cache.load() is None
    fake_logger.warning.assert_called_once()


def test_auth_storage_save_and_clear(tmp_path, fake_logger, make_user):
    """Token and user are stored and cleared together."""
    storage = SqlAlchemyAuthStorage(_store(tmp_path, fake_logger), logger=fake_logger)
    user = make_user(password="secret")

    storage.save("token-123", user)

    assert storage.get_token() == "token-123"
    loaded = storage.load_user()
    assert loaded.username == user.username
    assert loaded.password is None
    storage.clear()
    assert storage.get_token() is None
    assert storage.load_user() is None

"""Tests for the infrastructure.db module."""

import pytest

from src.infrastructure import db as db_module


def test_get_env_var_reads_environment(monkeypatch):
    """_get_env_var should load .env and return the requested value."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("TREASURY_CACHE_DB_URL", "sqlite:///example.db")

    assert db_module._get_env_var("TREASURY_CACHE_DB_URL") == "sqlite:///example.db"


def test_get_env_var_raises_when_missing(monkeypatch):
    """Missing env vars without default should raise a RuntimeError."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("TREASURY_CACHE_DB_URL", raising=False)

    with pytest.raises(RuntimeError):
        db_module._get_env_var("TREASURY_CACHE_DB_URL")


def test_get_env_var_uses_default(monkeypatch):
    """A default is returned when the variable is unset."""
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.delenv("TREASURY_CACHE_DB_URL", raising=False)

    assert db_module._get_env_var("TREASURY_CACHE_DB_URL", "sqlite://") == "sqlite://"


def test_create_engine_passes_pool_configuration(monkeypatch, tmp_path):
    """_create_engine should configure QueuePool with health checks."""
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured["db_url"] = db_url
        captured["kwargs"] = kwargs
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)
    db_url = f"sqlite:///{tmp_path / 'nested' / 'cache.db'}"

    engine = db_module._create_engine(db_url)

    assert engine == "engine"
    assert captured["db_url"] == db_url
    assert captured["kwargs"]["poolclass"] is db_module.QueuePool
    assert captured["kwargs"]["pool_size"] == 5
    assert captured["kwargs"]["max_overflow"] == 5
    assert captured["kwargs"]["pool_pre_ping"] is True
    assert captured["kwargs"]["future"] is True
    assert (tmp_path / "nested").is_dir()


def test_get_cache_engine_caches_engine(monkeypatch):
    """get_cache_engine should memoize the created engine."""
    monkeypatch.setattr(db_module, "_cache_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("TREASURY_CACHE_DB_URL", "sqlite:///cache.db")

    engine_one = db_module.get_cache_engine()
    engine_two = db_module.get_cache_engine()

    assert engine_one is engine_two
    assert engine_one == "engine:sqlite:///cache.db"
    assert created == ["sqlite:///cache.db"]


def test_adapter_proxies_global_engine(monkeypatch):
    """Without a URL the adapter returns the shared engine."""
    monkeypatch.setattr(db_module, "get_cache_engine", lambda: "cache_engine")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_cache_engine() == "cache_engine"


def test_adapter_with_url_builds_own_engine(monkeypatch):
    """An explicit URL gets a dedicated, memoized engine."""
    created = []
    monkeypatch.setattr(
        db_module,
        "_create_engine",
        lambda url: created.append(url) or f"engine:{url}",
    )

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter("sqlite://")

    assert adapter.get_cache_engine() == "engine:sqlite://"
    assert adapter.get_cache_engine() == "engine:sqlite://"
    assert created == ["sqlite://"]

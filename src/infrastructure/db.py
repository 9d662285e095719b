"""Database infrastructure for the treasury dashboard.

This module exposes helpers to create and reuse the SQLAlchemy engine
backing the local cache. SQLite is the default store; any SQLAlchemy URL
can be configured through ``TREASURY_CACHE_DB_URL``.
"""

import os
from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.utils.utils import get_project_root

CACHE_DB_URL_ENV = "TREASURY_CACHE_DB_URL"


def _get_env_var(name: str, default: Optional[str] = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value used when the variable is missing or empty.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the variable is missing and no default is given.
    """
    dotenv.load_dotenv()
    value = os.getenv(name) or default
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def default_cache_db_url() -> str:
    """Return the SQLite URL under the project ``data`` directory."""
    return f"sqlite:///{get_project_root() / 'data' / 'treasury_cache.db'}"


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the cache database.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    _ensure_sqlite_directory(db_url)
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_cache_engine: Optional[Engine] = None


def get_cache_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the local cache.

    Returns:
        Engine: Lazily initialized engine connected to the cache store.
    """
    global _cache_engine
    if _cache_engine is None:
        db_url = _get_env_var(CACHE_DB_URL_ENV, default_cache_db_url())
        _cache_engine = _create_engine(db_url)
    return _cache_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so application code depends only on the protocol.
    """

    def __init__(self, db_url: Optional[str] = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Optional explicit URL; the shared engine is used otherwise.
        """
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_cache_engine(self) -> Engine:
        """Get the engine for the local cache database.

        Returns:
            Engine: SQLAlchemy engine connected to the cache store.
        """
        if self._db_url is None:
            return get_cache_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_cache_engine",
    "default_cache_db_url",
    "SqlAlchemyDatabaseEngineAdapter",
]

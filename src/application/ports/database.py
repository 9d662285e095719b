"""Database ports for the treasury dashboard.

This module defines the application-layer protocol for accessing the local
cache database. Infrastructure implementations provide the concrete engine.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine backing the local cache."""

    def get_cache_engine(self) -> Engine:
        """Get the engine for the local cache database.

        Returns:
            Engine: SQLAlchemy engine connected to the cache store.
        """


__all__ = ["DatabaseEnginePort"]

"""Application ports package."""

from .database import DatabaseEnginePort
from .snapshot_cache import AuthStoragePort, SnapshotCachePort
from .treasury_api import TreasuryApiPort

__all__ = [
    "AuthStoragePort",
    "DatabaseEnginePort",
    "SnapshotCachePort",
    "TreasuryApiPort",
]

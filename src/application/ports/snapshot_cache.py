"""Ports for the local snapshot cache and the stored session."""

from typing import Protocol

from src.domain.models import AppData, User


class SnapshotCachePort(Protocol):
    """Port persisting the last known snapshot.

    The cache is advisory: readers fall back to defaults when it is empty
    or unreadable.
    """

    def load(self) -> AppData | None:
        """Return the cached snapshot, or None when missing or malformed."""

    def save(self, data: AppData) -> None:
        """Overwrite the cached snapshot."""


class AuthStoragePort(Protocol):
    """Port persisting the bearer token and the session user."""

    def save(self, token: str, user: User) -> None:
        """Store the token and the user."""

    def clear(self) -> None:
        """Forget the token and the user."""

    def get_token(self) -> str | None:
        """Return the stored token, if any."""

    def load_user(self) -> User | None:
        """Return the stored user, or None when missing or malformed."""


__all__ = ["SnapshotCachePort", "AuthStoragePort"]
